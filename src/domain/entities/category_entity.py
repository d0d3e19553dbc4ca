from typing import Optional

from pydantic import field_validator

from src.domain.entities.base_entity import BaseEntity


class CategoryEntity(BaseEntity):
    id: Optional[int] = None
    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is None or not v.strip():
            raise ValueError('[CategoryEntity] name is blank')
        return v.strip()
