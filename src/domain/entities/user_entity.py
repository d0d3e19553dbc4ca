import datetime
from typing import Optional

from pydantic import field_validator, EmailStr

from src.domain.entities.base_entity import BaseEntity


class UserEntity(BaseEntity):
    id: Optional[int] = None
    email: EmailStr
    name: str
    password_hash: str
    salt: str
    is_admin: bool = False
    is_super_admin: bool = False
    created_at: Optional[datetime.datetime] = None

    @field_validator("name", "password_hash", "salt")
    @classmethod
    def validate_not_blank(cls, v):
        if v is None or not str(v).strip():
            raise ValueError('[UserEntity] null exception')
        return v
