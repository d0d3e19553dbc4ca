from typing import Optional

from src.domain.entities.base_entity import BaseEntity


class TagEntity(BaseEntity):
    id: Optional[int] = None
    name: str
