from datetime import datetime
from typing import Optional

from src.domain.entities.base_entity import BaseEntity


class NotificationEntity(BaseEntity):
    id: Optional[int] = None
    user_id: int
    title: str
    message: str
    related_id: Optional[int] = None
    is_read: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
