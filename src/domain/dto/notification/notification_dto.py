from datetime import datetime
from typing import Optional

from src.domain.dto.base_dto import CamelDTO


class NotificationDTO(CamelDTO):
    id: int
    user_id: int
    title: str
    message: str
    related_id: Optional[int] = None
    is_read: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ResponseUnreadCountDTO(CamelDTO):
    count: int
