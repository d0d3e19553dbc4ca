from datetime import datetime
from typing import Optional

from src.domain.entities.base_entity import BaseEntity


class CommentEntity(BaseEntity):
    id: Optional[int] = None
    report_id: int
    user_id: int
    title: str
    content: str
    created_at: Optional[datetime] = None
