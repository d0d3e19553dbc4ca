from datetime import datetime
from typing import Optional

from pydantic import field_validator

from src.domain.entities.base_entity import BaseEntity


class ReportEntity(BaseEntity):
    id: Optional[int] = None
    user_id: int
    category_id: int
    title: str
    description: Optional[str] = None
    url: str
    status_id: int = 1
    image_url: Optional[str] = None
    vote_count: int = 0
    comment_count: int = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("title", "url")
    @classmethod
    def validate_not_blank(cls, v):
        if v is None or not v.strip():
            raise ValueError('[ReportEntity] title/url is blank')
        return v.strip()


class ReportStatusEntity(BaseEntity):
    id: int
    name: str
    description: Optional[str] = None


class ReportStatusHistoryEntity(BaseEntity):
    id: Optional[int] = None
    report_id: int
    from_status_id: int
    to_status_id: int
    note: Optional[str] = None
    change_reason: Optional[str] = None
    changed_by_user_id: Optional[int] = None
    changed_at: Optional[datetime] = None
