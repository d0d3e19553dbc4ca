from datetime import datetime
from typing import Optional

from pydantic import field_validator

from src.domain.dto.base_dto import CamelDTO


class CommentDTO(CamelDTO):
    id: int
    report_id: int
    user_id: int
    title: str
    content: str
    created_at: Optional[datetime] = None


class RequestCreateCommentDTO(CamelDTO):
    report_id: int
    title: str
    content: str

    @field_validator("title", "content")
    @classmethod
    def validate_not_blank(cls, v):
        if v is None or not v.strip():
            raise ValueError("빈 값은 허용되지 않습니다")
        return v.strip()
