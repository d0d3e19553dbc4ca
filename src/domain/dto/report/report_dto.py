from datetime import datetime
from typing import List, Optional

from pydantic import field_validator

from src.domain.dto.base_dto import CamelDTO


class TagDTO(CamelDTO):
    id: int
    name: str


class ReportDTO(CamelDTO):
    id: int
    user_id: Optional[int] = None
    category_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    status_id: Optional[int] = None
    status_name: Optional[str] = None
    status_description: Optional[str] = None
    category_name: Optional[str] = None
    user_name: Optional[str] = None
    image_url: Optional[str] = None
    vote_count: Optional[int] = None
    comment_count: Optional[int] = None
    tags: Optional[List[TagDTO]] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# 신고 작성
class RequestCreateReportDTO(CamelDTO):
    category_id: int
    title: str
    description: str
    url: str
    image_url: Optional[str] = None
    tag_names: Optional[List[str]] = None

    @field_validator("title", "description", "url")
    @classmethod
    def validate_not_blank(cls, v):
        if v is None or not v.strip():
            raise ValueError("빈 값은 허용되지 않습니다")
        return v.strip()

    @field_validator("category_id")
    @classmethod
    def validate_category_id(cls, v):
        if v <= 0:
            raise ValueError("잘못된 카테고리 ID")
        return v


# 신고 수정 (보낸 값만 반영, tagNames 는 전체 교체)
class RequestUpdateReportDTO(CamelDTO):
    title: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    category_id: Optional[int] = None
    image_url: Optional[str] = None
    tag_names: Optional[List[str]] = None


class RequestUpdateReportStatusDTO(CamelDTO):
    status_id: int
    moderation_note: Optional[str] = None


class RequestAddTagsDTO(CamelDTO):
    tag_names: List[str]


class ReportStatusDTO(CamelDTO):
    id: int
    name: str
    description: Optional[str] = None


class ReportStatusHistoryDTO(CamelDTO):
    id: int
    report_id: int
    from_status_id: int
    to_status_id: int
    note: Optional[str] = None
    change_reason: Optional[str] = None
    changed_by_user_id: Optional[int] = None
    changed_at: Optional[datetime] = None


class ResponseVoteDTO(CamelDTO):
    vote_count: int
    has_voted: bool


class ResponseReportCategoryDTO(CamelDTO):
    category_name: str
