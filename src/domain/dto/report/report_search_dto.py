from typing import List, Optional

from pydantic import BaseModel

SORT_POPULAR = "popular"
SORT_RECENT = "recent"

INCLUDE_STATUS = "status"
INCLUDE_CATEGORY = "category"
INCLUDE_USER = "user"
INCLUDE_TAGS = "tags"


# API 검색 조건 (가공 전)
class RequestReportSearchDTO(BaseModel):
    status: Optional[str] = None
    user_id: Optional[int] = None
    category_id: Optional[int] = None
    url: Optional[str] = None
    sort: Optional[str] = None
    include: List[str] = []
    page: Optional[int] = None
    limit: Optional[int] = None


# repository 로 넘기는 검색 조건 (가공 후)
class ReportSearchFilter(BaseModel):
    user_id: Optional[int] = None
    category_id: Optional[int] = None
    url: Optional[str] = None
    status_ids: Optional[List[int]] = None
    sort: Optional[str] = None
    include_status: bool = False
    include_category: bool = False
    include_user: bool = False
    include_tags: bool = False
    limit: int = 20
    offset: int = 0
