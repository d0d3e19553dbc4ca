from datetime import datetime
from typing import Optional, List

from pydantic import EmailStr, field_validator

from src.domain.dto.base_dto import CamelDTO


class UserDTO(CamelDTO):
    id: Optional[int] = None
    email: EmailStr
    name: str
    is_admin: Optional[bool] = None


# 회원가입 (관리자 등록도 동일 형식)
class RequestRegisterDTO(CamelDTO):
    email: EmailStr
    name: str
    password: str

    @field_validator("name", "password")
    @classmethod
    def validate_not_blank(cls, v):
        if v is None or not v.strip():
            raise ValueError("빈 값은 허용되지 않습니다")
        return v


# 내정보 / 관리자 수정 (보낸 값만 반영)
class RequestUpdateUserDTO(CamelDTO):
    name: Optional[str] = None
    email: Optional[EmailStr] = None
    password: Optional[str] = None


class UserStatsDTO(CamelDTO):
    id: int
    name: str
    email: str
    is_admin: bool
    is_super_admin: bool
    created_at: Optional[datetime] = None
    report_count: int = 0
    comment_count: int = 0
    like_count: int = 0


class ResponseUserStatsListDTO(CamelDTO):
    users: List[UserStatsDTO] = []
    total_users: int
    total_admins: int
    total_regular_users: int
