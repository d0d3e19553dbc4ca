from typing import Optional

from pydantic import BaseModel, EmailStr

from src.domain.dto.base_dto import CamelDTO


# 토큰에 실리는 프로필 (snake_case 유지)
class UserProfile(BaseModel):
    id: str
    email: str
    name: str
    is_admin: bool = False
    is_super_admin: bool = False


class RequestLoginDTO(CamelDTO):
    email: EmailStr
    password: str


class LoginUserDTO(BaseModel):
    id: int
    email: str
    name: str
    is_admin: bool
    is_super_admin: Optional[bool] = False


class ResponseLoginDTO(CamelDTO):
    access_token: str
    refresh_token: str
    user: LoginUserDTO


class RequestRefreshTokenDTO(CamelDTO):
    refresh_token: str


class ResponseRefreshTokenDTO(CamelDTO):
    access_token: str


class ResponseProfileDTO(BaseModel):
    profile: UserProfile
