from fastapi import APIRouter, Depends

from src.domain.dto.auth.auth_dto import RequestLoginDTO, ResponseLoginDTO, RequestRefreshTokenDTO, \
    ResponseRefreshTokenDTO, ResponseProfileDTO, UserProfile
from src.logger.custom_logger import get_logger
from src.service.auth.auth_service import AuthService
from src.service.auth.jwt import get_current_profile

router = APIRouter(prefix="/auth", tags=["auth"])
logger = get_logger(__name__)

auth_service = AuthService()


# 로그인
@router.post("/login")
async def login(dto: RequestLoginDTO) -> ResponseLoginDTO:
    return await auth_service.login(dto.email, dto.password)


# 토큰에 담긴 프로필
@router.get("/profile")
async def get_profile(profile: UserProfile = Depends(get_current_profile)) -> ResponseProfileDTO:
    return ResponseProfileDTO(profile=profile)


# access 토큰 재발급
@router.post("/refresh")
async def refresh(dto: RequestRefreshTokenDTO) -> ResponseRefreshTokenDTO:
    return await auth_service.refresh(dto.refresh_token)
