from fastapi import APIRouter, Depends

from src.domain.dto.auth.auth_dto import UserProfile
from src.domain.dto.user.user_dto import RequestRegisterDTO, RequestUpdateUserDTO, UserDTO, UserStatsDTO
from src.logger.custom_logger import get_logger
from src.service.auth.jwt import get_current_profile
from src.service.user.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])
logger = get_logger(__name__)

user_service = UserService()


# 회원가입
@router.post("", status_code=201)
async def register(dto: RequestRegisterDTO) -> UserDTO:
    return await user_service.register(dto)


# 내정보
@router.get("/me")
async def get_me(profile: UserProfile = Depends(get_current_profile)) -> UserDTO:
    return await user_service.get_user(int(profile.id))


# 내 활동 통계 (신고 / 댓글 / 투표 수)
@router.get("/me/stats")
async def get_my_stats(profile: UserProfile = Depends(get_current_profile)) -> UserStatsDTO:
    return await user_service.get_user_stats(int(profile.id))


# 내정보 수정
@router.put("/me")
async def update_me(dto: RequestUpdateUserDTO, profile: UserProfile = Depends(get_current_profile)) -> UserDTO:
    return await user_service.update_user(int(profile.id), dto)
