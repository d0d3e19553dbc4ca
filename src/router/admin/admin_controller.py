from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.domain.dto.auth.auth_dto import UserProfile
from src.domain.dto.user.user_dto import RequestRegisterDTO, RequestUpdateUserDTO, UserDTO, ResponseUserStatsListDTO
from src.logger.custom_logger import get_logger
from src.service.admin.admin_service import AdminService
from src.service.auth.jwt import require_admin

router = APIRouter(prefix="/admin", tags=["admin"])
logger = get_logger(__name__)

admin_service = AdminService()


# 관리자 등록
@router.post("/register", status_code=201)
async def register_admin(dto: RequestRegisterDTO, admin: UserProfile = Depends(require_admin)) -> UserDTO:
    return await admin_service.register_admin(dto)


# 슈퍼 관리자 등록
@router.post("/register-super", status_code=201)
async def register_super_admin(dto: RequestRegisterDTO, admin: UserProfile = Depends(require_admin)) -> UserDTO:
    return await admin_service.register_super_admin(dto)


# 최초 슈퍼 관리자 생성 (인증 없음, 1회)
@router.post("/init-super", status_code=201)
async def init_super_admin(dto: RequestRegisterDTO) -> UserDTO:
    return await admin_service.init_super_admin(dto)


@router.get("/user/stats")
async def get_users_with_stats(admin: UserProfile = Depends(require_admin)) -> ResponseUserStatsListDTO:
    return await admin_service.get_users_with_stats()


@router.get("/user/list")
async def get_users(admin: UserProfile = Depends(require_admin)) -> list[UserDTO]:
    return await admin_service.get_users()


@router.get("/user/{user_id}")
async def get_user(user_id: int, admin: UserProfile = Depends(require_admin)) -> UserDTO:
    return await admin_service.get_user(user_id)


@router.put("/user/{user_id}")
async def update_user(
        user_id: int,
        dto: RequestUpdateUserDTO,
        admin: UserProfile = Depends(require_admin)
) -> UserDTO:
    return await admin_service.update_user(user_id, dto)


@router.delete("/user/{user_id}")
async def delete_user(user_id: int, admin: UserProfile = Depends(require_admin)):
    await admin_service.delete_user(user_id)
    return JSONResponse(status_code=200, content={"status": "success"})
