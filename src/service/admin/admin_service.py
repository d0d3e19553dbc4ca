from src.domain.dto.user.user_dto import UserDTO, RequestRegisterDTO, RequestUpdateUserDTO, UserStatsDTO, \
    ResponseUserStatsListDTO
from src.infra.database.repository.user_repository import UserRepository
from src.logger.custom_logger import get_logger
from src.service.user.user_service import UserService, to_user_dto
from src.utils.exception_handler.service_error_class import ForbiddenException


class AdminService:
    def __init__(self):
        self.logger = get_logger(__name__)
        self.repository = UserRepository()
        self.user_service = UserService()

    async def register_admin(self, dto: RequestRegisterDTO) -> UserDTO:
        return await self.user_service.register(dto, is_admin=True)

    async def register_super_admin(self, dto: RequestRegisterDTO) -> UserDTO:
        return await self.user_service.register(dto, is_admin=True, is_super_admin=True)

    #   최초 슈퍼관리자 (인증 없음) -> 이미 있으면 차단
    async def init_super_admin(self, dto: RequestRegisterDTO) -> UserDTO:
        self.logger.info(f"try init super admin: {dto.email}")

        if await self.repository.exists_super_admin():
            raise ForbiddenException("슈퍼 관리자가 이미 존재합니다")

        return await self.user_service.register(dto, is_admin=True, is_super_admin=True)

    async def get_users_with_stats(self) -> ResponseUserStatsListDTO:
        users = [UserStatsDTO.model_validate(row) for row in await self.repository.select_with_stats()]
        total_admins = sum(1 for user in users if user.is_admin)

        return ResponseUserStatsListDTO(
            users=users,
            total_users=len(users),
            total_admins=total_admins,
            total_regular_users=len(users) - total_admins,
        )

    async def get_users(self) -> list[UserDTO]:
        users = await self.repository.select_by(order_by=[self.repository.table.c.id.asc()])
        return [to_user_dto(user) for user in users]

    async def get_user(self, user_id: int) -> UserDTO:
        return await self.user_service.get_user(user_id)

    async def update_user(self, user_id: int, dto: RequestUpdateUserDTO) -> UserDTO:
        return await self.user_service.update_user(user_id, dto)

    async def delete_user(self, user_id: int):
        await self.user_service.delete_user(user_id)
