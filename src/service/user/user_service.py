from src.domain.dto.user.user_dto import UserDTO, RequestRegisterDTO, RequestUpdateUserDTO, UserStatsDTO
from src.domain.entities.user_entity import UserEntity
from src.infra.database.repository.user_repository import UserRepository
from src.logger.custom_logger import get_logger
from src.utils.exception_handler.service_error_class import BadRequestException, NotFoundException
from src.utils.password_utils import generate_salt, hash_password


def to_user_dto(user: UserEntity) -> UserDTO:
    return UserDTO(id=user.id, email=user.email, name=user.name, is_admin=user.is_admin)


class UserService:
    def __init__(self):
        self.logger = get_logger(__name__)
        self.repository = UserRepository()

    #   회원가입 (관리자 등록도 여기로)
    async def register(self, dto: RequestRegisterDTO, is_admin: bool = False, is_super_admin: bool = False) -> UserDTO:
        self.logger.info(f"try register: {dto.email} admin: {is_admin} super: {is_super_admin}")

        if await self.repository.select_by_email(dto.email) is not None:
            raise BadRequestException("이미 사용 중인 이메일입니다")

        salt = generate_salt()
        user_id = await self.repository.insert(
            UserEntity(
                email=dto.email,
                name=dto.name.strip(),
                password_hash=hash_password(dto.password, salt),
                salt=salt,
                is_admin=is_admin or is_super_admin,
                is_super_admin=is_super_admin,
            )
        )

        return await self.get_user(user_id)

    async def get_user(self, user_id: int) -> UserDTO:
        if not user_id or user_id <= 0:
            raise BadRequestException("잘못된 사용자 ID")

        user = await self.repository.select(user_id)
        if user is None:
            raise NotFoundException("사용자를 찾을 수 없습니다")

        return to_user_dto(user)

    async def get_user_stats(self, user_id: int) -> UserStatsDTO:
        rows = await self.repository.select_with_stats(user_id)
        if not rows:
            raise NotFoundException("사용자를 찾을 수 없습니다")

        return UserStatsDTO.model_validate(rows[0])

    #   내정보 수정 (보낸 값만)
    async def update_user(self, user_id: int, dto: RequestUpdateUserDTO) -> UserDTO:
        await self.get_user(user_id)
        self.logger.info(f"try update user: {user_id}")

        values = {}

        if dto.name is not None:
            if not dto.name.strip():
                raise BadRequestException("이름은 비워둘 수 없습니다")
            values["name"] = dto.name.strip()

        if dto.email is not None:
            owner = await self.repository.select_by_email(dto.email)
            if owner is not None and owner.id != user_id:
                raise BadRequestException("이미 사용 중인 이메일입니다")
            values["email"] = dto.email

        if dto.password is not None:
            if not dto.password.strip():
                raise BadRequestException("비밀번호는 비워둘 수 없습니다")
            #   비밀번호 변경 시 salt 재발급
            salt = generate_salt()
            values["salt"] = salt
            values["password_hash"] = hash_password(dto.password, salt)

        if values:
            await self.repository.update(user_id, values)

        return await self.get_user(user_id)

    async def delete_user(self, user_id: int):
        await self.get_user(user_id)
        self.logger.info(f"try delete user: {user_id}")

        await self.repository.delete(user_id)
