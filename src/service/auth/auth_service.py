from src.domain.dto.auth.auth_dto import ResponseLoginDTO, LoginUserDTO, UserProfile, ResponseRefreshTokenDTO
from src.domain.entities.user_entity import UserEntity
from src.infra.database.repository.user_repository import UserRepository
from src.logger.custom_logger import get_logger
from src.service.auth.jwt import create_access_token, create_refresh_token, verify_refresh_token
from src.utils.exception_handler.auth_error_class import InvalidCredentialsException, InvalidTokenException
from src.utils.exception_handler.service_error_class import NotFoundException
from src.utils.password_utils import verify_password


def to_profile(user: UserEntity) -> UserProfile:
    return UserProfile(
        id=str(user.id),
        email=user.email,
        name=user.name,
        is_admin=user.is_admin,
        is_super_admin=user.is_super_admin,
    )


class AuthService:
    def __init__(self):
        self.logger = get_logger(__name__)
        self.repository = UserRepository()

    async def login(self, email: str, password: str) -> ResponseLoginDTO:
        self.logger.info(f"try login: {email}")

        user = await self.repository.select_by_email(email)
        if user is None:
            raise NotFoundException("존재하지 않는 사용자입니다")

        #   평문 비밀번호와 해시 비교
        if not verify_password(password, user.password_hash):
            raise InvalidCredentialsException()

        profile = to_profile(user)

        return ResponseLoginDTO(
            access_token=create_access_token(profile),
            refresh_token=create_refresh_token(profile.id),
            user=LoginUserDTO(
                id=user.id,
                email=user.email,
                name=user.name,
                is_admin=user.is_admin,
                is_super_admin=user.is_super_admin,
            )
        )

    async def refresh(self, refresh_token: str) -> ResponseRefreshTokenDTO:
        user_id = verify_refresh_token(refresh_token)

        #   탈퇴 / 권한 변경 반영을 위해 DB 에서 다시 조회
        user = await self.repository.select(int(user_id)) if user_id.isdigit() else None
        if user is None:
            raise InvalidTokenException()

        self.logger.info(f"try refresh access token: {user_id}")
        return ResponseRefreshTokenDTO(access_token=create_access_token(to_profile(user)))
