from datetime import datetime, timedelta, timezone

import jwt as jwt_token
from fastapi import Header, Depends

from src.domain.dto.auth.auth_dto import UserProfile
from src.logger.custom_logger import get_logger
from src.utils.env_config import get_config
from src.utils.exception_handler.auth_error_class import InvalidTokenException, MissingTokenException, \
    ExpiredAccessTokenException
from src.utils.exception_handler.service_error_class import ForbiddenException

ACCESS = "access"
REFRESH = "refresh"

logger = get_logger(__name__)


def _encode(payload: dict, secret: str, ttl: int) -> str:
    now = datetime.now(timezone.utc)
    payload = {
        **payload,
        "iat": int(now.timestamp()),                             #   생성 시간
        "exp": int((now + timedelta(seconds=ttl)).timestamp()),  #   만료 시간
    }
    return jwt_token.encode(payload, secret, algorithm=get_config().jwt.algorithm)


def _decode(token: str, secret: str, token_type: str) -> dict:
    try:
        decoded = jwt_token.decode(token, secret, algorithms=[get_config().jwt.algorithm])

    except jwt_token.ExpiredSignatureError as e:
        logger.info(f"expired {token_type} token: {e}")
        raise ExpiredAccessTokenException() from e

    except jwt_token.InvalidTokenError as e:
        logger.info(f"invalid {token_type} token: {e}")
        raise InvalidTokenException() from e

    #   access <-> refresh 혼용 차단
    if decoded.get("type") != token_type or not decoded.get("sub"):
        raise InvalidTokenException()

    return decoded


def create_access_token(profile: UserProfile) -> str:
    config = get_config().jwt
    return _encode(
        {"sub": profile.id, "type": ACCESS, "profile": profile.model_dump()},
        config.access_secret,
        config.access_ttl
    )


def create_refresh_token(user_id: str) -> str:
    config = get_config().jwt
    return _encode({"sub": str(user_id), "type": REFRESH}, config.refresh_secret, config.refresh_ttl)


def verify_access_token(token: str) -> UserProfile:
    decoded = _decode(token, get_config().jwt.access_secret, ACCESS)

    try:
        return UserProfile(**decoded["profile"])
    except (KeyError, TypeError, ValueError) as e:
        raise InvalidTokenException() from e


def verify_refresh_token(token: str) -> str:
    return _decode(token, get_config().jwt.refresh_secret, REFRESH)["sub"]


async def get_current_profile(authorization: str = Header(None)) -> UserProfile:
    """
        Authorization: Bearer <access token>
    """
    if not authorization:
        raise MissingTokenException()

    scheme, _, token = authorization.partition(" ")
    if scheme != "Bearer" or not token.strip():
        raise MissingTokenException()

    return verify_access_token(token.strip())


async def require_admin(profile: UserProfile = Depends(get_current_profile)) -> UserProfile:
    if not profile.is_admin:
        raise ForbiddenException("관리자 권한이 필요합니다.")
    return profile
