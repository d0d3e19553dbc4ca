from fastapi import APIRouter, Depends

from src.domain.dto.auth.auth_dto import UserProfile
from src.domain.dto.notification.notification_dto import NotificationDTO, ResponseUnreadCountDTO
from src.logger.custom_logger import get_logger
from src.service.auth.jwt import get_current_profile
from src.service.notification.notification_service import NotificationService
from src.utils.exception_handler.service_error_class import ForbiddenException

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = get_logger(__name__)

notification_service = NotificationService()


#   본인 또는 관리자만
def _check_owner(user_id: int, profile: UserProfile):
    if str(user_id) != profile.id and not profile.is_admin:
        raise ForbiddenException("본인의 알림만 조회할 수 있습니다")


@router.get("/user/{user_id}")
async def get_notifications(
        user_id: int,
        limit: int = 50,
        offset: int = 0,
        profile: UserProfile = Depends(get_current_profile)
) -> list[NotificationDTO]:
    _check_owner(user_id, profile)
    return await notification_service.get_notifications(user_id, limit, offset)


@router.get("/user/{user_id}/unread")
async def get_unread_notifications(
        user_id: int,
        profile: UserProfile = Depends(get_current_profile)
) -> list[NotificationDTO]:
    _check_owner(user_id, profile)
    return await notification_service.get_unread_notifications(user_id)


@router.get("/user/{user_id}/unread-count")
async def get_unread_count(user_id: int, profile: UserProfile = Depends(get_current_profile)) -> ResponseUnreadCountDTO:
    _check_owner(user_id, profile)
    return await notification_service.get_unread_count(user_id)


@router.get("/{notification_id}")
async def get_notification(notification_id: int, profile: UserProfile = Depends(get_current_profile)) -> NotificationDTO:
    notification = await notification_service.get_notification(notification_id)
    _check_owner(notification.user_id, profile)
    return notification


# 읽음 처리
@router.put("/{notification_id}/read")
async def mark_as_read(notification_id: int, profile: UserProfile = Depends(get_current_profile)) -> NotificationDTO:
    return await notification_service.mark_as_read(notification_id, int(profile.id), profile.is_admin)
