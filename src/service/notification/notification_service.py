from src.domain.dto.notification.notification_dto import NotificationDTO, ResponseUnreadCountDTO
from src.domain.entities.notification_entity import NotificationEntity
from src.infra.database.repository.notification_repository import NotificationRepository
from src.logger.custom_logger import get_logger
from src.service.report.status_workflow import STATUS_EMOJIS
from src.utils.exception_handler.service_error_class import BadRequestException, NotFoundException, \
    ForbiddenException


class NotificationService:
    def __init__(self):
        self.logger = get_logger(__name__)
        self.repo = NotificationRepository()

    #   알림 생성
    async def create_notification(self, user_id: int, title: str, message: str, related_id: int = None):
        if not user_id or user_id <= 0:
            raise BadRequestException("잘못된 사용자 ID")
        if not title or not title.strip():
            raise BadRequestException("제목은 필수입니다")
        if not message or not message.strip():
            raise BadRequestException("메시지는 필수입니다")

        self.logger.info(f"try create notification user: {user_id}, related: {related_id}")
        return await self.repo.insert(
            NotificationEntity(
                user_id=user_id,
                title=title.strip(),
                message=message.strip(),
                related_id=related_id,
                is_read=False,
            )
        )

    #   신고 상태 변경 알림
    async def notify_report_status_change(self, user_id: int, report_id: int, report_title: str, new_status: str):
        emoji = STATUS_EMOJIS.get(new_status, "📊")
        return await self.create_notification(
            user_id,
            f"{emoji} 신고 상태 변경",
            f'회원님의 신고 "{report_title}" 상태가 {new_status} (으)로 변경되었습니다.',
            report_id
        )

    #   새 댓글 알림
    async def notify_new_comment(self, user_id: int, report_id: int, report_title: str):
        return await self.create_notification(
            user_id,
            "💬 새 댓글",
            f'회원님의 신고 "{report_title}" 에 새 댓글이 달렸습니다.',
            report_id
        )

    async def get_notifications(self, user_id: int, limit: int = 50, offset: int = 0) -> list[NotificationDTO]:
        if not user_id or user_id <= 0:
            raise BadRequestException("잘못된 사용자 ID")

        limit = limit if limit and limit > 0 else 50
        offset = offset if offset and offset > 0 else 0

        rows = await self.repo.select_by_user(user_id, limit, offset)
        return [NotificationDTO.model_validate(row.model_dump()) for row in rows]

    async def get_unread_notifications(self, user_id: int) -> list[NotificationDTO]:
        if not user_id or user_id <= 0:
            raise BadRequestException("잘못된 사용자 ID")

        rows = await self.repo.select_unread_by_user(user_id)
        return [NotificationDTO.model_validate(row.model_dump()) for row in rows]

    async def get_unread_count(self, user_id: int) -> ResponseUnreadCountDTO:
        if not user_id or user_id <= 0:
            raise BadRequestException("잘못된 사용자 ID")

        return ResponseUnreadCountDTO(count=await self.repo.count_unread_by_user(user_id))

    async def get_notification(self, notification_id: int) -> NotificationDTO:
        if not notification_id or notification_id <= 0:
            raise BadRequestException("잘못된 알림 ID")

        notification = await self.repo.select(notification_id)
        if notification is None:
            raise NotFoundException("알림을 찾을 수 없습니다")

        return NotificationDTO.model_validate(notification.model_dump())

    #   읽음 처리
    async def mark_as_read(self, notification_id: int, requester_id: int, is_admin: bool) -> NotificationDTO:
        notification = await self.get_notification(notification_id)

        if notification.user_id != requester_id and not is_admin:
            raise ForbiddenException("본인의 알림만 처리할 수 있습니다")

        self.logger.info(f"try mark notification {notification_id} read by {requester_id}")
        await self.repo.mark_read(notification_id)

        return await self.get_notification(notification_id)
