from src.domain.dto.auth.auth_dto import UserProfile
from src.domain.dto.comment.comment_dto import CommentDTO, RequestCreateCommentDTO
from src.domain.entities.comment_entity import CommentEntity
from src.infra.database.repository.comment_repository import CommentRepository
from src.infra.database.repository.report_repository import ReportRepository
from src.logger.custom_logger import get_logger
from src.service.notification.notification_service import NotificationService
from src.service.report.status_workflow import APPROVED
from src.utils.exception_handler.service_error_class import BadRequestException, NotFoundException, \
    ForbiddenException


class CommentService:
    def __init__(self):
        self.logger = get_logger(__name__)
        self.repo = CommentRepository()
        self.report_repo = ReportRepository()
        self.notification_service = NotificationService()

    async def create_comment(self, dto: RequestCreateCommentDTO, user_id: int) -> CommentDTO:
        """
            승인된 신고에만 댓글 작성 가능 (검증 후 insert)
        """
        if not dto.report_id or dto.report_id <= 0:
            raise BadRequestException("잘못된 신고 ID")

        self.logger.info(f"try {user_id} create comment on report: {dto.report_id}")

        report = await self.report_repo.select(dto.report_id)
        if report is None:
            raise NotFoundException("신고를 찾을 수 없습니다")

        if report.status_id != APPROVED:
            raise BadRequestException("승인된 신고에만 댓글을 작성할 수 있습니다")

        comment_id = await self.repo.create_comment(
            CommentEntity(
                report_id=dto.report_id,
                user_id=user_id,
                title=dto.title,
                content=dto.content,
            )
        )

        #   본인 신고에 단 댓글은 알림 없음
        if report.user_id != user_id:
            await self.notification_service.notify_new_comment(report.user_id, report.id, report.title)

        return await self.get_comment(comment_id)

    async def get_comments_by_report(self, report_id: int) -> list[CommentDTO]:
        if not report_id or report_id <= 0:
            raise BadRequestException("잘못된 신고 ID")

        comments = await self.repo.select_by_report(report_id)
        return [CommentDTO.model_validate(comment.model_dump()) for comment in comments]

    async def get_comment(self, comment_id: int) -> CommentDTO:
        if not comment_id or comment_id <= 0:
            raise BadRequestException("잘못된 댓글 ID")

        comment = await self.repo.select(comment_id)
        if comment is None:
            raise NotFoundException("댓글을 찾을 수 없습니다")

        return CommentDTO.model_validate(comment.model_dump())

    async def delete_comment(self, comment_id: int, requester: UserProfile):
        comment = await self.get_comment(comment_id)

        if str(comment.user_id) != requester.id and not requester.is_admin:
            raise ForbiddenException("본인의 댓글만 삭제할 수 있습니다")

        self.logger.info(f"try {requester.id} delete comment: {comment_id}")
        await self.repo.delete_comment(comment_id, comment.report_id)
