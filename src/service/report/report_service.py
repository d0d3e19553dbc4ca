from src.domain.dto.report.report_dto import ReportDTO, RequestCreateReportDTO, RequestUpdateReportDTO, TagDTO, \
    ReportStatusDTO, ReportStatusHistoryDTO, ResponseVoteDTO, ResponseReportCategoryDTO
from src.domain.dto.report.report_search_dto import RequestReportSearchDTO
from src.domain.dto.auth.auth_dto import UserProfile
from src.domain.entities.report_entity import ReportEntity
from src.infra.database.repository.category_repository import CategoryRepository
from src.infra.database.repository.report_repository import ReportRepository
from src.logger.custom_logger import get_logger
from src.service.notification.notification_service import NotificationService
from src.service.report.report_filter import build_search_filter, parse_tags
from src.service.report.status_workflow import PENDING, MODERATION_REASON, is_transition_allowed, \
    default_moderation_note
from src.utils.exception_handler.service_error_class import BadRequestException, NotFoundException, \
    ForbiddenException

_BASE_FIELDS = (
    "id", "user_id", "category_id", "title", "description", "url", "status_id", "image_url",
    "vote_count", "comment_count", "created_at", "updated_at",
)


def _validate_id(value, message: str):
    if not value or value <= 0:
        raise BadRequestException(message)


class ReportService:
    def __init__(self):
        self.logger = get_logger(__name__)
        self.repo = ReportRepository()
        self.category_repo = CategoryRepository()
        self.notification_service = NotificationService()

    # ---------------------------------------------------------------- 조회

    async def get_report(self, report_id: int) -> ReportDTO:
        _validate_id(report_id, "잘못된 신고 ID")

        report = await self.repo.select(report_id)
        if report is None:
            raise NotFoundException("신고를 찾을 수 없습니다")

        return ReportDTO.model_validate(report.model_dump())

    async def get_report_with_status(self, report_id: int) -> ReportDTO:
        _validate_id(report_id, "잘못된 신고 ID")

        row = await self.repo.select_with_status(report_id)
        if row is None:
            raise NotFoundException("신고를 찾을 수 없습니다")

        return ReportDTO.model_validate(row)

    async def search_reports(self, dto: RequestReportSearchDTO) -> list[ReportDTO]:
        filters = build_search_filter(dto)
        rows = await self.repo.search_reports(filters)

        return [self._map_search_row(row, filters) for row in rows]

    @staticmethod
    def _map_search_row(row: dict, filters) -> ReportDTO:
        """
            기본 컬럼 + include 된 컬럼만 채움 (나머지는 unset)
        """
        data = {field: row.get(field) for field in _BASE_FIELDS}

        if filters.include_status:
            data["status_name"] = row.get("status_name")
            data["status_description"] = row.get("status_description")
        if filters.include_category:
            data["category_name"] = row.get("category_name")
        if filters.include_user:
            data["user_name"] = row.get("user_name")
        if filters.include_tags:
            data["tags"] = parse_tags(row.get("tags_json"))

        return ReportDTO.model_validate(data)

    async def get_tags(self, report_id: int) -> list[TagDTO]:
        _validate_id(report_id, "잘못된 신고 ID")

        tags = await self.repo.select_tags(report_id)
        return [TagDTO(id=tag.id, name=tag.name) for tag in tags]

    async def get_category(self, report_id: int) -> ResponseReportCategoryDTO:
        _validate_id(report_id, "잘못된 신고 ID")

        name = await self.repo.select_category_name(report_id)
        if not name:
            raise NotFoundException(f"신고 {report_id} 의 카테고리를 찾을 수 없습니다")

        return ResponseReportCategoryDTO(category_name=name)

    async def get_statuses(self) -> list[ReportStatusDTO]:
        statuses = await self.repo.select_statuses()
        return [ReportStatusDTO.model_validate(status.model_dump()) for status in statuses]

    async def get_status_history(self, report_id: int) -> list[ReportStatusHistoryDTO]:
        await self.get_report(report_id)

        rows = await self.repo.select_status_history(report_id)
        return [ReportStatusHistoryDTO.model_validate(row.model_dump()) for row in rows]

    # ---------------------------------------------------------------- 작성 / 수정 / 삭제

    async def create_report(self, dto: RequestCreateReportDTO, user_id: int) -> ReportDTO:
        _validate_id(user_id, "잘못된 사용자 ID")
        self.logger.info(f"try {user_id} create report: {dto.url}")

        if await self.category_repo.select(dto.category_id) is None:
            raise NotFoundException("카테고리를 찾을 수 없습니다")

        report_id = await self.repo.create_report(
            ReportEntity(
                user_id=user_id,
                category_id=dto.category_id,
                title=dto.title,
                description=dto.description,
                url=dto.url,
                image_url=dto.image_url,
                status_id=PENDING,
            ),
            dto.tag_names
        )

        return await self.get_report(report_id)

    async def update_report(self, report_id: int, dto: RequestUpdateReportDTO, requester: UserProfile) -> ReportDTO:
        report = await self._get_owned_report(report_id, requester)
        self.logger.info(f"try {requester.id} update report: {report_id}")

        values = {}
        for field in ("title", "description", "url"):
            value = getattr(dto, field)
            if value is not None and value.strip():
                values[field] = value.strip()

        if dto.category_id and dto.category_id != report.category_id:
            if await self.category_repo.select(dto.category_id) is None:
                raise NotFoundException("카테고리를 찾을 수 없습니다")
            values["category_id"] = dto.category_id

        if dto.image_url is not None:
            values["image_url"] = dto.image_url or None

        if values:
            await self.repo.update_report(report_id, values)

        if dto.tag_names is not None:
            await self.repo.replace_tags(report_id, dto.tag_names)

        return await self.get_report(report_id)

    async def add_tags_from_text(self, report_id: int, tag_names: list) -> list[TagDTO]:
        await self.get_report(report_id)
        self.logger.info(f"try add tags to report {report_id}: {tag_names}")

        await self.repo.add_tags_by_names(report_id, tag_names)
        return await self.get_tags(report_id)

    async def delete_report(self, report_id: int, requester: UserProfile):
        await self._get_owned_report(report_id, requester)
        self.logger.info(f"try {requester.id} delete report: {report_id}")

        await self.repo.delete(report_id)

    async def _get_owned_report(self, report_id: int, requester: UserProfile) -> ReportEntity:
        _validate_id(report_id, "잘못된 신고 ID")

        report = await self.repo.select(report_id)
        if report is None:
            raise NotFoundException("신고를 찾을 수 없습니다")

        if str(report.user_id) != requester.id and not requester.is_admin:
            raise ForbiddenException("본인의 신고만 수정/삭제할 수 있습니다")

        return report

    # ---------------------------------------------------------------- 투표

    async def vote_report(self, report_id: int, user_id: int) -> ResponseVoteDTO:
        _validate_id(report_id, "잘못된 신고 ID")
        _validate_id(user_id, "잘못된 사용자 ID")

        if await self.repo.select(report_id) is None:
            raise NotFoundException("신고를 찾을 수 없습니다")

        self.logger.info(f"try {user_id} toggle vote on report: {report_id}")
        vote_count, has_voted = await self.repo.toggle_vote(report_id, user_id)

        return ResponseVoteDTO(vote_count=vote_count, has_voted=has_voted)

    # ---------------------------------------------------------------- 상태 변경

    async def update_status(
            self,
            report_id: int,
            new_status_id: int,
            moderator_id: int,
            moderation_note: str = None
    ) -> ReportDTO:
        """
            상태 변경 -> 이력 기록 -> 작성자 알림 -> 갱신된 신고(상태명 포함) 반환
        """
        _validate_id(report_id, "잘못된 신고 ID")
        _validate_id(new_status_id, "잘못된 상태 ID")
        self.logger.info(f"try {moderator_id} change report {report_id} status to {new_status_id}")

        current = await self.repo.select(report_id)
        if current is None:
            raise NotFoundException("신고를 찾을 수 없습니다")

        new_status = await self.repo.select_status(new_status_id)
        if new_status is None:
            raise NotFoundException("존재하지 않는 상태입니다")

        if current.status_id == new_status_id:
            raise BadRequestException("이미 해당 상태인 신고입니다")

        if not is_transition_allowed(current.status_id, new_status_id):
            raise BadRequestException(f"{current.status_id} -> {new_status_id} 상태 변경은 허용되지 않습니다")

        previous_status = await self.repo.select_status(current.status_id)
        previous_name = previous_status.name if previous_status else str(current.status_id)

        note = moderation_note.strip() if moderation_note and moderation_note.strip() else None
        updated = await self.repo.update_status_with_history(
            report_id,
            current.status_id,
            new_status_id,
            note or default_moderation_note(previous_name, new_status.name),
            MODERATION_REASON,
            moderator_id
        )

        if not updated:
            raise BadRequestException("신고 상태가 이미 변경되었습니다. 다시 시도해 주세요")

        await self.notification_service.notify_report_status_change(
            current.user_id, report_id, current.title, new_status.name
        )

        return await self.get_report_with_status(report_id)
