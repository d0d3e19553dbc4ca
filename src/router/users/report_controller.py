from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from starlette.responses import JSONResponse

from src.domain.dto.auth.auth_dto import UserProfile
from src.domain.dto.report.report_dto import ReportDTO, RequestCreateReportDTO, RequestUpdateReportDTO, \
    RequestUpdateReportStatusDTO, RequestAddTagsDTO, TagDTO, ReportStatusDTO, ReportStatusHistoryDTO, \
    ResponseVoteDTO, ResponseReportCategoryDTO
from src.domain.dto.report.report_search_dto import RequestReportSearchDTO
from src.logger.custom_logger import get_logger
from src.service.auth.jwt import get_current_profile, require_admin
from src.service.report.report_service import ReportService

router = APIRouter(prefix="/reports", tags=["reports"])
logger = get_logger(__name__)

report_service = ReportService()


# 신고 작성
@router.post("", status_code=201, response_model=ReportDTO, response_model_exclude_unset=True)
async def create_report(dto: RequestCreateReportDTO, profile: UserProfile = Depends(get_current_profile)):
    return await report_service.create_report(dto, int(profile.id))


# ?id= 가 있으면 단건, 없으면 검색
@router.get("", response_model=ReportDTO | List[ReportDTO], response_model_exclude_unset=True)
async def get_reports(
        id: Optional[int] = None,
        status: Optional[str] = None,
        user_id: Optional[int] = Query(None, alias="userId"),
        category_id: Optional[int] = Query(None, alias="categoryId"),
        url: Optional[str] = None,
        sort: Optional[str] = None,
        include: List[str] = Query(default=[]),
        page: Optional[int] = None,
        limit: Optional[int] = None,
):
    if id is not None:
        return await report_service.get_report(id)

    return await report_service.search_reports(
        RequestReportSearchDTO(
            status=status,
            user_id=user_id,
            category_id=category_id,
            url=url,
            sort=sort,
            include=include,
            page=page,
            limit=limit,
        )
    )


@router.get("/statuses")
async def get_statuses() -> list[ReportStatusDTO]:
    return await report_service.get_statuses()


@router.get("/{report_id}/tags")
async def get_tags(report_id: int) -> list[TagDTO]:
    return await report_service.get_tags(report_id)


@router.get("/{report_id}/category")
async def get_category(report_id: int) -> ResponseReportCategoryDTO:
    return await report_service.get_category(report_id)


# 상태 변경 이력 (최신순)
@router.get("/{report_id}/history")
async def get_status_history(report_id: int) -> list[ReportStatusHistoryDTO]:
    return await report_service.get_status_history(report_id)


# 신고 수정 (작성자 / 관리자)
@router.put("/{report_id}", response_model=ReportDTO, response_model_exclude_unset=True)
async def update_report(
        report_id: int,
        dto: RequestUpdateReportDTO,
        profile: UserProfile = Depends(get_current_profile)
):
    return await report_service.update_report(report_id, dto, profile)


# 투표 토글
@router.put("/{report_id}/vote")
async def vote_report(report_id: int, profile: UserProfile = Depends(get_current_profile)) -> ResponseVoteDTO:
    return await report_service.vote_report(report_id, int(profile.id))


# 상태 변경 (관리자)
@router.put("/{report_id}/status", response_model=ReportDTO, response_model_exclude_unset=True)
async def update_status(
        report_id: int,
        dto: RequestUpdateReportStatusDTO,
        admin: UserProfile = Depends(require_admin)
):
    return await report_service.update_status(report_id, dto.status_id, int(admin.id), dto.moderation_note)


@router.put("/{report_id}/tags/from-text")
async def add_tags_from_text(
        report_id: int,
        dto: RequestAddTagsDTO,
        profile: UserProfile = Depends(get_current_profile)
) -> list[TagDTO]:
    return await report_service.add_tags_from_text(report_id, dto.tag_names)


@router.delete("/{report_id}")
async def delete_report(report_id: int, profile: UserProfile = Depends(get_current_profile)):
    await report_service.delete_report(report_id, profile)
    return JSONResponse(status_code=200, content={"status": "success"})
