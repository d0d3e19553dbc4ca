from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.domain.dto.auth.auth_dto import UserProfile
from src.domain.dto.comment.comment_dto import CommentDTO, RequestCreateCommentDTO
from src.logger.custom_logger import get_logger
from src.service.auth.jwt import get_current_profile
from src.service.comment.comment_service import CommentService

router = APIRouter(prefix="/comments", tags=["comments"])
logger = get_logger(__name__)

comment_service = CommentService()


# 댓글 작성 (승인된 신고만)
@router.post("", status_code=201)
async def create_comment(dto: RequestCreateCommentDTO, profile: UserProfile = Depends(get_current_profile)) -> CommentDTO:
    return await comment_service.create_comment(dto, int(profile.id))


@router.get("/report/{report_id}")
async def get_comments_by_report(report_id: int) -> list[CommentDTO]:
    return await comment_service.get_comments_by_report(report_id)


@router.get("/{comment_id}")
async def get_comment(comment_id: int) -> CommentDTO:
    return await comment_service.get_comment(comment_id)


@router.delete("/{comment_id}")
async def delete_comment(comment_id: int, profile: UserProfile = Depends(get_current_profile)):
    await comment_service.delete_comment(comment_id, profile)
    return JSONResponse(status_code=200, content={"status": "success"})
