from fastapi import APIRouter, Depends, File, UploadFile

from src.domain.dto.auth.auth_dto import UserProfile
from src.domain.dto.file.file_dto import ResponseFileUploadDTO
from src.logger.custom_logger import get_logger
from src.service.auth.jwt import get_current_profile
from src.service.file.file_service import FileService

router = APIRouter(prefix="/files", tags=["files"])
logger = get_logger(__name__)

file_service = FileService()


# 이미지 업로드 (png / jpeg / gif, 5MB 이하)
@router.post("/upload", status_code=201)
async def upload_file(
        file: UploadFile = File(...),
        profile: UserProfile = Depends(get_current_profile)
) -> ResponseFileUploadDTO:
    return await file_service.upload_image(file)
