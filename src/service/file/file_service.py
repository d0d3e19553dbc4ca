import os
import uuid

from fastapi import UploadFile

from src.domain.dto.file.file_dto import ResponseFileUploadDTO
from src.logger.custom_logger import get_logger
from src.utils.exception_handler.service_error_class import BadRequestException
from src.utils.path import path_dic

ALLOWED_MIME_TYPES = {
    "image/png": ".png",
    "image/jpeg": ".jpg",
    "image/jpg": ".jpg",
    "image/gif": ".gif",
}
MAX_FILE_SIZE = 5 * 1024 * 1024  # 5MB
PUBLIC_PATH = "/public/uploads"


class FileService:
    def __init__(self):
        self.logger = get_logger(__name__)

    async def upload_image(self, file: UploadFile) -> ResponseFileUploadDTO:
        if file is None or not file.filename:
            raise BadRequestException("업로드할 파일이 없습니다")

        if file.content_type not in ALLOWED_MIME_TYPES:
            raise BadRequestException("이미지 파일만 업로드 가능합니다 (png, jpeg, jpg, gif)")

        content = await file.read(MAX_FILE_SIZE + 1)
        if len(content) > MAX_FILE_SIZE:
            raise BadRequestException("파일 크기는 5MB 이하여야 합니다")

        #   확장자는 MIME 기준으로만 (클라이언트 파일명 확장자 무시)
        filename = f"{uuid.uuid4()}{ALLOWED_MIME_TYPES[file.content_type]}"

        upload_dir = path_dic["uploads"]
        os.makedirs(upload_dir, exist_ok=True)

        self.logger.info(f"try save upload: {file.filename} -> {filename} ({len(content)} bytes)")
        try:
            with open(os.path.join(upload_dir, filename), "wb") as f:
                f.write(content)

        except OSError as e:
            self.logger.error(f"upload save error: {e}")
            raise e

        return ResponseFileUploadDTO(
            filename=filename,
            path=f"{PUBLIC_PATH}/{filename}",
            mimetype=file.content_type,
            size=len(content),
        )
