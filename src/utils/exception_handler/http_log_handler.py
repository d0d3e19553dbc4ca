from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.responses import JSONResponse

from src.domain.dto.service.error_response import ErrorResponseBody
from src.logger.custom_logger import get_logger
from src.utils.exception_handler.service_error_class import ServiceException

logger = get_logger(__name__)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponseBody(status_code=status_code, message=message).model_dump()
    )


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(ServiceException)
    async def service_exception_handler(request: Request, exc: ServiceException):
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
        return _error_response(exc.status_code, exc.message)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        message = "; ".join(
            f"{'.'.join(str(loc) for loc in err.get('loc', []))}: {err.get('msg')}" for err in errors
        ) or "잘못된 요청입니다."
        logger.info(f"{request.method} {request.url.path} -> 400: {message}")
        return _error_response(400, message)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.error(f"{request.method} {request.url.path} unhandled error: {exc}", exc_info=True)
        return _error_response(500, "서버 내부 오류가 발생했습니다.")
