class ServiceException(Exception):
    def __init__(self, message: str, status_code: int = 500, trace_back: str = None):
        self.message = message
        self.status_code = status_code
        self.trace_back = trace_back
        super().__init__(self.message)


class BadRequestException(ServiceException):
    def __init__(self, message: str = "잘못된 요청입니다.", status_code: int = 400):
        super().__init__(message, status_code)


class UnauthorizedException(ServiceException):
    def __init__(self, message: str = "인증이 필요합니다.", status_code: int = 401):
        super().__init__(message, status_code)


class ForbiddenException(ServiceException):
    def __init__(self, message: str = "접근 권한이 없습니다.", status_code: int = 403):
        super().__init__(message, status_code)


class NotFoundException(ServiceException):
    def __init__(self, message: str = "목록이 존재 하지 않습니다.", status_code: int = 404):
        super().__init__(message, status_code)
