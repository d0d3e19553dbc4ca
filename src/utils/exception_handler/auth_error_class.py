from src.utils.exception_handler.service_error_class import UnauthorizedException


class MissingTokenException(UnauthorizedException):
    def __init__(self, message: str = "토큰이 제공되지 않았습니다."):
        super().__init__(message)


class InvalidTokenException(UnauthorizedException):
    def __init__(self, message: str = "유효하지 않은 토큰입니다."):
        super().__init__(message)


class ExpiredAccessTokenException(UnauthorizedException):
    def __init__(self, message: str = "토큰이 만료되었습니다."):
        super().__init__(message)


class InvalidCredentialsException(UnauthorizedException):
    def __init__(self, message: str = "비밀번호 불일치"):
        super().__init__(message)
