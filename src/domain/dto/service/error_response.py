from pydantic import BaseModel


class ErrorResponseBody(BaseModel):
    status_code: int
    message: str
