from pydantic import BaseModel


class ResponseFileUploadDTO(BaseModel):
    filename: str
    path: str
    mimetype: str
    size: int
