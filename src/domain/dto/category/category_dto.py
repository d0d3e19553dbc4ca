from typing import Optional

from pydantic import field_validator

from src.domain.dto.base_dto import CamelDTO


class CategoryDTO(CamelDTO):
    id: int
    name: str
    description: Optional[str] = None


class RequestCreateCategoryDTO(CamelDTO):
    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        if v is None or not v.strip():
            raise ValueError("카테고리 이름은 필수입니다")
        return v.strip()


class RequestUpdateCategoryDTO(CamelDTO):
    name: Optional[str] = None
    description: Optional[str] = None


# 많이 쓰인 카테고리 (관리자 대시보드)
class TopCategoryDTO(CamelDTO):
    name: str
    usage_count: int
