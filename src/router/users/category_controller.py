from fastapi import APIRouter, Depends
from starlette.responses import JSONResponse

from src.domain.dto.auth.auth_dto import UserProfile
from src.domain.dto.category.category_dto import CategoryDTO, RequestCreateCategoryDTO, RequestUpdateCategoryDTO, \
    TopCategoryDTO
from src.logger.custom_logger import get_logger
from src.service.auth.jwt import require_admin
from src.service.category.category_service import CategoryService

router = APIRouter(prefix="/categories", tags=["categories"])
logger = get_logger(__name__)

category_service = CategoryService()


@router.get("")
async def get_categories() -> list[CategoryDTO]:
    return await category_service.get_categories()


# 신고에 많이 쓰인 카테고리
@router.get("/top/{limit}")
async def get_top_categories(limit: int) -> list[TopCategoryDTO]:
    return await category_service.get_top_categories(limit)


@router.get("/{category_id}")
async def get_category(category_id: int) -> CategoryDTO:
    return await category_service.get_category(category_id)


@router.post("", status_code=201)
async def create_category(dto: RequestCreateCategoryDTO, admin: UserProfile = Depends(require_admin)) -> CategoryDTO:
    return await category_service.create_category(dto)


@router.put("/{category_id}")
async def update_category(
        category_id: int,
        dto: RequestUpdateCategoryDTO,
        admin: UserProfile = Depends(require_admin)
) -> CategoryDTO:
    return await category_service.update_category(category_id, dto)


@router.delete("/{category_id}")
async def delete_category(category_id: int, admin: UserProfile = Depends(require_admin)):
    await category_service.delete_category(category_id)
    return JSONResponse(status_code=200, content={"status": "success"})
