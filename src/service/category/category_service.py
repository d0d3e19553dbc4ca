from src.domain.dto.category.category_dto import CategoryDTO, RequestCreateCategoryDTO, RequestUpdateCategoryDTO, \
    TopCategoryDTO
from src.domain.entities.category_entity import CategoryEntity
from src.infra.database.repository.category_repository import CategoryRepository
from src.infra.database.repository.report_repository import ReportRepository
from src.logger.custom_logger import get_logger
from src.utils.exception_handler.service_error_class import BadRequestException, NotFoundException


class CategoryService:
    def __init__(self):
        self.logger = get_logger(__name__)
        self.repo = CategoryRepository()
        self.report_repo = ReportRepository()

    async def get_categories(self) -> list[CategoryDTO]:
        categories = await self.repo.select_all()
        return [CategoryDTO.model_validate(category.model_dump()) for category in categories]

    async def get_category(self, category_id: int) -> CategoryDTO:
        if not category_id or category_id <= 0:
            raise BadRequestException("잘못된 카테고리 ID")

        category = await self.repo.select(category_id)
        if category is None:
            raise NotFoundException("카테고리를 찾을 수 없습니다")

        return CategoryDTO.model_validate(category.model_dump())

    #   신고에 많이 쓰인 순
    async def get_top_categories(self, limit: int) -> list[TopCategoryDTO]:
        if not limit or limit <= 0:
            raise BadRequestException("limit 은 1 이상이어야 합니다")

        rows = await self.repo.select_top(limit)
        return [TopCategoryDTO(name=row["name"], usage_count=int(row["usage_count"] or 0)) for row in rows]

    async def create_category(self, dto: RequestCreateCategoryDTO) -> CategoryDTO:
        self.logger.info(f"try create category: {dto.name}")

        if await self.repo.select_by_name(dto.name) is not None:
            raise BadRequestException("이미 존재하는 카테고리입니다")

        category_id = await self.repo.insert(CategoryEntity(name=dto.name, description=dto.description))
        return await self.get_category(category_id)

    async def update_category(self, category_id: int, dto: RequestUpdateCategoryDTO) -> CategoryDTO:
        await self.get_category(category_id)
        self.logger.info(f"try update category: {category_id}")

        values = {}
        if dto.name is not None:
            name = dto.name.strip()
            if not name:
                raise BadRequestException("카테고리 이름은 필수입니다")

            same_name = await self.repo.select_by_name(name)
            if same_name is not None and same_name.id != category_id:
                raise BadRequestException("이미 존재하는 카테고리입니다")
            values["name"] = name

        if dto.description is not None:
            values["description"] = dto.description

        if values:
            await self.repo.update(category_id, values)

        return await self.get_category(category_id)

    async def delete_category(self, category_id: int):
        await self.get_category(category_id)
        self.logger.info(f"try delete category: {category_id}")

        #   신고가 참조 중인 카테고리는 삭제 불가
        if await self.report_repo.count_by(category_id=category_id) > 0:
            raise BadRequestException("신고에서 사용 중인 카테고리는 삭제할 수 없습니다")

        await self.repo.delete(category_id)
