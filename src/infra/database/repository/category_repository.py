from sqlalchemy import select, func

from . import base_repository
from .maria_engine import get_engine
from ..tables.table_category import category_table
from ..tables.table_report import report_table
from src.domain.entities.category_entity import CategoryEntity


class CategoryRepository(base_repository.BaseRepository):
    def __init__(self):
        super().__init__()
        self.table = category_table
        self.entity = CategoryEntity

    async def select_by_name(self, name: str):
        result = await self.select_by(limit=1, name=name)
        return result[0] if result else None

    async def select_all(self) -> list:
        return await self.select_by(order_by=[self.table.c.id.asc()])

    async def select_top(self, limit: int) -> list:
        """
            신고 수 기준 많이 쓰인 카테고리
        """
        usage_count = func.count(report_table.c.id).label("usage_count")
        stmt = (
            select(self.table.c.name, usage_count)
            .select_from(self.table.outerjoin(report_table, report_table.c.category_id == self.table.c.id))
            .group_by(self.table.c.id, self.table.c.name)
            .order_by(usage_count.desc(), self.table.c.id.asc())
            .limit(limit)
        )

        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                result = await conn.execute(stmt)
                return [dict(row) for row in result.mappings()]

        except Exception as e:
            self.logger.error(f"select_top {self.table} error: {e}")
            raise e
