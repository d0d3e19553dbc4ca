from sqlalchemy import select, func

from . import base_repository
from .maria_engine import get_engine
from ..tables.table_comment import comment_table
from ..tables.table_report import report_table
from src.domain.entities.comment_entity import CommentEntity


class CommentRepository(base_repository.BaseRepository):
    def __init__(self):
        super().__init__()
        self.table = comment_table
        self.entity = CommentEntity

    async def _refresh_comment_count(self, conn, report_id: int):
        #   comment 테이블 기준으로 재계산
        comment_count = (
            select(func.count())
            .select_from(self.table)
            .where(self.table.c.report_id == report_id)
            .scalar_subquery()
        )
        await conn.execute(
            report_table.update().where(report_table.c.id == report_id).values(comment_count=comment_count)
        )

    async def create_comment(self, item: CommentEntity) -> int:
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                result = await conn.execute(
                    self.table.insert().values(**item.model_dump(exclude_none=True, exclude={"id"}))
                )
                await self._refresh_comment_count(conn, item.report_id)

            return result.inserted_primary_key[0]

        except Exception as e:
            self.logger.error(f"create_comment error report: {item.report_id}: {e}")
            raise e

    async def delete_comment(self, comment_id: int, report_id: int) -> bool:
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                result = await conn.execute(self.table.delete().where(self.table.c.id == comment_id))
                await self._refresh_comment_count(conn, report_id)

            return result.rowcount > 0

        except Exception as e:
            self.logger.error(f"delete_comment error id: {comment_id}: {e}")
            raise e

    async def select_by_report(self, report_id: int) -> list:
        return await self.select_by(
            order_by=[self.table.c.created_at.asc(), self.table.c.id.asc()],
            report_id=report_id
        )
