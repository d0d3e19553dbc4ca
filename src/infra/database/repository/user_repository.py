from sqlalchemy import select, func, exists

from . import base_repository
from .maria_engine import get_engine
from ..tables.table_comment import comment_table
from ..tables.table_report import report_table
from ..tables.table_report_vote import report_vote_table
from ..tables.table_user import user_table
from src.domain.entities.user_entity import UserEntity


class UserRepository(base_repository.BaseRepository):
    def __init__(self):
        super().__init__()
        self.table = user_table
        self.entity = UserEntity

    async def select_by_email(self, email: str):
        result = await self.select_by(limit=1, email=email)
        return result[0] if result else None

    async def exists_super_admin(self) -> bool:
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                stmt = select(exists().where(self.table.c.is_super_admin.is_(True)))
                result = await conn.execute(stmt)
                return bool(result.scalar())

        except Exception as e:
            self.logger.error(e)
            raise e

    async def select_with_stats(self, user_id: int = None) -> list:
        """
            유저 + 작성 신고 수 / 댓글 수 / 투표 수
        """
        reports = (
            select(report_table.c.user_id, func.count().label("cnt"))
            .group_by(report_table.c.user_id)
            .subquery()
        )
        comments = (
            select(comment_table.c.user_id, func.count().label("cnt"))
            .group_by(comment_table.c.user_id)
            .subquery()
        )
        votes = (
            select(report_vote_table.c.user_id, func.count().label("cnt"))
            .group_by(report_vote_table.c.user_id)
            .subquery()
        )

        stmt = (
            select(
                self.table.c.id,
                self.table.c.name,
                self.table.c.email,
                self.table.c.is_admin,
                self.table.c.is_super_admin,
                self.table.c.created_at,
                func.coalesce(reports.c.cnt, 0).label("report_count"),
                func.coalesce(comments.c.cnt, 0).label("comment_count"),
                func.coalesce(votes.c.cnt, 0).label("like_count"),
            )
            .select_from(
                self.table
                .outerjoin(reports, reports.c.user_id == self.table.c.id)
                .outerjoin(comments, comments.c.user_id == self.table.c.id)
                .outerjoin(votes, votes.c.user_id == self.table.c.id)
            )
            .order_by(self.table.c.created_at.desc(), self.table.c.id.desc())
        )

        if user_id is not None:
            stmt = stmt.where(self.table.c.id == user_id)

        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                result = await conn.execute(stmt)
                return [dict(row) for row in result.mappings()]

        except Exception as e:
            self.logger.error(f"select_with_stats error: {e}")
            raise e
