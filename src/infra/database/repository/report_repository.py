from sqlalchemy import select, func, and_

from . import base_repository
from .maria_engine import get_engine
from ..tables.table_category import category_table
from ..tables.table_report import report_table
from ..tables.table_report_status import report_status_table
from ..tables.table_report_status_history import report_status_history_table
from ..tables.table_report_vote import report_vote_table
from ..tables.table_tag import tag_table, report_tag_table
from ..tables.table_user import user_table
from src.domain.dto.report.report_search_dto import ReportSearchFilter, SORT_POPULAR
from src.domain.entities.report_entity import ReportEntity, ReportStatusEntity, ReportStatusHistoryEntity
from src.domain.entities.tag_entity import TagEntity


def normalize_tag_names(raw_names) -> list:
    """
        공백 제거 + 소문자 + 중복 / 빈 값 제거 (입력 순서 유지)
    """
    names = []
    for raw in raw_names or []:
        if raw is None:
            continue
        name = str(raw).strip().lower()
        if name and name not in names:
            names.append(name)
    return names


class ReportRepository(base_repository.BaseRepository):
    def __init__(self):
        super().__init__()
        self.table = report_table
        self.entity = ReportEntity

    #   신고 생성 (+ 태그 연결) 한 트랜잭션
    async def create_report(self, item: ReportEntity, tag_names=None) -> int:
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                result = await conn.execute(
                    self.table.insert().values(**item.model_dump(exclude_none=True, exclude={"id"}))
                )
                report_id = result.inserted_primary_key[0]

                tag_ids = await self._find_or_create_tags(conn, normalize_tag_names(tag_names))
                await self._add_tags_to_report(conn, report_id, tag_ids)

            return report_id

        except Exception as e:
            self.logger.error(f"create_report error: {e}")
            raise e

    async def select_with_status(self, report_id: int):
        stmt = (
            select(
                self.table,
                report_status_table.c.name.label("status_name"),
                report_status_table.c.description.label("status_description"),
            )
            .select_from(self.table.outerjoin(report_status_table, self.table.c.status_id == report_status_table.c.id))
            .where(self.table.c.id == report_id)
            .limit(1)
        )

        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                result = await conn.execute(stmt)
                row = result.mappings().first()
                return dict(row) if row is not None else None

        except Exception as e:
            self.logger.error(f"select_with_status error: {e}")
            raise e

    async def select_category_name(self, report_id: int):
        stmt = (
            select(category_table.c.name)
            .select_from(self.table.join(category_table, self.table.c.category_id == category_table.c.id))
            .where(self.table.c.id == report_id)
            .limit(1)
        )

        engine = await get_engine()
        async with engine.begin() as conn:
            result = await conn.execute(stmt)
            return result.scalar()

    # ---------------------------------------------------------------- 검색

    def build_search_statement(self, filters: ReportSearchFilter, dialect_name: str = "mysql"):
        """
            include 된 테이블만 join, 조건은 전부 bind parameter
        """
        columns = [
            self.table.c.id, self.table.c.user_id, self.table.c.category_id, self.table.c.title,
            self.table.c.description, self.table.c.url, self.table.c.status_id, self.table.c.image_url,
            self.table.c.vote_count, self.table.c.comment_count, self.table.c.created_at, self.table.c.updated_at,
        ]
        group_by = list(columns)
        from_clause = self.table

        if filters.include_status:
            columns.append(report_status_table.c.name.label("status_name"))
            columns.append(report_status_table.c.description.label("status_description"))
            group_by += [report_status_table.c.name, report_status_table.c.description]
            from_clause = from_clause.outerjoin(report_status_table, self.table.c.status_id == report_status_table.c.id)

        if filters.include_category:
            columns.append(category_table.c.name.label("category_name"))
            group_by.append(category_table.c.name)
            from_clause = from_clause.outerjoin(category_table, self.table.c.category_id == category_table.c.id)

        if filters.include_user:
            columns.append(user_table.c.name.label("user_name"))
            group_by.append(user_table.c.name)
            from_clause = from_clause.outerjoin(user_table, self.table.c.user_id == user_table.c.id)

        if filters.include_tags:
            columns.append(self._tags_aggregate(dialect_name).label("tags_json"))
            from_clause = (
                from_clause
                .outerjoin(report_tag_table, report_tag_table.c.report_id == self.table.c.id)
                .outerjoin(tag_table, tag_table.c.id == report_tag_table.c.tag_id)
            )

        conditions = []
        if filters.user_id:
            conditions.append(self.table.c.user_id == filters.user_id)
        if filters.category_id:
            conditions.append(self.table.c.category_id == filters.category_id)
        if filters.url:
            conditions.append(self.table.c.url == filters.url)
        if filters.status_ids:
            conditions.append(self.table.c.status_id.in_(filters.status_ids))

        stmt = select(*columns).select_from(from_clause)

        if conditions:
            stmt = stmt.where(and_(*conditions))

        if filters.include_tags:
            stmt = stmt.group_by(*group_by)

        if filters.sort == SORT_POPULAR:
            stmt = stmt.order_by(self.table.c.vote_count.desc(), self.table.c.created_at.desc(), self.table.c.id.desc())
        else:
            stmt = stmt.order_by(self.table.c.created_at.desc(), self.table.c.id.desc())

        return stmt.limit(filters.limit).offset(filters.offset)

    @staticmethod
    def _tags_aggregate(dialect_name: str):
        tag_object = func.json_object("id", tag_table.c.id, "name", tag_table.c.name)

        if dialect_name == "sqlite":
            return func.json_group_array(tag_object)

        return func.coalesce(func.json_arrayagg(tag_object), func.json_array())

    async def search_reports(self, filters: ReportSearchFilter) -> list:
        try:
            engine = await get_engine()
            stmt = self.build_search_statement(filters, engine.dialect.name)

            async with engine.begin() as conn:
                result = await conn.execute(stmt)
                return [dict(row) for row in result.mappings()]

        except Exception as e:
            self.logger.error(f"search_reports error: {e}")
            raise e

    # ---------------------------------------------------------------- 태그

    async def _find_or_create_tags(self, conn, names: list) -> list:
        if not names:
            return []

        stmt = (
            tag_table.insert()
            .prefix_with("IGNORE", dialect="mysql")
            .prefix_with("OR IGNORE", dialect="sqlite")
        )
        await conn.execute(stmt, [{"name": name} for name in names])

        result = await conn.execute(select(tag_table.c.id).where(tag_table.c.name.in_(names)))
        return [row[0] for row in result]

    async def _add_tags_to_report(self, conn, report_id: int, tag_ids: list):
        if not tag_ids:
            return

        stmt = (
            report_tag_table.insert()
            .prefix_with("IGNORE", dialect="mysql")
            .prefix_with("OR IGNORE", dialect="sqlite")
        )
        await conn.execute(stmt, [{"report_id": report_id, "tag_id": tag_id} for tag_id in tag_ids])

    async def add_tags_by_names(self, report_id: int, tag_names) -> None:
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                tag_ids = await self._find_or_create_tags(conn, normalize_tag_names(tag_names))
                await self._add_tags_to_report(conn, report_id, tag_ids)

        except Exception as e:
            self.logger.error(f"add_tags_by_names error: {e}")
            raise e

    async def replace_tags(self, report_id: int, tag_names) -> None:
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                await conn.execute(report_tag_table.delete().where(report_tag_table.c.report_id == report_id))
                tag_ids = await self._find_or_create_tags(conn, normalize_tag_names(tag_names))
                await self._add_tags_to_report(conn, report_id, tag_ids)

        except Exception as e:
            self.logger.error(f"replace_tags error: {e}")
            raise e

    async def select_tags(self, report_id: int) -> list:
        stmt = (
            select(tag_table.c.id, tag_table.c.name)
            .select_from(tag_table.join(report_tag_table, tag_table.c.id == report_tag_table.c.tag_id))
            .where(report_tag_table.c.report_id == report_id)
            .order_by(tag_table.c.id.asc())
        )

        engine = await get_engine()
        async with engine.begin() as conn:
            result = await conn.execute(stmt)
            return [TagEntity(**row) for row in result.mappings()]

    # ---------------------------------------------------------------- 투표

    async def toggle_vote(self, report_id: int, user_id: int) -> tuple:
        """
            투표 있으면 삭제, 없으면 추가 -> vote_count 는 report_vote 기준으로 재계산
            return (vote_count, has_voted)
        """
        vote_match = and_(report_vote_table.c.report_id == report_id, report_vote_table.c.user_id == user_id)

        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                deleted = await conn.execute(report_vote_table.delete().where(vote_match))
                has_voted = deleted.rowcount == 0

                if has_voted:
                    stmt = (
                        report_vote_table.insert()
                        .prefix_with("IGNORE", dialect="mysql")
                        .prefix_with("OR IGNORE", dialect="sqlite")
                        .values(report_id=report_id, user_id=user_id)
                    )
                    await conn.execute(stmt)

                vote_count = (
                    select(func.count())
                    .select_from(report_vote_table)
                    .where(report_vote_table.c.report_id == report_id)
                    .scalar_subquery()
                )
                await conn.execute(
                    self.table.update().where(self.table.c.id == report_id).values(vote_count=vote_count)
                )

                result = await conn.execute(select(self.table.c.vote_count).where(self.table.c.id == report_id))
                return int(result.scalar() or 0), has_voted

        except Exception as e:
            self.logger.error(f"toggle_vote error report: {report_id}, user: {user_id}: {e}")
            raise e

    async def has_voted(self, report_id: int, user_id: int) -> bool:
        stmt = select(func.count()).select_from(report_vote_table).where(
            and_(report_vote_table.c.report_id == report_id, report_vote_table.c.user_id == user_id)
        )

        engine = await get_engine()
        async with engine.begin() as conn:
            result = await conn.execute(stmt)
            return bool(result.scalar())

    # ---------------------------------------------------------------- 상태

    async def select_statuses(self) -> list:
        engine = await get_engine()
        async with engine.begin() as conn:
            result = await conn.execute(report_status_table.select().order_by(report_status_table.c.id.asc()))
            return [ReportStatusEntity(**row) for row in result.mappings()]

    async def select_status(self, status_id: int):
        engine = await get_engine()
        async with engine.begin() as conn:
            result = await conn.execute(
                report_status_table.select().where(report_status_table.c.id == status_id).limit(1)
            )
            row = result.mappings().first()
            return ReportStatusEntity(**row) if row is not None else None

    async def update_status_with_history(
            self,
            report_id: int,
            from_status_id: int,
            to_status_id: int,
            note: str,
            change_reason: str,
            changed_by_user_id: int
    ) -> bool:
        """
            상태 변경 + 이력 기록 한 트랜잭션
            그 사이 다른 곳에서 상태가 바뀌었으면 아무것도 쓰지 않고 False
        """
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                result = await conn.execute(
                    self.table.update()
                    .where(and_(self.table.c.id == report_id, self.table.c.status_id == from_status_id))
                    .values(status_id=to_status_id, updated_at=func.now())
                )

                if result.rowcount == 0:
                    self.logger.info(f"report {report_id} status is no longer {from_status_id}")
                    return False

                await conn.execute(
                    report_status_history_table.insert().values(
                        report_id=report_id,
                        from_status_id=from_status_id,
                        to_status_id=to_status_id,
                        note=note,
                        change_reason=change_reason,
                        changed_by_user_id=changed_by_user_id,
                        changed_at=func.now(),
                    )
                )

            return True

        except Exception as e:
            self.logger.error(f"update_status_with_history error report: {report_id}: {e}")
            raise e

    async def select_status_history(self, report_id: int) -> list:
        stmt = (
            report_status_history_table.select()
            .where(report_status_history_table.c.report_id == report_id)
            .order_by(report_status_history_table.c.changed_at.desc(), report_status_history_table.c.id.desc())
        )

        engine = await get_engine()
        async with engine.begin() as conn:
            result = await conn.execute(stmt)
            return [ReportStatusHistoryEntity(**row) for row in result.mappings()]

    async def update_report(self, report_id: int, values: dict) -> bool:
        return await self.update(report_id, {**values, "updated_at": func.now()})
