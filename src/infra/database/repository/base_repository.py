from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError

from src.infra.database.repository.maria_engine import get_engine
from src.logger.custom_logger import get_logger


class BaseRepository:
    def __init__(self):
        self.logger = get_logger(__name__)
        self.table = None
        self.entity = None

    async def insert(self, item) -> int:
        """
            insert 후 새 id 반환
        """
        try:
            engine = await get_engine()
            data = item.model_dump(exclude_none=True) if hasattr(item, "model_dump") else dict(item)

            async with engine.begin() as conn:
                stmt = self.table.insert().values(**data)
                result = await conn.execute(stmt)

                return result.inserted_primary_key[0] if result.inserted_primary_key else None

        except IntegrityError as e:
            self.logger.error(f" duplicate error in {self.table}: {e}")
            raise e

        except Exception as e:
            self.logger.error(f" insert error: {e}")
            raise e

    async def select(self, item_id):
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                stmt = self.table.select().where(self.table.c.id == item_id).limit(1)
                result = await conn.execute(stmt)
                row = result.mappings().first()

                if row is None:
                    self.logger.info(f"no item in {self.table} id: {item_id}")
                    return None

                return self.entity(**row)

        except Exception as e:
            self.logger.error(f" select from {self.table} : error: {e}")
            raise e

    async def select_by(self, limit=None, offset=None, order_by=None, **filters) -> list:
        """

            조건 조회

            select_by(user_id=5, is_read=False)
            -> SELECT * FROM table WHERE user_id = 5 AND is_read = false

        """
        ans = []
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                stmt = self._apply_filters(self.table.select(), filters)

                if order_by is not None:
                    stmt = stmt.order_by(*order_by)

                if limit is not None:
                    stmt = stmt.limit(limit)

                if offset is not None:
                    stmt = stmt.offset(offset)

                result = await conn.execute(stmt)
                rows = list(result.mappings())
                if not rows:
                    self.logger.info(f"no item in {self.table}")
                else:
                    ans = [self.entity(**row) for row in rows]

            return ans

        except Exception as e:
            self.logger.error(f"select_by {self.table} error {e}")
            raise e

    async def count_by(self, **filters) -> int:
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                stmt = self._apply_filters(select(func.count()).select_from(self.table), filters)
                result = await conn.execute(stmt)
                return int(result.scalar() or 0)

        except Exception as e:
            self.logger.error(f"count_by {self.table} error {e}")
            raise e

    async def update(self, item_id, values: dict) -> bool:
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                stmt = self.table.update().values(**values).where(self.table.c.id == item_id)
                result = await conn.execute(stmt)

        except Exception as e:
            self.logger.error(f"update {self.table} error: {e}")
            raise e

        return result.rowcount > 0

    async def delete(self, item_id) -> bool:
        try:
            engine = await get_engine()
            async with engine.begin() as conn:
                stmt = self.table.delete().where(self.table.c.id == item_id)
                result = await conn.execute(stmt)

        except Exception as e:
            self.logger.error(f"delete {self.table} error: {e}")
            raise e

        return result.rowcount > 0

    #   where 절 생성
    def _apply_filters(self, stmt, filters: dict):
        for column, value in filters.items():
            if hasattr(self.table.c, column):
                stmt = stmt.where(getattr(self.table.c, column) == value)
        return stmt
