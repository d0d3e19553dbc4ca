from sqlalchemy import select, event
from sqlalchemy.ext.asyncio import create_async_engine, AsyncEngine
from sqlalchemy.pool import NullPool

from src.infra.database.tables.table_meta import meta
from src.infra.database.tables.table_report_status import report_status_table
from src.logger.custom_logger import get_logger
from src.utils.env_config import get_config

_ENGINE = None
logger = get_logger(__name__)

#   status_id 규칙: 1=pending, 2=in_review, 3=approved, 4=rejected
DEFAULT_REPORT_STATUSES = [
    {"id": 1, "name": "pending", "description": "검토 대기 중"},
    {"id": 2, "name": "in_review", "description": "검토 중"},
    {"id": 3, "name": "approved", "description": "승인됨"},
    {"id": 4, "name": "rejected", "description": "반려됨"},
]


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    #   ON DELETE CASCADE 동작용
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


async def get_engine() -> AsyncEngine:
    global _ENGINE

    if _ENGINE is not None:
        return _ENGINE

    try:
        url = get_config().database.sqlalchemy_url()

        if url.startswith("sqlite"):
            #   sqlite 는 커넥션 재사용 안함 (테스트 / 로컬)
            _ENGINE = create_async_engine(url, poolclass=NullPool)
            event.listen(_ENGINE.sync_engine, "connect", _enable_sqlite_foreign_keys)
        else:
            _ENGINE = create_async_engine(url, pool_pre_ping=True)

        return _ENGINE

    except Exception as e:
        logger.error(f"engine create error: {e}")
        raise e


async def dispose_engine():
    global _ENGINE

    if _ENGINE is not None:
        await _ENGINE.dispose()
        _ENGINE = None


async def init_schema():
    """
        없는 테이블 생성 + report_status 기본값 입력
    """
    engine = await get_engine()
    async with engine.begin() as conn:
        await conn.run_sync(meta.create_all)

        result = await conn.execute(select(report_status_table.c.id))
        existing = {row[0] for row in result}

        missing = [status for status in DEFAULT_REPORT_STATUSES if status["id"] not in existing]
        if missing:
            await conn.execute(report_status_table.insert(), missing)
            logger.info(f"report_status seeded: {[status['name'] for status in missing]}")
