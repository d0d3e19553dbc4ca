from sqlalchemy import func

from . import base_repository
from ..tables.table_notification import notification_table
from src.domain.entities.notification_entity import NotificationEntity


class NotificationRepository(base_repository.BaseRepository):
    def __init__(self):
        super().__init__()
        self.table = notification_table
        self.entity = NotificationEntity

    def _newest_first(self):
        return [self.table.c.created_at.desc(), self.table.c.id.desc()]

    async def select_by_user(self, user_id: int, limit: int = 50, offset: int = 0) -> list:
        return await self.select_by(limit=limit, offset=offset, order_by=self._newest_first(), user_id=user_id)

    async def select_unread_by_user(self, user_id: int) -> list:
        return await self.select_by(order_by=self._newest_first(), user_id=user_id, is_read=False)

    async def count_unread_by_user(self, user_id: int) -> int:
        return await self.count_by(user_id=user_id, is_read=False)

    async def mark_read(self, notification_id: int) -> bool:
        return await self.update(notification_id, {"is_read": True, "updated_at": func.now()})
