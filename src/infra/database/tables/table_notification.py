from sqlalchemy import Column, String, Table, DateTime, Integer, ForeignKey, Text, Boolean, func

from .table_meta import meta

notification_table = Table(
    'notification',
    meta,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('user_id', Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False),
    Column('title', String(255), nullable=False),
    Column('message', Text, nullable=False),
    Column('related_id', Integer),
    Column('is_read', Boolean, nullable=False, default=False, server_default='0'),
    Column('created_at', DateTime, nullable=False, server_default=func.now()),
    Column('updated_at', DateTime, nullable=False, server_default=func.now()),
)
