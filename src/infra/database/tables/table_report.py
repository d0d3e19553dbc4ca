from sqlalchemy import Column, String, Table, DateTime, Integer, ForeignKey, Text, func

from .table_meta import meta

report_table = Table(
    'report',
    meta,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('user_id', Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False),
    Column('category_id', Integer, ForeignKey("category.id"), nullable=False),
    Column('title', String(255), nullable=False),
    Column('description', Text),
    Column('url', String(2048), nullable=False),
    Column('status_id', Integer, ForeignKey("report_status.id"), nullable=False, default=1, server_default='1'),
    Column('image_url', String(2048)),
    Column('vote_count', Integer, nullable=False, default=0, server_default='0'),
    Column('comment_count', Integer, nullable=False, default=0, server_default='0'),
    Column('created_at', DateTime, nullable=False, server_default=func.now()),
    Column('updated_at', DateTime, nullable=False, server_default=func.now()),
)
