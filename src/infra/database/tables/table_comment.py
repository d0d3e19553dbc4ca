from sqlalchemy import Column, String, Table, DateTime, Integer, ForeignKey, Text, func

from .table_meta import meta

comment_table = Table(
    'comment',
    meta,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('report_id', Integer, ForeignKey("report.id", ondelete="CASCADE"), nullable=False),
    Column('user_id', Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False),
    Column('title', String(255), nullable=False),
    Column('content', Text, nullable=False),
    Column('created_at', DateTime, nullable=False, server_default=func.now()),
)
