from sqlalchemy import Column, String, Table, DateTime, Integer, ForeignKey, Text, func

from .table_meta import meta

#   append-only
report_status_history_table = Table(
    'report_status_history',
    meta,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('report_id', Integer, ForeignKey("report.id", ondelete="CASCADE"), nullable=False),
    Column('from_status_id', Integer, ForeignKey("report_status.id"), nullable=False),
    Column('to_status_id', Integer, ForeignKey("report_status.id"), nullable=False),
    Column('note', Text),
    Column('change_reason', String(255)),
    Column('changed_by_user_id', Integer, ForeignKey("user.id", ondelete="SET NULL"), nullable=True),
    Column('changed_at', DateTime, nullable=False, server_default=func.now()),
)
