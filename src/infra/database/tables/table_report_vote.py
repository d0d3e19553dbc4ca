from sqlalchemy import Column, Table, Integer, ForeignKey, UniqueConstraint

from .table_meta import meta

report_vote_table = Table(
    'report_vote',
    meta,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('report_id', Integer, ForeignKey("report.id", ondelete="CASCADE"), nullable=False),
    Column('user_id', Integer, ForeignKey("user.id", ondelete="CASCADE"), nullable=False),
    UniqueConstraint('report_id', 'user_id', name='uq_report_vote_report_user'),
)
