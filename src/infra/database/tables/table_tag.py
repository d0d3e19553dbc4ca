from sqlalchemy import Column, String, Table, Integer, ForeignKey

from .table_meta import meta

tag_table = Table(
    'tag',
    meta,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('name', String(255), nullable=False, unique=True),
)

report_tag_table = Table(
    'report_tag',
    meta,
    Column('report_id', Integer, ForeignKey("report.id", ondelete="CASCADE"), primary_key=True),
    Column('tag_id', Integer, ForeignKey("tag.id", ondelete="CASCADE"), primary_key=True),
)
