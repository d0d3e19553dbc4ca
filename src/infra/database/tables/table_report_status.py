from sqlalchemy import Column, String, Table, Integer

from .table_meta import meta

report_status_table = Table(
    'report_status',
    meta,
    Column('id', Integer, primary_key=True, autoincrement=False),
    Column('name', String(63), nullable=False, unique=True),
    Column('description', String(255)),
)
