from sqlalchemy import Column, String, Table, Integer, Text

from .table_meta import meta

category_table = Table(
    'category',
    meta,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False, unique=True),
    Column("description", Text),
)
