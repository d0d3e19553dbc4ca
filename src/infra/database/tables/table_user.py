from sqlalchemy import Column, String, Table, DateTime, Integer, Boolean, func

from .table_meta import meta

user_table = Table(
    'user',
    meta,
    Column('id', Integer, primary_key=True, autoincrement=True),
    Column('email', String(255), nullable=False, unique=True),
    Column('name', String(255), nullable=False),
    Column('password_hash', String(255), nullable=False),
    Column('salt', String(64), nullable=False),
    Column('is_admin', Boolean, nullable=False, default=False, server_default='0'),
    Column('is_super_admin', Boolean, nullable=False, default=False, server_default='0'),
    Column('created_at', DateTime, nullable=False, server_default=func.now()),
)
