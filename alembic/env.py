"""Alembic environment — migrates the devices table with the service's own settings.

The URL comes from inventory.config.Settings, so migrations and the running
service always target the same database (and share the postgresql:// rewrite).
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

import inventory.models  # noqa: F401  (registers the devices table)
from inventory.config import get_settings
from inventory.db.base import Base

if context.config.config_file_name is not None:
    fileConfig(context.config.config_file_name)


def _migrate(connection) -> None:
    context.configure(connection=connection, target_metadata=Base.metadata)
    with context.begin_transaction():
        context.run_migrations()


async def _migrate_online(database_url: str) -> None:
    engine = create_async_engine(database_url, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(_migrate)
    await engine.dispose()


database_url = get_settings().database_url
if context.is_offline_mode():
    context.configure(
        url=database_url, target_metadata=Base.metadata, literal_binds=True,
    )
    with context.begin_transaction():
        context.run_migrations()
else:
    asyncio.run(_migrate_online(database_url))
