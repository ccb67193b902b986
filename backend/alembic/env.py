"""Alembic environment — async migrations for the portal schema.

Invariants:
    - The migration URL is Settings.database_url, so postgresql:// URLs from
      the hosting provider are already rewritten for asyncpg
    - Every model is imported before target_metadata is read
"""

import asyncio
from logging.config import fileConfig

from sqlalchemy import pool
from sqlalchemy.ext.asyncio import create_async_engine

from alembic import context

from portal.config import get_settings
from portal.db.base import Base
from portal.models import (  # noqa: F401
    Bookmark, NotificationPreference, PushSubscription, User,
)

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = Base.metadata
database_url = get_settings().database_url


def _configure(**kwargs) -> None:
    context.configure(
        target_metadata=target_metadata, compare_type=True, **kwargs,
    )
    with context.begin_transaction():
        context.run_migrations()


async def _run_online() -> None:
    engine = create_async_engine(database_url, poolclass=pool.NullPool)
    async with engine.connect() as connection:
        await connection.run_sync(
            lambda sync_conn: _configure(connection=sync_conn),
        )
    await engine.dispose()


if context.is_offline_mode():
    _configure(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
else:
    asyncio.run(_run_online())
