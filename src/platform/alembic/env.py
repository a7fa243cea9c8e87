"""Alembic environment: migrations run on a sync connection borrowed from the asyncpg engine."""

import asyncio

from alembic import context
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base

# Every model must be imported so Base.metadata knows its table
from src.service.table_booking.driven_adapter.model import (  # noqa: F401
    booking_model,
    customer_model,
    restaurant_model,
)


config = context.config
target_metadata = Base.metadata


def _database_url() -> str:
    url = config.get_main_option('sqlalchemy.url')
    if not url:
        return settings.DATABASE_URL_ASYNC
    return url if '+asyncpg' in url else url.replace('postgresql://', 'postgresql+asyncpg://', 1)


def run_migrations_offline() -> None:
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={'paramstyle': 'named'},
    )
    with context.begin_transaction():
        context.run_migrations()


def _run_migrations(connection: Connection) -> None:
    context.configure(connection=connection, target_metadata=target_metadata)
    with context.begin_transaction():
        context.run_migrations()


async def run_migrations_online() -> None:
    engine = create_async_engine(_database_url())
    async with engine.connect() as connection:
        await connection.run_sync(_run_migrations)
    await engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    asyncio.run(run_migrations_online())
