"""
Integration fixtures: a real PostgreSQL database built from the ORM metadata.

Tests are skipped when the database configured in settings is unreachable.
"""

from collections.abc import AsyncIterator

import asyncpg
import pytest
import pytest_asyncio
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.platform.config.core_setting import settings
from src.platform.database.orm_db_setting import Base
from src.service.table_booking.driven_adapter.model.booking_model import BookingModel  # noqa: F401
from src.service.table_booking.driven_adapter.model.customer_model import CustomerModel  # noqa: F401
from src.service.table_booking.driven_adapter.model.restaurant_model import (
    DiningTableModel,
    OpeningHoursModel,
    RestaurantModel,
)


@pytest_asyncio.fixture
async def session_maker() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(settings.DATABASE_URL_ASYNC)
    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
            await conn.run_sync(Base.metadata.create_all)
    except (OSError, SQLAlchemyError, asyncpg.PostgresError) as e:
        await engine.dispose()
        pytest.skip(f'PostgreSQL unavailable: {e}')

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def restaurant_id(session_maker: async_sessionmaker[AsyncSession]) -> int:
    """One restaurant open 11:00-22:00 every day with tables T1 (2), T2 (4), T3 (6, inactive)"""
    async with session_maker() as session:
        restaurant = RestaurantModel(
            name='La Bella Italia',
            address='123 Main St, Downtown',
            phone='555-0101',
            opening_hours=[
                OpeningHoursModel(day_of_week=dow, open_time='11:00', close_time='22:00')
                for dow in range(7)
            ],
            tables=[
                DiningTableModel(table_number='T1', capacity=2),
                DiningTableModel(table_number='T2', capacity=4),
                DiningTableModel(table_number='T3', capacity=6, is_active=False),
            ],
        )
        session.add(restaurant)
        await session.commit()
        return restaurant.id
