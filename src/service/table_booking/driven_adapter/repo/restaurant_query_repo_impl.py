from contextlib import asynccontextmanager
from typing import AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.interface.i_restaurant_query_repo import IRestaurantQueryRepo
from src.service.table_booking.domain.entity.restaurant_entity import (
    OpeningHours,
    Restaurant,
    Table,
)
from src.service.table_booking.driven_adapter.model.restaurant_model import (
    DiningTableModel,
    OpeningHoursModel,
    RestaurantModel,
)


class RestaurantQueryRepoImpl(IRestaurantQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        """Use the UoW session when one was injected, otherwise open a short-lived one."""
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def to_opening_hours(db_hours: OpeningHoursModel) -> OpeningHours:
        return OpeningHours(
            id=db_hours.id,
            restaurant_id=db_hours.restaurant_id,
            day_of_week=db_hours.day_of_week,
            open_time=db_hours.open_time,
            close_time=db_hours.close_time,
            is_closed=db_hours.is_closed,
        )

    @staticmethod
    def to_table(db_table: DiningTableModel) -> Table:
        return Table(
            id=db_table.id,
            restaurant_id=db_table.restaurant_id,
            table_number=db_table.table_number,
            capacity=db_table.capacity,
            is_active=db_table.is_active,
        )

    @classmethod
    def to_entity(cls, db_restaurant: RestaurantModel, *, with_details: bool = False) -> Restaurant:
        return Restaurant(
            id=db_restaurant.id,
            name=db_restaurant.name,
            description=db_restaurant.description,
            address=db_restaurant.address,
            phone=db_restaurant.phone,
            email=db_restaurant.email,
            cuisine=db_restaurant.cuisine,
            price_range=db_restaurant.price_range,
            image_url=db_restaurant.image_url,
            created_at=db_restaurant.created_at,
            opening_hours=[cls.to_opening_hours(h) for h in db_restaurant.opening_hours]
            if with_details
            else [],
            tables=[cls.to_table(t) for t in db_restaurant.tables] if with_details else [],
        )

    @Logger.io
    async def list_restaurants(self) -> List[Restaurant]:
        async with self._get_session() as session:
            result = await session.execute(select(RestaurantModel).order_by(RestaurantModel.name))
            return [self.to_entity(r) for r in result.scalars().all()]

    @Logger.io
    async def get_with_details(self, *, restaurant_id: int) -> Restaurant | None:
        async with self._get_session() as session:
            result = await session.execute(
                select(RestaurantModel)
                .where(RestaurantModel.id == restaurant_id)
                .options(
                    selectinload(RestaurantModel.opening_hours),
                    selectinload(RestaurantModel.tables),
                )
            )
            db_restaurant = result.scalar_one_or_none()
            if db_restaurant is None:
                return None
            return self.to_entity(db_restaurant, with_details=True)
