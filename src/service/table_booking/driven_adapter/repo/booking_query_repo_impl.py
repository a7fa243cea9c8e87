from contextlib import asynccontextmanager
from typing import Any, AsyncContextManager, AsyncIterator, Callable, List

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.dto.booking_detail import BookingDetail
from src.service.table_booking.app.dto.booking_search import BookingPage, BookingSearchCriteria
from src.service.table_booking.app.interface.i_booking_query_repo import IBookingQueryRepo
from src.service.table_booking.domain.entity.customer_entity import Customer
from src.service.table_booking.driven_adapter.model.booking_model import BookingModel
from src.service.table_booking.driven_adapter.model.customer_model import CustomerModel
from src.service.table_booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.table_booking.driven_adapter.repo.customer_command_repo_impl import (
    CustomerCommandRepoImpl,
)
from src.service.table_booking.driven_adapter.repo.restaurant_query_repo_impl import (
    RestaurantQueryRepoImpl,
)


class BookingQueryRepoImpl(IBookingQueryRepo):
    def __init__(
        self, session_factory: Callable[..., AsyncContextManager[AsyncSession]] | None = None
    ):
        self.session_factory = session_factory
        self.session: AsyncSession | None = None

    @asynccontextmanager
    async def _get_session(self) -> AsyncIterator[AsyncSession]:
        if self.session is not None:
            yield self.session
        elif self.session_factory is not None:
            async with self.session_factory() as session:
                yield session
        else:
            raise RuntimeError('No session or session_factory available')

    @staticmethod
    def _with_details(statement: Select[Any]) -> Select[Any]:
        return statement.options(
            selectinload(BookingModel.restaurant),
            selectinload(BookingModel.table),
            selectinload(BookingModel.customer),
        )

    @staticmethod
    def _to_detail(db_booking: BookingModel) -> BookingDetail:
        return BookingDetail(
            booking=BookingCommandRepoImpl.to_entity(db_booking),
            restaurant=RestaurantQueryRepoImpl.to_entity(db_booking.restaurant),
            table=RestaurantQueryRepoImpl.to_table(db_booking.table),
            customer=CustomerCommandRepoImpl.to_entity(db_booking.customer),
        )

    @staticmethod
    def _apply_criteria(statement: Select[Any], criteria: BookingSearchCriteria) -> Select[Any]:
        if criteria.restaurant_id is not None:
            statement = statement.where(BookingModel.restaurant_id == criteria.restaurant_id)
        if criteria.customer_id is not None:
            statement = statement.where(BookingModel.customer_id == criteria.customer_id)
        if criteria.status is not None:
            statement = statement.where(BookingModel.status == criteria.status.value)
        # ISO dates compare correctly as strings
        if criteria.date_from is not None:
            statement = statement.where(BookingModel.booking_date >= criteria.date_from)
        if criteria.date_to is not None:
            statement = statement.where(BookingModel.booking_date <= criteria.date_to)
        if criteria.table_id is not None:
            statement = statement.where(BookingModel.table_id == criteria.table_id)
        return statement

    @Logger.io
    async def get_by_id_with_details(self, *, booking_id: int) -> BookingDetail | None:
        async with self._get_session() as session:
            result = await session.execute(
                self._with_details(select(BookingModel).where(BookingModel.id == booking_id))
            )
            db_booking = result.scalar_one_or_none()
            return self._to_detail(db_booking) if db_booking else None

    @Logger.io
    async def find_customer_by_email(self, *, email: str) -> Customer | None:
        async with self._get_session() as session:
            result = await session.execute(
                select(CustomerModel).where(CustomerModel.email == email)
            )
            db_customer = result.scalar_one_or_none()
            return CustomerCommandRepoImpl.to_entity(db_customer) if db_customer else None

    @Logger.io
    async def list_by_customer(self, *, customer_id: int) -> List[BookingDetail]:
        async with self._get_session() as session:
            result = await session.execute(
                self._with_details(
                    select(BookingModel)
                    .where(BookingModel.customer_id == customer_id)
                    .order_by(BookingModel.booking_date.desc(), BookingModel.booking_time.desc())
                )
            )
            return [self._to_detail(b) for b in result.scalars().all()]

    @Logger.io
    async def list_recent(self, *, limit: int) -> List[BookingDetail]:
        async with self._get_session() as session:
            result = await session.execute(
                self._with_details(
                    select(BookingModel)
                    .order_by(BookingModel.created_at.desc(), BookingModel.id.desc())
                    .limit(limit)
                )
            )
            return [self._to_detail(b) for b in result.scalars().all()]

    @Logger.io
    async def search(self, *, criteria: BookingSearchCriteria) -> BookingPage:
        async with self._get_session() as session:
            total = await session.scalar(
                self._apply_criteria(
                    select(func.count()).select_from(BookingModel), criteria
                )
            )
            result = await session.execute(
                self._with_details(
                    self._apply_criteria(select(BookingModel), criteria)
                    .order_by(
                        BookingModel.booking_date.desc(),
                        BookingModel.booking_time.desc(),
                        BookingModel.id.desc(),
                    )
                    .limit(criteria.limit)
                    .offset(criteria.offset)
                )
            )
            return BookingPage(
                bookings=[self._to_detail(b) for b in result.scalars().all()],
                total=total or 0,
                limit=criteria.limit,
                offset=criteria.offset,
            )
