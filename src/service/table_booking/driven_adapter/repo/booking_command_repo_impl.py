from typing import List, Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from src.platform.database.unit_of_work import conflict_from_integrity_error
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.enum.booking_status import BookingStatus
from src.service.table_booking.driven_adapter.model.booking_model import BookingModel


class BookingCommandRepoImpl(IBookingCommandRepo):
    """Always runs on the unit-of-work session; the UoW decides when to commit."""

    def __init__(self) -> None:
        self.session: AsyncSession | None = None

    def _require_session(self) -> AsyncSession:
        if self.session is None:
            raise RuntimeError('BookingCommandRepoImpl must be used inside a unit of work')
        return self.session

    @staticmethod
    def to_entity(db_booking: BookingModel) -> Booking:
        return Booking(
            id=db_booking.id,
            restaurant_id=db_booking.restaurant_id,
            table_id=db_booking.table_id,
            customer_id=db_booking.customer_id,
            booking_date=db_booking.booking_date,
            booking_time=db_booking.booking_time,
            party_size=db_booking.party_size,
            status=BookingStatus(db_booking.status),
            special_requests=db_booking.special_requests,
            created_at=db_booking.created_at,
            updated_at=db_booking.updated_at,
        )

    async def _flush(self, session: AsyncSession) -> None:
        try:
            await session.flush()
        except IntegrityError as e:
            if conflict := conflict_from_integrity_error(e):
                raise conflict from e
            raise

    @Logger.io
    async def get_by_id(self, *, booking_id: int) -> Booking | None:
        db_booking = await self._require_session().get(BookingModel, booking_id)
        return self.to_entity(db_booking) if db_booking else None

    @Logger.io
    async def find_confirmed_booking(
        self, *, table_id: int, booking_date: str, booking_time: str
    ) -> Booking | None:
        result = await self._require_session().execute(
            select(BookingModel)
            .where(
                BookingModel.table_id == table_id,
                BookingModel.booking_date == booking_date,
                BookingModel.booking_time == booking_time,
                BookingModel.status == BookingStatus.CONFIRMED.value,
            )
            .limit(1)
        )
        db_booking = result.scalar_one_or_none()
        return self.to_entity(db_booking) if db_booking else None

    @Logger.io
    async def find_confirmed_booking_for_customer_day(
        self, *, customer_id: int, restaurant_id: int, booking_date: str
    ) -> Booking | None:
        result = await self._require_session().execute(
            select(BookingModel)
            .where(
                BookingModel.customer_id == customer_id,
                BookingModel.restaurant_id == restaurant_id,
                BookingModel.booking_date == booking_date,
                BookingModel.status == BookingStatus.CONFIRMED.value,
            )
            .limit(1)
        )
        db_booking = result.scalar_one_or_none()
        return self.to_entity(db_booking) if db_booking else None

    @Logger.io
    async def create(self, *, booking: Booking) -> Booking:
        session = self._require_session()
        db_booking = BookingModel(
            restaurant_id=booking.restaurant_id,
            table_id=booking.table_id,
            customer_id=booking.customer_id,
            booking_date=booking.booking_date,
            booking_time=booking.booking_time,
            party_size=booking.party_size,
            status=booking.status.value,
            special_requests=booking.special_requests,
        )
        session.add(db_booking)
        await self._flush(session)
        await session.refresh(db_booking)
        return self.to_entity(db_booking)

    @Logger.io
    async def update(self, *, booking: Booking) -> Booking:
        session = self._require_session()
        db_booking = await session.get(BookingModel, booking.id)
        if db_booking is None:
            raise RuntimeError(f'Booking {booking.id} vanished inside the transaction')
        db_booking.table_id = booking.table_id
        db_booking.booking_date = booking.booking_date
        db_booking.booking_time = booking.booking_time
        db_booking.party_size = booking.party_size
        db_booking.status = booking.status.value
        db_booking.special_requests = booking.special_requests
        await self._flush(session)
        await session.refresh(db_booking)
        return self.to_entity(db_booking)

    @Logger.io
    async def list_by_ids(self, *, booking_ids: Sequence[int]) -> List[Booking]:
        result = await self._require_session().execute(
            select(BookingModel).where(BookingModel.id.in_(booking_ids))
        )
        return [self.to_entity(b) for b in result.scalars().all()]

    @Logger.io
    async def update_status_bulk(
        self, *, booking_ids: Sequence[int], status: BookingStatus
    ) -> List[Booking]:
        session = self._require_session()
        result = await session.execute(
            update(BookingModel)
            .where(BookingModel.id.in_(booking_ids))
            .values(status=status.value, updated_at=func.now())
            .returning(BookingModel)
            .execution_options(synchronize_session='fetch')
        )
        by_id = {b.id: self.to_entity(b) for b in result.scalars().all()}
        await self._flush(session)
        return [by_id[booking_id] for booking_id in booking_ids if booking_id in by_id]
