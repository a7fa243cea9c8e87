"""
Unit tests for bulk status changes

Both bulk use cases are all-or-nothing: one offending booking rejects the
whole batch and the store is left exactly as it was.
"""

from datetime import timedelta

import pytest

from src.platform.exception.exceptions import BulkOperationError, DomainError
from src.service.table_booking.app.command.bulk_cancel_bookings_use_case import (
    BulkCancelBookingsUseCase,
)
from src.service.table_booking.app.command.bulk_update_booking_status_use_case import (
    BulkUpdateBookingStatusUseCase,
)
from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.enum.booking_status import BookingStatus
from test.service.table_booking.unit.test_helpers import (
    SMALL_TABLE_ID,
    TODAY,
    FixedClock,
    InMemoryStore,
    InMemoryUnitOfWork,
    upcoming,
)


MONDAY = 1


@pytest.fixture
def bookings(store: InMemoryStore) -> list[Booking]:
    """Three confirmed bookings at 18:00, 19:00 and 20:00"""
    customer = store.add_customer()
    return [
        store.add_booking(
            customer_id=customer.id,  # pyrefly: ignore[bad-argument-type]
            booking_date=upcoming(MONDAY),
            booking_time=booking_time,
            table_id=SMALL_TABLE_ID,
        )
        for booking_time in ('18:00', '19:00', '20:00')
    ]


def _statuses(store: InMemoryStore) -> dict[int, BookingStatus]:
    return {booking_id: b.status for booking_id, b in store.bookings.items()}


@pytest.mark.unit
class TestBulkCancelBookingsUseCase:
    @pytest.mark.asyncio
    async def test_cancel_all(self, store: InMemoryStore, bookings: list[Booking]) -> None:
        use_case = BulkCancelBookingsUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())

        result = await use_case.bulk_cancel(booking_ids=[b.id for b in bookings])  # pyrefly: ignore[bad-argument-type]

        assert result.count == 3
        assert result.message == 'Successfully cancelled 3 bookings'
        assert set(_statuses(store).values()) == {BookingStatus.CANCELLED}
        assert store.commits == 1

    @pytest.mark.asyncio
    async def test_one_already_cancelled_rejects_the_batch(
        self, store: InMemoryStore, bookings: list[Booking]
    ) -> None:
        """
        Given bookings 1, 2, 3 where 2 is already cancelled
        When bulk cancelling [1, 2, 3]
        Then the request fails naming 2, and 1 and 3 stay confirmed
        """
        first, second, third = bookings
        store.bookings[second.id] = second.transition_to(  # pyrefly: ignore[bad-index]
            BookingStatus.CANCELLED, today=TODAY
        )
        use_case = BulkCancelBookingsUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())

        with pytest.raises(BulkOperationError) as exc_info:
            await use_case.bulk_cancel(booking_ids=[first.id, second.id, third.id])  # pyrefly: ignore[bad-argument-type]

        assert exc_info.value.status_code == 400
        assert exc_info.value.message == f'Bookings already cancelled: {second.id}'
        assert store.bookings[first.id].status is BookingStatus.CONFIRMED  # pyrefly: ignore[bad-index]
        assert store.bookings[third.id].status is BookingStatus.CONFIRMED  # pyrefly: ignore[bad-index]
        assert store.commits == 0

    @pytest.mark.asyncio
    async def test_past_booking_rejects_the_batch(
        self, store: InMemoryStore, bookings: list[Booking]
    ) -> None:
        past = store.add_booking(
            customer_id=bookings[0].customer_id,
            booking_date=(TODAY - timedelta(days=1)).isoformat(),
        )
        use_case = BulkCancelBookingsUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())

        with pytest.raises(BulkOperationError, match=f'Cannot cancel past bookings: {past.id}'):
            await use_case.bulk_cancel(booking_ids=[bookings[0].id, past.id])  # pyrefly: ignore[bad-argument-type]

        assert store.bookings[bookings[0].id].status is BookingStatus.CONFIRMED  # pyrefly: ignore[bad-index]

    @pytest.mark.asyncio
    async def test_unknown_ids_are_reported(
        self, store: InMemoryStore, bookings: list[Booking]
    ) -> None:
        use_case = BulkCancelBookingsUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())

        with pytest.raises(BulkOperationError, match='Bookings not found: 98, 99') as exc_info:
            await use_case.bulk_cancel(booking_ids=[bookings[0].id, 98, 99])  # pyrefly: ignore[bad-argument-type]

        assert exc_info.value.status_code == 404
        assert set(_statuses(store).values()) == {BookingStatus.CONFIRMED}

    @pytest.mark.asyncio
    async def test_duplicate_ids_count_once(
        self, store: InMemoryStore, bookings: list[Booking]
    ) -> None:
        use_case = BulkCancelBookingsUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())
        first_id = bookings[0].id

        result = await use_case.bulk_cancel(booking_ids=[first_id, first_id])  # pyrefly: ignore[bad-argument-type]

        assert result.count == 1

    @pytest.mark.asyncio
    async def test_batch_size_limit(self, store: InMemoryStore) -> None:
        use_case = BulkCancelBookingsUseCase(
            uow=InMemoryUnitOfWork(store), clock=FixedClock(), max_batch=2
        )

        with pytest.raises(DomainError, match='Cannot cancel more than 2 bookings at once'):
            await use_case.bulk_cancel(booking_ids=[1, 2, 3])

    @pytest.mark.asyncio
    async def test_empty_batch(self, store: InMemoryStore) -> None:
        use_case = BulkCancelBookingsUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())

        with pytest.raises(DomainError, match='booking_ids must be a non-empty array'):
            await use_case.bulk_cancel(booking_ids=[])


@pytest.mark.unit
class TestBulkUpdateBookingStatusUseCase:
    @pytest.mark.asyncio
    async def test_complete_all(self, store: InMemoryStore, bookings: list[Booking]) -> None:
        use_case = BulkUpdateBookingStatusUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())

        result = await use_case.bulk_update_status(
            booking_ids=[b.id for b in bookings], status='completed'  # pyrefly: ignore[bad-argument-type]
        )

        assert result.count == 3
        assert result.message == 'Successfully updated 3 bookings'
        assert all(b.status is BookingStatus.COMPLETED for b in result.bookings)
        assert set(_statuses(store).values()) == {BookingStatus.COMPLETED}

    @pytest.mark.asyncio
    async def test_one_terminal_booking_rejects_the_batch(
        self, store: InMemoryStore, bookings: list[Booking]
    ) -> None:
        first, second, third = bookings
        store.bookings[third.id] = third.transition_to(  # pyrefly: ignore[bad-index]
            BookingStatus.NO_SHOW, today=TODAY
        )
        use_case = BulkUpdateBookingStatusUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())

        with pytest.raises(
            BulkOperationError, match=f'Cannot change status of no_show booking: {third.id}'
        ):
            await use_case.bulk_update_status(
                booking_ids=[first.id, second.id, third.id], status='completed'  # pyrefly: ignore[bad-argument-type]
            )

        assert store.bookings[first.id].status is BookingStatus.CONFIRMED  # pyrefly: ignore[bad-index]
        assert store.bookings[second.id].status is BookingStatus.CONFIRMED  # pyrefly: ignore[bad-index]

    @pytest.mark.asyncio
    async def test_cancelling_a_past_cancelled_booking_rejects_the_batch(
        self, store: InMemoryStore, bookings: list[Booking]
    ) -> None:
        past = store.add_booking(
            customer_id=bookings[0].customer_id,
            booking_date=(TODAY - timedelta(days=5)).isoformat(),
            status=BookingStatus.CANCELLED,
        )
        use_case = BulkUpdateBookingStatusUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())

        with pytest.raises(BulkOperationError, match=f'Cannot cancel past bookings: {past.id}'):
            await use_case.bulk_update_status(
                booking_ids=[bookings[0].id, past.id], status='cancelled'  # pyrefly: ignore[bad-argument-type]
            )

        assert store.bookings[bookings[0].id].status is BookingStatus.CONFIRMED  # pyrefly: ignore[bad-index]
        assert store.commits == 0

    @pytest.mark.asyncio
    async def test_invalid_status(self, store: InMemoryStore, bookings: list[Booking]) -> None:
        use_case = BulkUpdateBookingStatusUseCase(uow=InMemoryUnitOfWork(store), clock=FixedClock())

        with pytest.raises(DomainError, match='Invalid status'):
            await use_case.bulk_update_status(booking_ids=[bookings[0].id], status='seated')  # pyrefly: ignore[bad-argument-type]
