from datetime import date, datetime, timezone
from typing import Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.table_booking.domain.booking_calendar import is_past_date
from src.service.table_booking.domain.enum.booking_status import BookingStatus


@attrs.define
class Booking:
    restaurant_id: int
    table_id: int
    customer_id: int
    booking_date: str  # YYYY-MM-DD
    booking_time: str  # HH:MM
    party_size: int
    status: BookingStatus = attrs.field(default=BookingStatus.CONFIRMED, converter=BookingStatus)
    special_requests: Optional[str] = None
    id: Optional[int] = None  # None until persisted
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        restaurant_id: int,
        table_id: int,
        customer_id: int,
        booking_date: str,
        booking_time: str,
        party_size: int,
        special_requests: Optional[str] = None,
    ) -> 'Booking':
        now = datetime.now(timezone.utc)
        return cls(
            restaurant_id=restaurant_id,
            table_id=table_id,
            customer_id=customer_id,
            booking_date=booking_date,
            booking_time=booking_time,
            party_size=party_size,
            status=BookingStatus.CONFIRMED,
            special_requests=special_requests or None,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_confirmed(self) -> bool:
        return self.status is BookingStatus.CONFIRMED

    def is_past(self, today: date) -> bool:
        return is_past_date(self.booking_date, today)

    def occupies_slot(self, *, table_id: int, booking_date: str, booking_time: str) -> bool:
        return (
            self.is_confirmed
            and self.table_id == table_id
            and self.booking_date == booking_date
            and self.booking_time == booking_time
        )

    def transition_problem(self, target: BookingStatus, *, today: date) -> Optional[str]:
        """Reason the move to `target` is illegal, or None when allowed."""
        if not self.status.can_transition_to(target):
            return f'Cannot change status of {self.status} booking'
        if target is BookingStatus.CANCELLED and self.is_past(today):
            return 'Cannot cancel past bookings'
        return None

    def transition_to(self, target: BookingStatus, *, today: date) -> 'Booking':
        if problem := self.transition_problem(target, today=today):
            raise DomainError(problem)
        return attrs.evolve(self, status=target, updated_at=datetime.now(timezone.utc))

    def cancel(self, *, today: date) -> 'Booking':
        if self.status is BookingStatus.CANCELLED:
            raise DomainError('Booking is already cancelled')
        return self.transition_to(BookingStatus.CANCELLED, today=today)

    def ensure_modifiable(self) -> None:
        if self.status is BookingStatus.CANCELLED:
            raise DomainError('Cannot modify cancelled booking')

    def reschedule(
        self,
        *,
        table_id: int,
        booking_date: str,
        booking_time: str,
        party_size: int,
        special_requests: Optional[str],
    ) -> 'Booking':
        return attrs.evolve(
            self,
            table_id=table_id,
            booking_date=booking_date,
            booking_time=booking_time,
            party_size=party_size,
            special_requests=special_requests,
            updated_at=datetime.now(timezone.utc),
        )
