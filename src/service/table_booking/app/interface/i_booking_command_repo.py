"""
Booking Command Repository Interface

Reads needed to validate a write, plus the writes themselves. Implementations
share the unit-of-work session so checks and writes land in one transaction.
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.enum.booking_status import BookingStatus


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def get_by_id(self, *, booking_id: int) -> Booking | None:
        pass

    @abstractmethod
    async def find_confirmed_booking(
        self, *, table_id: int, booking_date: str, booking_time: str
    ) -> Booking | None:
        """The confirmed booking holding this exact slot, if any."""
        pass

    @abstractmethod
    async def find_confirmed_booking_for_customer_day(
        self, *, customer_id: int, restaurant_id: int, booking_date: str
    ) -> Booking | None:
        pass

    @abstractmethod
    async def create(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def update(self, *, booking: Booking) -> Booking:
        pass

    @abstractmethod
    async def list_by_ids(self, *, booking_ids: Sequence[int]) -> List[Booking]:
        pass

    @abstractmethod
    async def update_status_bulk(
        self, *, booking_ids: Sequence[int], status: BookingStatus
    ) -> List[Booking]:
        """Set `status` on every id in one statement; returns the updated bookings."""
        pass
