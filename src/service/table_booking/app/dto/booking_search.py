"""Search criteria and paged result for the booking admin search."""

from typing import List, Optional

import attrs

from src.service.table_booking.app.dto.booking_detail import BookingDetail
from src.service.table_booking.domain.enum.booking_status import BookingStatus


@attrs.define(frozen=True)
class BookingSearchCriteria:
    restaurant_id: Optional[int] = None
    customer_id: Optional[int] = None
    status: Optional[BookingStatus] = None
    date_from: Optional[str] = None  # inclusive
    date_to: Optional[str] = None  # inclusive
    table_id: Optional[int] = None
    limit: int = 50
    offset: int = 0


@attrs.define(frozen=True)
class BookingPage:
    bookings: List[BookingDetail]
    total: int
    limit: int
    offset: int

    @property
    def has_more(self) -> bool:
        return self.offset + self.limit < self.total

    @classmethod
    def empty(cls, *, limit: int, offset: int) -> 'BookingPage':
        return cls(bookings=[], total=0, limit=limit, offset=offset)
