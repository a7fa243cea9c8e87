from typing import List

import attrs

from src.service.table_booking.domain.entity.booking_entity import Booking


@attrs.define(frozen=True)
class BulkOperationResult:
    message: str
    bookings: List[Booking]

    @property
    def count(self) -> int:
        return len(self.bookings)
