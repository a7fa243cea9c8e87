from typing import Optional

import attrs


@attrs.define(frozen=True)
class BookingUpdate:
    """
    Partial modification of a booking. None means "leave unchanged";
    `special_requests=''` clears the note.
    """

    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    customer_phone: Optional[str] = None
    booking_date: Optional[str] = None
    booking_time: Optional[str] = None
    party_size: Optional[int] = None
    table_id: Optional[int] = None
    special_requests: Optional[str] = None

    @property
    def touches_contact(self) -> bool:
        return any(
            value is not None
            for value in (self.customer_name, self.customer_email, self.customer_phone)
        )

    @property
    def touches_schedule(self) -> bool:
        return self.booking_date is not None or self.booking_time is not None

    @property
    def touches_slot(self) -> bool:
        return self.touches_schedule or self.table_id is not None
