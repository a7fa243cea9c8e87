"""
Conflict detection over existing bookings.

Only confirmed bookings count. A slot is an exact (table, date, time) match;
nearby times on the same table do not collide.
"""

from collections.abc import Iterable
from typing import Optional

from src.service.table_booking.domain.entity.booking_entity import Booking


def find_conflict(
    existing_bookings: Iterable[Booking],
    table_id: int,
    booking_date: str,
    booking_time: str,
    exclude_booking_id: Optional[int] = None,
) -> Optional[Booking]:
    return next(
        (
            booking
            for booking in existing_bookings
            if booking.occupies_slot(
                table_id=table_id, booking_date=booking_date, booking_time=booking_time
            )
            and (exclude_booking_id is None or booking.id != exclude_booking_id)
        ),
        None,
    )


def find_customer_day_conflict(
    existing_bookings: Iterable[Booking],
    customer_id: int,
    restaurant_id: int,
    booking_date: str,
) -> Optional[Booking]:
    return next(
        (
            booking
            for booking in existing_bookings
            if booking.is_confirmed
            and booking.customer_id == customer_id
            and booking.restaurant_id == restaurant_id
            and booking.booking_date == booking_date
        ),
        None,
    )
