from typing import Optional

import attrs

from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.entity.customer_entity import Customer
from src.service.table_booking.domain.entity.restaurant_entity import Restaurant, Table


@attrs.define(frozen=True)
class BookingDetail:
    """Booking joined with the restaurant, table and customer it refers to."""

    booking: Booking
    restaurant: Optional[Restaurant] = None
    table: Optional[Table] = None
    customer: Optional[Customer] = None
