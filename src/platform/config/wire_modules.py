"""
Wire Modules Configuration

Modules whose `depends` classmethods use Provide[Container.*] markers.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.table_booking.app.command import (
    bulk_cancel_bookings_use_case,
    bulk_update_booking_status_use_case,
    cancel_booking_use_case,
    create_booking_use_case,
    update_booking_status_use_case,
    update_booking_use_case,
)
from src.service.table_booking.app.query import (
    get_booking_use_case,
    get_restaurant_use_case,
    list_bookings_use_case,
    list_restaurants_use_case,
    search_bookings_use_case,
)


WIRE_MODULES: list[ModuleType] = [
    create_booking_use_case,
    update_booking_use_case,
    cancel_booking_use_case,
    update_booking_status_use_case,
    bulk_update_booking_status_use_case,
    bulk_cancel_bookings_use_case,
    list_restaurants_use_case,
    get_restaurant_use_case,
    get_booking_use_case,
    list_bookings_use_case,
    search_bookings_use_case,
]
