"""Table Booking Domain Enums"""

from src.service.table_booking.domain.enum.booking_status import (
    ALLOWED_TRANSITIONS,
    BookingStatus,
)
from src.service.table_booking.domain.enum.rejection_reason import RejectionReason

__all__ = ['ALLOWED_TRANSITIONS', 'BookingStatus', 'RejectionReason']
