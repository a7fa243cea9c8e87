from enum import StrEnum


class RejectionReason(StrEnum):
    """Why the availability rules refused a proposed booking"""

    PAST_DATE = 'past_date'
    BEYOND_HORIZON = 'beyond_horizon'
    PARTY_SIZE_OUT_OF_RANGE = 'party_size_out_of_range'
    RESTAURANT_CLOSED = 'restaurant_closed'
    OUTSIDE_OPENING_HOURS = 'outside_opening_hours'
    TABLE_INACTIVE = 'table_inactive'
    CAPACITY_EXCEEDED = 'capacity_exceeded'
