"""
Availability Rule Engine

Decides whether a proposed (restaurant, table, date, time, party size) is
admissible. Rules run in a fixed order and stop at the first failure:

    1. date not in the past
    2. date within the booking horizon
    3. party size within range
    4. restaurant open that day
    5. time within [open, closing boundary - min dining time]
    6. table active
    7. party fits the table

The rule groups are exposed separately for partial updates, which only
re-check what changed.
"""

from datetime import date

from src.platform.logging.loguru_io import Logger
from src.service.table_booking.domain.booking_calendar import (
    closing_boundary_minutes,
    day_of_week,
    is_past_date,
    is_within_horizon,
    parse_booking_date,
    to_minutes,
)
from src.service.table_booking.domain.entity.restaurant_entity import Restaurant, Table
from src.service.table_booking.domain.enum.rejection_reason import RejectionReason
from src.service.table_booking.domain.value_object.availability_check_result import (
    AvailabilityCheckResult,
)
from src.service.table_booking.domain.value_object.booking_policy import BookingPolicy


DEFAULT_POLICY = BookingPolicy()


def check_booking_window(
    booking_date: str, *, today: date, policy: BookingPolicy = DEFAULT_POLICY
) -> AvailabilityCheckResult:
    requested = parse_booking_date(booking_date)
    if is_past_date(requested, today):
        return AvailabilityCheckResult.reject(
            RejectionReason.PAST_DATE, 'Cannot book in the past', booking_date=booking_date
        )
    if not is_within_horizon(requested, today, max_days=policy.horizon_days):
        return AvailabilityCheckResult.reject(
            RejectionReason.BEYOND_HORIZON,
            f'Cannot book more than {policy.horizon_days} days in advance',
            booking_date=booking_date,
            horizon_days=policy.horizon_days,
        )
    return AvailabilityCheckResult.ok()


def check_party_size(
    party_size: int, *, policy: BookingPolicy = DEFAULT_POLICY
) -> AvailabilityCheckResult:
    if not policy.min_party_size <= party_size <= policy.max_party_size:
        return AvailabilityCheckResult.reject(
            RejectionReason.PARTY_SIZE_OUT_OF_RANGE,
            f'Party size must be between {policy.min_party_size} and {policy.max_party_size}',
            party_size=party_size,
        )
    return AvailabilityCheckResult.ok()


def check_opening_hours(
    restaurant: Restaurant,
    booking_date: str,
    booking_time: str,
    *,
    policy: BookingPolicy = DEFAULT_POLICY,
) -> AvailabilityCheckResult:
    hours = restaurant.hours_for(day_of_week(booking_date))
    if hours is None or hours.is_closed:
        return AvailabilityCheckResult.reject(
            RejectionReason.RESTAURANT_CLOSED,
            'Restaurant is closed on this day',
            booking_date=booking_date,
        )

    requested = to_minutes(booking_time)
    last_seating = closing_boundary_minutes(hours.close_time) - policy.min_dining_minutes
    if requested < to_minutes(hours.open_time) or requested > last_seating:
        return AvailabilityCheckResult.reject(
            RejectionReason.OUTSIDE_OPENING_HOURS,
            f'Restaurant hours: {hours.open_time} - {hours.close_time}',
            open_time=hours.open_time,
            close_time=hours.close_time,
        )
    return AvailabilityCheckResult.ok()


def check_table(
    table: Table, party_size: int, *, require_active: bool = True
) -> AvailabilityCheckResult:
    if require_active and not table.is_active:
        return AvailabilityCheckResult.reject(
            RejectionReason.TABLE_INACTIVE, 'Table is not available', table_id=table.id
        )
    if party_size > table.capacity:
        return AvailabilityCheckResult.reject(
            RejectionReason.CAPACITY_EXCEEDED,
            f'Party size exceeds table capacity (max {table.capacity})',
            table_id=table.id,
            capacity=table.capacity,
        )
    return AvailabilityCheckResult.ok()


@Logger.io
def check_availability(
    restaurant: Restaurant,
    table: Table,
    booking_date: str,
    booking_time: str,
    party_size: int,
    *,
    today: date,
    policy: BookingPolicy = DEFAULT_POLICY,
) -> AvailabilityCheckResult:
    result = check_booking_window(booking_date, today=today, policy=policy)
    if result.is_ok:
        result = check_party_size(party_size, policy=policy)
    if result.is_ok:
        result = check_opening_hours(restaurant, booking_date, booking_time, policy=policy)
    if result.is_ok:
        result = check_table(table, party_size)
    return result
