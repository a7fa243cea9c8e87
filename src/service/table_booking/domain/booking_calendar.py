"""
Calendar and wall-clock helpers for booking rules.

Dates are "YYYY-MM-DD" and times "HH:MM" restaurant-local strings. Every
function that depends on "now" takes the reference day explicitly.
"""

from datetime import date, datetime, timedelta
import re


MINUTES_PER_DAY = 24 * 60
MIDNIGHT = '00:00'

_HHMM_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})$')
_DATE_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2}$')


def _split_hhmm(hhmm: str) -> tuple[int, int]:
    match = _HHMM_PATTERN.match(hhmm or '')
    if not match:
        raise ValueError(f'Invalid time format: {hhmm!r} (expected HH:MM)')
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        raise ValueError(f'Invalid time: {hhmm!r}')
    return hours, minutes


def to_minutes(hhmm: str) -> int:
    hours, minutes = _split_hhmm(hhmm)
    return hours * 60 + minutes


def normalize_hhmm(hhmm: str) -> str:
    hours, minutes = _split_hhmm(hhmm)
    return f'{hours:02d}:{minutes:02d}'


def closing_boundary_minutes(close_time: str) -> int:
    """Closing "00:00" means the restaurant runs until the end of the day."""
    if normalize_hhmm(close_time) == MIDNIGHT:
        return MINUTES_PER_DAY
    return to_minutes(close_time)


def parse_booking_date(value: str) -> date:
    if not _DATE_PATTERN.match(value or ''):
        raise ValueError(f'Invalid date format: {value!r} (expected YYYY-MM-DD)')
    return date.fromisoformat(value)


def _reference_day(reference_now: date | datetime) -> date:
    return reference_now.date() if isinstance(reference_now, datetime) else reference_now


def is_past_date(booking_date: date | str, reference_now: date | datetime) -> bool:
    if isinstance(booking_date, str):
        booking_date = parse_booking_date(booking_date)
    return booking_date < _reference_day(reference_now)


def is_within_horizon(
    booking_date: date | str, reference_now: date | datetime, max_days: int = 90
) -> bool:
    if isinstance(booking_date, str):
        booking_date = parse_booking_date(booking_date)
    return booking_date <= _reference_day(reference_now) + timedelta(days=max_days)


def day_of_week(booking_date: date | str) -> int:
    """0 = Sunday ... 6 = Saturday."""
    if isinstance(booking_date, str):
        booking_date = parse_booking_date(booking_date)
    return booking_date.isoweekday() % 7
