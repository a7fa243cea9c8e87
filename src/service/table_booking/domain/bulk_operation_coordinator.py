"""
Bulk Operation Coordinator

All-or-nothing status changes over a batch of bookings. Every item is checked
before anything is written; if any item fails, the whole batch is rejected
with one error naming every offending booking.
"""

from collections.abc import Iterable, Sequence
from datetime import date

from src.platform.exception.exceptions import BulkOperationError, DomainError
from src.service.table_booking.domain.entity.booking_entity import Booking
from src.service.table_booking.domain.enum.booking_status import BookingStatus


ALREADY_CANCELLED = 'Bookings already cancelled'


def normalize_booking_ids(booking_ids: Iterable[int], *, max_batch: int, verb: str) -> list[int]:
    """Collapse duplicates keeping first-occurrence order and enforce the batch size."""
    unique_ids = list(dict.fromkeys(booking_ids))
    if not unique_ids:
        raise DomainError('booking_ids must be a non-empty array')
    if len(unique_ids) > max_batch:
        raise DomainError(f'Cannot {verb} more than {max_batch} bookings at once')
    return unique_ids


def ensure_all_found(booking_ids: Sequence[int], bookings: Iterable[Booking]) -> list[Booking]:
    """Return bookings in request order; 404 listing every unknown id otherwise."""
    by_id = {booking.id: booking for booking in bookings}
    missing = [booking_id for booking_id in booking_ids if booking_id not in by_id]
    if missing:
        raise BulkOperationError(
            f'Bookings not found: {_join_ids(missing)}',
            failures=[{'booking_id': i, 'reason': 'Booking not found'} for i in missing],
            status_code=404,
        )
    return [by_id[booking_id] for booking_id in booking_ids]


def collect_failures(
    bookings: Iterable[Booking],
    target: BookingStatus,
    *,
    today: date,
    reject_already_cancelled: bool = False,
) -> list[dict]:
    failures = []
    for booking in bookings:
        if reject_already_cancelled and booking.status is BookingStatus.CANCELLED:
            reason: str | None = ALREADY_CANCELLED
        else:
            reason = booking.transition_problem(target, today=today)
        if reason:
            failures.append({'booking_id': booking.id, 'reason': reason})
    return failures


def ensure_no_failures(failures: list[dict]) -> None:
    if not failures:
        return
    grouped: dict[str, list[int]] = {}
    for failure in failures:
        grouped.setdefault(failure['reason'], []).append(failure['booking_id'])
    raise BulkOperationError(
        '; '.join(f'{reason}: {_join_ids(ids)}' for reason, ids in grouped.items()),
        failures=failures,
    )


def plan_bulk_transition(
    booking_ids: Sequence[int],
    bookings: Iterable[Booking],
    target: BookingStatus,
    *,
    today: date,
    reject_already_cancelled: bool = False,
) -> list[Booking]:
    """Validate the whole batch; returns the bookings in request order when every one may move."""
    ordered = ensure_all_found(booking_ids, bookings)
    ensure_no_failures(
        collect_failures(
            ordered, target, today=today, reject_already_cancelled=reject_already_cancelled
        )
    )
    return ordered


def _join_ids(ids: Iterable[int | None]) -> str:
    return ', '.join(str(i) for i in ids)
