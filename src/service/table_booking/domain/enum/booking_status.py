"""Booking lifecycle states and the transitions allowed between them."""

from enum import StrEnum

from src.platform.exception.exceptions import DomainError


class BookingStatus(StrEnum):
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'
    NO_SHOW = 'no_show'

    @property
    def is_terminal(self) -> bool:
        return self is not BookingStatus.CONFIRMED

    def can_transition_to(self, target: 'BookingStatus') -> bool:
        return target in ALLOWED_TRANSITIONS[self]

    @classmethod
    def parse(cls, value: str) -> 'BookingStatus':
        try:
            return cls(value)
        except ValueError:
            raise DomainError(
                f'Invalid status. Must be one of: {", ".join(s.value for s in cls)}'
            ) from None


# Re-applying the current status is always accepted; no_show is terminal like completed
ALLOWED_TRANSITIONS: dict[BookingStatus, frozenset[BookingStatus]] = {
    BookingStatus.CONFIRMED: frozenset(BookingStatus),
    BookingStatus.CANCELLED: frozenset({BookingStatus.CANCELLED}),
    BookingStatus.COMPLETED: frozenset({BookingStatus.COMPLETED}),
    BookingStatus.NO_SHOW: frozenset({BookingStatus.NO_SHOW}),
}
