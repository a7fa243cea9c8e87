"""Availability check result value object."""

from typing import Any, Optional

import attrs

from src.platform.exception.exceptions import BookingRejectedError
from src.service.table_booking.domain.enum.rejection_reason import RejectionReason


@attrs.define(frozen=True)
class AvailabilityCheckResult:
    """
    Outcome of running a proposed booking through the availability rules.

    `reason` is None when the booking is admissible; otherwise it names the
    first rule that failed, with a user-facing message and the values that
    explain the rejection (e.g. opening hours, table capacity).
    """

    reason: Optional[RejectionReason] = None
    message: str = ''
    context: dict[str, Any] = attrs.field(factory=dict)

    @classmethod
    def ok(cls) -> 'AvailabilityCheckResult':
        return cls()

    @classmethod
    def reject(
        cls, reason: RejectionReason, message: str, **context: Any
    ) -> 'AvailabilityCheckResult':
        return cls(reason=reason, message=message, context=context)

    @property
    def is_ok(self) -> bool:
        return self.reason is None

    def raise_if_rejected(self) -> None:
        if self.reason is not None:
            raise BookingRejectedError(self.message, reason=self.reason, context=self.context)
