from typing import Any


class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_content(self) -> dict[str, Any]:
        return {'detail': self.message}


class DomainError(CustomBaseError):
    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 404)


class ConflictError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 409)


class BookingRejectedError(DomainError):
    """A proposed booking failed one of the availability rules."""

    def __init__(self, message: str, *, reason: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.reason = reason
        self.context = context or {}

    def to_content(self) -> dict[str, Any]:
        return {'detail': self.message, 'reason': self.reason, 'context': self.context}


class BulkOperationError(CustomBaseError):
    """A bulk request rejected as a whole; `failures` names every offending booking."""

    def __init__(
        self, message: str, *, failures: list[dict[str, Any]], status_code: int = 400
    ) -> None:
        super().__init__(message, status_code)
        self.failures = failures

    def to_content(self) -> dict[str, Any]:
        return {'detail': self.message, 'failures': self.failures}
