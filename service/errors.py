"""
Errors raised by the class and booking service.

Every error carries the text shown to API clients as ``str(exc)``.
"""

from __future__ import annotations


class BookingServiceError(Exception):
    """Base class for rejected class or booking requests."""

    default_message = "request rejected"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)


class InvalidDateFormat(BookingServiceError):
    """A date string did not match the configured format; carries the parser's text."""


class InvalidCapacity(BookingServiceError):
    default_message = "class capacity must be a positive number"


class EndBeforeStart(BookingServiceError):
    default_message = "class end date can not be less than start end date"


class ClassNotFound(BookingServiceError):
    default_message = "Please Check Your Class Name"


class BookingWindowViolation(BookingServiceError):
    default_message = "booking for the mentioned date is not allowed for the class"


class BookingBeforeStart(BookingWindowViolation):
    pass


class BookingAfterEnd(BookingWindowViolation):
    pass


class CapacityExceeded(BookingServiceError):
    default_message = "booking full for the requested class on the mentioned date"
