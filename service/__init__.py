from __future__ import annotations

from .async_service import AsyncBookingService
from .booking_service import BookingService
from .errors import (
    BookingAfterEnd,
    BookingBeforeStart,
    BookingServiceError,
    BookingWindowViolation,
    CapacityExceeded,
    ClassNotFound,
    EndBeforeStart,
    InvalidCapacity,
    InvalidDateFormat,
)

__all__ = [
    "AsyncBookingService",
    "BookingService",
    "BookingServiceError",
    "InvalidDateFormat",
    "InvalidCapacity",
    "EndBeforeStart",
    "ClassNotFound",
    "BookingWindowViolation",
    "BookingBeforeStart",
    "BookingAfterEnd",
    "CapacityExceeded",
]
