from __future__ import annotations

import logging
from datetime import date as Date
from datetime import datetime

from persistence.class_state import ClassRecord
from persistence.interfaces import KeyValueStore
from persistence.locks import LockProvider

from .errors import (
    BookingAfterEnd,
    BookingBeforeStart,
    CapacityExceeded,
    ClassNotFound,
    EndBeforeStart,
    InvalidCapacity,
    InvalidDateFormat,
)

logger = logging.getLogger(__name__)


class BookingService:
    """
    Creates classes and books users into them.

    Records are never held across calls: each booking loads the record, works on
    a deep copy and writes it back, all while holding the lock the provider
    returns for the class name. A rejected request leaves the store untouched.
    """

    def __init__(self, store: KeyValueStore[ClassRecord], locks: LockProvider, date_format: str) -> None:
        self._store = store
        self._locks = locks
        self._date_format = date_format

    def parse_date(self, raw: str) -> Date:
        try:
            return datetime.strptime(raw, self._date_format).date()
        except (TypeError, ValueError) as e:
            raise InvalidDateFormat(str(e)) from e

    def create_class(self, name: str, capacity: int, start_date: str, end_date: str) -> ClassRecord:
        start = self.parse_date(start_date)
        end = self.parse_date(end_date)
        if end < start:
            raise EndBeforeStart()
        if capacity <= 0:
            raise InvalidCapacity()

        record = ClassRecord(allowed_capacity=capacity, start_date=start, end_date=end)

        with self._locks.lock_for(name):
            # Same name replaces the previous class and its bookings.
            self._store.store(name, record)

        logger.info("CLASS CREATED: name=%s capacity=%d window=%s..%s", name, capacity, start, end)
        return record.model_copy(deep=True)

    def create_booking(self, user_name: str, class_name: str, booking_date: str) -> list[str]:
        """
        Book user_name into class_name on booking_date.

        Returns the users booked on that day after the append, in booking order.
        """
        day = self.parse_date(booking_date)

        with self._locks.lock_for(class_name):
            stored = self._store.load(class_name)
            if stored is None:
                raise ClassNotFound()

            record = stored.model_copy(deep=True)
            if day < record.start_date:
                raise BookingBeforeStart()
            if day > record.end_date:
                raise BookingAfterEnd()
            if record.is_full_on(day):
                raise CapacityExceeded()

            record.add_booking(day, user_name)
            self._store.store(class_name, record)
            booked = record.bookings_on(day)

        logger.info(
            "BOOKING CREATED: class=%s user=%s date=%s (%d/%d)",
            class_name,
            user_name,
            day,
            len(booked),
            record.allowed_capacity,
        )
        return booked
