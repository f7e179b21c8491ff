from __future__ import annotations

import asyncio

from persistence.class_state import ClassRecord

from .booking_service import BookingService


class AsyncBookingService:
    """
    Async wrapper around BookingService.
    Uses asyncio.to_thread so lock waits never block the event loop.
    """

    def __init__(self, service: BookingService) -> None:
        self._service = service

    async def create_class(self, name: str, capacity: int, start_date: str, end_date: str) -> ClassRecord:
        return await asyncio.to_thread(self._service.create_class, name, capacity, start_date, end_date)

    async def create_booking(self, user_name: str, class_name: str, booking_date: str) -> list[str]:
        return await asyncio.to_thread(self._service.create_booking, user_name, class_name, booking_date)
