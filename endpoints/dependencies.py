from __future__ import annotations

from fastapi import Request

from service.async_service import AsyncBookingService


def get_booking_service(request: Request) -> AsyncBookingService:
    return request.app.state.booking_service
