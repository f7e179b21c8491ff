from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from service.async_service import AsyncBookingService

from .dependencies import get_booking_service
from .schemas import BOOKING_CREATED_MESSAGE, CreateBookingRequest, ResponseEnvelope

router = APIRouter(tags=["bookings"])
logger = logging.getLogger(__name__)


@router.post("/booking", response_model=ResponseEnvelope, response_model_exclude_none=True)
async def create_booking(
    body: CreateBookingRequest,
    service: Annotated[AsyncBookingService, Depends(get_booking_service)],
) -> ResponseEnvelope:
    booked = await service.create_booking(body.user_name, body.class_name, body.booking_date)
    logger.debug("BOOKING: %s now holds %d user(s) on %s", body.class_name, len(booked), body.booking_date)
    return ResponseEnvelope.ok(BOOKING_CREATED_MESSAGE)
