from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends

from service.async_service import AsyncBookingService

from .dependencies import get_booking_service
from .schemas import CLASS_CREATED_MESSAGE, CreateClassRequest, ResponseEnvelope

router = APIRouter(tags=["classes"])
logger = logging.getLogger(__name__)


@router.post("/class", response_model=ResponseEnvelope, response_model_exclude_none=True)
async def create_class(
    body: CreateClassRequest,
    service: Annotated[AsyncBookingService, Depends(get_booking_service)],
) -> ResponseEnvelope:
    record = await service.create_class(body.class_name, body.class_capacity, body.start_date, body.end_date)
    logger.debug("CLASS: %s accepts bookings %s..%s", body.class_name, record.start_date, record.end_date)
    return ResponseEnvelope.ok(CLASS_CREATED_MESSAGE)
