from __future__ import annotations

import contextlib
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dotenv import load_dotenv

from endpoints.booking_endpoints import router as booking_router
from endpoints.class_endpoints import router as class_router
from endpoints.schemas import UNMARSHALLING_MESSAGE, ResponseEnvelope
from logging_config import setup_logging
from persistence import lock_provider_for, shared_class_store
from service import AsyncBookingService, BookingService, BookingServiceError
from settings import Settings, get_settings

logger = logging.getLogger(__name__)


@contextlib.asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings
    logger.info(
        "SERVER: accepting requests under %r (date format %r, %s locking)",
        settings.base_route or "/",
        settings.date_format,
        settings.lock_granularity,
    )
    yield
    logger.info("SERVER: shut down gracefully")


def build_service(settings: Settings) -> BookingService:
    return BookingService(
        store=shared_class_store(),
        locks=lock_provider_for(settings.lock_granularity),
        date_format=settings.date_format,
    )


def create_app(settings: Settings | None = None, service: BookingService | None = None) -> FastAPI:
    load_dotenv("local.env")

    settings = settings or get_settings()
    setup_logging(settings.log_level)
    service = service or build_service(settings)

    app = FastAPI(title="Class Booking API", lifespan=lifespan)
    app.state.settings = settings
    app.state.booking_service = AsyncBookingService(service)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.debug_log_requests:

        @app.middleware("http")
        async def log_requests(request: Request, call_next):
            response = await call_next(request)
            logger.info("REQUEST: %s %s -> %d", request.method, request.url.path, response.status_code)
            return response

    @app.exception_handler(RequestValidationError)
    async def request_validation_error(request: Request, exc: RequestValidationError):
        logger.info("%s %s: %s", UNMARSHALLING_MESSAGE, request.url.path, exc.errors())
        return JSONResponse(ResponseEnvelope.fail(UNMARSHALLING_MESSAGE).to_json(), status_code=400)

    @app.exception_handler(BookingServiceError)
    async def booking_service_error(request: Request, exc: BookingServiceError):
        logger.info("REJECTED %s %s: %s", request.method, request.url.path, exc)
        return JSONResponse(ResponseEnvelope.fail(str(exc)).to_json(), status_code=400)

    app.include_router(class_router, prefix=settings.base_route)
    app.include_router(booking_router, prefix=settings.base_route)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=app.state.settings.host, port=app.state.settings.port)
