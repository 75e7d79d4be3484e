import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from tourism_catalog.config import Settings
from tourism_catalog.exceptions.custom import (
    BookingApiError,
    BookingStateError,
    BookingValidationError,
    CatalogApiError,
    FilterError,
    RateLimitError,
)
from tourism_catalog.exceptions.handlers import (
    booking_api_error_handler,
    booking_state_error_handler,
    booking_validation_error_handler,
    catalog_api_error_handler,
    filter_error_handler,
    rate_limit_error_handler,
)
from tourism_catalog.routers.bookings import router as bookings_router
from tourism_catalog.routers.browse import router as browse_router
from tourism_catalog.routers.catalog import router as catalog_router
from tourism_catalog.schemas.responses import HealthResponse
from tourism_catalog.services.booking_api import BookingApiService
from tourism_catalog.services.catalog_api import CatalogApiService
from tourism_catalog.sessions import SessionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=30.0) as client:
        catalog = CatalogApiService(
            client, settings.catalog_api_url, settings.catalog_api_key
        )
        if not catalog.is_remote:
            logger.info("CATALOG_API_URL not set, serving the sample catalog")

        bookings = BookingApiService(
            client, settings.booking_api_url, settings.booking_api_key
        )
        if not bookings.is_remote:
            logger.info("BOOKING_API_URL not set, bookings are confirmed locally")

        app.state.catalog_service = catalog
        app.state.booking_service = bookings
        app.state.session_store = SessionStore(max_sessions=settings.max_sessions)

        yield


app = FastAPI(title="Tourism Catalog", lifespan=lifespan)

app.add_exception_handler(CatalogApiError, catalog_api_error_handler)
app.add_exception_handler(BookingApiError, booking_api_error_handler)
app.add_exception_handler(RateLimitError, rate_limit_error_handler)
app.add_exception_handler(FilterError, filter_error_handler)
app.add_exception_handler(BookingStateError, booking_state_error_handler)
app.add_exception_handler(BookingValidationError, booking_validation_error_handler)

app.include_router(browse_router)
app.include_router(catalog_router)
app.include_router(bookings_router)


@app.get("/health", response_model=HealthResponse)
async def health(request: Request) -> HealthResponse:
    return HealthResponse(
        status="ok",
        catalog_source="remote" if request.app.state.catalog_service.is_remote else "sample",
        booking_target="remote" if request.app.state.booking_service.is_remote else "local",
    )
