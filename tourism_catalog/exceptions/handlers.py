import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    BookingApiError,
    BookingStateError,
    BookingValidationError,
    CatalogApiError,
    FilterError,
    RateLimitError,
)

logger = logging.getLogger(__name__)


async def catalog_api_error_handler(_request: Request, exc: CatalogApiError) -> JSONResponse:
    logger.error("Catalog API error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Catalog API error: {exc.message}"},
    )


async def booking_api_error_handler(_request: Request, exc: BookingApiError) -> JSONResponse:
    logger.error("Booking API error: %s (status=%s)", exc.message, exc.status_code)
    return JSONResponse(
        status_code=502,
        content={"detail": f"Booking API error: {exc.message}"},
    )


async def rate_limit_error_handler(_request: Request, exc: RateLimitError) -> JSONResponse:
    logger.warning("Rate limit hit for %s", exc.service)
    return JSONResponse(
        status_code=429,
        content={"detail": f"Rate limit exceeded for {exc.service}"},
    )


async def filter_error_handler(_request: Request, exc: FilterError) -> JSONResponse:
    logger.info("Rejected filter update: %s", exc.message)
    return JSONResponse(status_code=400, content={"detail": exc.message})


async def booking_state_error_handler(_request: Request, exc: BookingStateError) -> JSONResponse:
    logger.info("Booking state error: %s", exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


async def booking_validation_error_handler(
    _request: Request, exc: BookingValidationError
) -> JSONResponse:
    logger.info("Booking validation failed: %s", exc)
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Invalid booking details",
            "errors": [e.model_dump() for e in exc.errors],
        },
    )
