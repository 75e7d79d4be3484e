import logging

from fastapi import APIRouter

from tourism_catalog.dependencies import BookingDep, CatalogDep
from tourism_catalog.exceptions.custom import BookingStateError, BookingValidationError
from tourism_catalog.mappers.booking_validator import clamp_guests, validate_contact
from tourism_catalog.schemas.booking import BookingConfirmation, BookingDraft, BookingRequest

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


@router.post("", response_model=BookingConfirmation, status_code=201)
async def create_booking(
    request: BookingRequest,
    catalog: CatalogDep,
    bookings: BookingDep,
) -> BookingConfirmation:
    errors = validate_contact(request.contact_name, request.contact_email, request.contact_phone)
    if errors:
        raise BookingValidationError(errors)

    item = await catalog.find_item(request.item_type, request.item_id)
    if item is None:
        raise BookingStateError(
            f"No {request.item_type.value} with id {request.item_id!r}", status_code=404
        )

    draft = BookingDraft(
        item_id=request.item_id,
        item_type=request.item_type,
        contact_name=request.contact_name,
        contact_email=request.contact_email,
        contact_phone=request.contact_phone,
        guest_counts=clamp_guests(request.guest_counts.adults, request.guest_counts.children),
        date_range=request.date_range,
    )
    return await bookings.submit(draft)
