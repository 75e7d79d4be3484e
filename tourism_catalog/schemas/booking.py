from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from tourism_catalog.schemas.catalog import ItemKind
from tourism_catalog.schemas.filters import DateRange


class BookingModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GuestCounts(BookingModel):
    adults: int = Field(default=1, ge=1)
    children: int = Field(default=0, ge=0)


class BookingDraft(BookingModel):
    item_id: str
    item_type: ItemKind
    contact_name: str
    contact_email: str = ""
    contact_phone: str = ""
    guest_counts: GuestCounts = GuestCounts()
    date_range: DateRange = DateRange()


class GuestCountsInput(BookingModel):
    adults: int = 1
    children: int = 0


class BookingRequest(BookingModel):
    """Unvalidated booking details as posted by a client."""

    item_id: str
    item_type: ItemKind
    contact_name: str = ""
    contact_email: str = ""
    contact_phone: str = ""
    guest_counts: GuestCountsInput = GuestCountsInput()
    date_range: DateRange = DateRange()


class BookingFieldsUpdate(BookingModel):
    contact_name: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    adults: int | None = None
    children: int | None = None


class FieldError(BaseModel):
    field: str
    code: str  # "missing_required" | "too_long" | "invalid_email" | "invalid_phone"
    message: str


class BookingView(BookingModel):
    item_id: str
    item_type: ItemKind
    item_title: str
    location_label: str
    date_range: DateRange
    contact_name: str
    contact_email: str
    contact_phone: str
    guest_counts: GuestCounts


class BookingConfirmation(BookingModel):
    booking_id: str
    status: str
    draft: BookingDraft
