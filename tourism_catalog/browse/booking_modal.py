from collections.abc import Callable

from tourism_catalog.exceptions.custom import BookingValidationError
from tourism_catalog.mappers.booking_validator import clamp_guests, validate_contact
from tourism_catalog.schemas.booking import BookingDraft, BookingView, GuestCounts
from tourism_catalog.schemas.catalog import CatalogItem, ItemKind
from tourism_catalog.schemas.filters import DateRange

ConfirmCallback = Callable[[BookingDraft], None]
CloseCallback = Callable[[], None]


class BookingDraftModal:
    """Collects guest details for one catalog item.

    Confirming hands a BookingDraft to `on_confirm`; the modal itself never
    submits anything.
    """

    def __init__(
        self,
        item: CatalogItem,
        item_type: ItemKind,
        date_range: DateRange,
        on_confirm: ConfirmCallback,
        on_close: CloseCallback,
    ):
        self.item = item
        self.item_type = item_type
        self.date_range = date_range
        self._on_confirm = on_confirm
        self._on_close = on_close
        self._reset()

    def _reset(self) -> None:
        self.contact_name = ""
        self.contact_email = ""
        self.contact_phone = ""
        self.guest_counts = GuestCounts()

    def update(
        self,
        *,
        contact_name: str | None = None,
        contact_email: str | None = None,
        contact_phone: str | None = None,
        adults: int | None = None,
        children: int | None = None,
    ) -> None:
        if contact_name is not None:
            self.contact_name = contact_name
        if contact_email is not None:
            self.contact_email = contact_email
        if contact_phone is not None:
            self.contact_phone = contact_phone
        if adults is not None or children is not None:
            self.guest_counts = clamp_guests(
                self.guest_counts.adults if adults is None else adults,
                self.guest_counts.children if children is None else children,
            )

    def view(self) -> BookingView:
        return BookingView(
            item_id=self.item.id,
            item_type=self.item_type,
            item_title=self.item.display_title,
            location_label=self.item.location_label,
            date_range=self.date_range,
            contact_name=self.contact_name,
            contact_email=self.contact_email,
            contact_phone=self.contact_phone,
            guest_counts=self.guest_counts,
        )

    def confirm(self) -> BookingDraft:
        errors = validate_contact(self.contact_name, self.contact_email, self.contact_phone)
        if errors:
            raise BookingValidationError(errors)

        draft = BookingDraft(
            item_id=self.item.id,
            item_type=self.item_type,
            contact_name=self.contact_name,
            contact_email=self.contact_email,
            contact_phone=self.contact_phone,
            guest_counts=self.guest_counts,
            date_range=self.date_range,
        )
        self._on_confirm(draft)
        return draft

    def cancel(self) -> None:
        self._reset()
        self._on_close()
