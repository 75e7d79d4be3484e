import logging
from collections.abc import Awaitable, Callable

from tourism_catalog.browse.booking_modal import BookingDraftModal
from tourism_catalog.browse.filter_sidebar import FilterSidebar
from tourism_catalog.browse.search_bar import SearchBar
from tourism_catalog.exceptions.custom import BookingStateError
from tourism_catalog.mappers.card_mapper import count_message, to_card
from tourism_catalog.mappers.catalog_filter import apply_filters
from tourism_catalog.mappers.filter_state import DEFAULT_FILTERS
from tourism_catalog.schemas.booking import BookingConfirmation, BookingDraft
from tourism_catalog.schemas.catalog import TAB_ITEM_KIND, CatalogItem, Tab
from tourism_catalog.schemas.filters import DateRange, FilterState, SortOrder
from tourism_catalog.schemas.responses import CatalogCard
from tourism_catalog.services.booking_api import BookingApiService
from tourism_catalog.services.catalog_api import CatalogApiService

logger = logging.getLogger(__name__)

SubmitBooking = Callable[[BookingDraft], Awaitable[BookingConfirmation]]


class TabController:
    """Browsing state for one visitor: active tab, per-tab filters, search and booking.

    Each tab keeps its own FilterState, so a selection made under one tab
    never carries over to another. The search query and date range are
    shared by all tabs.
    """

    def __init__(
        self,
        catalog: CatalogApiService,
        on_confirm: SubmitBooking | None = None,
    ):
        self._catalog = catalog
        self._on_confirm = on_confirm or BookingApiService(None).submit
        self._active_tab = Tab.tours
        self._collections: dict[Tab, list[CatalogItem]] = {tab: [] for tab in Tab}
        self._filters: dict[Tab, FilterState] = {tab: DEFAULT_FILTERS for tab in Tab}
        self._query = ""
        self._date_range = DateRange()
        self._booking: BookingDraftModal | None = None

        self.search_bar = SearchBar(on_search=self._handle_search)
        self.filter_sidebar = FilterSidebar(
            self._active_tab, self._filters[self._active_tab], self._handle_filters_change
        )

    async def mount(self) -> None:
        self._collections = await self._catalog.fetch_all()
        logger.info(
            "Mounted catalog: %s",
            ", ".join(f"{tab.value}={len(items)}" for tab, items in self._collections.items()),
        )

    # --- state accessors

    @property
    def active_tab(self) -> Tab:
        return self._active_tab

    @property
    def query(self) -> str:
        return self._query

    @property
    def date_range(self) -> DateRange:
        return self._date_range

    @property
    def filters(self) -> FilterState:
        return self._filters[self._active_tab]

    @property
    def booking(self) -> BookingDraftModal | None:
        return self._booking

    def filters_for(self, tab: Tab) -> FilterState:
        return self._filters[tab]

    def collection(self, tab: Tab) -> list[CatalogItem]:
        return list(self._collections[tab])

    # --- transitions

    def set_tab(self, tab: Tab) -> None:
        self._active_tab = tab
        self.filter_sidebar.show(tab, self._filters[tab])

    def _handle_search(self, query: str, date_range: DateRange) -> None:
        self._query = query
        self._date_range = date_range

    def _handle_filters_change(self, filters: FilterState) -> None:
        self._filters[self._active_tab] = filters

    # --- rendering

    def visible_items(self, order: SortOrder | None = None) -> list[CatalogItem]:
        return apply_filters(
            self._collections[self._active_tab],
            self.filters,
            self._active_tab,
            query=self._query,
            order=order,
        )

    def cards(self, order: SortOrder | None = None) -> list[CatalogCard]:
        return [to_card(item) for item in self.visible_items(order)]

    def count_message(self) -> str:
        return count_message(self._active_tab, len(self.visible_items()))

    # --- booking

    def open_booking(self, item_id: str) -> BookingDraftModal:
        """Open the booking modal for an item of the active tab, replacing any open one."""
        item = next(
            (i for i in self._collections[self._active_tab] if i.id == item_id), None
        )
        if item is None:
            raise BookingStateError(
                f"No {self._active_tab.value} item with id {item_id!r}", status_code=404
            )
        self._booking = BookingDraftModal(
            item,
            TAB_ITEM_KIND[self._active_tab],
            self._date_range,
            on_confirm=self._handle_confirm,
            on_close=self.close_booking,
        )
        return self._booking

    def close_booking(self) -> None:
        self._booking = None

    def _require_booking(self) -> BookingDraftModal:
        if self._booking is None:
            raise BookingStateError("No booking is open")
        return self._booking

    def update_booking(self, **fields) -> BookingDraftModal:
        booking = self._require_booking()
        booking.update(**fields)
        return booking

    async def confirm_booking(self) -> BookingConfirmation:
        """Validate the open booking and hand the draft to `on_confirm`.

        The modal closes only once the submission is accepted; if it raises,
        the booking stays open with its fields intact.
        """
        draft = self._require_booking().confirm()
        confirmation = await self._on_confirm(draft)
        self.close_booking()
        return confirmation

    def cancel_booking(self) -> None:
        if self._booking is not None:
            self._booking.cancel()

    def _handle_confirm(self, draft: BookingDraft) -> None:
        logger.info("Booking draft ready for %s %s", draft.item_type.value, draft.item_id)
