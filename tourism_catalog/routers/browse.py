import logging

from fastapi import APIRouter

from tourism_catalog.browse.tab_controller import TabController
from tourism_catalog.dependencies import BookingDep, CatalogDep, SessionDep, SessionStoreDep
from tourism_catalog.schemas.booking import BookingConfirmation, BookingFieldsUpdate, BookingView
from tourism_catalog.schemas.catalog import Tab
from tourism_catalog.schemas.filters import DateRange, FilterOptions, FilterState, SortOrder
from tourism_catalog.schemas.responses import ApiModel, SearchState, SessionView
from tourism_catalog.sessions import BrowseSession

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["browse"])


class TabRequest(ApiModel):
    tab: Tab


class SearchRequest(ApiModel):
    query: str = ""
    date_range: DateRange = DateRange()


class FilterUpdateRequest(ApiModel):
    key: str
    value: int | float | str


class OpenBookingRequest(ApiModel):
    item_id: str


def _session_view(session: BrowseSession, order: SortOrder | None = None) -> SessionView:
    controller = session.controller
    return SessionView(
        session_id=session.session_id,
        created_at=session.created_at,
        active_tab=controller.active_tab.value,
        filters=controller.filters,
        search=SearchState(query=controller.query, date_range=controller.date_range),
        count_message=controller.count_message(),
        items=controller.cards(order),
        booking=controller.booking.view() if controller.booking else None,
    )


@router.post("", response_model=SessionView, status_code=201)
async def create_session(
    catalog: CatalogDep, bookings: BookingDep, store: SessionStoreDep
) -> SessionView:
    controller = TabController(catalog, on_confirm=bookings.submit)
    await controller.mount()
    session = store.create_session(controller)
    logger.info("Created browse session %s", session.session_id)
    return _session_view(session)


@router.get("/{session_id}", response_model=SessionView)
async def get_session_view(
    session: SessionDep, sort: SortOrder | None = None
) -> SessionView:
    return _session_view(session, sort)


@router.delete("/{session_id}", status_code=204)
async def delete_session(session: SessionDep, store: SessionStoreDep) -> None:
    store.delete_session(session.session_id)


@router.put("/{session_id}/tab", response_model=SessionView)
async def set_tab(session: SessionDep, request: TabRequest) -> SessionView:
    session.controller.set_tab(request.tab)
    return _session_view(session)


@router.post("/{session_id}/search", response_model=SessionView)
async def submit_search(session: SessionDep, request: SearchRequest) -> SessionView:
    session.controller.search_bar.submit_search(request.query, request.date_range)
    return _session_view(session)


@router.patch("/{session_id}/filters", response_model=FilterState)
async def update_filter(session: SessionDep, request: FilterUpdateRequest) -> FilterState:
    return session.controller.filter_sidebar.update_filter(request.key, request.value)


@router.delete("/{session_id}/filters", response_model=FilterState)
async def clear_filters(session: SessionDep) -> FilterState:
    return session.controller.filter_sidebar.clear_filters()


@router.get("/{session_id}/filters/options", response_model=FilterOptions)
async def filter_options(session: SessionDep) -> FilterOptions:
    return session.controller.filter_sidebar.options()


@router.post("/{session_id}/booking", response_model=BookingView, status_code=201)
async def open_booking(session: SessionDep, request: OpenBookingRequest) -> BookingView:
    return session.controller.open_booking(request.item_id).view()


@router.patch("/{session_id}/booking", response_model=BookingView)
async def update_booking(session: SessionDep, request: BookingFieldsUpdate) -> BookingView:
    booking = session.controller.update_booking(**request.model_dump(exclude_unset=True))
    return booking.view()


@router.post("/{session_id}/booking/confirm", response_model=BookingConfirmation, status_code=201)
async def confirm_booking(session: SessionDep) -> BookingConfirmation:
    return await session.controller.confirm_booking()


@router.delete("/{session_id}/booking", status_code=204)
async def cancel_booking(session: SessionDep) -> None:
    session.controller.cancel_booking()
