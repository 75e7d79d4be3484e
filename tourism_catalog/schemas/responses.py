from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tourism_catalog.schemas.booking import BookingView
from tourism_catalog.schemas.catalog import ImageRef, PriceQuote
from tourism_catalog.schemas.filters import DateRange, FilterState


class ApiModel(BaseModel):
    """Request and response bodies; camelCase on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CatalogCard(ApiModel):
    id: str
    kind: str
    title: str
    location: str
    price: PriceQuote
    thumbnail: ImageRef
    rating: float
    review_count: int
    category: str
    difficulty: str | None = None
    featured: bool = False
    description: str = ""


class CatalogPageResponse(ApiModel):
    tab: str
    count_message: str
    total: int
    page: int
    limit: int
    total_pages: int
    has_next: bool
    has_prev: bool
    items: list[CatalogCard]


class SearchState(ApiModel):
    query: str
    date_range: DateRange


class SessionView(ApiModel):
    session_id: str
    created_at: datetime
    active_tab: str
    filters: FilterState
    search: SearchState
    count_message: str
    items: list[CatalogCard]
    booking: BookingView | None = None


class HealthResponse(ApiModel):
    status: str
    catalog_source: str  # "remote" | "sample"
    booking_target: str  # "remote" | "local"


class FeaturedResponse(ApiModel):
    tours: list[CatalogCard]
    homestay: list[CatalogCard]
    activities: list[CatalogCard]
    events: list[CatalogCard]
