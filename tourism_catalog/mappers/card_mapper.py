import math

from tourism_catalog.schemas.catalog import CatalogItem, Tab
from tourism_catalog.schemas.responses import CatalogCard, CatalogPageResponse

DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 100

_COUNT_NOUNS: dict[Tab, str] = {
    Tab.tours: "tours",
    Tab.homestay: "homestays",
    Tab.activities: "activities",
    Tab.events: "events",
}


def count_message(tab: Tab, count: int) -> str:
    return f"{count} {_COUNT_NOUNS[tab]} found"


def to_card(item: CatalogItem) -> CatalogCard:
    return CatalogCard(
        id=item.id,
        kind=item.kind,
        title=item.display_title,
        location=item.location_label,
        price=item.price_quote,
        thumbnail=item.thumbnail,
        rating=item.rating,
        review_count=item.review_count,
        category=item.category,
        difficulty=item.difficulty.value if item.difficulty else None,
        featured=item.featured,
        description=item.short_description,
    )


def build_page(
    tab: Tab,
    items: list[CatalogItem],
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
) -> CatalogPageResponse:
    total = len(items)
    total_pages = math.ceil(total / limit) if total else 0
    start = (page - 1) * limit
    window = items[start:start + limit]
    return CatalogPageResponse(
        tab=tab.value,
        count_message=count_message(tab, total),
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
        has_next=page < total_pages,
        has_prev=page > 1,
        items=[to_card(item) for item in window],
    )
