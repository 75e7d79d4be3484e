from collections.abc import Iterable

from tourism_catalog.mappers.filter_options import supports_difficulty
from tourism_catalog.schemas.catalog import CatalogItem, Tab
from tourism_catalog.schemas.filters import FilterState, SortOrder


def _norm(value: str | None) -> str:
    return (value or "").strip().casefold()


def matches_query(item: CatalogItem, query: str) -> bool:
    """Case-insensitive match of `query` against the item's searchable text."""
    needle = _norm(query)
    if not needle:
        return True
    haystack = (
        item.display_title,
        item.short_description,
        item.category,
        item.location_label,
    )
    return any(needle in _norm(text) for text in haystack)


def matches_destination(location_label: str, destination: str) -> bool:
    # "Kathmandu" (a city) belongs to "Kathmandu Valley" (a region) and vice versa
    wanted = _norm(destination)
    if not wanted:
        return True
    label = _norm(location_label)
    if not label:
        return False
    return wanted in label or label in wanted


def matches_filters(item: CatalogItem, filters: FilterState, tab: Tab) -> bool:
    if filters.category and _norm(item.category) != _norm(filters.category):
        return False
    if item.price_quote.amount > filters.price_ceiling:
        return False
    if item.rating < filters.min_rating:
        return False
    if filters.difficulty and supports_difficulty(tab):
        if item.difficulty is None or item.difficulty.value != filters.difficulty:
            return False
    return matches_destination(item.location_label, filters.destination)


def sort_items(items: list[CatalogItem], order: SortOrder | None) -> list[CatalogItem]:
    if order == SortOrder.price_low:
        return sorted(items, key=lambda i: i.price_quote.amount)
    if order == SortOrder.price_high:
        return sorted(items, key=lambda i: i.price_quote.amount, reverse=True)
    if order == SortOrder.rating:
        return sorted(items, key=lambda i: i.rating, reverse=True)
    # default listing order: featured items first, then best rated
    return sorted(items, key=lambda i: (i.featured, i.rating), reverse=True)


def featured_items(items: Iterable[CatalogItem], limit: int) -> list[CatalogItem]:
    """Top-rated featured items, at most `limit` of them."""
    featured = [item for item in items if item.featured]
    return sorted(featured, key=lambda i: i.rating, reverse=True)[:limit]


def apply_filters(
    items: Iterable[CatalogItem],
    filters: FilterState,
    tab: Tab,
    query: str = "",
    order: SortOrder | None = None,
) -> list[CatalogItem]:
    """Narrow a tab's collection by search text and sidebar filters."""
    visible = [
        item
        for item in items
        if matches_query(item, query) and matches_filters(item, filters, tab)
    ]
    return sort_items(visible, order)
