from fastapi import APIRouter, HTTPException, Query

from tourism_catalog.dependencies import CatalogDep
from tourism_catalog.mappers.card_mapper import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE, build_page, to_card
from tourism_catalog.mappers.catalog_filter import apply_filters, featured_items
from tourism_catalog.mappers.filter_options import filter_options
from tourism_catalog.mappers.filter_state import build_filters
from tourism_catalog.schemas.catalog import Tab
from tourism_catalog.schemas.filters import FilterOptions, SortOrder
from tourism_catalog.schemas.responses import CatalogCard, CatalogPageResponse, FeaturedResponse

router = APIRouter(prefix="/catalog", tags=["catalog"])

FEATURED_LIMITS: dict[Tab, int] = {
    Tab.tours: 6,
    Tab.homestay: 4,
    Tab.activities: 6,
    Tab.events: 6,
}


# Fixed-segment routes are registered before the /{tab} ones so "featured"
# and "options" are never parsed as a tab.
@router.get("/featured", response_model=FeaturedResponse)
async def featured(catalog: CatalogDep) -> FeaturedResponse:
    collections = await catalog.fetch_all()
    return FeaturedResponse(**{
        tab.value: [to_card(item) for item in featured_items(items, FEATURED_LIMITS[tab])]
        for tab, items in collections.items()
    })


@router.get("/options/{tab}", response_model=FilterOptions)
async def catalog_options(tab: Tab) -> FilterOptions:
    return filter_options(tab)


@router.get("/{tab}", response_model=CatalogPageResponse)
async def list_catalog(
    tab: Tab,
    catalog: CatalogDep,
    q: str = "",
    category: str | None = None,
    price_ceiling: int | None = Query(default=None, alias="priceCeiling"),
    min_rating: int | None = Query(default=None, alias="minRating"),
    difficulty: str | None = None,
    destination: str | None = None,
    sort: SortOrder | None = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
) -> CatalogPageResponse:
    filters = build_filters(
        category=category,
        price_ceiling=price_ceiling,
        min_rating=min_rating,
        difficulty=difficulty,
        destination=destination,
    )
    items = await catalog.fetch_collection(tab)
    visible = apply_filters(items, filters, tab, query=q, order=sort)
    return build_page(tab, visible, page=page, limit=limit)


@router.get("/{tab}/{item_id}", response_model=CatalogCard)
async def get_catalog_item(tab: Tab, item_id: str, catalog: CatalogDep) -> CatalogCard:
    item = await catalog.get_item(tab, item_id)
    if item is None:
        raise HTTPException(status_code=404, detail="Item not found")
    return to_card(item)
