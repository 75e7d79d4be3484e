from tourism_catalog.schemas.catalog import Difficulty, Tab
from tourism_catalog.schemas.filters import CategoryOption, FilterOptions


def _options(*pairs: tuple[str, str]) -> tuple[CategoryOption, ...]:
    return tuple(CategoryOption(value=v, label=label) for v, label in pairs)


TOUR_CATEGORIES = _options(
    ("trekking", "Trekking"),
    ("cultural", "Cultural Tours"),
    ("adventure", "Adventure"),
    ("wildlife", "Wildlife Safari"),
    ("pilgrimage", "Pilgrimage"),
    ("heritage", "Heritage Sites"),
    ("honeymoon", "Honeymoon"),
    ("family", "Family Tours"),
)

HOMESTAY_CATEGORIES = _options(
    ("traditional", "Traditional"),
    ("modern", "Modern"),
    ("family", "Family Run"),
    ("farm", "Farm Stay"),
    ("mountain", "Mountain View"),
    ("lakeside", "Lakeside"),
)

EVENT_CATEGORIES = _options(
    ("cultural", "Cultural Events"),
    ("music", "Music & Entertainment"),
    ("festival", "Festivals"),
    ("religious", "Religious Ceremonies"),
    ("sports", "Sports Events"),
    ("food", "Food & Culinary"),
)

ACTIVITY_CATEGORIES = _options(
    ("adventure", "Adventure"),
    ("cultural", "Cultural"),
    ("nature", "Nature"),
    ("spiritual", "Spiritual"),
    ("food", "Food & Dining"),
    ("sports", "Sports"),
    ("photography", "Photography"),
)

DIFFICULTY_OPTIONS = tuple(
    CategoryOption(value=d.value, label=d.value.capitalize()) for d in Difficulty
)

RATING_OPTIONS = (4, 3, 2, 1)

DESTINATIONS = (
    "Kathmandu Valley",
    "Everest Region",
    "Annapurna Region",
    "Langtang Region",
    "Pokhara",
    "Chitwan National Park",
    "Lumbini",
    "Bandipur",
    "Gorkha",
    "Mustang",
)

_CATEGORIES_BY_TAB: dict[Tab, tuple[CategoryOption, ...]] = {
    Tab.tours: TOUR_CATEGORIES,
    Tab.homestay: HOMESTAY_CATEGORIES,
    Tab.activities: ACTIVITY_CATEGORIES,
    Tab.events: EVENT_CATEGORIES,
}

_DIFFICULTY_TABS = frozenset({Tab.tours, Tab.activities})


def category_options(tab: Tab) -> tuple[CategoryOption, ...]:
    return _CATEGORIES_BY_TAB[tab]


def supports_difficulty(tab: Tab) -> bool:
    return tab in _DIFFICULTY_TABS


def filter_options(tab: Tab) -> FilterOptions:
    """Everything the sidebar offers while `tab` is active."""
    return FilterOptions(
        tab=tab.value,
        categories=list(category_options(tab)),
        ratings=list(RATING_OPTIONS),
        difficulties=list(DIFFICULTY_OPTIONS) if supports_difficulty(tab) else [],
        destinations=list(DESTINATIONS),
    )
