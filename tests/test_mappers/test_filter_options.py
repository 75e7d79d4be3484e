import pytest

from tourism_catalog.mappers.filter_options import (
    DESTINATIONS,
    category_options,
    filter_options,
    supports_difficulty,
)
from tourism_catalog.schemas.catalog import Tab


@pytest.mark.parametrize(
    "tab,expected",
    [(Tab.tours, 8), (Tab.homestay, 6), (Tab.events, 6), (Tab.activities, 7)],
)
def test_category_counts(tab, expected):
    assert len(category_options(tab)) == expected


def test_tour_category_values():
    assert [o.value for o in category_options(Tab.tours)] == [
        "trekking", "cultural", "adventure", "wildlife",
        "pilgrimage", "heritage", "honeymoon", "family",
    ]


def test_difficulty_only_for_tours_and_activities():
    assert supports_difficulty(Tab.tours)
    assert supports_difficulty(Tab.activities)
    assert not supports_difficulty(Tab.homestay)
    assert not supports_difficulty(Tab.events)

    assert filter_options(Tab.events).difficulties == []
    assert [d.value for d in filter_options(Tab.tours).difficulties] == [
        "easy", "moderate", "challenging", "extreme",
    ]


def test_slider_ratings_and_destinations():
    options = filter_options(Tab.homestay)
    assert (options.price.min, options.price.max, options.price.step) == (0, 5000, 50)
    assert options.ratings == [4, 3, 2, 1]
    assert len(DESTINATIONS) == 10
    assert options.destinations[0] == "Kathmandu Valley"
