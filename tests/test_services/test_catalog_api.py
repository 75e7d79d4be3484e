import httpx
import pytest
import respx
from httpx import Response

from tourism_catalog.exceptions.custom import CatalogApiError, RateLimitError
from tourism_catalog.schemas.catalog import Activity, Hotel, ItemKind, Tab, Tour
from tourism_catalog.services.catalog_api import CatalogApiService

BASE_URL = "https://catalog.test/api"

TOUR_ROW = {
    "id": "t1",
    "title": "Langtang Valley Trek",
    "destination": "Langtang Region",
    "price": {"adult": 900, "child": 600, "currency": "USD"},
    "rating": 4.6,
    "reviewCount": 77,
    "category": "trekking",
    "difficulty": "moderate",
}


async def test_sample_catalog_when_not_configured():
    service = CatalogApiService(None)

    collections = await service.fetch_all()

    assert not service.is_remote
    assert {tab: len(items) for tab, items in collections.items()} == {
        Tab.tours: 3, Tab.homestay: 2, Tab.activities: 2, Tab.events: 3,
    }
    assert all(isinstance(i, Hotel) for i in collections[Tab.homestay])
    assert all(isinstance(i, Activity) for i in collections[Tab.events])


@respx.mock
async def test_fetch_collection_from_api():
    route = respx.get(f"{BASE_URL}/tours").mock(return_value=Response(200, json=[TOUR_ROW]))

    async with httpx.AsyncClient() as client:
        service = CatalogApiService(client, BASE_URL + "/", "secret")
        items = await service.fetch_collection(Tab.tours)

    assert route.called
    assert route.calls.last.request.headers["Authorization"] == "Bearer secret"
    assert len(items) == 1
    assert isinstance(items[0], Tour)
    assert items[0].location_label == "Langtang Region"


@respx.mock
async def test_fetch_collection_unwraps_data_envelope():
    respx.get(f"{BASE_URL}/tours").mock(
        return_value=Response(200, json={"success": True, "data": [TOUR_ROW]})
    )

    async with httpx.AsyncClient() as client:
        items = await CatalogApiService(client, BASE_URL).fetch_collection(Tab.tours)

    assert [i.id for i in items] == ["t1"]


@respx.mock
async def test_malformed_rows_are_skipped():
    bad = {**TOUR_ROW, "id": "t2", "rating": 9}
    respx.get(f"{BASE_URL}/tours").mock(return_value=Response(200, json=[TOUR_ROW, bad]))

    async with httpx.AsyncClient() as client:
        items = await CatalogApiService(client, BASE_URL).fetch_collection(Tab.tours)

    assert [i.id for i in items] == ["t1"]


@respx.mock
async def test_rate_limit():
    respx.get(f"{BASE_URL}/events").mock(return_value=Response(429, text="slow down"))

    async with httpx.AsyncClient() as client:
        with pytest.raises(RateLimitError):
            await CatalogApiService(client, BASE_URL).fetch_collection(Tab.events)


@respx.mock
async def test_upstream_error():
    respx.get(f"{BASE_URL}/homestay").mock(return_value=Response(500, text="boom"))

    async with httpx.AsyncClient() as client:
        with pytest.raises(CatalogApiError) as exc_info:
            await CatalogApiService(client, BASE_URL).fetch_collection(Tab.homestay)

    assert exc_info.value.status_code == 500


@respx.mock
async def test_unexpected_payload():
    respx.get(f"{BASE_URL}/tours").mock(return_value=Response(200, json={"data": "nope"}))

    async with httpx.AsyncClient() as client:
        with pytest.raises(CatalogApiError):
            await CatalogApiService(client, BASE_URL).fetch_collection(Tab.tours)


async def test_get_and_find_item():
    service = CatalogApiService(None)

    assert (await service.get_item(Tab.tours, "3")).display_title == "Chitwan Wildlife Safari"
    assert await service.get_item(Tab.tours, "99") is None
    # activity ids are looked up in activities first, then events
    found = await service.find_item(ItemKind.activity, "3")
    assert found.display_title == "Mountain Music Festival"
