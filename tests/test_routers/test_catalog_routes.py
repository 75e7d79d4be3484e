import respx
from httpx import Response


async def test_list_tours_unfiltered(client):
    resp = await client.get("/catalog/tours")

    assert resp.status_code == 200
    data = resp.json()
    assert data["countMessage"] == "3 tours found"
    assert data["page"] == 1
    assert data["limit"] == 12
    assert [c["id"] for c in data["items"]] == ["1", "2", "3"]


async def test_list_with_filters(client):
    resp = await client.get("/catalog/tours", params={"priceCeiling": 1000})

    assert [c["title"] for c in resp.json()["items"]] == ["Chitwan Wildlife Safari"]


async def test_list_events_min_rating(client):
    resp = await client.get("/catalog/events", params={"minRating": 4})

    assert resp.json()["total"] == 3


async def test_list_search_sort_and_paginate(client):
    resp = await client.get(
        "/catalog/events", params={"q": "festival", "sort": "price-high", "limit": 2}
    )

    data = resp.json()
    assert data["total"] == 3
    assert data["totalPages"] == 2
    assert data["hasNext"] is True
    assert [c["price"]["amount"] for c in data["items"]] == [45, 35]


async def test_list_invalid_filter(client):
    resp = await client.get("/catalog/tours", params={"difficulty": "brutal"})

    assert resp.status_code == 400


async def test_list_unknown_tab(client):
    resp = await client.get("/catalog/cruises")

    assert resp.status_code == 422


async def test_options(client):
    resp = await client.get("/catalog/options/activities")

    data = resp.json()
    assert len(data["categories"]) == 7
    assert len(data["difficulties"]) == 4
    assert data["price"] == {"min": 0, "max": 5000, "step": 50}


async def test_get_item(client):
    resp = await client.get("/catalog/homestay/2")

    assert resp.status_code == 200
    card = resp.json()
    assert card["title"] == "Temple Tree Resort"
    assert card["price"] == {"amount": 120.0, "currency": "USD"}


async def test_get_missing_item(client):
    resp = await client.get("/catalog/homestay/9")

    assert resp.status_code == 404


async def test_health(client):
    resp = await client.get("/health")

    assert resp.json() == {"status": "ok", "catalogSource": "sample", "bookingTarget": "local"}


@respx.mock
async def test_catalog_api_rate_limit_maps_to_429(remote_client):
    respx.get("https://catalog.test/api/tours").mock(return_value=Response(429))

    resp = await remote_client.get("/catalog/tours")

    assert resp.status_code == 429
    assert resp.json()["detail"] == "Rate limit exceeded for Catalog API"


@respx.mock
async def test_catalog_api_error_maps_to_502(remote_client):
    respx.get("https://catalog.test/api/tours").mock(return_value=Response(500, text="oops"))

    resp = await remote_client.get("/catalog/tours")

    assert resp.status_code == 502


async def test_list_default_order_is_featured_first(client):
    resp = await client.get("/catalog/events")

    items = resp.json()["items"]
    assert [c["title"] for c in items] == [
        "Mountain Music Festival",
        "Dashain Festival Celebration",
        "Holi Color Festival",
    ]
    assert items[0]["featured"] is True
    assert items[0]["reviewCount"] == 67


async def test_featured(client):
    resp = await client.get("/catalog/featured")

    assert resp.status_code == 200
    data = resp.json()
    assert {tab: [c["id"] for c in cards] for tab, cards in data.items()} == {
        "tours": ["1"],
        "homestay": ["1"],
        "activities": ["1"],
        "events": ["3"],
    }


@respx.mock
async def test_item_with_reserved_looking_id(remote_client):
    respx.get("https://catalog.test/api/tours").mock(
        return_value=Response(200, json=[{"id": "options", "title": "Options Trek", "price": {"adult": 500}}])
    )

    resp = await remote_client.get("/catalog/tours/options")

    assert resp.status_code == 200
    assert resp.json()["title"] == "Options Trek"
