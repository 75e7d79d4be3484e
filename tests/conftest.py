import httpx
import pytest
from httpx import ASGITransport

CATALOG_API_URL = "https://catalog.test/api"
BOOKING_API_URL = "https://bookings.test/api"


@pytest.fixture
def mock_env(monkeypatch):
    monkeypatch.setenv("CATALOG_API_URL", "")
    monkeypatch.setenv("BOOKING_API_URL", "")
    monkeypatch.setenv("MAX_SESSIONS", "50")


@pytest.fixture
def remote_env(monkeypatch):
    monkeypatch.setenv("CATALOG_API_URL", CATALOG_API_URL)
    monkeypatch.setenv("CATALOG_API_KEY", "test-catalog-key")
    monkeypatch.setenv("BOOKING_API_URL", BOOKING_API_URL)
    monkeypatch.setenv("BOOKING_API_KEY", "test-booking-key")


async def _app_client():
    from tourism_catalog.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c


@pytest.fixture
async def client(mock_env):
    async for c in _app_client():
        yield c


@pytest.fixture
async def remote_client(remote_env):
    async for c in _app_client():
        yield c
