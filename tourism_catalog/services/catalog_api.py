import logging

import httpx
from pydantic import ValidationError

from tourism_catalog.exceptions.custom import CatalogApiError, RateLimitError
from tourism_catalog.sample_catalog import sample_collection
from tourism_catalog.schemas.catalog import (
    ITEM_MODELS,
    TAB_ITEM_KIND,
    CatalogItem,
    ItemKind,
    Tab,
)

logger = logging.getLogger(__name__)


class CatalogApiService:
    """Fetches catalog collections, one per tab.

    With no `base_url` the bundled sample catalog is served instead.
    """

    def __init__(
        self,
        client: httpx.AsyncClient | None,
        base_url: str = "",
        api_key: str = "",
    ):
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._headers = {"Accept": "application/json"}
        if api_key:
            self._headers["Authorization"] = f"Bearer {api_key}"

    @property
    def is_remote(self) -> bool:
        return bool(self._base_url)

    async def fetch_collection(self, tab: Tab) -> list[CatalogItem]:
        if not self.is_remote:
            return sample_collection(tab)

        resp = await self._client.get(f"{self._base_url}/{tab.value}", headers=self._headers)

        if resp.status_code == 429:
            raise RateLimitError("Catalog API")
        if resp.status_code >= 400:
            raise CatalogApiError(resp.text, status_code=resp.status_code)

        data = resp.json()
        rows = data.get("data", []) if isinstance(data, dict) else data
        if not isinstance(rows, list):
            raise CatalogApiError(f"Unexpected catalog payload for {tab.value}")

        model = ITEM_MODELS[TAB_ITEM_KIND[tab]]
        items: list[CatalogItem] = []
        for row in rows:
            try:
                items.append(model.model_validate(row))
            except ValidationError as exc:
                logger.warning(
                    "Skipping malformed %s item %s: %s",
                    tab.value,
                    row.get("id") if isinstance(row, dict) else "?",
                    exc.error_count(),
                )
        logger.info("Fetched %d %s from catalog API", len(items), tab.value)
        return items

    async def fetch_all(self) -> dict[Tab, list[CatalogItem]]:
        return {tab: await self.fetch_collection(tab) for tab in Tab}

    async def get_item(self, tab: Tab, item_id: str) -> CatalogItem | None:
        for item in await self.fetch_collection(tab):
            if item.id == item_id:
                return item
        return None

    async def find_item(self, kind: ItemKind, item_id: str) -> CatalogItem | None:
        """Look an item up in every tab that lists items of `kind`."""
        for tab, tab_kind in TAB_ITEM_KIND.items():
            if tab_kind != kind:
                continue
            item = await self.get_item(tab, item_id)
            if item is not None:
                return item
        return None
