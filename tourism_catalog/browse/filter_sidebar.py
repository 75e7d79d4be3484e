from collections.abc import Callable
from typing import Any

from tourism_catalog.mappers.filter_options import filter_options
from tourism_catalog.mappers.filter_state import clear_filters, update_filter
from tourism_catalog.schemas.catalog import Tab
from tourism_catalog.schemas.filters import FilterOptions, FilterState

FilterCallback = Callable[[FilterState], None]


class FilterSidebar:
    def __init__(self, tab: Tab, filters: FilterState, on_change: FilterCallback):
        self._tab = tab
        self._filters = filters
        self._on_change = on_change

    @property
    def tab(self) -> Tab:
        return self._tab

    @property
    def filters(self) -> FilterState:
        return self._filters

    def show(self, tab: Tab, filters: FilterState) -> None:
        """Switch to another tab's option lists and selections."""
        self._tab = tab
        self._filters = filters

    def options(self) -> FilterOptions:
        return filter_options(self._tab)

    def update_filter(self, key: str, value: Any) -> FilterState:
        self._filters = update_filter(self._filters, key, value)
        self._on_change(self._filters)
        return self._filters

    def clear_filters(self) -> FilterState:
        self._filters = clear_filters()
        self._on_change(self._filters)
        return self._filters
