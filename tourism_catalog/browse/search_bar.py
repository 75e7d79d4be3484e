from collections.abc import Callable

from tourism_catalog.schemas.filters import DateRange

SearchCallback = Callable[[str, DateRange], None]


class SearchBar:
    def __init__(self, on_search: SearchCallback):
        self._on_search = on_search

    def submit_search(self, query_text: str, date_range: DateRange | None = None) -> None:
        """Forward the query and dates to the owner as entered; empty means show all."""
        self._on_search(query_text, date_range or DateRange())
