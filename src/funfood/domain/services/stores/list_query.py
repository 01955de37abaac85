"""List query coordinator: pagination, filters and fetch execution."""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Generic, TypeVar

from funfood.domain.exceptions import StaleResponseDiscarded
from funfood.domain.services.stores.filters import FilterState
from funfood.domain.services.stores.pagination import Pagination

logger = logging.getLogger("funfood.query")

T = TypeVar("T")


class QueryStatus(Enum):
    """Lifecycle of a list query."""
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class FetchPage(Generic[T]):
    """One page of results with the server-reported total."""
    items: list[T] = field(default_factory=list)
    total: int = 0


FetchFunction = Callable[[int, int, dict[str, Any]], Awaitable[FetchPage[T]]]


class ListQueryCoordinator(Generic[T]):
    """Drives a paginated, filtered fetch function.

    Every ``execute`` call is tagged with a sequence number. Only the most
    recently issued call may write ``items``, ``error`` and ``status``;
    responses to older calls are dropped even if they resolve last.

    Filter and page changes never fetch by themselves. Call ``execute`` (or
    ``refresh``) afterwards.
    """

    def __init__(self, fetch: FetchFunction[T], limit: int = 10,
                 initial_filters: Mapping[str, Any] | None = None):
        self.fetch = fetch
        self.default_limit = limit
        self.pagination = Pagination(limit=limit)
        self.filters = FilterState(dict(initial_filters or {}))
        self.status = QueryStatus.IDLE
        self.items: list[T] = []
        self.error: str | None = None
        self._sequence = 0

    # -- state accessors -----------------------------------------------------

    @property
    def page(self) -> int:
        return self.pagination.page

    @property
    def limit(self) -> int:
        return self.pagination.limit

    @property
    def total(self) -> int:
        return self.pagination.total

    @property
    def total_pages(self) -> int:
        return self.pagination.total_pages

    @property
    def is_loading(self) -> bool:
        return self.status == QueryStatus.LOADING

    # -- filters -------------------------------------------------------------

    def update_filter(self, key: str, value: Any) -> None:
        """Set one filter and go back to the first page."""
        self.filters.update(key, value)
        self.pagination.page = 1

    def update_filters(self, values: Mapping[str, Any]) -> None:
        """Merge filters and go back to the first page."""
        self.filters.update_many(values)
        self.pagination.page = 1

    def clear_filters(self) -> None:
        """Drop all filters and restore the default page size."""
        self.filters.clear()
        self.pagination.page = 1
        self.pagination.set_limit(self.default_limit)

    # -- pagination ----------------------------------------------------------

    def next_page(self) -> None:
        self.pagination.next_page()

    def prev_page(self) -> None:
        self.pagination.prev_page()

    def go_to_page(self, page: int) -> None:
        self.pagination.go_to_page(page)

    def update_pagination(self, page: int, limit: int) -> None:
        """Set page and page size together."""
        self.pagination.set_limit(limit)
        self.pagination.page = max(page, 1)

    def set_total(self, total: int) -> None:
        """Record the server-reported total."""
        self.pagination.set_total(total)

    def reset(self) -> None:
        """Return to a fresh, idle query.

        In-flight calls become stale and will be ignored.
        """
        self._sequence += 1
        self.pagination = Pagination(limit=self.default_limit)
        self.filters = FilterState()
        self.status = QueryStatus.IDLE
        self.items = []
        self.error = None

    # -- execution -----------------------------------------------------------

    def _ensure_latest(self, sequence: int) -> None:
        if sequence != self._sequence:
            raise StaleResponseDiscarded(sequence, self._sequence)

    async def execute(self) -> FetchPage[T] | None:
        """Fetch the current page with the current filters.

        Never raises for fetch failures; they are stored in ``error``.

        Returns:
            The fetched page if this call is still the latest one, else None
        """
        self._sequence += 1
        sequence = self._sequence
        page, limit, filters = self.page, self.limit, self.filters.snapshot()

        self.status = QueryStatus.LOADING
        self.error = None
        logger.debug(f"Query #{sequence}: page={page} limit={limit} filters={filters}")

        try:
            try:
                result = await self.fetch(page, limit, filters)
            except Exception as e:
                self._ensure_latest(sequence)
                logger.error(f"Query #{sequence} failed: {e}")
                self.error = str(e) or e.__class__.__name__
                self.status = QueryStatus.ERROR
                return None

            self._ensure_latest(sequence)
        except StaleResponseDiscarded as stale:
            logger.debug(str(stale))
            return None

        self.items = list(result.items)
        self.pagination.set_total(max(result.total, 0))
        self.status = QueryStatus.SUCCESS
        return result

    async def refresh(self) -> FetchPage[T] | None:
        """Re-run the query for the current page and filters."""
        return await self.execute()
