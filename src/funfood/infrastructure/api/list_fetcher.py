"""List fetch functions backed by the REST API."""

from collections.abc import Callable
from typing import Any, Generic, TypeVar

from pydantic import ValidationError as PydanticValidationError

from funfood.domain.exceptions import RemoteFailure
from funfood.domain.services.stores.list_query import FetchPage
from funfood.infrastructure.api.client import ApiClient
from funfood.infrastructure.api.schemas import PaginatedResponse

T = TypeVar("T")

RESTAURANTS = "/restaurants"
PRODUCTS = "/products"


class HttpListFetcher(Generic[T]):
    """Callable usable as a ``ListQueryCoordinator`` fetch function.

    Sends ``GET {path}?_page=..&_limit=..`` with filters as extra query
    parameters (``None`` values are dropped) and converts each entry with
    ``parse`` when given.
    """

    def __init__(self, client: ApiClient, path: str,
                 parse: Callable[[dict[str, Any]], T] | None = None):
        self.client = client
        self.path = path
        self.parse = parse

    async def __call__(self, page: int, limit: int, filters: dict[str, Any]) -> FetchPage[T]:
        params = {key: value for key, value in filters.items() if value is not None}
        params.update({"_page": page, "_limit": limit})
        body = await self.client.get(self.path, params=params)

        try:
            response = PaginatedResponse.model_validate(body or {})
            items = [self.parse(entry) for entry in response.data] if self.parse else response.data
        except (PydanticValidationError, KeyError, TypeError, ValueError) as e:
            raise RemoteFailure(f"Malformed list response from {self.path}: {e}") from e

        total = response.pagination.total if response.pagination else len(items)
        return FetchPage(items=items, total=total)
