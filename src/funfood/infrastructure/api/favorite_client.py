"""Favorite service backed by the REST API."""

import logging
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from funfood.domain.entities.favorite import FavoriteKind
from funfood.domain.exceptions import RemoteFailure
from funfood.domain.repositories.favorite_service import FavoriteService
from funfood.infrastructure.api.client import ApiClient
from funfood.infrastructure.api.schemas import ApiResponse, PaginatedResponse

logger = logging.getLogger("funfood.api")

FAVORITES_BY_TYPE = "/favorites/{kind}"
FAVORITE_TOGGLE = "/favorites/{kind}/{id}/toggle"


class HttpFavoriteService(FavoriteService):
    """Favorite endpoints of the backend.

    ``GET /favorites/{kind}`` returns the liked entities; ids are taken from
    each entry's ``{kind}Id`` field, falling back to ``id``.
    """

    def __init__(self, client: ApiClient, page_size: int = 100):
        self.client = client
        self.page_size = page_size

    @staticmethod
    def _entity_id(kind: FavoriteKind, entry: Any) -> int:
        if isinstance(entry, dict):
            value = entry.get(f"{kind.value}Id", entry.get("id"))
        else:
            value = entry
        return int(value)

    async def get_favorites(self, kind: FavoriteKind, page: int = 1,
                            limit: int = 20) -> PaginatedResponse:
        """Fetch one page of liked entities with their details."""
        body = await self.client.get(
            FAVORITES_BY_TYPE.format(kind=kind.value),
            params={"_page": page, "_limit": limit},
        )
        try:
            return PaginatedResponse.model_validate(body or {})
        except PydanticValidationError as e:
            raise RemoteFailure(f"Malformed favorites response: {e}") from e

    async def get_favorite_ids(self, kind: FavoriteKind) -> set[int]:
        ids: set[int] = set()
        page = 1
        while True:
            response = await self.get_favorites(kind, page=page, limit=self.page_size)
            try:
                ids.update(self._entity_id(kind, entry) for entry in response.data)
            except (TypeError, ValueError) as e:
                raise RemoteFailure(f"Malformed favorite entry: {e}") from e
            if not response.pagination or not response.pagination.has_next:
                return ids
            page += 1

    async def toggle_favorite(self, kind: FavoriteKind, entity_id: int) -> None:
        body = await self.client.post(FAVORITE_TOGGLE.format(kind=kind.value, id=entity_id))
        if body is not None:
            try:
                response = ApiResponse.model_validate(body)
            except PydanticValidationError as e:
                raise RemoteFailure(f"Malformed toggle response: {e}") from e
            if not response.success:
                raise RemoteFailure(response.message or "Toggle rejected")
        logger.debug(f"Toggled {kind.value} {entity_id}")
