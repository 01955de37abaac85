"""Favorite store with optimistic toggling."""

import asyncio
import logging

from funfood.domain.entities.favorite import FavoriteKind
from funfood.domain.repositories.favorite_service import FavoriteService
from funfood.domain.services.stores.optimistic import optimistic_update

logger = logging.getLogger("funfood.favorites")


class FavoriteStore:
    """Liked restaurant and product ids mirrored from the favorite service.

    Toggles are applied locally before the remote call returns and rolled back
    if it fails. Toggles of the same id are not serialized: two overlapping
    calls each restore their own snapshot on failure.
    """

    def __init__(self, service: FavoriteService):
        self.service = service
        self._ids: dict[FavoriteKind, frozenset[int]] = {kind: frozenset() for kind in FavoriteKind}
        self.is_loading = False
        self.error: str | None = None

    def ids(self, kind: FavoriteKind) -> frozenset[int]:
        """Current liked ids of a kind."""
        return self._ids[kind]

    @property
    def restaurant_ids(self) -> frozenset[int]:
        return self._ids[FavoriteKind.RESTAURANT]

    @property
    def product_ids(self) -> frozenset[int]:
        return self._ids[FavoriteKind.PRODUCT]

    def is_favorite(self, kind: FavoriteKind, entity_id: int) -> bool:
        """Check membership without touching the network."""
        return entity_id in self._ids[kind]

    async def fetch_favorites(self) -> None:
        """Reload both id sets from the server.

        On failure the previous sets are kept and the error is only logged and
        recorded in ``error``.
        """
        self.is_loading = True
        try:
            restaurant_ids, product_ids = await asyncio.gather(
                self.service.get_favorite_ids(FavoriteKind.RESTAURANT),
                self.service.get_favorite_ids(FavoriteKind.PRODUCT),
            )
        except Exception as e:
            logger.error(f"Failed to load favorites: {e}")
            self.error = str(e)
        else:
            self._ids[FavoriteKind.RESTAURANT] = frozenset(restaurant_ids)
            self._ids[FavoriteKind.PRODUCT] = frozenset(product_ids)
            self.error = None
            logger.info(
                f"Loaded favorites: {len(restaurant_ids)} restaurants, {len(product_ids)} products"
            )
        finally:
            self.is_loading = False

    async def toggle_favorite(self, kind: FavoriteKind, entity_id: int) -> bool:
        """Flip the liked state of an entity.

        The new state is visible immediately. If the remote toggle fails the
        set for ``kind`` is restored to its pre-toggle value and the error is
        re-raised.

        Args:
            kind: Restaurant or product
            entity_id: Entity id

        Returns:
            The liked state after the toggle

        Raises:
            RemoteFailure: If the favorite service rejects the toggle
        """

        def write(ids: frozenset[int]) -> None:
            self._ids[kind] = ids

        await optimistic_update(
            read=lambda: self._ids[kind],
            write=write,
            compute=lambda ids: ids - {entity_id} if entity_id in ids else ids | {entity_id},
            commit=lambda: self.service.toggle_favorite(kind, entity_id),
        )
        return self.is_favorite(kind, entity_id)
