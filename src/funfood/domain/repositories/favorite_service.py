"""Remote favorite service interface."""

from abc import ABC, abstractmethod

from funfood.domain.entities.favorite import FavoriteKind


class FavoriteService(ABC):
    """Remote source of truth for liked restaurants and products."""

    @abstractmethod
    async def get_favorite_ids(self, kind: FavoriteKind) -> set[int]:
        """Fetch ids the current user has liked.

        Args:
            kind: Restaurant or product

        Returns:
            Set of liked entity ids

        Raises:
            RemoteFailure: If the request fails
        """
        pass

    @abstractmethod
    async def toggle_favorite(self, kind: FavoriteKind, entity_id: int) -> None:
        """Flip the liked state of an entity on the server.

        Raises:
            RemoteFailure: If the request fails
        """
        pass
