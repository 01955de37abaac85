"""Application container composing the client stores."""

import logging
from dataclasses import dataclass, field

from funfood.application.checkout import CheckoutEstimator
from funfood.domain.entities.cart import Product
from funfood.domain.repositories.favorite_service import FavoriteService
from funfood.domain.repositories.geolocation import GeolocationProvider
from funfood.domain.repositories.storage import KeyValueStorage
from funfood.domain.services.delivery_fee import DistanceFeeCalculator
from funfood.domain.services.stores.cart_store import CartStore
from funfood.domain.services.stores.favorite_store import FavoriteStore
from funfood.domain.services.stores.list_query import ListQueryCoordinator
from funfood.domain.services.stores.session_store import SessionStore
from funfood.infrastructure.api.client import ApiClient
from funfood.infrastructure.api.favorite_client import HttpFavoriteService
from funfood.infrastructure.api.list_fetcher import PRODUCTS, RESTAURANTS, HttpListFetcher
from funfood.infrastructure.geolocation.static_provider import StaticGeolocationProvider
from funfood.infrastructure.storage.factory import StorageFactory
from funfood.shared.config.settings import Settings, get_settings

logger = logging.getLogger("funfood.app")


@dataclass
class AppContainer:
    """Owns the stores for one application run.

    Build it once at start-up with ``create`` and pass it to consumers; call
    ``start`` to restore the session and load favorites, ``close`` on exit.
    """

    settings: Settings
    session: SessionStore
    cart: CartStore
    favorites: FavoriteStore
    checkout: CheckoutEstimator
    api: ApiClient | None = None
    queries: dict[str, ListQueryCoordinator] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        settings: Settings | None = None,
        storage: KeyValueStorage | None = None,
        favorite_service: FavoriteService | None = None,
        geolocation: GeolocationProvider | None = None,
    ) -> "AppContainer":
        """Wire stores from settings, using the given collaborators if any."""
        settings = settings or get_settings()
        session = SessionStore(storage or StorageFactory.from_settings(settings.storage))

        api = ApiClient(
            **settings.get_api_config(),
            token_provider=lambda: session.token,
            on_unauthorized=session.logout,
        )
        cart = CartStore()
        calculator = DistanceFeeCalculator(settings.delivery.to_schedule())
        limit = settings.pagination.default_limit

        container = cls(
            settings=settings,
            session=session,
            cart=cart,
            favorites=FavoriteStore(favorite_service or HttpFavoriteService(api)),
            checkout=CheckoutEstimator(cart, geolocation or StaticGeolocationProvider(), calculator),
            api=api,
            queries={
                "restaurants": ListQueryCoordinator(HttpListFetcher(api, RESTAURANTS), limit=limit),
                "products": ListQueryCoordinator(
                    HttpListFetcher(api, PRODUCTS, parse=Product.from_dict), limit=limit
                ),
            },
        )
        logger.debug(f"{settings.app_name} container created")
        return container

    async def start(self) -> None:
        """Restore the stored session and, if signed in, load favorites."""
        if await self.session.restore_session():
            await self.favorites.fetch_favorites()

    async def close(self) -> None:
        """Release network resources."""
        if self.api:
            await self.api.close()
