from __future__ import annotations

import json

import pytest

from funfood.application.checkout import CheckoutEstimator
from funfood.application.container import AppContainer
from funfood.domain.entities.cart import Product
from funfood.domain.entities.favorite import FavoriteKind
from funfood.domain.exceptions import GeolocationError
from funfood.domain.services.stores.cart_store import CartStore
from funfood.domain.value_objects.geo_coordinate import GeoCoordinate
from funfood.infrastructure.geolocation.static_provider import StaticGeolocationProvider
from funfood.infrastructure.storage.memory_storage import InMemoryStorage
from funfood.shared.config.settings import Settings, StorageSettings

pytest.importorskip("pytest_asyncio")

RESTAURANT = GeoCoordinate(10.0, 106.0)


def filled_cart() -> CartStore:
    cart = CartStore()
    cart.add_item(Product(id=1, price=40000, discount=50), 2)
    cart.add_item(Product(id=2, price=10000), 1)
    return cart


@pytest.mark.asyncio
async def test_estimate_uses_current_location() -> None:
    customer = StaticGeolocationProvider(GeoCoordinate(10.03, 106.0))  # ~3.3 km
    summary = await CheckoutEstimator(filled_cart(), customer).estimate(RESTAURANT)

    assert summary.total_items == 3
    assert summary.subtotal == pytest.approx(50000)
    assert summary.delivery_fee == 25000
    assert summary.total == pytest.approx(75000)
    assert summary.to_dict()["deliveryFee"] == 25000


@pytest.mark.asyncio
async def test_estimate_without_location_permission() -> None:
    estimator = CheckoutEstimator(filled_cart(), StaticGeolocationProvider())
    with pytest.raises(GeolocationError):
        await estimator.estimate(RESTAURANT)


def test_summarize_empty_cart() -> None:
    summary = CheckoutEstimator(CartStore(), StaticGeolocationProvider()).summarize(
        RESTAURANT, RESTAURANT
    )
    assert summary.subtotal == 0
    assert summary.distance_km == 0
    assert summary.delivery_fee == 15000


def memory_settings() -> Settings:
    return Settings(storage=StorageSettings(type="memory"))


@pytest.mark.asyncio
async def test_container_start_restores_session_and_loads_favorites(favorite_service, user) -> None:
    favorite_service.remote[FavoriteKind.PRODUCT] = {3}
    storage = InMemoryStorage({"authToken": "tok", "user": json.dumps(user.to_dict())})
    container = AppContainer.create(memory_settings(), storage=storage,
                                    favorite_service=favorite_service)
    try:
        await container.start()
        assert container.session.is_authenticated
        assert container.favorites.is_favorite(FavoriteKind.PRODUCT, 3)
        assert set(container.queries) == {"restaurants", "products"}
        assert container.queries["products"].limit == 10
        assert container.api.on_unauthorized == container.session.logout
    finally:
        await container.close()


@pytest.mark.asyncio
async def test_container_start_anonymous_skips_favorites(favorite_service) -> None:
    favorite_service.fail_fetch = True
    container = AppContainer.create(memory_settings(), favorite_service=favorite_service)
    try:
        await container.start()
        assert not container.session.is_authenticated
        assert container.favorites.error is None
    finally:
        await container.close()
