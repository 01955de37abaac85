"""Cart and checkout demo - runs offline."""

import asyncio
import sys

sys.path.insert(0, "src")

from funfood.application.checkout import CheckoutEstimator
from funfood.domain.entities.cart import Product
from funfood.domain.entities.favorite import FavoriteKind
from funfood.domain.repositories.favorite_service import FavoriteService
from funfood.domain.services.stores.cart_store import CartStore
from funfood.domain.services.stores.favorite_store import FavoriteStore
from funfood.domain.value_objects.geo_coordinate import GeoCoordinate
from funfood.infrastructure.geolocation.static_provider import StaticGeolocationProvider
from funfood.shared.formatters import format_currency, format_distance


class OfflineFavoriteService(FavoriteService):
    """Accepts every toggle except for product 13."""

    async def get_favorite_ids(self, kind: FavoriteKind) -> set[int]:
        return {1} if kind == FavoriteKind.RESTAURANT else set()

    async def toggle_favorite(self, kind: FavoriteKind, entity_id: int) -> None:
        await asyncio.sleep(0.1)
        if entity_id == 13:
            raise ConnectionError("server unreachable")


async def main():
    print("=" * 50)
    print("FunFood - Cart & Checkout Demo")
    print("=" * 50)

    cart = CartStore()
    pho = Product(id=1, name="Pho bo", price=45000, discount=10)
    tea = Product(id=2, name="Tra da", price=5000)

    print("\n[1] Adding items...")
    cart.add_item(pho, 2)
    cart.add_item(tea, 1)
    cart.add_item(pho, 1)
    for item in cart.items:
        print(f"    {item.product.name} x{item.quantity} = {format_currency(item.line_total)}")
    print(f"    Units: {cart.get_item_count()}, lines: {cart.distinct_item_count}")

    print("\n[2] Estimating delivery...")
    restaurant = GeoCoordinate(10.7769, 106.7009)
    customer = StaticGeolocationProvider(GeoCoordinate(10.8016, 106.7147))
    summary = await CheckoutEstimator(cart, customer).estimate(restaurant)
    print(f"    Distance: {format_distance(summary.distance_km)}")
    print(f"    Subtotal: {format_currency(summary.subtotal)}")
    print(f"    Delivery: {format_currency(summary.delivery_fee)}")
    print(f"    Total:    {format_currency(summary.total)}")

    print("\n[3] Favorites...")
    favorites = FavoriteStore(OfflineFavoriteService())
    await favorites.fetch_favorites()
    print(f"    Restaurants liked: {sorted(favorites.restaurant_ids)}")

    await favorites.toggle_favorite(FavoriteKind.PRODUCT, 2)
    print(f"    Product 2 liked: {favorites.is_favorite(FavoriteKind.PRODUCT, 2)}")

    try:
        await favorites.toggle_favorite(FavoriteKind.PRODUCT, 13)
    except ConnectionError as e:
        print(f"    Toggle of product 13 failed ({e}), rolled back")
    print(f"    Product 13 liked: {favorites.is_favorite(FavoriteKind.PRODUCT, 13)}")

    print("\n" + "=" * 50)
    print("Demo finished")


if __name__ == "__main__":
    asyncio.run(main())
