"""Checkout estimation: cart totals plus distance-based delivery fee."""

import logging

from funfood.domain.entities.order import OrderSummary
from funfood.domain.repositories.geolocation import GeolocationProvider
from funfood.domain.services.delivery_fee import DistanceFeeCalculator
from funfood.domain.services.stores.cart_store import CartStore
from funfood.domain.value_objects.geo_coordinate import GeoCoordinate

logger = logging.getLogger("funfood.checkout")


class CheckoutEstimator:
    """Builds the order summary shown on the checkout screen."""

    def __init__(self, cart: CartStore, geolocation: GeolocationProvider,
                 calculator: DistanceFeeCalculator | None = None):
        self.cart = cart
        self.geolocation = geolocation
        self.calculator = calculator or DistanceFeeCalculator()

    def summarize(self, origin: GeoCoordinate, destination: GeoCoordinate) -> OrderSummary:
        """Summary for a delivery between two known points."""
        distance_km = self.calculator.distance(
            origin.latitude, origin.longitude, destination.latitude, destination.longitude
        )
        return OrderSummary(
            total_items=self.cart.get_item_count(),
            subtotal=self.cart.get_total_price(),
            delivery_fee=self.calculator.delivery_fee(distance_km),
            distance_km=distance_km,
        )

    async def estimate(self, restaurant_location: GeoCoordinate) -> OrderSummary:
        """Summary for delivering from a restaurant to the current location.

        Raises:
            GeolocationError: If the current location is unavailable
        """
        current = await self.geolocation.current_location()
        summary = self.summarize(restaurant_location, current)
        logger.info(
            f"Checkout estimate: {summary.distance_km:.2f} km, fee {summary.delivery_fee}, "
            f"total {summary.total}"
        )
        return summary
