"""Distance and delivery fee calculation."""

import math
from decimal import ROUND_HALF_UP, Decimal

from funfood.domain.value_objects.fee_schedule import DeliveryFeeSchedule
from funfood.domain.value_objects.geo_coordinate import GeoCoordinate

EARTH_RADIUS_KM = 6371.0


def haversine_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance between two points in kilometers."""
    d_lat = math.radians(lat2 - lat1)
    d_lon = math.radians(lon2 - lon1)
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def round_distance(distance_km: float) -> float:
    """Round to one decimal place, ties away from zero on the exact binary value."""
    return float(Decimal(distance_km).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


class DistanceFeeCalculator:
    """Stateless calculator turning distances into delivery fees.

    The distance is rounded to one decimal before the tier is chosen, and the
    per-km surcharge is computed with ``ceil`` on that rounded value, so
    2.04 km is billed like 2.0 km and 2.1 km like 3.0 km.
    """

    def __init__(self, schedule: DeliveryFeeSchedule | None = None):
        self.schedule = schedule or DeliveryFeeSchedule()

    @staticmethod
    def distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Haversine distance in kilometers."""
        return haversine_distance(lat1, lon1, lat2, lon2)

    def delivery_fee(self, distance_km: float) -> int:
        """Delivery fee for a distance.

        Args:
            distance_km: Distance in kilometers

        Returns:
            Fee in VND
        """
        s = self.schedule
        d = round_distance(distance_km)

        if d <= s.free_distance:
            return s.base_fee
        if d <= s.standard_distance:
            return s.base_fee + math.ceil(d - s.free_distance) * s.per_km_fee

        standard_km = math.ceil(s.standard_distance - s.free_distance)
        return (
            s.base_fee
            + standard_km * s.per_km_fee
            + math.ceil(d - s.standard_distance) * s.extra_per_km_fee
        )

    def fee_between(self, origin: GeoCoordinate, destination: GeoCoordinate) -> int:
        """Delivery fee between two coordinates."""
        return self.delivery_fee(
            self.distance(origin.latitude, origin.longitude,
                          destination.latitude, destination.longitude)
        )
