"""Geolocation provider returning a configured position."""

from funfood.domain.exceptions import GeolocationError
from funfood.domain.repositories.geolocation import GeolocationProvider
from funfood.domain.value_objects.geo_coordinate import GeoCoordinate


class StaticGeolocationProvider(GeolocationProvider):
    """Reports a fixed location, or a permission error when none is set.

    Used where no device GPS is available (CLI, tests).
    """

    def __init__(self, location: GeoCoordinate | None = None):
        self.location = location

    async def current_location(self) -> GeoCoordinate:
        if self.location is None:
            raise GeolocationError("Permission denied")
        return self.location
