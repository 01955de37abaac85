"""Geolocation provider interface."""

from abc import ABC, abstractmethod

from funfood.domain.value_objects.geo_coordinate import GeoCoordinate


class GeolocationProvider(ABC):
    """Supplies the device's current position."""

    @abstractmethod
    async def current_location(self) -> GeoCoordinate:
        """Get the current location.

        Returns:
            Current coordinate

        Raises:
            GeolocationError: If permission is denied or no fix is available
        """
        pass
