"""Geographic coordinate value object."""

from dataclasses import dataclass

from funfood.domain.exceptions import ValidationError


@dataclass(frozen=True)
class GeoCoordinate:
    """Immutable latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Validate coordinate ranges."""
        if not -90 <= self.latitude <= 90:
            raise ValidationError(f"Latitude out of range: {self.latitude}")
        if not -180 <= self.longitude <= 180:
            raise ValidationError(f"Longitude out of range: {self.longitude}")

    def __str__(self) -> str:
        """String representation of the coordinate."""
        return f"({self.latitude:.6f}, {self.longitude:.6f})"
