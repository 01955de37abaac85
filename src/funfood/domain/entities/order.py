"""Order summary produced at checkout."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class OrderSummary:
    """Price breakdown shown before placing an order."""

    total_items: int
    subtotal: float
    delivery_fee: int
    distance_km: float

    @property
    def total(self) -> float:
        """Subtotal plus delivery fee."""
        return self.subtotal + self.delivery_fee

    def to_dict(self) -> dict[str, Any]:
        """Convert to the API's summary payload."""
        return {
            "totalItems": self.total_items,
            "subtotal": self.subtotal,
            "deliveryFee": self.delivery_fee,
            "total": self.total,
        }
