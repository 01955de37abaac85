"""Cart entities: product snapshots and cart line items."""

import uuid
from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Product:
    """Snapshot of a product as it was when added to the cart.

    Price and discount are copied from the server payload; the discount is a
    percentage and is not range-checked here.
    """

    id: int
    price: float = 0.0
    discount: float = 0.0
    name: str = ""
    restaurant_id: int | None = None

    @property
    def unit_price(self) -> float:
        """Price of one unit after applying the discount."""
        return self.price * (1 - self.discount / 100)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Product":
        """Build a snapshot from an API payload."""
        return cls(
            id=int(data["id"]),
            price=float(data.get("price") or 0),
            discount=float(data.get("discount") or 0),
            name=data.get("name", ""),
            restaurant_id=data.get("restaurantId"),
        )


@dataclass
class CartItem:
    """A line in the cart. One per distinct product."""

    product: Product
    quantity: int = 1
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def product_id(self) -> int:
        """Id of the product this line refers to."""
        return self.product.id

    @property
    def line_total(self) -> float:
        """Discounted unit price times quantity."""
        return self.product.unit_price * self.quantity
