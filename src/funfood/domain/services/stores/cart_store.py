"""Cart store: line items and derived totals."""

import logging
import math

from funfood.domain.entities.cart import CartItem, Product
from funfood.domain.exceptions import ValidationError

logger = logging.getLogger("funfood.cart")


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class CartStore:
    """In-memory cart holding at most one line per product.

    All operations are synchronous and make no network calls.
    """

    def __init__(self) -> None:
        self._items: list[CartItem] = []

    @property
    def items(self) -> tuple[CartItem, ...]:
        """Snapshot of the current lines in insertion order."""
        return tuple(self._items)

    @property
    def distinct_item_count(self) -> int:
        """Number of lines, regardless of quantity."""
        return len(self._items)

    @property
    def is_empty(self) -> bool:
        """Check if the cart has no lines."""
        return not self._items

    def find_by_product(self, product_id: int) -> CartItem | None:
        """Find the line for a product, if any."""
        return next((item for item in self._items if item.product_id == product_id), None)

    def _find(self, cart_item_id: str) -> CartItem | None:
        return next((item for item in self._items if item.id == cart_item_id), None)

    def add_item(self, product: Product, quantity: int = 1) -> CartItem:
        """Add a product, merging into its existing line.

        Args:
            product: Product snapshot
            quantity: Units to add, must be a positive integer

        Returns:
            The created or updated line

        Raises:
            ValidationError: If quantity is not a positive integer
        """
        if not _is_int(quantity) or quantity < 1:
            raise ValidationError(f"Quantity must be a positive integer, got {quantity!r}")

        existing = self.find_by_product(product.id)
        if existing:
            existing.quantity += quantity
            logger.debug(f"Cart: product {product.id} quantity -> {existing.quantity}")
            return existing

        item = CartItem(product=product, quantity=quantity)
        self._items.append(item)
        logger.debug(f"Cart: added product {product.id} as line {item.id}")
        return item

    def remove_item(self, cart_item_id: str) -> None:
        """Remove a line. Unknown ids are ignored."""
        self._items = [item for item in self._items if item.id != cart_item_id]

    def update_quantity(self, cart_item_id: str, quantity: int) -> None:
        """Set a line's quantity; zero removes the line.

        Raises:
            ValidationError: If quantity is negative or not an integer
        """
        if not _is_int(quantity) or quantity < 0:
            raise ValidationError(f"Quantity must be a non-negative integer, got {quantity!r}")

        if quantity == 0:
            self.remove_item(cart_item_id)
            return

        item = self._find(cart_item_id)
        if item:
            item.quantity = quantity

    def clear_cart(self) -> None:
        """Remove every line."""
        self._items = []

    def get_total_price(self) -> float:
        """Sum of discounted line totals, unrounded.

        Uses an exact float summation so the result does not depend on the
        order in which lines were added.
        """
        return math.fsum(item.line_total for item in self._items)

    def get_item_count(self) -> int:
        """Total number of units across all lines."""
        return sum(item.quantity for item in self._items)
