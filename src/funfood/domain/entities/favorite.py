"""Favorite entity kinds."""

from enum import Enum


class FavoriteKind(Enum):
    """Kinds of entities a user can like."""
    RESTAURANT = "restaurant"
    PRODUCT = "product"
