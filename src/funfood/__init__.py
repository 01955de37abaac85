"""
FunFood - Food Ordering Client Core

Client-side state for a food ordering app: the in-memory mirrors of server
state that screens read and mutate.

This package provides:
- Cart aggregation and discounted price totals
- Favorites with optimistic toggling and rollback
- Paginated, filtered list queries with stale-response protection
- Session persistence and restoration
- Distance-based delivery fee calculation
"""

__version__ = "1.0.0"
__license__ = "MIT"

from funfood.domain.entities.cart import CartItem, Product
from funfood.domain.entities.favorite import FavoriteKind
from funfood.domain.entities.user import User, UserRole
from funfood.domain.services.delivery_fee import DistanceFeeCalculator
from funfood.domain.services.stores import (
    CartStore,
    FavoriteStore,
    ListQueryCoordinator,
    SessionStore,
)
from funfood.domain.value_objects.geo_coordinate import GeoCoordinate

__all__ = [
    "CartItem",
    "Product",
    "FavoriteKind",
    "User",
    "UserRole",
    "DistanceFeeCalculator",
    "CartStore",
    "FavoriteStore",
    "ListQueryCoordinator",
    "SessionStore",
    "GeoCoordinate",
]
