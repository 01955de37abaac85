"""Client-side state stores."""

from funfood.domain.services.stores.cart_store import CartStore
from funfood.domain.services.stores.favorite_store import FavoriteStore
from funfood.domain.services.stores.filters import FilterState
from funfood.domain.services.stores.list_query import (
    FetchPage,
    ListQueryCoordinator,
    QueryStatus,
)
from funfood.domain.services.stores.optimistic import optimistic_update
from funfood.domain.services.stores.pagination import Pagination
from funfood.domain.services.stores.session_store import SessionStore

__all__ = [
    "CartStore",
    "FavoriteStore",
    "FilterState",
    "FetchPage",
    "ListQueryCoordinator",
    "QueryStatus",
    "optimistic_update",
    "Pagination",
    "SessionStore",
]
