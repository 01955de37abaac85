"""REST API adapters."""

from funfood.infrastructure.api.client import ApiClient
from funfood.infrastructure.api.favorite_client import HttpFavoriteService
from funfood.infrastructure.api.list_fetcher import HttpListFetcher

__all__ = [
    "ApiClient",
    "HttpFavoriteService",
    "HttpListFetcher",
]
