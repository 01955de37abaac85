"""Key-value storage implementations."""

from funfood.infrastructure.storage.factory import StorageFactory
from funfood.infrastructure.storage.json_file_storage import JsonFileStorage
from funfood.infrastructure.storage.memory_storage import InMemoryStorage

__all__ = [
    "StorageFactory",
    "JsonFileStorage",
    "InMemoryStorage",
]
