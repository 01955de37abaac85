"""Storage factory."""

from pathlib import Path

from funfood.domain.repositories.storage import KeyValueStorage
from funfood.infrastructure.storage.json_file_storage import JsonFileStorage
from funfood.infrastructure.storage.memory_storage import InMemoryStorage
from funfood.shared.config.settings import StorageSettings


class StorageFactory:
    """Creates key-value storages from settings."""

    @classmethod
    def create(cls, storage_type: str, path: Path | str | None = None) -> KeyValueStorage:
        """Create a storage.

        Args:
            storage_type: ``memory`` or ``file``
            path: File location, required for ``file``

        Returns:
            Storage instance

        Raises:
            ValueError: If the type is not supported or a path is missing
        """
        if storage_type == "memory":
            return InMemoryStorage()
        if storage_type == "file":
            if path is None:
                raise ValueError("File storage requires a path")
            return JsonFileStorage(path)
        raise ValueError(
            f"Unsupported storage type: {storage_type}. "
            f"Supported types: {cls.get_supported_types()}"
        )

    @classmethod
    def from_settings(cls, settings: StorageSettings) -> KeyValueStorage:
        """Create a storage from StorageSettings."""
        return cls.create(settings.type, settings.path)

    @classmethod
    def get_supported_types(cls) -> list[str]:
        return ["memory", "file"]
