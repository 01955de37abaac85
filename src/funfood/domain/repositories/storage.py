"""Key-value storage interface used for session persistence."""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """Repository interface for string key-value persistence.

    Implementations raise ``PersistenceFailure`` when the underlying medium
    cannot be read or written.
    """

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Read a value.

        Args:
            key: Storage key

        Returns:
            Stored string, or None if the key is absent
        """
        pass

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Write a value, replacing any previous one."""
        pass

    @abstractmethod
    async def clear(self) -> None:
        """Remove every stored key."""
        pass
