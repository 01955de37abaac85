"""In-memory key-value storage."""

from funfood.domain.repositories.storage import KeyValueStorage


class InMemoryStorage(KeyValueStorage):
    """Process-local storage. Contents are lost on exit."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        self._data[key] = value

    async def clear(self) -> None:
        self._data.clear()
