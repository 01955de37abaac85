"""Key-value storage kept in a single JSON file."""

import asyncio
import json
import logging
from pathlib import Path

from funfood.domain.exceptions import PersistenceFailure
from funfood.domain.repositories.storage import KeyValueStorage

logger = logging.getLogger("funfood.storage")


class JsonFileStorage(KeyValueStorage):
    """Stores all keys as one JSON object on disk.

    The file is re-read on every access, so changes made by another process
    between a read and a write are picked up. Writes go through a temporary
    file and an atomic rename.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as e:
            raise PersistenceFailure(f"Cannot read {self.path}: {e}") from e
        if not isinstance(data, dict):
            raise PersistenceFailure(f"Unexpected content in {self.path}")
        return data

    def _dump(self, data: dict[str, str]) -> None:
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
            tmp_path.replace(self.path)
        except OSError as e:
            raise PersistenceFailure(f"Cannot write {self.path}: {e}") from e

    async def get(self, key: str) -> str | None:
        data = await asyncio.to_thread(self._load)
        return data.get(key)

    async def set(self, key: str, value: str) -> None:
        def write() -> None:
            data = self._load()
            data[key] = value
            self._dump(data)

        await asyncio.to_thread(write)
        logger.debug(f"Stored key {key!r} in {self.path}")

    async def clear(self) -> None:
        def remove() -> None:
            try:
                self.path.unlink(missing_ok=True)
            except OSError as e:
                raise PersistenceFailure(f"Cannot clear {self.path}: {e}") from e

        await asyncio.to_thread(remove)
