from __future__ import annotations

import json

import pytest

from funfood.domain.exceptions import PersistenceFailure
from funfood.infrastructure.storage import InMemoryStorage, JsonFileStorage, StorageFactory
from funfood.shared.config.settings import StorageSettings

pytest.importorskip("pytest_asyncio")


@pytest.mark.asyncio
async def test_memory_storage_basic_operations() -> None:
    storage = InMemoryStorage({"a": "1"})
    assert await storage.get("a") == "1"
    assert await storage.get("missing") is None

    await storage.set("b", "2")
    await storage.clear()
    assert await storage.get("b") is None


@pytest.mark.asyncio
async def test_json_file_storage_persists_across_instances(tmp_path) -> None:
    path = tmp_path / "nested" / "session.json"
    await JsonFileStorage(path).set("authToken", "abc")
    await JsonFileStorage(path).set("user", '{"id": 1}')

    assert json.loads(path.read_text(encoding="utf-8")) == {"authToken": "abc", "user": '{"id": 1}'}
    assert await JsonFileStorage(path).get("authToken") == "abc"


@pytest.mark.asyncio
async def test_json_file_storage_clear(tmp_path) -> None:
    storage = JsonFileStorage(tmp_path / "session.json")
    await storage.set("authToken", "abc")
    await storage.clear()
    await storage.clear()
    assert await storage.get("authToken") is None


@pytest.mark.asyncio
async def test_json_file_storage_sees_external_changes(tmp_path) -> None:
    path = tmp_path / "session.json"
    storage = JsonFileStorage(path)
    await storage.set("authToken", "abc")
    path.unlink()
    assert await storage.get("authToken") is None


@pytest.mark.asyncio
async def test_json_file_storage_corrupt_file(tmp_path) -> None:
    path = tmp_path / "session.json"
    path.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(PersistenceFailure):
        await JsonFileStorage(path).get("authToken")


@pytest.mark.asyncio
async def test_json_file_storage_unreadable_path(tmp_path) -> None:
    storage = JsonFileStorage(tmp_path)
    with pytest.raises(PersistenceFailure):
        await storage.set("authToken", "abc")


def test_factory_creates_from_settings(tmp_path) -> None:
    assert isinstance(StorageFactory.from_settings(StorageSettings(type="memory")), InMemoryStorage)
    storage = StorageFactory.from_settings(StorageSettings(type="file", path=tmp_path / "s.json"))
    assert isinstance(storage, JsonFileStorage)


def test_factory_rejects_unknown_type() -> None:
    with pytest.raises(ValueError):
        StorageFactory.create("sqlite")
    with pytest.raises(ValueError):
        StorageFactory.create("file")
