"""Shared fakes for the store tests."""

from __future__ import annotations

import asyncio

import pytest

from funfood.domain.entities.favorite import FavoriteKind
from funfood.domain.entities.user import User
from funfood.domain.exceptions import PersistenceFailure, RemoteFailure
from funfood.domain.repositories.favorite_service import FavoriteService
from funfood.infrastructure.storage.memory_storage import InMemoryStorage


class FlakyStorage(InMemoryStorage):
    """In-memory storage whose operations can be made to fail."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        super().__init__(initial)
        self.fail_get = False
        self.fail_set_keys: set[str] = set()
        self.fail_clear = False
        self.gate: asyncio.Event | None = None

    @property
    def data(self) -> dict[str, str]:
        return dict(self._data)

    async def get(self, key: str) -> str | None:
        if self.gate is not None:
            await self.gate.wait()
        if self.fail_get:
            raise PersistenceFailure("disk unavailable")
        return await super().get(key)

    async def set(self, key: str, value: str) -> None:
        if key in self.fail_set_keys:
            raise PersistenceFailure(f"cannot write {key}")
        await super().set(key, value)

    async def clear(self) -> None:
        if self.fail_clear:
            raise PersistenceFailure("cannot clear")
        await super().clear()


class FakeFavoriteService(FavoriteService):
    """Favorite service with scripted responses."""

    def __init__(self) -> None:
        self.remote: dict[FavoriteKind, set[int]] = {kind: set() for kind in FavoriteKind}
        self.fail_fetch = False
        self.fail_toggle_ids: set[int] = set()
        self.toggle_calls: list[tuple[FavoriteKind, int]] = []
        self.toggle_gate: asyncio.Event | None = None

    async def get_favorite_ids(self, kind: FavoriteKind) -> set[int]:
        if self.fail_fetch:
            raise RemoteFailure("server down", status_code=503)
        return set(self.remote[kind])

    async def toggle_favorite(self, kind: FavoriteKind, entity_id: int) -> None:
        self.toggle_calls.append((kind, entity_id))
        if self.toggle_gate is not None:
            await self.toggle_gate.wait()
        if entity_id in self.fail_toggle_ids:
            raise RemoteFailure("toggle rejected", status_code=500)
        self.remote[kind] ^= {entity_id}


@pytest.fixture
def storage() -> FlakyStorage:
    return FlakyStorage()


@pytest.fixture
def favorite_service() -> FakeFavoriteService:
    return FakeFavoriteService()


@pytest.fixture
def user() -> User:
    return User(id=7, name="Lan", email="lan@example.com", phone="0912345678")
