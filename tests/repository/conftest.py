from __future__ import annotations

import pytest

import repository.blob_repository as blob_repository
import repository.index_repository as index_repository


class FakeRedis:
    """In-memory stand-in for the redis.asyncio calls the repositories make."""

    def __init__(self) -> None:
        self.values: dict[str, bytes] = {}
        self.ttls: dict[str, int] = {}
        self.expire_calls: list[tuple[str, int]] = []

    async def set(self, key: str, value: bytes, ex: int | None = None) -> bool:
        self.values[key] = value
        if ex is not None:
            self.ttls[key] = ex
        return True

    async def get(self, key: str) -> bytes | None:
        return self.values.get(key)

    async def expire(self, key: str, seconds: int) -> bool:
        self.expire_calls.append((key, seconds))
        if key not in self.values:
            return False
        self.ttls[key] = seconds
        return True

    async def delete(self, key: str) -> int:
        self.ttls.pop(key, None)
        return 1 if self.values.pop(key, None) is not None else 0


@pytest.fixture
def redis(monkeypatch: pytest.MonkeyPatch) -> FakeRedis:
    fake = FakeRedis()

    async def _get_redis() -> FakeRedis:
        return fake

    monkeypatch.setattr(index_repository, "get_redis", _get_redis)
    monkeypatch.setattr(blob_repository, "get_redis", _get_redis)
    return fake
