"""Cache contract for channel scores and an in-memory implementation."""

from __future__ import annotations

from dataclasses import dataclass
import time
from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class CacheStore(Protocol):
    """Key/value store with per-entry TTL.

    Values must come back from ``get`` equal to what was passed to ``set``;
    a store that serialises is free to hand back a plain mapping instead.
    """

    def get(self, key: str) -> object | None: ...

    def set(self, key: str, value: object, ttl_seconds: int) -> bool: ...

    def delete(self, key: str) -> bool: ...


@dataclass
class _Entry:
    value: object
    expires_at: float | None


class DictCache:
    def __init__(self, *, clock: Callable[[], float] | None = None) -> None:
        self._store: dict[str, _Entry] = {}
        self._clock = clock or time.monotonic

    def get(self, key: str, default: object | None = None) -> object | None:
        entry = self._store.get(key)
        if entry is None:
            return default
        if entry.expires_at is not None and self._clock() >= entry.expires_at:
            del self._store[key]
            return default
        return entry.value

    def set(self, key: str, value: object, ttl_seconds: int) -> bool:
        ttl = int(ttl_seconds)
        expires_at = self._clock() + ttl if ttl > 0 else None
        self._store[key] = _Entry(value=value, expires_at=expires_at)
        return True

    def delete(self, key: str) -> bool:
        return self._store.pop(key, None) is not None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None

    def __len__(self) -> int:
        return len(self._store)
