"""
In-memory implementation of the guard cache.

Useful for testing and single-process applications.
"""

import time
from collections.abc import Callable
from threading import RLock
from typing import Any

from routeguard.domain.interfaces import GuardCacheInterface


class InMemoryGuardCache(GuardCacheInterface):
    """
    Simple in-process TTL cache.

    Expired entries are dropped when read, and swept on writes so keys that
    are never read again do not accumulate.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """
        Args:
            clock: Time source in seconds (injectable for tests)
        """
        self._clock = clock
        self._data: dict[str, tuple[Any, float | None]] = {}
        self._lock = RLock()

    def get(self, key: str) -> Any | None:
        now = self._clock()
        with self._lock:
            entry = self._data.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if expires_at is not None and now >= expires_at:
                self._data.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        now = self._clock()
        with self._lock:
            self._prune_expired(now)
            expires_at = now + ttl if ttl is not None else None
            self._data[key] = (value, expires_at)

    def invalidate(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)

    def _prune_expired(self, now: float) -> None:
        expired = [
            k
            for k, (_value, expires_at) in self._data.items()
            if expires_at is not None and now >= expires_at
        ]
        for k in expired:
            self._data.pop(k, None)
