"""Simple in-memory TTL cache. No Redis needed for MVP.

Named entries are registered up front with their own TTL and are reset
(never removed) on clear. Anything else stored here (head-to-head lookups,
article searches) is a dynamic entry, created on first store and deleted
outright on clear.

Note: Each uvicorn worker has its own cache instance. With --workers 2,
data may be fetched twice (once per worker). Two requests racing on the
same cold key will both fetch and the last write wins.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

DEFAULT_TTL_SECONDS = 300


@dataclass
class CacheEntry:
    ttl: float
    value: Any | None = None
    stored_at: float | None = None

    def is_valid(self, now: float) -> bool:
        if self.value is None or self.stored_at is None:
            return False
        return now - self.stored_at < self.ttl

    def reset(self) -> None:
        self.value = None
        self.stored_at = None


class TTLCache:
    def __init__(
        self,
        default_ttl: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.default_ttl = default_ttl
        self._clock = clock
        self._named: dict[str, CacheEntry] = {}
        self._dynamic: dict[str, CacheEntry] = {}

    def register(self, key: str, ttl: float) -> None:
        """Pre-create an empty named entry with its own TTL."""
        self._dynamic.pop(key, None)
        self._named[key] = CacheEntry(ttl=ttl)

    def _entry(self, key: str) -> CacheEntry | None:
        return self._named.get(key) or self._dynamic.get(key)

    def is_valid(self, key: str) -> bool:
        entry = self._entry(key)
        return entry is not None and entry.is_valid(self._clock())

    def get(self, key: str) -> Any | None:
        entry = self._entry(key)
        if entry is not None and entry.is_valid(self._clock()):
            return entry.value
        return None

    def set(self, key: str, value: Any, ttl: float | None = None) -> None:
        entry = self._entry(key)
        if entry is None:
            entry = CacheEntry(ttl=ttl if ttl is not None else self.default_ttl)
            self._dynamic[key] = entry
        elif ttl is not None:
            entry.ttl = ttl
        entry.value = value
        entry.stored_at = self._clock()

    def clear(self, key: str | None = None) -> None:
        """Reset one entry, or every entry when no key is given."""
        if key is not None:
            if key in self._named:
                self._named[key].reset()
            self._dynamic.pop(key, None)
            return

        for entry in self._named.values():
            entry.reset()
        self._dynamic.clear()

    def snapshot(self) -> dict[str, bool]:
        """Validity of every named entry, for health reporting."""
        now = self._clock()
        return {key: entry.is_valid(now) for key, entry in self._named.items()}

    @property
    def dynamic_keys(self) -> list[str]:
        return list(self._dynamic)
