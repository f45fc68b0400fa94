from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar

import structlog
from cachetools import TTLCache  # type: ignore[import-untyped]

logger = structlog.get_logger()

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 5 * 60
DEFAULT_MAX_ENTRIES = 1024


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value and the timer reading when it was stored."""

    value: T
    stored_at: float


class ResponseCache(Generic[T]):
    """In-memory response cache with a single time-to-live for every entry.

    An entry expires once ``now - stored_at >= ttl``. Expired entries read as
    absent and are evicted by the lookup that observes them.

    Backed by ``cachetools.TTLCache``, which also purges expired entries on
    every write and evicts the least recently used entry once ``maxsize``
    entries are held. Not safe for concurrent mutation from multiple threads.
    """

    def __init__(
        self,
        ttl: float = DEFAULT_TTL_SECONDS,
        *,
        maxsize: int = DEFAULT_MAX_ENTRIES,
        timer: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl
        self._timer = timer
        self._entries: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl, timer=timer)

    @property
    def ttl(self) -> float:
        return self._ttl

    def get(self, key: str) -> T | None:
        """Get value from cache, or None when absent or expired."""
        self._entries.expire()
        entry: CacheEntry[T] | None = self._entries.get(key)
        if entry is None:
            return None
        return entry.value

    def entry(self, key: str) -> CacheEntry[T] | None:
        """Get the stored entry including its timestamp."""
        self._entries.expire()
        return self._entries.get(key)

    def set(self, key: str, value: T) -> None:
        """Store value, replacing any existing entry for key."""
        self._entries[key] = CacheEntry(value=value, stored_at=self._timer())

    def delete(self, key: str) -> None:
        """Delete key from cache."""
        self._entries.pop(key, None)

    def clear(self) -> None:
        """Drop every entry."""
        size = len(self._entries)
        self._entries.clear()
        logger.debug("response_cache_cleared", entries=size)

    def __contains__(self, key: Any) -> bool:
        return self.entry(key) is not None

    def __len__(self) -> int:
        self._entries.expire()
        return len(self._entries)
