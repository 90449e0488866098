"""Query cache - keyed TTL cache shared by query executors."""

import asyncio
import logging
from collections.abc import Callable, MutableMapping
from datetime import datetime, timedelta, timezone
from typing import Any

from cachetools import LRUCache  # type: ignore[import-untyped]

from payrollcache.core.entities.cache_entry import CacheEntry
from payrollcache.core.entities.query_config import DEFAULT_STALE_TIME

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    """Return the current UTC time."""
    return datetime.now(timezone.utc)


class QueryCache:
    """Keyed cache mapping query keys to CacheEntry objects.

    Staleness is decided by comparing the clock with ``expires_at`` at
    read time. Entries are never swept in the background; they are only
    overwritten or removed by invalidation. With ``maxsize`` set, the
    least recently used key is dropped once the bound is reached.

    The cache also keeps the in-flight fetch registry used by executors
    to coalesce overlapping fetches for the same key.

    One instance is meant to be shared by reference between every
    executor of an application scope. Use ``create_query_cache`` to
    get an isolated one.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        maxsize: int | None = None,
    ) -> None:
        """Initialize the query cache.

        Args:
            clock: Callable returning the current time. Defaults to UTC now.
            maxsize: Optional bound on the number of keys.
        """
        self._clock = clock or utc_now
        self._maxsize = maxsize
        self._entries: MutableMapping[str, CacheEntry]
        if maxsize is None:
            self._entries = {}
        else:
            self._entries = LRUCache(maxsize=maxsize)
        self._pending: dict[str, asyncio.Future[Any]] = {}

        # Statistics
        self._hits = 0
        self._misses = 0

    def now(self) -> datetime:
        """Return the current time according to the cache clock."""
        return self._clock()

    @property
    def maxsize(self) -> int | None:
        """Return the key bound, or None when unbounded."""
        return self._maxsize

    @property
    def stats(self) -> dict[str, int]:
        """Get cache statistics.

        Returns:
            Dictionary with hits, misses, and total fresh lookups.
        """
        return {
            "hits": self._hits,
            "misses": self._misses,
            "total": self._hits + self._misses,
        }

    def get(self, key: str) -> CacheEntry | None:
        """Return the entry for a key, fresh or not.

        Args:
            key: The query key.

        Returns:
            The cache entry, or None if absent.
        """
        return self._entries.get(key)

    def get_fresh(self, key: str) -> CacheEntry | None:
        """Return the entry for a key only if it is still fresh.

        Counts a hit or a miss.

        Args:
            key: The query key.

        Returns:
            The fresh cache entry, or None on miss or staleness.
        """
        entry = self._entries.get(key)
        if entry is not None and entry.is_fresh(self.now()):
            self._hits += 1
            logger.debug("Cache hit for %r", key)
            return entry

        self._misses += 1
        logger.debug("Cache miss for %r", key)
        return None

    def set(
        self,
        key: str,
        value: Any,
        stale_time: timedelta | None = None,
    ) -> CacheEntry:
        """Store a value, replacing any existing entry.

        Args:
            key: The query key.
            value: The value to cache.
            stale_time: How long the value stays fresh.

        Returns:
            The created CacheEntry.
        """
        entry = CacheEntry.create(
            key=key,
            value=value,
            stale_time=stale_time if stale_time is not None else DEFAULT_STALE_TIME,
            now=self.now(),
        )
        self._entries[key] = entry
        return entry

    def invalidate(self, key: str) -> None:
        """Remove the entry and in-flight marker for a key, if present.

        Args:
            key: The query key.
        """
        self._entries.pop(key, None)
        self._pending.pop(key, None)

    def invalidate_all(self) -> None:
        """Remove every entry and in-flight marker."""
        self._entries.clear()
        self._pending.clear()

    def pending(self, key: str) -> asyncio.Future[Any] | None:
        """Return the in-flight fetch for a key, if any."""
        return self._pending.get(key)

    def track(self, key: str, future: asyncio.Future[Any]) -> None:
        """Register the in-flight fetch for a key."""
        self._pending[key] = future

    def untrack(self, key: str, future: asyncio.Future[Any]) -> bool:
        """Drop the in-flight marker if it still refers to ``future``.

        Args:
            key: The query key.
            future: The fetch that completed.

        Returns:
            True if ``future`` was the registered fetch for the key.
        """
        if self._pending.get(key) is not future:
            return False
        del self._pending[key]
        return True

    def keys(self) -> list[str]:
        """Return the cached keys."""
        return list(self._entries.keys())

    def __contains__(self, key: object) -> bool:
        """Check if a key has an entry, fresh or not."""
        return key in self._entries

    def __len__(self) -> int:
        """Return the number of entries."""
        return len(self._entries)


def create_query_cache(
    clock: Clock | None = None,
    maxsize: int | None = None,
) -> QueryCache:
    """Create an isolated query cache.

    Args:
        clock: Optional clock override.
        maxsize: Optional bound on the number of keys.

    Returns:
        A new, empty QueryCache.
    """
    return QueryCache(clock=clock, maxsize=maxsize)
