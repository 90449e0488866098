"""Cache entry entity."""

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any


@dataclass(frozen=True)
class CacheEntry:
    """Immutable cache entry value object.

    Represents a cached query result with the instant it was fetched
    and the instant it stops being fresh. Entries are disposable: they
    can always be rebuilt from the source of truth.
    """

    key: str
    value: Any
    fetched_at: datetime
    expires_at: datetime

    @property
    def stale_time(self) -> timedelta:
        """Return the stale time this entry was stored with."""
        return self.expires_at - self.fetched_at

    def is_fresh(self, now: datetime) -> bool:
        """Check if the entry is still fresh at the given instant.

        Args:
            now: The instant to compare against.

        Returns:
            True if ``now`` is strictly before ``expires_at``.
        """
        return now < self.expires_at

    @classmethod
    def create(
        cls,
        key: str,
        value: Any,
        stale_time: timedelta,
        now: datetime,
    ) -> "CacheEntry":
        """Factory method to create a new cache entry.

        Args:
            key: The query key.
            value: The value to cache.
            stale_time: How long the value stays fresh.
            now: The fetch instant.

        Returns:
            A new CacheEntry instance.
        """
        return cls(
            key=key,
            value=value,
            fetched_at=now,
            expires_at=now + stale_time,
        )
