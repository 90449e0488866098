"""Remote store implementations."""

from payrollcache.infrastructure.remote_stores.memory import (
    InMemoryRemoteStore,
    InMemorySubscription,
)

__all__ = [
    "InMemoryRemoteStore",
    "InMemorySubscription",
]
