"""Infrastructure layer implementations for payrollcache."""

from payrollcache.infrastructure.local_stores import (
    InMemoryLocalStore,
    JsonFileLocalStore,
)
from payrollcache.infrastructure.remote_stores import InMemoryRemoteStore
from payrollcache.infrastructure.serializers import JsonSerializer

__all__ = [
    "InMemoryLocalStore",
    "JsonFileLocalStore",
    "InMemoryRemoteStore",
    "JsonSerializer",
]
