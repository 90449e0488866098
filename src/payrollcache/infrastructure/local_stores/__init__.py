"""Local fallback store implementations."""

from payrollcache.infrastructure.local_stores.file import JsonFileLocalStore
from payrollcache.infrastructure.local_stores.memory import InMemoryLocalStore

__all__ = [
    "InMemoryLocalStore",
    "JsonFileLocalStore",
]
