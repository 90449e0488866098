"""Domain entities for payrollcache."""

from payrollcache.core.entities.cache_entry import CacheEntry
from payrollcache.core.entities.collection import (
    CollectionConfig,
    CollectionSnapshot,
    DataSource,
)
from payrollcache.core.entities.employee import Employee, EmployeeStatus
from payrollcache.core.entities.query_config import DEFAULT_STALE_TIME, QueryConfig
from payrollcache.core.entities.query_state import QueryState

__all__ = [
    "CacheEntry",
    "QueryConfig",
    "QueryState",
    "DEFAULT_STALE_TIME",
    "CollectionConfig",
    "CollectionSnapshot",
    "DataSource",
    "Employee",
    "EmployeeStatus",
]
