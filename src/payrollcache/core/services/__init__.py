"""Domain services for payrollcache."""

from payrollcache.core.services.collection_accessor import (
    CollectionAccessor,
    EmployeeAccessor,
    employees_config,
)
from payrollcache.core.services.query_cache import QueryCache, create_query_cache
from payrollcache.core.services.query_executor import QueryExecutor
from payrollcache.core.services.realtime_bridge import RealtimeBridge

__all__ = [
    "QueryCache",
    "create_query_cache",
    "QueryExecutor",
    "RealtimeBridge",
    # Domain accessors
    "CollectionAccessor",
    "EmployeeAccessor",
    "employees_config",
]
