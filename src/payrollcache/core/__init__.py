"""Core domain layer for payrollcache."""

from payrollcache.core.entities import (
    CacheEntry,
    CollectionConfig,
    CollectionSnapshot,
    DataSource,
    Employee,
    EmployeeStatus,
    QueryConfig,
    QueryState,
)
from payrollcache.core.exceptions import (
    PayrollCacheError,
    RemoteStoreError,
    SerializationError,
    SnapshotError,
)
from payrollcache.core.interfaces import (
    ChangeEvent,
    ILocalStore,
    IRemoteStore,
    ISerializer,
    ISubscription,
)
from payrollcache.core.services import (
    CollectionAccessor,
    EmployeeAccessor,
    QueryCache,
    QueryExecutor,
    RealtimeBridge,
    create_query_cache,
)

__all__ = [
    # Entities
    "CacheEntry",
    "QueryConfig",
    "QueryState",
    "CollectionConfig",
    "CollectionSnapshot",
    "DataSource",
    "Employee",
    "EmployeeStatus",
    # Exceptions
    "PayrollCacheError",
    "RemoteStoreError",
    "SnapshotError",
    "SerializationError",
    # Interfaces
    "IRemoteStore",
    "ISubscription",
    "ILocalStore",
    "ISerializer",
    "ChangeEvent",
    # Services
    "QueryCache",
    "create_query_cache",
    "QueryExecutor",
    "RealtimeBridge",
    "CollectionAccessor",
    "EmployeeAccessor",
]
