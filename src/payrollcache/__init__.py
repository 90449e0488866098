"""payrollcache - data-access and caching layer for payroll records.

A cache-aside layer for payroll administration data: a keyed TTL cache,
query executors with loading/error state and periodic refetch, and
collection accessors that read from a remote store, fall back to a
local persisted snapshot, and refresh on realtime change events.

Example:
    from payrollcache import (
        EmployeeAccessor,
        Employee,
        InMemoryLocalStore,
        create_query_cache,
    )

    cache = create_query_cache()
    employees = EmployeeAccessor(
        cache,
        local_store=InMemoryLocalStore(),
        remote_store=remote,  # any IRemoteStore, or None for offline use
    )

    async with employees:  # initial load + change-feed subscription
        print(employees.source, employees.employees)
        await employees.add(Employee(name="Sara", base_salary=4200))

Degraded mode is visible on every read:
    if employees.source is DataSource.FALLBACK:
        warn_user("showing locally saved data")
"""

from payrollcache.core.entities import (
    DEFAULT_STALE_TIME,
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
    employees_config,
)
from payrollcache.infrastructure import (
    InMemoryLocalStore,
    InMemoryRemoteStore,
    JsonFileLocalStore,
    JsonSerializer,
)
from payrollcache.sample_data import SAMPLE_EMPLOYEES

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core entities
    "CacheEntry",
    "QueryConfig",
    "QueryState",
    "DEFAULT_STALE_TIME",
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
    # Core interfaces
    "IRemoteStore",
    "ISubscription",
    "ILocalStore",
    "ISerializer",
    "ChangeEvent",
    # Core services
    "QueryCache",
    "create_query_cache",
    "QueryExecutor",
    "RealtimeBridge",
    "CollectionAccessor",
    "EmployeeAccessor",
    "employees_config",
    # Infrastructure implementations
    "InMemoryLocalStore",
    "JsonFileLocalStore",
    "InMemoryRemoteStore",
    "JsonSerializer",
    # Sample data
    "SAMPLE_EMPLOYEES",
]
