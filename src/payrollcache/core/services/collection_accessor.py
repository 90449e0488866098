"""Collection accessors - entity-specific reads and writes over the cache."""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any, Generic, TypeVar, cast

from payrollcache.core.entities.collection import (
    CollectionConfig,
    CollectionSnapshot,
    DataSource,
)
from payrollcache.core.entities.employee import Employee, utc_timestamp
from payrollcache.core.entities.query_config import QueryConfig
from payrollcache.core.entities.query_state import QueryState
from payrollcache.core.exceptions import SnapshotError
from payrollcache.core.interfaces.local_store import ILocalStore
from payrollcache.core.interfaces.remote_store import IRemoteStore, Row
from payrollcache.core.interfaces.serializer import ISerializer
from payrollcache.core.services.query_cache import QueryCache
from payrollcache.core.services.query_executor import QueryExecutor
from payrollcache.core.services.realtime_bridge import RealtimeBridge
from payrollcache.infrastructure.serializers.json import JsonSerializer
from payrollcache.sample_data import SAMPLE_EMPLOYEES
from payrollcache.utils.ids import new_id

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _identity(value: Any) -> Any:
    return value


class CollectionAccessor(Generic[T]):
    """Reads and writes one entity collection.

    Reads go through a QueryExecutor whose fetch function prefers the
    remote store and falls back to the local snapshot when the remote
    store is missing or failing. Writes go to the remote store when
    one is configured, otherwise to the local snapshot, and are followed
    by a cache invalidation and a forced refetch.

    Write failures are logged and re-raised. Read failures of the remote
    store are logged and answered from the fallback snapshot, tagged
    with ``DataSource.FALLBACK``.
    """

    def __init__(
        self,
        cache: QueryCache,
        local_store: ILocalStore,
        config: CollectionConfig,
        remote_store: IRemoteStore | None = None,
        sample_rows: Sequence[Row] = (),
        query_config: QueryConfig | None = None,
        serializer: ISerializer | None = None,
        id_factory: Callable[[], str] = new_id,
        from_row: Callable[[Row], T] | None = None,
        to_row: Callable[[T], Row] | None = None,
    ) -> None:
        """Initialize the accessor.

        Args:
            cache: The shared query cache.
            local_store: The local fallback store.
            config: Collection configuration.
            remote_store: The remote store, or None if not configured.
            sample_rows: Rows seeding an empty fallback snapshot.
            query_config: Optional query configuration for the executor.
            serializer: Snapshot serializer. Defaults to JSON.
            id_factory: Generates identifiers for new records.
            from_row: Converts a store row to an entity.
            to_row: Converts an entity to a store row.
        """
        self._local_store = local_store
        self._config = config
        self._remote_store = remote_store
        self._sample_rows = tuple(sample_rows)
        self._serializer = serializer or JsonSerializer()
        self._id_factory = id_factory
        self._from_row = cast(Callable[[Row], T], from_row or _identity)
        self._to_row = cast(Callable[[T], Row], to_row or _identity)

        self._executor = QueryExecutor(
            cache,
            config.query_key,
            self._fetch_snapshot,
            query_config,
        )
        self._bridge = RealtimeBridge(remote_store, config.table, self.refetch)

    @property
    def config(self) -> CollectionConfig:
        """Get the collection configuration."""
        return self._config

    @property
    def executor(self) -> QueryExecutor:
        """Get the underlying query executor."""
        return self._executor

    @property
    def snapshot(self) -> CollectionSnapshot[T] | None:
        """Get the last loaded snapshot, if any."""
        return self._executor.data

    @property
    def items(self) -> list[T]:
        """Get the last loaded items (empty before the first load)."""
        snapshot = self.snapshot
        return list(snapshot.items) if snapshot is not None else []

    @property
    def source(self) -> DataSource | None:
        """Get where the last loaded items came from."""
        snapshot = self.snapshot
        return snapshot.source if snapshot is not None else None

    @property
    def is_loading(self) -> bool:
        """Check if a fetch cycle is in progress."""
        return self._executor.is_loading

    @property
    def error(self) -> Exception | None:
        """Get the error of the last fetch cycle."""
        return self._executor.error

    @property
    def state(self) -> QueryState:
        """Get the executor state."""
        return self._executor.state

    async def get(self) -> list[T]:
        """Return the items, from cache when fresh."""
        await self._executor.fetch()
        return self.items

    async def refetch(self) -> QueryState:
        """Reload the items, bypassing the cache."""
        return await self._executor.refetch()

    def invalidate_cache(self) -> None:
        """Drop the cached items."""
        self._executor.invalidate_cache()

    async def add(self, entity: T) -> T:
        """Create a record.

        An identifier is generated when the entity has none.

        Args:
            entity: The new entity.

        Returns:
            The entity as written, including its identifier.
        """
        id_field = self._config.id_field
        row = self.prepare_new_row(dict(self._to_row(entity)))
        if not row.get(id_field):
            row[id_field] = self._id_factory()

        try:
            if self._remote_store is not None:
                await self._remote_store.insert(self._config.table, [row])
            else:
                rows = self._read_rows()
                rows.append(row)
                self._write_rows(rows)
        except Exception:
            logger.exception("Error adding record to %r", self._config.table)
            raise

        await self._refresh()
        return self._from_row(row)

    async def update(self, record_id: str, changes: Mapping[str, Any]) -> None:
        """Apply changes to the record with the given identifier.

        Args:
            record_id: The record identifier.
            changes: Column values to set.
        """
        id_field = self._config.id_field
        values = dict(changes)

        try:
            if self._remote_store is not None:
                await self._remote_store.update(
                    self._config.table, values, filters={id_field: record_id}
                )
            else:
                rows = [
                    {**row, **values} if str(row.get(id_field)) == record_id else row
                    for row in self._read_rows()
                ]
                self._write_rows(rows)
        except Exception:
            logger.exception("Error updating record %r in %r", record_id, self._config.table)
            raise

        await self._refresh()

    async def delete(self, record_id: str) -> None:
        """Delete the record with the given identifier.

        Args:
            record_id: The record identifier.
        """
        id_field = self._config.id_field

        try:
            if self._remote_store is not None:
                await self._remote_store.delete(
                    self._config.table, filters={id_field: record_id}
                )
            else:
                rows = [
                    row for row in self._read_rows()
                    if str(row.get(id_field)) != record_id
                ]
                self._write_rows(rows)
        except Exception:
            logger.exception("Error deleting record %r from %r", record_id, self._config.table)
            raise

        await self._refresh()

    def prepare_new_row(self, row: Row) -> Row:
        """Fill in defaults on a row about to be inserted.

        Subclasses override this to stamp entity-specific columns.
        """
        return row

    def subscribe(self) -> bool:
        """Start refreshing on remote change events.

        Returns:
            True if a subscription is active.
        """
        return self._bridge.subscribe()

    def unsubscribe(self) -> None:
        """Stop refreshing on remote change events."""
        self._bridge.unsubscribe()

    @property
    def is_subscribed(self) -> bool:
        """Check if change events are being received."""
        return self._bridge.is_subscribed

    async def drain(self) -> None:
        """Wait for refreshes triggered by change events."""
        await self._bridge.drain()

    async def start(self) -> QueryState:
        """Subscribe to changes and run the initial load."""
        self.subscribe()
        return await self._executor.start()

    async def stop(self) -> None:
        """Unsubscribe and stop the refetch timer."""
        self.unsubscribe()
        await self._executor.stop()

    async def _refresh(self) -> None:
        self.invalidate_cache()
        await self.refetch()

    async def _fetch_snapshot(self) -> CollectionSnapshot[T]:
        """Fetch function handed to the executor."""
        if self._remote_store is None:
            return self._fallback_snapshot()

        try:
            rows = await self._remote_store.select(
                self._config.table, order_by=self._config.order_by
            )
        except Exception:
            logger.warning(
                "Error fetching %r from remote store, using fallback snapshot",
                self._config.table,
                exc_info=True,
            )
            return self._fallback_snapshot()

        if self._config.mirror_to_fallback:
            self._mirror(rows)

        return CollectionSnapshot(
            items=[self._from_row(row) for row in rows],
            source=DataSource.REMOTE,
        )

    def _fallback_snapshot(self) -> CollectionSnapshot[T]:
        return CollectionSnapshot(
            items=[self._from_row(row) for row in self._read_rows()],
            source=DataSource.FALLBACK,
        )

    def _read_rows(self) -> list[Row]:
        key = cast(str, self._config.fallback_key)
        raw = self._local_store.get_item(key)
        if raw is None:
            rows = [dict(row) for row in self._sample_rows]
            logger.info("Seeding fallback snapshot %r with %d sample rows", key, len(rows))
            self._write_rows(rows)
            return rows

        rows = self._serializer.deserialize(raw)
        if not isinstance(rows, list):
            raise SnapshotError(f"Fallback snapshot {key!r} is not a list of rows")
        return rows

    def _write_rows(self, rows: list[Row]) -> None:
        key = cast(str, self._config.fallback_key)
        self._local_store.set_item(key, self._serializer.serialize(rows))

    def _mirror(self, rows: list[Row]) -> None:
        try:
            self._write_rows(rows)
        except Exception:
            logger.warning(
                "Could not mirror %r to the fallback snapshot",
                self._config.table,
                exc_info=True,
            )

    async def __aenter__(self) -> "CollectionAccessor[T]":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.stop()


def employees_config(**overrides: Any) -> CollectionConfig:
    """Return the collection configuration for the employees table."""
    settings: dict[str, Any] = {
        "query_key": "employees",
        "table": "employees",
        "order_by": "name",
    }
    settings.update(overrides)
    return CollectionConfig(**settings)


class EmployeeAccessor(CollectionAccessor[Employee]):
    """Accessor for employee records.

    Rows are ordered by name, converted to Employee objects, and new
    records are stamped with ``created_at``. An empty fallback store is
    seeded with SAMPLE_EMPLOYEES.
    """

    def __init__(
        self,
        cache: QueryCache,
        local_store: ILocalStore,
        remote_store: IRemoteStore | None = None,
        config: CollectionConfig | None = None,
        query_config: QueryConfig | None = None,
        sample_rows: Sequence[Row] = SAMPLE_EMPLOYEES,
        serializer: ISerializer | None = None,
        id_factory: Callable[[], str] = new_id,
    ) -> None:
        super().__init__(
            cache,
            local_store,
            config or employees_config(),
            remote_store=remote_store,
            sample_rows=sample_rows,
            query_config=query_config,
            serializer=serializer,
            id_factory=id_factory,
            from_row=Employee.from_row,
            to_row=Employee.to_row,
        )

    @property
    def employees(self) -> list[Employee]:
        """Get the last loaded employees."""
        return self.items

    def prepare_new_row(self, row: Row) -> Row:
        if not row.get("created_at"):
            row["created_at"] = utc_timestamp()
        return row
