"""In-memory remote store implementation."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from payrollcache.core.exceptions import RemoteStoreError
from payrollcache.core.interfaces.remote_store import ChangeCallback, ChangeEvent, Row


@dataclass(eq=False)
class _Listener:
    table: str
    events: frozenset[ChangeEvent]
    callback: ChangeCallback
    active: bool = True


@dataclass
class InMemorySubscription:
    """Subscription handle returned by InMemoryRemoteStore."""

    store: "InMemoryRemoteStore"
    listener: _Listener = field(repr=False)

    @property
    def active(self) -> bool:
        return self.listener.active

    def unsubscribe(self) -> None:
        self.store._remove_listener(self.listener)


class InMemoryRemoteStore:
    """Remote store kept in process memory.

    Implements the full IRemoteStore surface, including change
    notifications, which are delivered synchronously to subscribers
    after each write. Setting ``online`` to False makes every call
    raise RemoteStoreError, which is how an outage is simulated.
    """

    def __init__(self, tables: dict[str, list[Row]] | None = None) -> None:
        """Initialize the store.

        Args:
            tables: Optional initial rows per table.
        """
        self._tables: dict[str, list[Row]] = {
            name: [dict(row) for row in rows] for name, rows in (tables or {}).items()
        }
        self._listeners: list[_Listener] = []
        self.online = True

    async def select(
        self,
        table: str,
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
    ) -> list[Row]:
        self._check_online(table)
        rows = [dict(row) for row in self._rows(table) if _matches(row, filters)]
        if order_by is not None:
            rows.sort(key=lambda row: (row.get(order_by) is None, row.get(order_by)))
        return rows

    async def insert(self, table: str, rows: list[Row]) -> list[Row]:
        self._check_online(table)
        inserted = [dict(row) for row in rows]
        self._tables.setdefault(table, []).extend(inserted)
        for row in inserted:
            self._notify(table, ChangeEvent.INSERT, row)
        return [dict(row) for row in inserted]

    async def update(
        self,
        table: str,
        values: Row,
        *,
        filters: dict[str, Any],
    ) -> list[Row]:
        self._check_online(table)
        updated = []
        for row in self._rows(table):
            if _matches(row, filters):
                row.update(values)
                updated.append(dict(row))
        for row in updated:
            self._notify(table, ChangeEvent.UPDATE, row)
        return updated

    async def delete(self, table: str, *, filters: dict[str, Any]) -> int:
        self._check_online(table)
        rows = self._rows(table)
        removed = [row for row in rows if _matches(row, filters)]
        self._tables[table] = [row for row in rows if not _matches(row, filters)]
        for row in removed:
            self._notify(table, ChangeEvent.DELETE, row)
        return len(removed)

    def subscribe(
        self,
        table: str,
        events: Iterable[ChangeEvent],
        callback: ChangeCallback,
    ) -> InMemorySubscription:
        listener = _Listener(table=table, events=frozenset(events), callback=callback)
        self._listeners.append(listener)
        return InMemorySubscription(store=self, listener=listener)

    def listener_count(self, table: str | None = None) -> int:
        """Return the number of active subscriptions, optionally per table."""
        return sum(
            1 for listener in self._listeners
            if table is None or listener.table == table
        )

    def _rows(self, table: str) -> list[Row]:
        return self._tables.get(table, [])

    def _check_online(self, table: str) -> None:
        if not self.online:
            raise RemoteStoreError("Remote store is offline", table=table)

    def _notify(self, table: str, event: ChangeEvent, row: Row) -> None:
        for listener in list(self._listeners):
            if listener.table == table and event in listener.events:
                listener.callback(event, dict(row))

    def _remove_listener(self, listener: _Listener) -> None:
        listener.active = False
        if listener in self._listeners:
            self._listeners.remove(listener)


def _matches(row: Row, filters: dict[str, Any] | None) -> bool:
    if not filters:
        return True
    return all(row.get(column) == value for column, value in filters.items())
