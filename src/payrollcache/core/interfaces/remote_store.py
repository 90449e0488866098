"""Remote store interface."""

from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any, Protocol

Row = dict[str, Any]


class ChangeEvent(Enum):
    """Row change events published by a remote store."""

    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


ChangeCallback = Callable[[ChangeEvent, Row], None]


class ISubscription(Protocol):
    """Handle for an active change-feed subscription."""

    def unsubscribe(self) -> None:
        """Stop receiving events. Calling it twice is a no-op."""
        ...


class IRemoteStore(Protocol):
    """Contract for the remote relational store client.

    Calls are table-scoped. ``filters`` maps column names to values and
    matches rows by equality. Implementations raise RemoteStoreError
    (or any exception) on failure.
    """

    async def select(
        self,
        table: str,
        *,
        filters: dict[str, Any] | None = None,
        order_by: str | None = None,
    ) -> list[Row]:
        """Read rows from a table.

        Args:
            table: The table name.
            filters: Optional column equality filters.
            order_by: Optional column to sort ascending by.

        Returns:
            The matching rows.
        """
        ...

    async def insert(self, table: str, rows: list[Row]) -> list[Row]:
        """Insert rows into a table.

        Args:
            table: The table name.
            rows: The rows to insert.

        Returns:
            The inserted rows.
        """
        ...

    async def update(
        self,
        table: str,
        values: Row,
        *,
        filters: dict[str, Any],
    ) -> list[Row]:
        """Update matching rows.

        Args:
            table: The table name.
            values: Column values to set.
            filters: Column equality filters selecting the rows.

        Returns:
            The updated rows.
        """
        ...

    async def delete(self, table: str, *, filters: dict[str, Any]) -> int:
        """Delete matching rows.

        Args:
            table: The table name.
            filters: Column equality filters selecting the rows.

        Returns:
            Number of rows deleted.
        """
        ...

    def subscribe(
        self,
        table: str,
        events: Iterable[ChangeEvent],
        callback: ChangeCallback,
    ) -> ISubscription:
        """Subscribe to row changes on a table.

        Args:
            table: The table name.
            events: The events to receive.
            callback: Called with the event and the affected row.

        Returns:
            A subscription handle.
        """
        ...
