"""Realtime bridge - refresh a collection when its table changes."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from payrollcache.core.interfaces.remote_store import (
    ChangeEvent,
    IRemoteStore,
    ISubscription,
    Row,
)

logger = logging.getLogger(__name__)

ALL_EVENTS = (ChangeEvent.INSERT, ChangeEvent.UPDATE, ChangeEvent.DELETE)


class RealtimeBridge:
    """Subscribes to a table's change feed and triggers a refresh.

    Best effort: without a remote store no subscription is made and
    freshness relies on stale time and manual invalidation.

    The owner of the bridge must call ``unsubscribe`` when its scope
    ends; events received afterwards are not delivered.
    """

    def __init__(
        self,
        remote_store: IRemoteStore | None,
        table: str,
        on_change: Callable[[], Awaitable[Any]],
    ) -> None:
        """Initialize the bridge.

        Args:
            remote_store: The remote store, or None if not configured.
            table: The table to watch.
            on_change: Coroutine function run for every change event.
        """
        self._remote_store = remote_store
        self._table = table
        self._on_change = on_change
        self._subscription: ISubscription | None = None
        self._tasks: set[asyncio.Task[Any]] = set()

    @property
    def is_subscribed(self) -> bool:
        """Check if a subscription is active."""
        return self._subscription is not None

    def subscribe(self) -> bool:
        """Start listening for insert, update and delete events.

        Returns:
            True if a subscription is active after the call.
        """
        if self._subscription is not None:
            return True
        if self._remote_store is None:
            logger.debug("No remote store, realtime updates disabled for %r", self._table)
            return False

        self._subscription = self._remote_store.subscribe(
            self._table, ALL_EVENTS, self._handle_change
        )
        logger.info("Subscribed to changes on %r", self._table)
        return True

    def unsubscribe(self) -> None:
        """Stop listening and cancel pending refreshes.

        Safe to call when not subscribed.
        """
        subscription, self._subscription = self._subscription, None
        if subscription is None:
            return
        subscription.unsubscribe()
        for task in self._tasks:
            task.cancel()
        self._tasks.clear()
        logger.info("Unsubscribed from changes on %r", self._table)

    async def drain(self) -> None:
        """Wait for every refresh scheduled so far to finish."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def _handle_change(self, event: ChangeEvent, row: Row) -> None:
        if self._subscription is None:
            return
        logger.debug("%s on %r, refreshing", event.value, self._table)
        task = asyncio.ensure_future(self._on_change())
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
