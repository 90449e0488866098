"""Query executor - get-or-fetch orchestration over a QueryCache."""

import asyncio
import contextlib
import functools
import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace
from datetime import timedelta
from typing import Any

from payrollcache.core.entities.query_config import QueryConfig
from payrollcache.core.entities.query_state import QueryState
from payrollcache.core.services.query_cache import QueryCache

logger = logging.getLogger(__name__)

FetchFunction = Callable[[], Awaitable[Any]]

_UNSET: Any = object()


class QueryExecutor:
    """Serves one query key from the cache or from its fetch function.

    Each executor owns its own QueryState (data, loading flag, error)
    while the cache entries are shared with every other executor using
    the same QueryCache.

    Usage:
        cache = create_query_cache()
        executor = QueryExecutor(cache, "employees", load_employees)

        async with executor:  # initial cycle, starts the refetch timer
            print(executor.data)
            await executor.refetch()  # always calls load_employees
    """

    def __init__(
        self,
        cache: QueryCache,
        key: str,
        fetch: FetchFunction,
        config: QueryConfig | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            cache: The shared query cache.
            key: The query key.
            fetch: Coroutine function producing fresh data.
            config: Optional query configuration. Uses defaults if not provided.
        """
        self._cache = cache
        self._key = key
        self._fetch = fetch
        self._config = replace(config) if config is not None else QueryConfig()

        self._data: Any = self._config.initial_data
        self._is_loading = False
        self._error: Exception | None = None

        self._active = False
        self._timer: asyncio.Task[None] | None = None
        self._cycle = 0

    @property
    def key(self) -> str:
        """Get the query key."""
        return self._key

    @property
    def config(self) -> QueryConfig:
        """Get the query configuration."""
        return self._config

    @property
    def data(self) -> Any:
        """Get the last successfully loaded data."""
        return self._data

    @property
    def is_loading(self) -> bool:
        """Check if a cycle is in progress."""
        return self._is_loading

    @property
    def error(self) -> Exception | None:
        """Get the error of the last cycle, if it failed."""
        return self._error

    @property
    def state(self) -> QueryState:
        """Get a snapshot of the current state."""
        return QueryState(
            data=self._data,
            is_loading=self._is_loading,
            error=self._error,
        )

    @property
    def is_active(self) -> bool:
        """Check if the executor has been started and not stopped."""
        return self._active

    async def fetch(self, force: bool = False) -> QueryState:
        """Run one fetch cycle.

        A fresh cache entry is adopted without calling the fetch function
        unless ``force`` is set. Fetch errors are recorded in ``error``
        and passed to ``on_error``; previously loaded data is kept.

        Args:
            force: Skip the cache lookup and always fetch.

        Returns:
            The state after the cycle.
        """
        if not self._config.enabled:
            return self.state

        self._cycle += 1
        cycle = self._cycle
        self._is_loading = True
        self._error = None

        # Only the latest cycle writes state.
        try:
            data = await self._resolve(force)
            if cycle != self._cycle:
                logger.debug("Dropping result of superseded cycle for %r", self._key)
            else:
                self._data = data
                if self._config.on_success is not None:
                    self._config.on_success(data)
        except Exception as e:
            logger.debug("Fetch for %r failed: %r", self._key, e)
            if cycle == self._cycle:
                self._error = e
                if self._config.on_error is not None:
                    self._config.on_error(e)
        finally:
            if cycle == self._cycle:
                self._is_loading = False

        return self.state

    async def get(self) -> Any:
        """Run a cache-first cycle and return the data."""
        await self.fetch()
        return self._data

    async def refetch(self) -> QueryState:
        """Fetch fresh data, bypassing the cache."""
        return await self.fetch(force=True)

    def invalidate_cache(self) -> None:
        """Remove this executor's key from the cache.

        Does not fetch; the next cycle decides.
        """
        self._cache.invalidate(self._key)

    async def start(self) -> QueryState:
        """Activate the executor.

        Runs the initial cycle and starts the refetch timer when a
        refetch interval is configured.

        Returns:
            The state after the initial cycle.
        """
        self._active = True
        self._restart_timer()
        return await self.fetch()

    async def stop(self) -> None:
        """Deactivate the executor and cancel its refetch timer."""
        self._active = False
        timer = self._cancel_timer()
        if timer is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await timer

    async def reconfigure(
        self,
        *,
        key: str | None = None,
        enabled: bool | None = None,
        refetch_interval: timedelta | None = _UNSET,
    ) -> QueryState:
        """Change the key, enabled flag or refetch interval.

        A key or enabled transition on an active executor runs a new
        cycle. The refetch timer is restarted to match the new settings.

        Args:
            key: New query key.
            enabled: New enabled flag.
            refetch_interval: New refetch interval, None to disable.

        Returns:
            The state after any triggered cycle.
        """
        changed = False
        if key is not None and key != self._key:
            self._key = key
            changed = True
        if enabled is not None and enabled != self._config.enabled:
            self._config = replace(self._config, enabled=enabled)
            changed = True
        if refetch_interval is not _UNSET:
            self._config = replace(self._config, refetch_interval=refetch_interval)

        if not self._active:
            return self.state

        self._restart_timer()
        if changed:
            return await self.fetch()
        return self.state

    async def _resolve(self, force: bool) -> Any:
        if not force:
            entry = self._cache.get_fresh(self._key)
            if entry is not None:
                return entry.value
        return await self._load(force)

    async def _load(self, force: bool = False) -> Any:
        """Await the key's in-flight fetch, starting one if needed.

        A forced load always starts a new fetch and replaces the
        registered one, whose result is then discarded by ``_settle``.
        """
        key = self._key
        pending = None if force else self._cache.pending(key)
        if pending is None:
            pending = asyncio.ensure_future(self._fetch())
            self._cache.track(key, pending)
            pending.add_done_callback(
                functools.partial(self._settle, key, self._config.stale_time)
            )
        else:
            logger.debug("Joining in-flight fetch for %r", key)

        # Shielded so one cancelled awaiter does not cancel the others.
        return await asyncio.shield(pending)

    def _settle(
        self,
        key: str,
        stale_time: timedelta | None,
        future: asyncio.Future[Any],
    ) -> None:
        """Write a completed fetch into the cache.

        Results of fetches superseded by an invalidation are dropped.
        """
        if future.cancelled():
            self._cache.untrack(key, future)
            return

        error = future.exception()
        if not self._cache.untrack(key, future):
            logger.debug("Discarding superseded fetch result for %r", key)
            return
        if error is None:
            self._cache.set(key, future.result(), stale_time)

    def _restart_timer(self) -> None:
        self._cancel_timer()
        interval = self._config.refetch_interval
        if self._active and self._config.enabled and interval is not None:
            self._timer = asyncio.ensure_future(self._run_timer(interval))

    def _cancel_timer(self) -> asyncio.Task[None] | None:
        timer, self._timer = self._timer, None
        if timer is not None:
            timer.cancel()
        return timer

    async def _run_timer(self, interval: timedelta) -> None:
        while True:
            await asyncio.sleep(interval.total_seconds())
            try:
                await self.fetch()
            except Exception:
                logger.exception("Refetch of %r raised in a callback", self._key)

    async def __aenter__(self) -> "QueryExecutor":
        await self.start()
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.stop()
