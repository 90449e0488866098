"""Shared test doubles for payrollcache tests."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any

from payrollcache import InMemoryRemoteStore, RemoteStoreError


class FakeClock:
    """Manually advanced clock for staleness tests."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, milliseconds: int) -> None:
        self.now += timedelta(milliseconds=milliseconds)


class CountingFetch:
    """Fetch function returning queued results and counting calls."""

    def __init__(self, *results: Any) -> None:
        self.results = list(results)
        self.calls = 0

    async def __call__(self) -> Any:
        self.calls += 1
        result = self.results[min(self.calls, len(self.results)) - 1]
        if isinstance(result, Exception):
            raise result
        return result


class BrokenRemoteStore(InMemoryRemoteStore):
    """Remote store whose reads always fail."""

    async def select(self, table: str, **kwargs: Any) -> list[dict[str, Any]]:
        raise RemoteStoreError("connection refused", table=table)


class GatedRemoteStore(InMemoryRemoteStore):
    """Remote store whose first read holds its rows until released."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.entered = asyncio.Event()
        self.release = asyncio.Event()
        self.selects = 0

    async def select(self, table: str, **kwargs: Any) -> list[dict[str, Any]]:
        self.selects += 1
        rows = await super().select(table, **kwargs)
        if self.selects == 1:
            self.entered.set()
            await self.release.wait()
        return rows
