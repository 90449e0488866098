"""Query configuration entity."""

from collections.abc import Callable
from dataclasses import dataclass
from datetime import timedelta
from typing import Any

DEFAULT_STALE_TIME = timedelta(minutes=5)


@dataclass
class QueryConfig:
    """Per-query configuration for a QueryExecutor.

    Supplied when the executor is created and never persisted.

    Attributes:
        enabled: When False, fetch cycles are skipped entirely.
        refetch_interval: Period of the background refetch timer.
            None disables periodic refetching.
        stale_time: How long a fetched value is served from cache.
        on_success: Called with the data after every successful cycle,
            including cache hits.
        on_error: Called with the exception when a fetch fails.
        initial_data: Data exposed before the first cycle completes.
    """

    enabled: bool = True
    refetch_interval: timedelta | None = None
    stale_time: timedelta | None = None
    on_success: Callable[[Any], None] | None = None
    on_error: Callable[[Exception], None] | None = None
    initial_data: Any = None

    def __post_init__(self) -> None:
        """Apply defaults and validate durations."""
        if self.stale_time is None:
            self.stale_time = DEFAULT_STALE_TIME
        if self.stale_time < timedelta(0):
            raise ValueError("stale_time must not be negative")
        if self.refetch_interval is not None and self.refetch_interval <= timedelta(0):
            raise ValueError("refetch_interval must be positive")
