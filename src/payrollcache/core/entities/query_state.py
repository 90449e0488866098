"""Query state entity."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class QueryState:
    """Snapshot of a QueryExecutor's observable state."""

    data: Any = None
    is_loading: bool = False
    error: Exception | None = None

    @property
    def is_error(self) -> bool:
        """Check if the last cycle failed."""
        return self.error is not None
