"""Collection entities used by domain accessors."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Generic, TypeVar

T = TypeVar("T")


class DataSource(Enum):
    """Where a collection snapshot was read from.

    REMOTE: The remote store answered.
    FALLBACK: The local persisted snapshot was used instead.
    """

    REMOTE = "remote"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class CollectionSnapshot(Generic[T]):
    """A fetched collection tagged with its source."""

    items: list[T] = field(default_factory=list)
    source: DataSource = DataSource.REMOTE

    @property
    def is_degraded(self) -> bool:
        """Check if the snapshot came from the fallback store."""
        return self.source is DataSource.FALLBACK

    def __len__(self) -> int:
        """Return the number of items."""
        return len(self.items)


@dataclass
class CollectionConfig:
    """Configuration for one entity collection.

    Attributes:
        query_key: Cache key for the collection query.
        table: Remote store table name.
        order_by: Column the remote select is ordered by.
        id_field: Name of the identifier column.
        fallback_key: Local store key holding the fallback snapshot.
            Defaults to ``query_key``.
        mirror_to_fallback: Write every successful remote read to the
            fallback snapshot so it stays a recent shadow copy.
    """

    query_key: str
    table: str
    order_by: str | None = None
    id_field: str = "id"
    fallback_key: str | None = None
    mirror_to_fallback: bool = False

    def __post_init__(self) -> None:
        """Default the fallback key to the query key."""
        if not self.query_key:
            raise ValueError("query_key must not be empty")
        if self.fallback_key is None:
            self.fallback_key = self.query_key
