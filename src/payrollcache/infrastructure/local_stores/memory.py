"""In-memory local store implementation."""


class InMemoryLocalStore:
    """Dict-backed local store.

    Suitable for tests and short-lived processes; nothing survives a
    restart.
    """

    def __init__(self, items: dict[str, str] | None = None) -> None:
        """Initialize the store.

        Args:
            items: Optional initial contents.
        """
        self._items: dict[str, str] = dict(items or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        """Remove every key."""
        self._items.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)
