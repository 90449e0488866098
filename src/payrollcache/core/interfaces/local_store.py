"""Local persisted store interface."""

from typing import Protocol


class ILocalStore(Protocol):
    """Contract for the local key-value fallback store.

    A synchronous string store in the spirit of browser localStorage.
    """

    def get_item(self, key: str) -> str | None:
        """Return the stored string, or None if the key is absent."""
        ...

    def set_item(self, key: str, value: str) -> None:
        """Store a string under a key, replacing any previous value."""
        ...

    def remove_item(self, key: str) -> None:
        """Remove a key. Removing an absent key is a no-op."""
        ...
