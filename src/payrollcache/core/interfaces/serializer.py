"""Serializer interface."""

from typing import Any, Protocol


class ISerializer(Protocol):
    """Contract for serializing/deserializing fallback snapshots.

    Serializers handle the conversion between Python objects
    and the strings kept in the local store.
    """

    def serialize(self, value: Any) -> str:
        """Serialize value to a string.

        Args:
            value: The Python object to serialize.

        Returns:
            The serialized value.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        ...

    def deserialize(self, data: str) -> Any:
        """Deserialize a string to a value.

        Args:
            data: The string to deserialize.

        Returns:
            The deserialized Python object.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        ...
