"""JSON serializer implementation."""

import dataclasses
import json
from datetime import date, datetime
from enum import Enum
from typing import Any

from payrollcache.core.exceptions import SerializationError


class JsonSerializer:
    """JSON serializer for fallback snapshots.

    Handles serialization of rows to JSON text and back. Dates,
    datetimes, enums and dataclasses are written in a JSON-compatible
    form; they are read back as plain strings and dicts.
    """

    def __init__(self, ensure_ascii: bool = False) -> None:
        """Initialize the JSON serializer.

        Args:
            ensure_ascii: Escape non-ASCII characters in the output.
        """
        self._ensure_ascii = ensure_ascii

    def serialize(self, value: Any) -> str:
        """Serialize value to a JSON string.

        Args:
            value: The Python object to serialize.

        Returns:
            The serialized value.

        Raises:
            SerializationError: If the value cannot be serialized.
        """
        try:
            return json.dumps(
                value,
                default=self._default_encoder,
                ensure_ascii=self._ensure_ascii,
            )
        except (TypeError, ValueError) as e:
            raise SerializationError(f"Failed to serialize value: {e}") from e

    def deserialize(self, data: str) -> Any:
        """Deserialize a JSON string to a value.

        Args:
            data: The string to deserialize.

        Returns:
            The deserialized Python object.

        Raises:
            SerializationError: If the data cannot be deserialized.
        """
        try:
            return json.loads(data)
        except (json.JSONDecodeError, TypeError) as e:
            raise SerializationError(f"Failed to deserialize data: {e}") from e

    def _default_encoder(self, obj: Any) -> Any:
        """Custom encoder for non-JSON-serializable types.

        Args:
            obj: The object to encode.

        Returns:
            A JSON-serializable representation of the object.

        Raises:
            TypeError: If the object cannot be encoded.
        """
        if isinstance(obj, (datetime, date)):
            return obj.isoformat()
        if isinstance(obj, Enum):
            return obj.value
        if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
            return dataclasses.asdict(obj)
        raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")
