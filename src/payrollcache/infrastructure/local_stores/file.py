"""JSON file local store implementation."""

import json
import os
import tempfile
from pathlib import Path

from payrollcache.core.exceptions import SnapshotError


class JsonFileLocalStore:
    """Local store persisted as one JSON object in a file.

    The whole key/value map is rewritten on every change. The file is
    replaced atomically, so a crash mid-write leaves the previous
    contents in place. Not safe for concurrent writers.
    """

    def __init__(self, path: str | Path) -> None:
        """Initialize the store.

        Args:
            path: Location of the JSON file. Created on first write.
        """
        self._path = Path(path)
        self._items: dict[str, str] | None = None

    @property
    def path(self) -> Path:
        """Return the backing file path."""
        return self._path

    def get_item(self, key: str) -> str | None:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if items.pop(key, None) is not None:
            self._save(items)

    def _load(self) -> dict[str, str]:
        if self._items is not None:
            return self._items

        if not self._path.exists():
            self._items = {}
            return self._items

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise SnapshotError(f"Failed to read local store {self._path}: {e}") from e
        if not isinstance(data, dict):
            raise SnapshotError(f"Local store {self._path} does not hold a JSON object")

        self._items = {str(k): str(v) for k, v in data.items()}
        return self._items

    def _save(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(items, tmp, ensure_ascii=False)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
