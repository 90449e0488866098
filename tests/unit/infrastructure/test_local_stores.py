"""Tests for local store implementations."""

import json
from pathlib import Path

import pytest

from payrollcache import InMemoryLocalStore, JsonFileLocalStore, SnapshotError


class TestInMemoryLocalStore:
    """Tests for InMemoryLocalStore."""

    def test_set_and_get(self) -> None:
        store = InMemoryLocalStore()
        store.set_item("employees", "[]")

        assert store.get_item("employees") == "[]"
        assert "employees" in store
        assert len(store) == 1

    def test_get_missing_key(self) -> None:
        assert InMemoryLocalStore().get_item("employees") is None

    def test_remove_item(self) -> None:
        store = InMemoryLocalStore({"employees": "[]"})

        store.remove_item("employees")
        store.remove_item("employees")

        assert store.get_item("employees") is None

    def test_clear(self) -> None:
        store = InMemoryLocalStore({"a": "1", "b": "2"})
        store.clear()
        assert len(store) == 0


class TestJsonFileLocalStore:
    """Tests for JsonFileLocalStore."""

    def test_missing_file_is_empty(self, tmp_path: Path) -> None:
        store = JsonFileLocalStore(tmp_path / "store.json")

        assert store.get_item("employees") is None
        assert not store.path.exists()

    def test_values_persist_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "store.json"
        JsonFileLocalStore(path).set_item("employees", '[{"id": "1"}]')

        reopened = JsonFileLocalStore(path)

        assert reopened.get_item("employees") == '[{"id": "1"}]'
        assert json.loads(path.read_text(encoding="utf-8")) == {
            "employees": '[{"id": "1"}]'
        }

    def test_remove_item(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        store = JsonFileLocalStore(path)
        store.set_item("employees", "[]")
        store.set_item("advances", "[]")

        store.remove_item("employees")
        store.remove_item("missing")

        assert JsonFileLocalStore(path).get_item("employees") is None
        assert JsonFileLocalStore(path).get_item("advances") == "[]"

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        store = JsonFileLocalStore(tmp_path / "store.json")
        store.set_item("employees", "[]")

        assert [p.name for p in tmp_path.iterdir()] == ["store.json"]

    def test_corrupt_file(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("{broken", encoding="utf-8")

        with pytest.raises(SnapshotError):
            JsonFileLocalStore(path).get_item("employees")

    def test_non_object_file(self, tmp_path: Path) -> None:
        path = tmp_path / "store.json"
        path.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(SnapshotError):
            JsonFileLocalStore(path).get_item("employees")
