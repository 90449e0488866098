"""Tests for InMemoryRemoteStore."""

from typing import Any

import pytest

from payrollcache import ChangeEvent, InMemoryRemoteStore, RemoteStoreError

ROWS = [
    {"id": "1", "name": "Omar", "department": "IT"},
    {"id": "2", "name": "Fatima", "department": "Finance"},
    {"id": "3", "name": "Ahmed", "department": "IT"},
]


@pytest.fixture
def store() -> InMemoryRemoteStore:
    return InMemoryRemoteStore({"employees": ROWS})


class TestQueries:
    """Tests for select filtering and ordering."""

    async def test_select_all(self, store: InMemoryRemoteStore) -> None:
        assert await store.select("employees") == ROWS

    async def test_select_unknown_table(self, store: InMemoryRemoteStore) -> None:
        assert await store.select("advances") == []

    async def test_order_by(self, store: InMemoryRemoteStore) -> None:
        rows = await store.select("employees", order_by="name")
        assert [row["name"] for row in rows] == ["Ahmed", "Fatima", "Omar"]

    async def test_equality_filters(self, store: InMemoryRemoteStore) -> None:
        rows = await store.select("employees", filters={"department": "IT"})
        assert [row["id"] for row in rows] == ["1", "3"]

    async def test_rows_are_copies(self, store: InMemoryRemoteStore) -> None:
        rows = await store.select("employees")
        rows[0]["name"] = "changed"

        assert (await store.select("employees"))[0]["name"] == "Omar"

    async def test_offline(self, store: InMemoryRemoteStore) -> None:
        store.online = False

        with pytest.raises(RemoteStoreError) as exc_info:
            await store.select("employees")

        assert exc_info.value.table == "employees"


class TestWrites:
    """Tests for insert, update and delete."""

    async def test_insert(self, store: InMemoryRemoteStore) -> None:
        await store.insert("employees", [{"id": "4", "name": "Sara"}])
        assert len(await store.select("employees")) == 4

    async def test_update(self, store: InMemoryRemoteStore) -> None:
        updated = await store.update("employees", {"department": "HR"}, filters={"id": "2"})

        assert updated == [{"id": "2", "name": "Fatima", "department": "HR"}]

    async def test_delete(self, store: InMemoryRemoteStore) -> None:
        count = await store.delete("employees", filters={"department": "IT"})

        assert count == 2
        assert await store.select("employees") == [ROWS[1]]


class TestChangeFeed:
    """Tests for subscriptions."""

    async def test_events_delivered(self, store: InMemoryRemoteStore) -> None:
        received: list[tuple[ChangeEvent, dict[str, Any]]] = []
        store.subscribe("employees", list(ChangeEvent), lambda e, r: received.append((e, r)))

        await store.insert("employees", [{"id": "4", "name": "Sara"}])
        await store.update("employees", {"name": "Sarah"}, filters={"id": "4"})
        await store.delete("employees", filters={"id": "4"})

        assert [event for event, _ in received] == [
            ChangeEvent.INSERT,
            ChangeEvent.UPDATE,
            ChangeEvent.DELETE,
        ]
        assert received[1][1]["name"] == "Sarah"

    async def test_event_filter(self, store: InMemoryRemoteStore) -> None:
        received: list[ChangeEvent] = []
        store.subscribe("employees", [ChangeEvent.DELETE], lambda e, r: received.append(e))

        await store.insert("employees", [{"id": "4"}])
        await store.delete("employees", filters={"id": "4"})

        assert received == [ChangeEvent.DELETE]

    async def test_unsubscribe(self, store: InMemoryRemoteStore) -> None:
        received: list[ChangeEvent] = []
        subscription = store.subscribe(
            "employees", list(ChangeEvent), lambda e, r: received.append(e)
        )

        subscription.unsubscribe()
        subscription.unsubscribe()
        await store.insert("employees", [{"id": "4"}])

        assert received == []
        assert not subscription.active
        assert store.listener_count("employees") == 0
