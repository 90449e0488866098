"""Pytest configuration for payrollcache tests."""

import pytest
from helpers import FakeClock

from payrollcache import (
    InMemoryLocalStore,
    InMemoryRemoteStore,
    QueryCache,
    create_query_cache,
)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> QueryCache:
    """Isolated cache driven by the fake clock."""
    return create_query_cache(clock=clock)


@pytest.fixture
def local_store() -> InMemoryLocalStore:
    return InMemoryLocalStore()


@pytest.fixture
def remote_store() -> InMemoryRemoteStore:
    return InMemoryRemoteStore()
