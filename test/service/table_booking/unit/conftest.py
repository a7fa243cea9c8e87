"""
Unit test fixtures for the table booking service.

Use cases run against the in-memory unit of work; nothing here needs a
database or a running app.
"""

import pytest

from src.platform.state.keyed_lock import KeyedLockManager
from src.service.table_booking.domain.value_object.booking_policy import BookingPolicy
from test.service.table_booking.unit.test_helpers import (
    FixedClock,
    InMemoryStore,
    InMemoryUnitOfWork,
    make_restaurant,
)


@pytest.fixture
def store() -> InMemoryStore:
    """Store seeded with one restaurant open 11:00-22:00 every day"""
    store = InMemoryStore()
    store.add_restaurant(make_restaurant())
    return store


@pytest.fixture
def uow(store: InMemoryStore) -> InMemoryUnitOfWork:
    return InMemoryUnitOfWork(store)


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture
def policy() -> BookingPolicy:
    return BookingPolicy()


@pytest.fixture
def lock_manager() -> KeyedLockManager:
    return KeyedLockManager()
