# tests/conftest.py

import datetime

import pytest

from core.config import StoreConfig
from models.record_store import RecordStore
from models.student import Student

FIXED_NOW = datetime.datetime(2025, 9, 1, 8, 30, 0)


class FakeClock:
    def __init__(self, start: datetime.datetime = FIXED_NOW):
        self.now = start

    def __call__(self) -> datetime.datetime:
        return self.now

    def advance(self, minutes: int = 1) -> None:
        self.now += datetime.timedelta(minutes=minutes)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def empty_store(clock):
    return RecordStore(clock=clock)


@pytest.fixture
def sample_store(clock):
    store = RecordStore(clock=clock)

    store.add_student("John Smith", [85, 92, 78, 88, 90])
    store.add_student("Emma Wilson", [95, 98, 92, 96, 94])
    store.add_student("Michael Brown", [72, 68, 75, 70, 73])
    store.add_student("Sarah Davis", [55, 48, 62, 58, 52])
    store.add_student("David Lee", [88, 85, 90, 87, 91])

    return store


@pytest.fixture
def small_history_store(clock):
    return RecordStore(config=StoreConfig(history_capacity=3), clock=clock)


@pytest.fixture
def sample_student():
    return Student("STU-001", "Ann Lee", [90, 80, 70], FIXED_NOW)
