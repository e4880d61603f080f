"""
Pytest fixtures for Plant Companion tests.
"""
import sys
import pytest
from pathlib import Path
from datetime import date, timedelta
from dotenv import load_dotenv

# Ensure src/ is on sys.path so tests can import plant_companion.
ROOT = Path(__file__).resolve().parent.parent
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Load environment variables
load_dotenv()

from plant_companion import InMemoryStorage, PlantStateStore  # noqa: E402


TODAY = date(2026, 3, 10)


class FakeClock:
    """Controllable calendar for store tests."""

    def __init__(self, today: date = TODAY):
        self.current = today

    def __call__(self) -> date:
        return self.current

    def advance(self, days: int = 1) -> date:
        self.current += timedelta(days=days)
        return self.current


def record_dict(**overrides) -> dict:
    """Stored plant record in its persisted JSON shape."""
    data = {
        "growth": 26,
        "chatCount": 7,
        "streak": 0,
        "currentMood": "neutral",
        "moodLogs": [],
        "plantName": "Little Sprout",
        "lastInteraction": TODAY.isoformat(),
    }
    data.update(overrides)
    return data


def days_ago(days: int, today: date = TODAY) -> str:
    return (today - timedelta(days=days)).isoformat()


@pytest.fixture
def clock():
    """A clock fixed at TODAY that tests can advance."""
    return FakeClock()


@pytest.fixture
def memory_storage():
    """Empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def store(clock, memory_storage):
    """A fresh store created from defaults."""
    return PlantStateStore(memory_storage, clock=clock)


@pytest.fixture
def make_store(clock):
    """
    Factory fixture creating a store from a stored record.

    Returns a function accepting record field overrides (persisted
    camelCase keys) and returning (store, storage).
    """

    def _make_store(**overrides):
        storage = InMemoryStorage(record_dict(**overrides))
        return PlantStateStore(storage, clock=clock), storage

    return _make_store
