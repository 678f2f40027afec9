"""Pytest configuration and shared fixtures."""

import pytest
from typing import Optional

from hydration_app.persistence import MemoryKeyValueStore
from hydration_app.state.models import HydrationState
from hydration_app.state.runtime import HydrationTracker


class DayClock:
    """Controllable source of today's date key."""

    def __init__(self, today: str):
        self.today = today

    def __call__(self) -> str:
        return self.today


@pytest.fixture
def fresh_state() -> HydrationState:
    """Untouched state for 2024-01-01."""
    return HydrationState(
        remaining_ml=2000,
        streak=0,
        last_date="2024-01-01",
        completed_today=False,
    )


@pytest.fixture
def completed_state() -> HydrationState:
    """State where the 2024-01-01 goal was reached with a running streak."""
    return HydrationState(
        remaining_ml=0,
        streak=3,
        last_date="2024-01-01",
        completed_today=True,
    )


@pytest.fixture
def clock() -> DayClock:
    return DayClock("2024-01-01")


@pytest.fixture
def memory_store() -> MemoryKeyValueStore:
    return MemoryKeyValueStore()


@pytest.fixture
def tracker(memory_store: MemoryKeyValueStore, clock: DayClock) -> HydrationTracker:
    """Tracker over an empty in-memory store, not yet loaded."""
    return HydrationTracker(store=memory_store, today_provider=clock)
