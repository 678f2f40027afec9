"""Tests for hydration state data model."""

import pytest
from dataclasses import FrozenInstanceError

from hydration_app.state.models import DAILY_GOAL_ML, STORAGE_KEY, HydrationState


class TestHydrationState:
    """Test HydrationState data model."""

    def test_constants(self):
        """Goal and storage key match the stored format."""
        assert DAILY_GOAL_ML == 2000
        assert STORAGE_KEY == "water-tracker-state-v1"

    def test_state_is_immutable(self, fresh_state):
        """Fields cannot be reassigned."""
        with pytest.raises(FrozenInstanceError):
            fresh_state.remaining_ml = 10

    def test_value_equality(self):
        """States compare by value."""
        a = HydrationState(remaining_ml=10, streak=1, last_date="2024-01-01")
        b = HydrationState(remaining_ml=10, streak=1, last_date="2024-01-01")

        assert a == b
        assert a.completed_today is False

    def test_consumed_ml(self):
        """Consumed is goal minus remaining."""
        state = HydrationState(remaining_ml=1200, streak=0, last_date="2024-01-01")
        assert state.consumed_ml == 800

    def test_with_remaining_sets_completion_at_zero(self, fresh_state):
        """Reaching zero marks the day complete."""
        updated = fresh_state.with_remaining(0)

        assert updated.remaining_ml == 0
        assert updated.completed_today is True
        assert updated.streak == fresh_state.streak
        assert updated.last_date == fresh_state.last_date

    def test_with_remaining_keeps_completion(self, completed_state):
        """Completion stays set for the rest of the day."""
        assert completed_state.with_remaining(50).completed_today is True

    def test_to_dict(self, completed_state):
        """Plain dict uses attribute names."""
        assert completed_state.to_dict() == {
            "remaining_ml": 0,
            "streak": 3,
            "last_date": "2024-01-01",
            "completed_today": True,
        }
