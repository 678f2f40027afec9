"""
Integration tests for state surviving app restarts.

Each "restart" builds a new tracker over the same SQLite file.
"""

import pytest

from hydration_app.persistence import SQLiteKeyValueStore
from hydration_app.state.models import DAILY_GOAL_ML
from hydration_app.state.runtime import HydrationTracker


def start_app(db_path, today: str) -> HydrationTracker:
    tracker = HydrationTracker(
        store=SQLiteKeyValueStore(db_path),
        today_provider=lambda: today
    )
    tracker.load()
    return tracker


class TestRestartPersistence:
    """Test multi-session behaviour over a real database file."""

    def test_same_day_restart_keeps_progress(self, tmp_path):
        """Intake recorded before a restart is still there afterwards."""
        db_path = tmp_path / "hydration.db"

        first = start_app(db_path, "2024-01-01")
        first.add_intake("600")
        first.add_intake("400")

        second = start_app(db_path, "2024-01-01")

        assert second.state.remaining_ml == 1000
        assert second.progress == pytest.approx(0.5)

    def test_streak_builds_over_consecutive_days(self, tmp_path):
        """Completing each day grows the streak across restarts."""
        db_path = tmp_path / "hydration.db"

        for day, expected_streak in [("2024-01-01", 0), ("2024-01-02", 1), ("2024-01-03", 2)]:
            app = start_app(db_path, day)
            assert app.state.streak == expected_streak
            assert app.state.remaining_ml == DAILY_GOAL_ML
            app.add_intake(str(DAILY_GOAL_ML))

        assert start_app(db_path, "2024-01-04").state.streak == 3

    def test_missed_goal_resets_streak(self, tmp_path):
        """An incomplete day resets the streak at the next start."""
        db_path = tmp_path / "hydration.db"

        start_app(db_path, "2024-01-01").add_intake("2000")
        start_app(db_path, "2024-01-02").add_intake("1999")

        assert start_app(db_path, "2024-01-03").state.streak == 0

    def test_rollover_persisted_without_further_changes(self, tmp_path):
        """The rollover at load is written even if nothing else happens."""
        db_path = tmp_path / "hydration.db"

        start_app(db_path, "2024-01-01").add_intake("2000")
        start_app(db_path, "2024-01-02")

        restarted = start_app(db_path, "2024-01-02")

        assert restarted.state.streak == 1
        assert restarted.state.last_date == "2024-01-02"

    def test_corrupt_database_value_recovers(self, tmp_path):
        """A garbage value in the database yields a fresh, usable state."""
        db_path = tmp_path / "hydration.db"
        store = SQLiteKeyValueStore(db_path)
        store.set("water-tracker-state-v1", b"\x00\xffnot-json")

        app = start_app(db_path, "2024-01-01")
        app.add_intake("250")

        assert app.state.remaining_ml == 1750
        assert start_app(db_path, "2024-01-01").state.remaining_ml == 1750

    def test_unavailable_database_keeps_session_working(self, tmp_path):
        """With no usable database the session still tracks intake."""
        app = start_app(tmp_path / "no-such-dir" / "hydration.db", "2024-01-01")

        app.add_intake("500")
        app.add_intake("2000")

        assert app.state.remaining_ml == 0
        assert app.state.completed_today is True
