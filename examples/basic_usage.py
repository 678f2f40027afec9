#!/usr/bin/env python3
"""
Basic Usage Example - Hydration Tracker

This script walks through a few simulated days with the hydration tracker
over a temporary SQLite database. It shows how to:
- Build a tracker from configuration
- Load state on startup (with rollover)
- Record intake from text input
- Read remaining amount, streak and fill level for display

Run: python examples/basic_usage.py
"""

import tempfile
from pathlib import Path

from hydration_app.config.loader import ConfigLoader
from hydration_app.logging import configure_logging
from hydration_app.state.runtime import HydrationTracker


def print_bottle(tracker: HydrationTracker) -> None:
    """Print a text bottle for the current state."""
    state = tracker.state
    filled = round(tracker.progress * 10)
    print(f"  Streak: {state.streak} day(s)")
    print(f"  [{'#' * filled}{'.' * (10 - filled)}] {state.remaining_ml} ml left")
    print()


def run_day(db_path: Path, today: str, entries: list) -> None:
    """Simulate one app session on the given day."""
    config = ConfigLoader.create().load({
        "storage": {"backend": "sqlite", "db_path": str(db_path)}
    })
    tracker = HydrationTracker.from_config(config, today_provider=lambda: today)

    print(f"📅 {today}")
    tracker.load()
    print_bottle(tracker)

    for raw in entries:
        print(f"  + {raw!r}")
        tracker.add_intake(raw)
    print_bottle(tracker)


def main():
    """Main demonstration function."""
    configure_logging(level="WARNING")

    print("💧 Hydration Tracker - Basic Usage Demo")
    print("=" * 60)

    with tempfile.TemporaryDirectory() as tmp_dir:
        db_path = Path(tmp_dir) / "hydration.db"

        run_day(db_path, "2024-01-01", ["500", "750", "1000"])
        run_day(db_path, "2024-01-02", ["250ml", "abc", "-5", "1750"])
        run_day(db_path, "2024-01-05", ["300"])
        run_day(db_path, "2024-01-06", [])


if __name__ == "__main__":
    main()
