"""
Hydration state data model.

This module defines the immutable structure that tracks today's remaining
intake, the completion flag and the day-over-day streak.
"""

from dataclasses import dataclass
from typing import Any

DAILY_GOAL_ML = 2000                                 # Fixed daily intake target
STORAGE_KEY = "water-tracker-state-v1"               # Single key for the persisted state


@dataclass(frozen=True)
class HydrationState:
    """Tracked state for the current calendar day."""

    remaining_ml: int                                # Still needed to reach the goal
    streak: int                                      # Completed days before last_date
    last_date: str                                   # YYYY-MM-DD of last rollover check
    completed_today: bool = False                    # Goal reached for last_date

    @property
    def consumed_ml(self) -> int:
        """Amount consumed so far today."""
        return DAILY_GOAL_ML - self.remaining_ml

    def with_remaining(self, remaining_ml: int) -> 'HydrationState':
        """Create new state with updated remaining amount.

        Completion is sticky: once reached it stays set until the next rollover.
        """
        return HydrationState(
            remaining_ml=remaining_ml,
            streak=self.streak,
            last_date=self.last_date,
            completed_today=self.completed_today or remaining_ml == 0
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "remaining_ml": self.remaining_ml,
            "streak": self.streak,
            "last_date": self.last_date,
            "completed_today": self.completed_today,
        }
