"""
Hydration App - Daily Fluid Intake Tracker

Tracks a single user's daily fluid intake against a fixed goal, exposes a
fill-level fraction for a bottle indicator and keeps a day-over-day completion
streak that survives restarts.
"""

__version__ = "0.1.0"
__author__ = "Hydration Team"
