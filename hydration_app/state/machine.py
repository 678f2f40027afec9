"""
Core hydration state machine.

Pure transition functions: no I/O, no logging, no clock access. Callers pass
today's date key in explicitly so every function is deterministic.
"""

import re
from datetime import date
from typing import Union

from ..utils.time import get_date_key
from .models import DAILY_GOAL_ML, HydrationState

DateLike = Union[str, date]

_LEADING_INT_PATTERN = re.compile(r"^\s*([+-]?)([0-9]+)")

# Longer digit runs clamp identically and are not converted
MAX_AMOUNT_DIGITS = 9


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Constrain value to the closed range [minimum, maximum]."""
    return min(max(value, minimum), maximum)


def _to_date_key(today: DateLike) -> str:
    if isinstance(today, date):
        return get_date_key(today)
    return today


def build_initial_state(today: DateLike) -> HydrationState:
    """Fresh state for a first run or when stored state is unusable."""
    return HydrationState(
        remaining_ml=DAILY_GOAL_ML,
        streak=0,
        last_date=_to_date_key(today),
        completed_today=False
    )


def rollover(state: HydrationState, today: DateLike) -> HydrationState:
    """
    Start a new day if the state was recorded on a different date.

    The streak grows by one when the previous day was completed and resets
    to zero otherwise. Any number of skipped days counts as a single step.

    Args:
        state: Last known state
        today: Current local date or date key

    Returns:
        The same ``state`` object for the same day, otherwise a fresh day
    """
    today_key = _to_date_key(today)

    if state.last_date == today_key:
        return state

    next_streak = state.streak + 1 if state.completed_today else 0

    return HydrationState(
        remaining_ml=DAILY_GOAL_ML,
        streak=next_streak,
        last_date=today_key,
        completed_today=False
    )


def parse_amount(raw_input: Union[str, int, None]) -> int:
    """
    Parse user-entered milliliters.

    Reads the leading base-10 integer of the text, so ``" 250"`` and
    ``"250ml"`` both give 250 and ``"2.5"`` gives 2. Anything without a
    leading integer gives 0.
    """
    if raw_input is None or isinstance(raw_input, bool):
        return 0

    if isinstance(raw_input, int):
        return raw_input

    match = _LEADING_INT_PATTERN.match(str(raw_input))
    if not match:
        return 0

    sign, digits = match.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > MAX_AMOUNT_DIGITS:
        digits = "1" + "0" * MAX_AMOUNT_DIGITS

    return int(sign + digits)


def apply_intake(state: HydrationState, raw_input: Union[str, int, None]) -> HydrationState:
    """
    Subtract an intake amount from today's remaining volume.

    Non-positive or unparsable amounts return ``state`` unchanged. Amounts
    larger than what remains are capped at the goal; nothing carries over
    to tomorrow. Streak and date are never touched here.
    """
    amount = parse_amount(raw_input)

    if amount <= 0:
        return state

    next_remaining = int(clamp(state.remaining_ml - amount, 0, DAILY_GOAL_ML))

    return state.with_remaining(next_remaining)


def progress(state: HydrationState) -> float:
    """Fraction of the daily goal consumed, in [0, 1]."""
    consumed = DAILY_GOAL_ML - state.remaining_ml
    return clamp(consumed / DAILY_GOAL_ML, 0.0, 1.0)
