"""
Serialization of HydrationState to and from stored bytes.

The payload is a UTF-8 JSON object with camelCase field names:

    {"remainingMl": 1750, "streak": 3, "lastDate": "2024-01-02", "completedToday": false}
"""

import json
from typing import Any

from ..errors import MalformedDataError, MissingDataError
from ..state.models import DAILY_GOAL_ML, HydrationState
from ..utils.time import is_date_key

EXPECTED_FORMAT = "json object with remainingMl, streak, lastDate, completedToday"


def encode_state(state: HydrationState) -> bytes:
    """Serialize the full state."""
    payload = {
        "remainingMl": state.remaining_ml,
        "streak": state.streak,
        "lastDate": state.last_date,
        "completedToday": state.completed_today,
    }
    return json.dumps(payload).encode("utf-8")


def _require(payload: dict[str, Any], field: str) -> Any:
    if field not in payload or payload[field] is None:
        raise MissingDataError(
            f"Stored state missing required field: {field}",
            data_type="hydration_state"
        )
    return payload[field]


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def decode_state(raw: bytes) -> HydrationState:
    """
    Deserialize and validate a stored state.

    Raises:
        MalformedDataError: Payload is not valid JSON or a field is out of range
        MissingDataError: A required field is absent
    """
    text = raw.decode("utf-8", errors="replace") if isinstance(raw, (bytes, bytearray)) else str(raw)

    try:
        payload = json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedDataError(
            f"Stored state is not valid JSON: {getattr(e, 'msg', type(e).__name__)}",
            raw_data=text[:200],
            expected_format=EXPECTED_FORMAT
        ) from e

    if not isinstance(payload, dict):
        raise MalformedDataError(
            "Stored state is not a JSON object",
            raw_data=text[:200],
            expected_format=EXPECTED_FORMAT
        )

    remaining_ml = _require(payload, "remainingMl")
    streak = _require(payload, "streak")
    last_date = _require(payload, "lastDate")
    completed_today = _require(payload, "completedToday")

    errors = []
    if not _is_int(remaining_ml) or not 0 <= remaining_ml <= DAILY_GOAL_ML:
        errors.append(f"remainingMl must be an integer in [0, {DAILY_GOAL_ML}]")
    if not _is_int(streak) or streak < 0:
        errors.append("streak must be a non-negative integer")
    if not is_date_key(last_date):
        errors.append("lastDate must be a YYYY-MM-DD date")
    if not isinstance(completed_today, bool):
        errors.append("completedToday must be a boolean")

    if errors:
        raise MalformedDataError(
            "; ".join(errors),
            raw_data=text[:200],
            expected_format=EXPECTED_FORMAT,
            context={"payload": payload}
        )

    return HydrationState(
        remaining_ml=remaining_ml,
        streak=streak,
        last_date=last_date,
        completed_today=completed_today
    )
