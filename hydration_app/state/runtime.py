"""
Runtime state management for the hydration tracker.

This module owns the active HydrationState, runs the load-on-startup
sequence and persists every accepted change. Storage is best-effort: the
in-memory state stays authoritative whenever a read or write fails.
"""

from datetime import date
from typing import Any, Callable, Optional, Union

from ..errors import DataQualityError
from ..logging.config import get_state_logger, log_state_transition
from ..persistence import KeyValueStore, StoreResult, StoreStatus, create_store
from ..persistence.codec import decode_state, encode_state
from ..utils.time import get_date_key
from .machine import apply_intake, build_initial_state, progress, rollover
from .models import STORAGE_KEY, HydrationState


class HydrationTracker:
    """State container for a single user's hydration tracking."""

    def __init__(
        self,
        store: KeyValueStore,
        storage_key: str = STORAGE_KEY,
        today_provider: Optional[Callable[[], str]] = None
    ):
        self.logger = get_state_logger(__name__)
        self.store = store
        self.storage_key = storage_key
        self._today = today_provider or get_date_key
        self._state = build_initial_state(self._today())
        self._loaded = False

    @classmethod
    def from_config(cls, config: dict[str, Any], **kwargs) -> "HydrationTracker":
        """Create a tracker from a merged configuration mapping."""
        storage_config = config.get("storage", {})
        return cls(
            store=create_store(storage_config),
            storage_key=storage_config.get("key", STORAGE_KEY),
            **kwargs
        )

    @property
    def state(self) -> HydrationState:
        return self._state

    @property
    def progress(self) -> float:
        return progress(self._state)

    @property
    def loaded(self) -> bool:
        return self._loaded

    def load(self, today: Optional[Union[str, date]] = None) -> HydrationState:
        """
        Restore state from storage and roll it over to today.

        Missing, unreadable or corrupt stored state falls back to a fresh
        initial state. The result is written back immediately so the
        rollover survives a crash before the next change.
        """
        today = today or self._today()
        stored = self._read_stored_state(today)

        hydrated = rollover(stored, today)
        if hydrated is not stored:
            log_state_transition(
                self.logger,
                from_state=stored.to_dict(),
                to_state=hydrated.to_dict(),
                trigger="rollover",
                context={"previous_day_completed": stored.completed_today}
            )

        self._state = hydrated
        self._loaded = True
        self._persist(hydrated)

        self.logger.info("Hydration state loaded", **hydrated.to_dict())
        return hydrated

    def add_intake(self, raw_input: Union[str, int, None]) -> HydrationState:
        """Apply a user-entered amount and persist the result if it changed."""
        current = self._state
        updated = apply_intake(current, raw_input)

        if updated is current:
            self.logger.debug("Intake ignored", raw_input=raw_input)
            return current

        self._state = updated
        log_state_transition(
            self.logger,
            from_state=current.to_dict(),
            to_state=updated.to_dict(),
            trigger="intake",
            context={"consumed_ml": current.remaining_ml - updated.remaining_ml}
        )

        if updated.completed_today and not current.completed_today:
            self.logger.info("Daily goal reached", streak=updated.streak, last_date=updated.last_date)

        self._persist(updated)
        return updated

    def check_rollover(self, today: Optional[Union[str, date]] = None) -> HydrationState:
        """Roll the active state over if the day changed during a session."""
        current = self._state
        updated = rollover(current, today or self._today())

        if updated is current:
            return current

        self._state = updated
        log_state_transition(
            self.logger,
            from_state=current.to_dict(),
            to_state=updated.to_dict(),
            trigger="rollover"
        )
        self._persist(updated)
        return updated

    def _read_stored_state(self, today: Union[str, date]) -> HydrationState:
        result = self.store.get(self.storage_key)

        if result.status == StoreStatus.ABSENT:
            self.logger.info("No stored state, initializing", key=self.storage_key)
            return build_initial_state(today)

        if not result.ok:
            self.logger.warning(
                "Stored state unreadable, initializing",
                key=self.storage_key,
                error=str(result.error)
            )
            return build_initial_state(today)

        try:
            return decode_state(result.value)
        except DataQualityError as e:
            self.logger.warning(
                "Stored state corrupt, initializing",
                key=self.storage_key,
                error=str(e),
                error_type=type(e).__name__
            )
            return build_initial_state(today)

    def _persist(self, state: HydrationState) -> StoreResult:
        """Write the full state; failures are logged and dropped."""
        result = self.store.set(self.storage_key, encode_state(state))

        if not result.ok:
            self.logger.warning(
                "State not persisted, continuing in memory",
                key=self.storage_key,
                error=str(result.error)
            )

        return result
