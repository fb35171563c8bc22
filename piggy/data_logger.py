"""Caches pet stats and player actions for analytics."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any, Deque, Dict, List, Optional, TYPE_CHECKING

from piggy.constants import DEFAULT_MAX_CACHED_EVENTS

if TYPE_CHECKING:  # pragma: no cover
    from piggy.stat_model import StatModel
    from piggy.structured_logger import StructuredLogger

LOGGER = logging.getLogger(__name__)


@dataclass
class LogEvent:
    event_type: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    parameters: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "event_type": self.event_type,
            "timestamp": self.timestamp.isoformat(),
            "parameters": dict(self.parameters),
        }


class DataLogger:
    """Bounded in-memory analytics cache.

    Uploading is out of scope: :meth:`flush` hands the cached batch to the
    structured logger and clears the cache.
    """

    def __init__(
        self,
        structured_logger: Optional["StructuredLogger"] = None,
        *,
        enable_logging: bool = True,
        log_to_console: bool = False,
        max_cached_events: int = DEFAULT_MAX_CACHED_EVENTS,
    ) -> None:
        self._structured_logger = structured_logger
        self.enable_logging = enable_logging
        self.log_to_console = log_to_console
        self._events: Deque[LogEvent] = deque(maxlen=max(1, max_cached_events))

    @property
    def cached_events(self) -> List[LogEvent]:
        return list(self._events)

    def log_tick(self, stats: Optional["StatModel"]) -> None:
        """Log pet stats during a tick."""
        if not self.enable_logging or stats is None:
            return
        event = LogEvent("PetStats")
        event.parameters["Hunger"] = stats.hunger
        event.parameters["Thirst"] = stats.thirst
        event.parameters["Happiness"] = stats.happiness
        event.parameters["Health"] = stats.health
        event.parameters["AgeHours"] = stats.age_hours
        self._log_event(event)

    def log_action(self, action_type: str, parameters: Optional[Dict[str, Any]] = None) -> None:
        """Log a player action."""
        if not self.enable_logging:
            return
        event = LogEvent(action_type)
        if parameters:
            event.parameters.update(parameters)
        self._log_event(event)

    def flush(self) -> int:
        """Emit and clear the cache; returns how many events were flushed."""

        if not self._events:
            return 0
        batch = [event.to_dict() for event in self._events]
        LOGGER.debug("[DataLogger] Flushing %d events", len(batch))
        if self._structured_logger is not None:
            self._structured_logger.log_cached_events(batch)
        self._events.clear()
        return len(batch)

    def _log_event(self, event: LogEvent) -> None:
        # deque maxlen drops the oldest event once the cache is full
        self._events.append(event)
        if self.log_to_console:
            params = ", ".join(f"{key}={value}" for key, value in event.parameters.items())
            LOGGER.info("[DataLogger] Event: %s, Parameters: %s", event.event_type, params)
