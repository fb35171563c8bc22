"""Structured logging with JSON-formatted context for simulation analysis."""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import Any, Dict, List, Optional

LOGGER = logging.getLogger(__name__)


class StructuredLogger:
    """Logger that emits JSON-formatted structured logs for later analysis."""

    def __init__(self, name: str):
        self.logger = logging.getLogger(name)

    def log_tick(
        self,
        stats: Dict[str, Any],
        emotion: Optional[str] = None,
    ) -> None:
        """Log one simulation tick with the post-mutation vitals."""
        event = {
            "event": "tick",
            "stats": stats,
            "timestamp": datetime.now(UTC).isoformat(),
        }
        if emotion is not None:
            event["emotion"] = emotion

        self.logger.info(json.dumps(event, ensure_ascii=False))

    def log_interaction(
        self,
        action: str,
        stats: Dict[str, Any],
        bond_points: int,
    ) -> None:
        """Log a player interaction (feed, drink, play)."""
        event = {
            "event": "interaction",
            "action": action,
            "bond_points": bond_points,
            "stats": stats,
            "timestamp": datetime.now(UTC).isoformat(),
        }

        self.logger.info(json.dumps(event, ensure_ascii=False))

    def log_level_up(self, level: int, points: int) -> None:
        event = {
            "event": "bond_level_up",
            "level": level,
            "points": points,
            "timestamp": datetime.now(UTC).isoformat(),
        }

        self.logger.info(json.dumps(event, ensure_ascii=False))

    def log_cached_events(self, events: List[Dict[str, Any]]) -> None:
        """Log a batch of cached analytics events."""
        event = {
            "event": "analytics_flush",
            "count": len(events),
            "events": events,
            "timestamp": datetime.now(UTC).isoformat(),
        }

        self.logger.info(json.dumps(event, ensure_ascii=False, default=str))

    def log_error(
        self,
        error_type: str,
        error_message: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Log an error with context."""
        event = {
            "event": "error",
            "error_type": error_type,
            "error_message": error_message,
            "timestamp": datetime.now(UTC).isoformat(),
        }
        if context:
            event["context"] = context

        self.logger.error(json.dumps(event, ensure_ascii=False))

    def log_lifecycle(
        self,
        phase: str,
        reason: Optional[str] = None,
    ) -> None:
        """Log a simulation lifecycle transition (started, stopped, died)."""
        event = {
            "event": "lifecycle",
            "phase": phase,
            "timestamp": datetime.now(UTC).isoformat(),
        }
        if reason:
            event["reason"] = reason

        self.logger.info(json.dumps(event, ensure_ascii=False))
