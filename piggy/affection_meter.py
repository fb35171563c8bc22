"""Long-term bonding with the pet through accumulated interactions."""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Tuple, TYPE_CHECKING

from piggy.constants import DEFAULT_MAX_BOND_LEVEL, DEFAULT_POINTS_PER_LEVEL
from piggy.event_bus import EventType

if TYPE_CHECKING:  # pragma: no cover
    from piggy.event_bus import EventBus
    from piggy.structured_logger import StructuredLogger

LOGGER = logging.getLogger(__name__)


class AffectionMeter:
    """Carry-over leveling counter fed by bonding points.

    Surplus points beyond a level's requirement roll into the next level.
    Levels past the end of ``points_per_level`` can never be reached, and
    ``level`` never exceeds ``max_level``.
    """

    def __init__(
        self,
        points_per_level: Sequence[int] = DEFAULT_POINTS_PER_LEVEL,
        max_level: int = DEFAULT_MAX_BOND_LEVEL,
        event_bus: Optional["EventBus"] = None,
        structured_logger: Optional["StructuredLogger"] = None,
    ) -> None:
        if not points_per_level:
            LOGGER.warning("[AffectionMeter] points_per_level is empty; bond levels are unreachable")
        self._points_per_level: Tuple[int, ...] = tuple(int(p) for p in points_per_level)
        self._max_level = max(0, int(max_level))
        self._event_bus = event_bus
        self._structured_logger = structured_logger
        self._level = 0
        self._points = 0

    @property
    def level(self) -> int:
        return self._level

    @property
    def points(self) -> int:
        return self._points

    @property
    def max_level(self) -> int:
        return self._max_level

    @property
    def is_maxed(self) -> bool:
        return self._level >= self._max_level

    def required_for_level(self, level: int) -> float:
        """Points needed to leave ``level``; infinite beyond the table."""

        if level < 0 or level >= len(self._points_per_level):
            return math.inf
        return self._points_per_level[level]

    def add_bond(self, points: int) -> None:
        """Add bond points, levelling up as many times as they allow."""

        if points <= 0:
            LOGGER.warning("[AffectionMeter] Ignoring non-positive bond points: %s", points)
            return

        if self.is_maxed:
            self._publish(EventType.BOND_POINTS_CHANGED, self._points)
            return

        self._points += points
        while self._level < self._max_level:
            needed = self.required_for_level(self._level)
            if self._points < needed:
                break
            self._points -= int(needed)
            self._level += 1
            LOGGER.info("[AffectionMeter] Bond Level Up! Now level %d", self._level)
            if self._structured_logger is not None:
                self._structured_logger.log_level_up(self._level, self._points)
            self._publish(EventType.BOND_LEVEL_UP, self._level)

        self._publish(EventType.BOND_POINTS_CHANGED, self._points)

    def progress(self) -> float:
        """Fraction of the way to the next level, between 0.0 and 1.0."""

        if self.is_maxed:
            return 1.0
        needed = self.required_for_level(self._level)
        if needed <= 0:
            return 1.0
        if math.isinf(needed):
            return 0.0
        return min(1.0, self._points / needed)

    def snapshot(self) -> dict:
        return {
            "level": self._level,
            "points": self._points,
            "progress": round(self.progress(), 3),
        }

    def _publish(self, event_type: EventType, value: int) -> None:
        if self._event_bus is not None:
            self._event_bus.publish(event_type, value)
