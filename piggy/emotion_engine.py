"""Mood classification and low-stat alerts derived from the pet's vitals."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, TYPE_CHECKING

from piggy.constants import (
    DEFAULT_ANXIOUS_THRESHOLD,
    DEFAULT_JOY_THRESHOLD,
    DEFAULT_SADNESS_THRESHOLD,
    HEALTH_ALERT,
    HEALTH_ALERT_THRESHOLD,
    HUNGER_ALERT,
    THIRST_ALERT,
)
from piggy.event_bus import EventType

if TYPE_CHECKING:  # pragma: no cover
    from piggy.event_bus import EventBus
    from piggy.stat_model import StatModel

LOGGER = logging.getLogger(__name__)


class EmotionState(Enum):
    """Emotional states of the pet."""
    SAD = "Sad"
    CONTENT = "Content"
    JOY = "Joy"
    ANXIOUS = "Anxious"


@dataclass(frozen=True)
class EmotionThresholds:
    joy: float = DEFAULT_JOY_THRESHOLD
    sadness: float = DEFAULT_SADNESS_THRESHOLD
    anxious: float = DEFAULT_ANXIOUS_THRESHOLD


class EmotionEngine:
    """Stateless classifier turning vitals into a mood and alert messages.

    Precedence is fixed: joy, then sadness, then anxiety. A very unhappy
    pet that is also hungry is therefore ``SAD``, never ``ANXIOUS``.
    """

    def __init__(
        self,
        thresholds: Optional[EmotionThresholds] = None,
        event_bus: Optional["EventBus"] = None,
    ) -> None:
        self.thresholds = thresholds or EmotionThresholds()
        self._event_bus = event_bus

    def classify(self, stats: Optional["StatModel"]) -> Optional[EmotionState]:
        if stats is None:
            LOGGER.error("[EmotionEngine] stats is None; cannot classify")
            return None

        if stats.happiness >= self.thresholds.joy:
            return EmotionState.JOY
        if stats.happiness <= self.thresholds.sadness:
            return EmotionState.SAD
        if stats.hunger >= self.thresholds.anxious or stats.thirst >= self.thresholds.anxious:
            return EmotionState.ANXIOUS
        return EmotionState.CONTENT

    def update_emotion(self, stats: Optional["StatModel"]) -> Optional[EmotionState]:
        """Classify and notify observers.

        Observers are notified on every call, including when the mood did not
        change; suppressing repeats is left to the presentation layer.
        """

        state = self.classify(stats)
        if state is None:
            return None
        if self._event_bus is not None:
            self._event_bus.publish(EventType.EMOTION_CHANGED, state)
        return state

    def get_alerts(self, stats: Optional["StatModel"]) -> List[str]:
        """Retrieve alert messages for vitals past their warning thresholds.

        Alerts are independent of the mood and always come out in
        hunger, thirst, health order.
        """

        if stats is None:
            LOGGER.error("[EmotionEngine] stats is None; no alerts produced")
            return []

        alerts: List[str] = []
        if stats.hunger >= self.thresholds.anxious:
            alerts.append(HUNGER_ALERT)
        if stats.thirst >= self.thresholds.anxious:
            alerts.append(THIRST_ALERT)
        if stats.health <= HEALTH_ALERT_THRESHOLD:
            alerts.append(HEALTH_ALERT)
        return alerts
