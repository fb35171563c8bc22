"""Event bus for loose coupling between the engine and its observers."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, List

LOGGER = logging.getLogger(__name__)


class EventType(Enum):
    """Types of events that can be published."""
    EMOTION_CHANGED = "emotion_changed"
    BOND_LEVEL_UP = "bond_level_up"
    BOND_POINTS_CHANGED = "bond_points_changed"
    ALERTS_RAISED = "alerts_raised"
    TICK_COMPLETED = "tick_completed"
    QUEST_COMPLETED = "quest_completed"
    REWARD_TRIGGERED = "reward_triggered"
    INTERACTION = "interaction"
    NOTIFICATION_SHOWN = "notification_shown"
    PET_DIED = "pet_died"


class EventBus:
    """Simple pub/sub event bus for component communication."""

    def __init__(self):
        self._subscribers: Dict[EventType, List[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: EventType, handler: Callable[[Any], None]) -> None:
        """Subscribe to an event type.

        Args:
            event_type: The type of event to subscribe to
            handler: Callback function that receives event data
        """
        self._subscribers.setdefault(event_type, []).append(handler)
        LOGGER.debug("Subscribed handler to event type: %s", event_type.value)

    def unsubscribe(self, event_type: EventType, handler: Callable[[Any], None]) -> None:
        """Unsubscribe from an event type.

        Args:
            event_type: The type of event to unsubscribe from
            handler: The handler to remove
        """
        handlers = self._subscribers.get(event_type, [])
        if handler in handlers:
            handlers.remove(handler)
            LOGGER.debug("Unsubscribed handler from event type: %s", event_type.value)

    def publish(self, event_type: EventType, data: Any = None) -> None:
        """Publish an event to all subscribers, in subscription order.

        A failing handler is logged and skipped; the remaining handlers
        still receive the event.

        Args:
            event_type: The type of event
            data: Optional event data
        """
        handlers = list(self._subscribers.get(event_type, []))
        for handler in handlers:
            try:
                handler(data)
            except Exception as exc:
                LOGGER.error("Event handler failed for %s: %s", event_type.value, exc)

    def subscriber_count(self, event_type: EventType) -> int:
        return len(self._subscribers.get(event_type, []))

    def clear(self) -> None:
        """Clear all subscribers."""
        self._subscribers.clear()
        LOGGER.debug("Event bus cleared")
