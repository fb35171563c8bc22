"""Simulation and notification engine for the virtual pet."""

from piggy.affection_meter import AffectionMeter
from piggy.emotion_engine import EmotionEngine, EmotionState
from piggy.errors import ConfigurationError
from piggy.event_bus import EventBus, EventType
from piggy.notification_queue import NotificationQueue, QueueState
from piggy.stat_model import StatModel
from piggy.tick_scheduler import TickConsumers, TickScheduler

__all__ = [
    "AffectionMeter",
    "ConfigurationError",
    "EmotionEngine",
    "EmotionState",
    "EventBus",
    "EventType",
    "NotificationQueue",
    "QueueState",
    "StatModel",
    "TickConsumers",
    "TickScheduler",
]
