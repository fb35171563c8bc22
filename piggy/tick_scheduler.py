"""Fixed-interval simulation driver.

Each tick advances the pet's vitals by one in-game hour and then feeds the
post-mutation stats to the downstream consumers, always in the same order:
emotion classification, quest evaluation, reward evaluation, logging, alert
generation and finally alert dispatch to the notification queue. Consumers
are optional; a missing one is skipped.

A tick is synchronous, so cancelling the driver between ticks can never
leave the vitals half-updated.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
import math
import time
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Optional, TYPE_CHECKING

from piggy.constants import TICK_REWARD_ACTION
from piggy.errors import ConfigurationError
from piggy.event_bus import EventType

if TYPE_CHECKING:  # pragma: no cover
    from config import PetConfig
    from piggy.data_logger import DataLogger
    from piggy.emotion_engine import EmotionEngine, EmotionState
    from piggy.event_bus import EventBus
    from piggy.metrics import SimulationMetrics
    from piggy.notification_queue import NotificationQueue
    from piggy.quest_manager import QuestManager
    from piggy.reward_manager import RewardManager
    from piggy.stat_model import StatModel
    from piggy.structured_logger import StructuredLogger

LOGGER = logging.getLogger(__name__)

_REQUIRED_RATES = ("hunger_rate", "thirst_rate", "happiness_decay")


@dataclass
class TickConsumers:
    """Collaborators invoked after every tick; any of them may be absent."""

    emotion_engine: Optional["EmotionEngine"] = None
    quest_manager: Optional["QuestManager"] = None
    reward_manager: Optional["RewardManager"] = None
    data_logger: Optional["DataLogger"] = None
    notification_queue: Optional["NotificationQueue"] = None


@dataclass
class TickResult:
    age_hours: int
    emotion: Optional["EmotionState"]
    alerts: List[str] = field(default_factory=list)
    health_penalized: bool = False
    stats: Dict[str, Any] = field(default_factory=dict)


def validate_tick_config(config: Optional["PetConfig"]) -> "PetConfig":
    """Check the settings the tick loop cannot run without."""

    if config is None:
        raise ConfigurationError("Missing configuration; refusing to start the tick loop")

    hour_duration = getattr(config, "hour_duration", None)
    if not _is_number(hour_duration) or hour_duration <= 0:
        raise ConfigurationError(f"hour_duration must be a positive number, got {hour_duration!r}")

    for name in _REQUIRED_RATES:
        value = getattr(config, name, None)
        if not _is_number(value) or value < 0:
            raise ConfigurationError(f"{name} must be a non-negative number, got {value!r}")
    return config


def _is_number(value: Any) -> bool:
    return (
        isinstance(value, (int, float))
        and not isinstance(value, bool)
        and math.isfinite(value)
    )


class TickScheduler:
    """Drives :class:`StatModel` decay from a cooperative asyncio task."""

    def __init__(
        self,
        stats: "StatModel",
        consumers: Optional[TickConsumers] = None,
        *,
        event_bus: Optional["EventBus"] = None,
        metrics: Optional["SimulationMetrics"] = None,
        structured_logger: Optional["StructuredLogger"] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self._stats = stats
        self._consumers = consumers or TickConsumers()
        self._event_bus = event_bus
        self._metrics = metrics
        self._structured_logger = structured_logger
        self._sleep = sleep
        self._config: Optional["PetConfig"] = None
        self._running = False
        self._task: Optional[asyncio.Task[None]] = None

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def consumers(self) -> TickConsumers:
        return self._consumers

    # ------------------------------------------------------------------
    def configure(self, config: Optional["PetConfig"]) -> None:
        """Validate and store the tick settings without starting the loop."""

        self._config = validate_tick_config(config)

    async def start(self, config: Optional["PetConfig"]) -> None:
        """Begin ticking every ``config.hour_duration`` seconds.

        Raises:
            ConfigurationError: if the configuration is missing or invalid.
        """
        validated = validate_tick_config(config)
        if self._running:
            LOGGER.debug("Tick loop already running; new configuration ignored")
            return
        self._config = validated
        if self._stats.is_dead:
            LOGGER.warning("Pet is already dead; tick loop not started")
            return

        self._running = True
        self._task = asyncio.create_task(self._tick_loop())
        if self._structured_logger is not None:
            self._structured_logger.log_lifecycle("started")
        LOGGER.info("Tick loop started (hour_duration=%ss)", self._config.hour_duration)

    async def stop(self) -> None:
        self._running = False
        task = self._task
        self._task = None
        if task is None:
            return
        if task is asyncio.current_task():
            return
        if not task.done():
            task.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await task
        if self._structured_logger is not None:
            self._structured_logger.log_lifecycle("stopped")
        LOGGER.info("Tick loop stopped")

    async def wait_finished(self) -> None:
        """Wait for the loop to end on its own (the pet died)."""

        if self._task is not None:
            await asyncio.shield(self._task)

    # ------------------------------------------------------------------
    def tick(self) -> Optional[TickResult]:
        """Run a single simulation step synchronously."""

        if self._config is None:
            raise ConfigurationError("tick() called before a configuration was provided")
        if self._stats.is_dead:
            LOGGER.warning("Tick skipped; pet health is zero")
            return None

        started = time.monotonic()
        config = self._config
        stats = self._stats
        consumers = self._consumers

        penalized = stats.decay(config.hunger_rate, config.thirst_rate, config.happiness_decay)

        emotion = None
        if consumers.emotion_engine is not None:
            emotion = self._call_consumer("emotion", consumers.emotion_engine.update_emotion, stats)
        if consumers.quest_manager is not None:
            self._call_consumer("quest", consumers.quest_manager.check_quests, stats)
        if consumers.reward_manager is not None:
            self._call_consumer(
                "reward", consumers.reward_manager.check_variable_reward, TICK_REWARD_ACTION
            )
        if consumers.data_logger is not None:
            self._call_consumer("data_logger", consumers.data_logger.log_tick, stats)
        if self._structured_logger is not None:
            self._structured_logger.log_tick(
                stats.snapshot(),
                emotion=emotion.value if emotion is not None else None,
            )

        alerts: List[str] = []
        if consumers.emotion_engine is not None:
            alerts = self._call_consumer("alerts", consumers.emotion_engine.get_alerts, stats) or []
        if alerts:
            if self._event_bus is not None:
                self._event_bus.publish(EventType.ALERTS_RAISED, list(alerts))
            if consumers.notification_queue is not None:
                self._call_consumer(
                    "notifications", consumers.notification_queue.trigger_alerts, alerts
                )

        result = TickResult(
            age_hours=stats.age_hours,
            emotion=emotion,
            alerts=alerts,
            health_penalized=penalized,
            stats=stats.snapshot(),
        )
        if self._metrics is not None:
            self._metrics.record_tick(time.monotonic() - started)
            self._metrics.record_alerts(len(alerts))
        if self._event_bus is not None:
            self._event_bus.publish(EventType.TICK_COMPLETED, result)

        if stats.is_dead:
            self._on_death()
        return result

    def _call_consumer(self, name: str, func: Callable[..., Any], *args: Any) -> Any:
        """Run one consumer; a failure is reported and does not abort the tick."""

        try:
            return func(*args)
        except Exception as exc:
            self._report_error(f"Tick consumer '{name}' failed", exc)
            return None

    def _report_error(self, message: str, exc: Exception) -> None:
        LOGGER.error("%s: %s", message, exc)
        if self._metrics is not None:
            self._metrics.record_error()
        if self._structured_logger is not None:
            self._structured_logger.log_error(
                type(exc).__name__, str(exc), {"age_hours": self._stats.age_hours}
            )

    def _on_death(self) -> None:
        self._running = False
        LOGGER.info("Pet health reached zero after %d hours; stopping tick loop", self._stats.age_hours)
        if self._structured_logger is not None:
            self._structured_logger.log_lifecycle("died", reason="health reached zero")
        if self._event_bus is not None:
            self._event_bus.publish(EventType.PET_DIED, self._stats.snapshot())

    async def _tick_loop(self) -> None:
        assert self._config is not None
        interval = self._config.hour_duration
        try:
            while self._running and not self._stats.is_dead:
                await self._sleep(interval)
                if not self._running:
                    break
                try:
                    self.tick()
                except Exception as exc:
                    self._report_error("Tick failed", exc)
        finally:
            self._running = False
