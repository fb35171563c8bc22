"""Virtual pet orchestrator.

This module wires the simulation engine together: the vitals, the tick
driver, the emotion engine, the affection meter and the notification queue,
plus the optional quest, reward and analytics collaborators. Player actions
(feed, drink, play) enter through :class:`VirtualPet`; presentation layers
plug in through ``UIEventSink`` and ``AvatarClient``.
"""

from __future__ import annotations

import asyncio
import logging
import os
import random
import signal
from enum import Enum
from typing import Any, Dict, List, Optional

from config import PetConfig
from piggy.affection_meter import AffectionMeter
from piggy.constants import (
    DEFAULT_ENV_FILE,
    DRINK_BOND_POINTS,
    DRINK_HAPPINESS_DELTA,
    DRINK_THIRST_DELTA,
    FEED_BOND_POINTS,
    FEED_HAPPINESS_DELTA,
    FEED_HUNGER_DELTA,
    PLAY_BOND_POINTS,
    PLAY_HAPPINESS_DELTA,
    PLAY_HUNGER_DELTA,
    PLAY_THIRST_DELTA,
)
from piggy.data_logger import DataLogger
from piggy.emotion_engine import EmotionEngine
from piggy.errors import ConfigurationError
from piggy.event_bus import EventBus, EventType
from piggy.metrics import SimulationMetrics
from piggy.notification_queue import NotificationQueue
from piggy.presentation_api import (
    AvatarClient,
    LoggingUISink,
    NullAvatarClient,
    UIEventSink,
)
from piggy.quest_manager import QuestManager
from piggy.reward_manager import RewardConfig, RewardManager
from piggy.stat_model import StatModel
from piggy.structured_logger import StructuredLogger
from piggy.tick_scheduler import TickConsumers, TickScheduler

LOGGER = logging.getLogger(__name__)


class Temperament(Enum):
    CURIOUS = "Curious"
    SHY = "Shy"
    PLAYFUL = "Playful"


# action name -> (stat deltas, bond points, animation)
INTERACTIONS: Dict[str, Any] = {
    "Feed": (
        {"hunger": FEED_HUNGER_DELTA, "happiness": FEED_HAPPINESS_DELTA},
        FEED_BOND_POINTS,
        "Eat",
    ),
    "Drink": (
        {"thirst": DRINK_THIRST_DELTA, "happiness": DRINK_HAPPINESS_DELTA},
        DRINK_BOND_POINTS,
        "Drink",
    ),
    "Play": (
        {
            "happiness": PLAY_HAPPINESS_DELTA,
            "hunger": PLAY_HUNGER_DELTA,
            "thirst": PLAY_THIRST_DELTA,
        },
        PLAY_BOND_POINTS,
        "Play",
    ),
}


def load_env_file(path: str) -> None:
    if not os.path.exists(path):
        return
    with open(path, "r", encoding="utf-8") as handle:
        for raw_line in handle:
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" not in line:
                continue
            key, value = line.split("=", 1)
            os.environ.setdefault(key.strip(), value.strip())


class VirtualPet:
    """Composition root for one pet.

    All collaborators are created here and handed to each other through
    constructors; observers register on :attr:`event_bus`.
    """

    def __init__(
        self,
        config: Optional[PetConfig],
        *,
        ui_event_sink: Optional[UIEventSink] = None,
        avatar_client: Optional[AvatarClient] = None,
        reward_configs: Optional[List[RewardConfig]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        if config is None:
            raise ConfigurationError("VirtualPet requires a PetConfig")
        self.config = config
        self._rng = rng or random.Random()
        self.temperament = self._rng.choice(list(Temperament))

        self.event_bus = EventBus()
        self._metrics = SimulationMetrics()
        self._structured_logger = StructuredLogger(__name__)

        self.stats = StatModel(
            hunger=config.initial_hunger,
            thirst=config.initial_thirst,
            happiness=config.initial_happiness,
            health=config.initial_health,
        )
        self.ui_event_sink = ui_event_sink or LoggingUISink()
        self.avatar_client = avatar_client or NullAvatarClient()

        self.emotions = EmotionEngine(config.emotion_thresholds(), event_bus=self.event_bus)
        self.affection = AffectionMeter(
            config.points_per_level,
            config.max_bond_level,
            event_bus=self.event_bus,
            structured_logger=self._structured_logger,
        )
        self.notifications = NotificationQueue(
            self.ui_event_sink,
            display_duration=config.display_duration,
            queue_delay=config.queue_delay,
            event_bus=self.event_bus,
            metrics=self._metrics,
        )
        self.quests = QuestManager(config.quest_interactions_required, event_bus=self.event_bus)
        self.rewards = RewardManager(reward_configs, event_bus=self.event_bus, rng=self._rng)
        self.data_logger = DataLogger(
            self._structured_logger,
            enable_logging=config.enable_data_logging,
            log_to_console=config.log_to_console,
            max_cached_events=config.max_cached_events,
        )
        self.scheduler = TickScheduler(
            self.stats,
            TickConsumers(
                emotion_engine=self.emotions,
                quest_manager=self.quests,
                reward_manager=self.rewards,
                data_logger=self.data_logger,
                notification_queue=self.notifications,
            ),
            event_bus=self.event_bus,
            metrics=self._metrics,
            structured_logger=self._structured_logger,
        )
        self.event_bus.subscribe(EventType.BOND_LEVEL_UP, self._on_bond_level_up)
        self.event_bus.subscribe(EventType.PET_DIED, self._on_pet_died)

    # ------------------------------------------------------------------
    async def start(self) -> None:
        await self.scheduler.start(self.config)
        LOGGER.info("VirtualPet started (temperament=%s)", self.temperament.value)

    async def shutdown(self) -> None:
        await self.scheduler.stop()
        await self.notifications.close()
        self.data_logger.flush()
        LOGGER.info("VirtualPet stopped")

    @property
    def is_alive(self) -> bool:
        return not self.stats.is_dead

    # ------------------------------------------------------------------
    def feed(self) -> bool:
        return self._interact("Feed")

    def drink(self) -> bool:
        return self._interact("Drink")

    def play(self) -> bool:
        return self._interact("Play")

    def _interact(self, action: str) -> bool:
        if self.stats.is_dead:
            LOGGER.warning("Ignoring %s; the pet is no longer alive", action)
            return False

        deltas, bond_points, animation = INTERACTIONS[action]
        for key, delta in deltas.items():
            self.stats.adjust(key, delta)
        self.affection.add_bond(bond_points)
        self.avatar_client.play_animation(animation)
        self.rewards.check_variable_reward(action)
        self.data_logger.log_action(action, {"bond_points": bond_points})
        self._metrics.record_interaction()
        self._structured_logger.log_interaction(action, self.stats.snapshot(), bond_points)
        self.event_bus.publish(EventType.INTERACTION, action)
        return True

    # ------------------------------------------------------------------
    def snapshot(self) -> Dict[str, Any]:
        return {
            "stats": self.stats.snapshot(),
            "emotion": self._current_emotion(),
            "bond": self.affection.snapshot(),
            "temperament": self.temperament.value,
            "alive": self.is_alive,
        }

    def get_metrics(self) -> Dict[str, Any]:
        return self._metrics.get_stats()

    def _current_emotion(self) -> Optional[str]:
        state = self.emotions.classify(self.stats)
        return state.value if state is not None else None

    def _on_bond_level_up(self, level: Any) -> None:
        self.notifications.enqueue(f"Our bond grew stronger! Level {level} 💖")

    def _on_pet_died(self, data: Any) -> None:
        LOGGER.info("The pet has passed away: %s", data)


async def main() -> None:
    logging.basicConfig(level=os.getenv("PIGGY_LOG_LEVEL", "INFO").upper())
    load_env_file(os.path.join(os.path.dirname(__file__), DEFAULT_ENV_FILE))

    config = PetConfig.from_env()
    pet = VirtualPet(config)

    def shutdown_handler(sig, frame):
        LOGGER.info("Shutdown signal received (%s)", sig)
        asyncio.create_task(pet.shutdown())
    signal.signal(signal.SIGINT, shutdown_handler)
    signal.signal(signal.SIGTERM, shutdown_handler)
    await pet.start()

    try:
        await pet.scheduler.wait_finished()
        await pet.notifications.wait_idle()
    except asyncio.CancelledError:
        LOGGER.info("Simulation cancelled; shutting down")
    finally:
        await pet.shutdown()


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
