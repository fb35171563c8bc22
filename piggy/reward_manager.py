"""Variable reward schedules to encourage continued play."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, TYPE_CHECKING

from piggy.constants import (
    DEFAULT_REWARD_PROBABILITY,
    MAX_REWARD_PROBABILITY,
    MIN_REWARD_PROBABILITY,
)
from piggy.errors import ConfigurationError
from piggy.event_bus import EventType

if TYPE_CHECKING:  # pragma: no cover
    from piggy.event_bus import EventBus

LOGGER = logging.getLogger(__name__)


@dataclass
class RewardConfig:
    """Reward chance for one action type."""

    action_type: str
    reward_probability: float = DEFAULT_REWARD_PROBABILITY

    def __post_init__(self) -> None:
        if not self.action_type:
            raise ConfigurationError("RewardConfig.action_type must not be empty")
        if not MIN_REWARD_PROBABILITY <= self.reward_probability <= MAX_REWARD_PROBABILITY:
            raise ConfigurationError(
                f"reward_probability for {self.action_type} must be between "
                f"{MIN_REWARD_PROBABILITY} and {MAX_REWARD_PROBABILITY}"
            )


class RewardManager:
    """Rolls a reward for actions that have a configured probability."""

    def __init__(
        self,
        reward_configs: Optional[List[RewardConfig]] = None,
        event_bus: Optional["EventBus"] = None,
        rng: Optional[random.Random] = None,
        log_rewards: bool = False,
    ) -> None:
        self._reward_configs: List[RewardConfig] = []
        self._event_bus = event_bus
        self._rng = rng or random.Random()
        self.log_rewards = log_rewards
        for config in reward_configs or []:
            self.add_reward_config(config)

    @property
    def reward_configs(self) -> List[RewardConfig]:
        return list(self._reward_configs)

    def check_variable_reward(self, action_type: str) -> bool:
        """Roll for a reward; returns True when one was triggered."""

        for config in self._reward_configs:
            if config.action_type != action_type:
                continue
            if self._rng.random() <= config.reward_probability:
                if self.log_rewards:
                    LOGGER.info("[RewardManager] Triggered reward for %s", action_type)
                if self._event_bus is not None:
                    self._event_bus.publish(EventType.REWARD_TRIGGERED, action_type)
                return True
            return False
        return False

    def add_reward_config(self, config: Optional[RewardConfig]) -> None:
        """Add a config, replacing any existing one for the same action."""

        if config is None:
            return
        for index, existing in enumerate(self._reward_configs):
            if existing.action_type == config.action_type:
                self._reward_configs[index] = config
                return
        self._reward_configs.append(config)
