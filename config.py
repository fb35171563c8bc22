"""Centralized configuration management for the virtual pet."""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from piggy.constants import (
    DEFAULT_ANXIOUS_THRESHOLD,
    DEFAULT_DISPLAY_DURATION_SECONDS,
    DEFAULT_HAPPINESS_DECAY,
    DEFAULT_HOUR_DURATION_SECONDS,
    DEFAULT_HUNGER_RATE,
    DEFAULT_INITIAL_HAPPINESS,
    DEFAULT_INITIAL_HEALTH,
    DEFAULT_INITIAL_HUNGER,
    DEFAULT_INITIAL_THIRST,
    DEFAULT_JOY_THRESHOLD,
    DEFAULT_MAX_BOND_LEVEL,
    DEFAULT_MAX_CACHED_EVENTS,
    DEFAULT_POINTS_PER_LEVEL,
    DEFAULT_QUEST_INTERACTIONS_REQUIRED,
    DEFAULT_QUEUE_DELAY_SECONDS,
    DEFAULT_SADNESS_THRESHOLD,
    DEFAULT_THIRST_RATE,
)
from piggy.emotion_engine import EmotionThresholds
from piggy.errors import ConfigurationError

# Environment variable backing each field.
ENV_VARS: Dict[str, str] = {
    "hour_duration": "PIGGY_HOUR_DURATION",
    "hunger_rate": "PIGGY_HUNGER_RATE",
    "thirst_rate": "PIGGY_THIRST_RATE",
    "happiness_decay": "PIGGY_HAPPINESS_DECAY",
    "joy_threshold": "PIGGY_JOY_THRESHOLD",
    "sadness_threshold": "PIGGY_SADNESS_THRESHOLD",
    "anxious_threshold": "PIGGY_ANXIOUS_THRESHOLD",
    "points_per_level": "PIGGY_POINTS_PER_LEVEL",
    "max_bond_level": "PIGGY_MAX_BOND_LEVEL",
    "display_duration": "PIGGY_DISPLAY_DURATION",
    "queue_delay": "PIGGY_QUEUE_DELAY",
    "quest_interactions_required": "PIGGY_QUEST_INTERACTIONS",
    "enable_data_logging": "PIGGY_DATA_LOGGING",
    "log_to_console": "PIGGY_LOG_TO_CONSOLE",
    "max_cached_events": "PIGGY_MAX_CACHED_EVENTS",
    "initial_hunger": "PIGGY_INITIAL_HUNGER",
    "initial_thirst": "PIGGY_INITIAL_THIRST",
    "initial_happiness": "PIGGY_INITIAL_HAPPINESS",
    "initial_health": "PIGGY_INITIAL_HEALTH",
}


class PetConfig(BaseModel):
    """Type-safe configuration for the simulation with validation."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    # Time settings
    hour_duration: float = Field(default=DEFAULT_HOUR_DURATION_SECONDS, gt=0)

    # Stat rates
    hunger_rate: float = Field(default=DEFAULT_HUNGER_RATE, ge=0, le=100)
    thirst_rate: float = Field(default=DEFAULT_THIRST_RATE, ge=0, le=100)
    happiness_decay: float = Field(default=DEFAULT_HAPPINESS_DECAY, ge=0, le=100)

    # Emotion thresholds
    joy_threshold: float = Field(default=DEFAULT_JOY_THRESHOLD, ge=0, le=100)
    sadness_threshold: float = Field(default=DEFAULT_SADNESS_THRESHOLD, ge=0, le=100)
    anxious_threshold: float = Field(default=DEFAULT_ANXIOUS_THRESHOLD, ge=0, le=100)

    # Bonding
    points_per_level: Tuple[int, ...] = Field(default=DEFAULT_POINTS_PER_LEVEL)
    max_bond_level: int = Field(default=DEFAULT_MAX_BOND_LEVEL, ge=0)

    # Notifications
    display_duration: float = Field(default=DEFAULT_DISPLAY_DURATION_SECONDS, gt=0)
    queue_delay: float = Field(default=DEFAULT_QUEUE_DELAY_SECONDS, ge=0)

    # Quests and analytics
    quest_interactions_required: int = Field(default=DEFAULT_QUEST_INTERACTIONS_REQUIRED, ge=1)
    enable_data_logging: bool = True
    log_to_console: bool = False
    max_cached_events: int = Field(default=DEFAULT_MAX_CACHED_EVENTS, ge=1)

    # Spawn seeds
    initial_hunger: float = Field(default=DEFAULT_INITIAL_HUNGER, ge=0, le=100)
    initial_thirst: float = Field(default=DEFAULT_INITIAL_THIRST, ge=0, le=100)
    initial_happiness: float = Field(default=DEFAULT_INITIAL_HAPPINESS, ge=0, le=100)
    initial_health: float = Field(default=DEFAULT_INITIAL_HEALTH, gt=0, le=100)

    @field_validator("points_per_level")
    @classmethod
    def validate_points_per_level(cls, v: Tuple[int, ...]) -> Tuple[int, ...]:
        if not v:
            raise ValueError("points_per_level must list at least one level")
        if any(points < 0 for points in v):
            raise ValueError("points_per_level entries must not be negative")
        return v

    def emotion_thresholds(self) -> EmotionThresholds:
        return EmotionThresholds(
            joy=self.joy_threshold,
            sadness=self.sadness_threshold,
            anxious=self.anxious_threshold,
        )

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "PetConfig":
        """Validate a plain mapping, raising ConfigurationError on bad input."""
        if data is None:
            raise ConfigurationError("Missing configuration mapping")
        try:
            return cls.model_validate(dict(data))
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid pet configuration: {exc}") from exc

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "PetConfig":
        """Load configuration from environment variables.

        Unset variables keep their defaults; malformed ones raise
        ConfigurationError instead of silently falling back.
        """
        env = os.environ if environ is None else environ
        values: Dict[str, Any] = {}
        for field_name, env_name in ENV_VARS.items():
            raw = env.get(env_name)
            if raw is None or not raw.strip():
                continue
            if field_name == "points_per_level":
                values[field_name] = [part.strip() for part in raw.split(",") if part.strip()]
            else:
                values[field_name] = raw.strip()
        return cls.from_mapping(values)
