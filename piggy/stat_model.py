"""Vital statistics of the pet and the rules that keep them in range."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from piggy.constants import (
    DEFAULT_INITIAL_HAPPINESS,
    DEFAULT_INITIAL_HEALTH,
    DEFAULT_INITIAL_HUNGER,
    DEFAULT_INITIAL_THIRST,
    STARVATION_HEALTH_PENALTY,
    STAT_MAX,
    STAT_MIN,
)

_ADJUSTABLE = ("hunger", "thirst", "happiness")


@dataclass
class StatModel:
    """Bounded vitals plus an elapsed-age counter.

    Hunger and thirst grow towards 100 over time; happiness decays towards 0.
    Health can only go down, through :meth:`penalize_health`.
    """

    hunger: float = DEFAULT_INITIAL_HUNGER
    thirst: float = DEFAULT_INITIAL_THIRST
    happiness: float = DEFAULT_INITIAL_HAPPINESS
    health: float = DEFAULT_INITIAL_HEALTH
    age_hours: int = 0

    def __post_init__(self) -> None:
        self.hunger = self._clamp(self.hunger)
        self.thirst = self._clamp(self.thirst)
        self.happiness = self._clamp(self.happiness)
        self.health = self._clamp(self.health)

    @property
    def is_dead(self) -> bool:
        return self.health <= STAT_MIN

    @property
    def is_starving(self) -> bool:
        """True when hunger or thirst sits at the ceiling."""

        return self.hunger >= STAT_MAX or self.thirst >= STAT_MAX

    def adjust(self, key: str, delta: float) -> None:
        """Shift hunger, thirst or happiness by ``delta`` and clamp."""

        if key not in _ADJUSTABLE:
            raise KeyError(f"Unknown or non-adjustable stat: {key}")
        setattr(self, key, self._clamp(getattr(self, key) + delta))

    def penalize_health(self, amount: float = STARVATION_HEALTH_PENALTY) -> None:
        if amount <= 0:
            return
        self.health = self._clamp(self.health - amount)

    def decay(self, hunger_rate: float, thirst_rate: float, happiness_decay: float) -> bool:
        """Advance the vitals by one tick.

        Returns True when the fixed starvation penalty was applied.
        """

        self.adjust("hunger", hunger_rate)
        self.adjust("thirst", thirst_rate)
        self.adjust("happiness", -happiness_decay)
        penalized = False
        if self.is_starving:
            self.penalize_health()
            penalized = True
        self.age_hours += 1
        return penalized

    def snapshot(self) -> Dict[str, float]:
        """Return a copy of the current vitals."""

        return {
            "hunger": round(self.hunger, 3),
            "thirst": round(self.thirst, 3),
            "happiness": round(self.happiness, 3),
            "health": round(self.health, 3),
            "age_hours": self.age_hours,
        }

    @staticmethod
    def _clamp(value: float) -> float:
        return max(STAT_MIN, min(STAT_MAX, float(value)))
