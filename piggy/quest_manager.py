"""Counts evaluations and fires a quest-complete event."""

from __future__ import annotations

import logging
from typing import Optional, TYPE_CHECKING

from piggy.constants import DEFAULT_QUEST_INTERACTIONS_REQUIRED
from piggy.errors import ConfigurationError
from piggy.event_bus import EventType

if TYPE_CHECKING:  # pragma: no cover
    from piggy.event_bus import EventBus
    from piggy.stat_model import StatModel

LOGGER = logging.getLogger(__name__)


class QuestManager:
    """Completes a quest every ``interactions_required`` checks."""

    def __init__(
        self,
        interactions_required: int = DEFAULT_QUEST_INTERACTIONS_REQUIRED,
        event_bus: Optional["EventBus"] = None,
    ) -> None:
        if interactions_required <= 0:
            raise ConfigurationError("interactions_required must be > 0")
        self.interactions_required = interactions_required
        self._event_bus = event_bus
        self._interaction_count = 0
        self._completed = 0

    @property
    def interaction_count(self) -> int:
        return self._interaction_count

    @property
    def completed(self) -> int:
        return self._completed

    def check_quests(self, stats: Optional["StatModel"]) -> bool:
        """Advance the quest counter; returns True when a quest completed."""

        if stats is None:
            LOGGER.error("[QuestManager] stats is None; quest not evaluated")
            return False

        self._interaction_count += 1
        if self._interaction_count < self.interactions_required:
            return False

        self._interaction_count = 0
        self._completed += 1
        LOGGER.info("[QuestManager] Quest complete (%d total)", self._completed)
        if self._event_bus is not None:
            self._event_bus.publish(EventType.QUEST_COMPLETED, self._completed)
        return True
