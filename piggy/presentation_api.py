"""Abstractions for animation control and UI event delivery.

The engine only speaks in terms of UI events and animation names. Concrete
renderers (AR overlays, terminal front-ends, headless test sinks) plug in by
implementing :class:`UIEventSink` and :class:`AvatarClient`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict

LOGGER = logging.getLogger(__name__)

NOTIFICATION_SHOW = "notification_show"
NOTIFICATION_HIDE = "notification_hide"


@dataclass
class UIEvent:
    """Typed UI directive for notification panels and overlay state."""

    kind: str
    payload: Dict[str, Any] = field(default_factory=dict)


class UIEventSink(ABC):
    """Abstract consumer for UI events produced by the engine."""

    @abstractmethod
    def emit(self, event: UIEvent) -> None:
        """Dispatch a UI event to the presentation layer."""


class AvatarClient(ABC):
    """Abstract control surface for the pet's on-screen body."""

    @abstractmethod
    def play_animation(self, name: str) -> None:
        """Play a named one-shot animation (``Eat``, ``Drink``, ``Play``)."""


class LoggingUISink(UIEventSink):
    """Headless sink that writes notifications to the log."""

    def __init__(self, author: str = "Piggy") -> None:
        self._author = author

    def emit(self, event: UIEvent) -> None:
        if event.kind == NOTIFICATION_SHOW:
            text = event.payload.get("text", "")
            if text:
                LOGGER.info("[%s] %s", self._author, text)
            return
        if event.kind == NOTIFICATION_HIDE:
            LOGGER.debug("[%s] notification hidden", self._author)
            return
        LOGGER.debug("Unhandled UI event: %s", event.kind)


class NullAvatarClient(AvatarClient):
    """Avatar client used when no renderer is attached."""

    def play_animation(self, name: str) -> None:
        LOGGER.debug("Animation requested without renderer: %s", name)
