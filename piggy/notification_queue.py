"""Paced, one-at-a-time delivery of alert messages."""

from __future__ import annotations

import asyncio
import contextlib
import logging
from collections import deque
from enum import Enum
from typing import Any, Awaitable, Callable, Deque, Dict, Iterable, List, Optional, TYPE_CHECKING

from piggy.constants import DEFAULT_DISPLAY_DURATION_SECONDS, DEFAULT_QUEUE_DELAY_SECONDS
from piggy.event_bus import EventType
from piggy.presentation_api import NOTIFICATION_HIDE, NOTIFICATION_SHOW, UIEvent

if TYPE_CHECKING:  # pragma: no cover
    from piggy.event_bus import EventBus
    from piggy.metrics import SimulationMetrics
    from piggy.presentation_api import UIEventSink

LOGGER = logging.getLogger(__name__)


class QueueState(Enum):
    IDLE = "idle"
    DISPLAYING = "displaying"


class NotificationQueue:
    """FIFO of alert strings drained by a single asyncio consumer task.

    Producers may push bursts of alerts at any time; the consumer shows the
    head for ``display_duration`` seconds, waits ``queue_delay`` seconds if
    more messages are pending, and goes idle once the queue is empty. The
    consumer is started lazily by the first enqueue made inside a running
    event loop.
    """

    def __init__(
        self,
        ui_event_sink: Optional["UIEventSink"] = None,
        *,
        display_duration: float = DEFAULT_DISPLAY_DURATION_SECONDS,
        queue_delay: float = DEFAULT_QUEUE_DELAY_SECONDS,
        event_bus: Optional["EventBus"] = None,
        metrics: Optional["SimulationMetrics"] = None,
        sleep: Callable[[float], Awaitable[Any]] = asyncio.sleep,
    ) -> None:
        self.display_duration = max(0.0, float(display_duration))
        self.queue_delay = max(0.0, float(queue_delay))
        self._ui_event_sink = ui_event_sink
        self._event_bus = event_bus
        self._metrics = metrics
        self._sleep = sleep
        self._pending: Deque[str] = deque()
        self._state = QueueState.IDLE
        self._current: Optional[str] = None
        self._consumer: Optional[asyncio.Task[None]] = None

    @property
    def state(self) -> QueueState:
        return self._state

    @property
    def current(self) -> Optional[str]:
        """Message currently on screen, if any."""
        return self._current

    def pending(self) -> List[str]:
        return list(self._pending)

    def __len__(self) -> int:
        return len(self._pending)

    def enqueue(self, message: Optional[str]) -> bool:
        """Append a message to the tail of the queue.

        Empty messages and messages identical to one still waiting in the
        queue are rejected. Returns True when the message was accepted.
        """

        if not message or not message.strip():
            LOGGER.warning("[NotificationQueue] Rejected empty notification")
            return False
        if message in self._pending:
            LOGGER.debug("[NotificationQueue] Already pending, skipping: %s", message)
            return False

        self._pending.append(message)
        self._ensure_consumer()
        return True

    def trigger_alerts(self, alerts: Optional[Iterable[str]]) -> int:
        """Enqueue every alert in order; returns how many were accepted.

        The in-progress notification, if any, is never pre-empted.
        """

        if not alerts:
            return 0
        accepted = 0
        for alert in alerts:
            if self.enqueue(alert):
                accepted += 1
        return accepted

    async def wait_idle(self) -> None:
        """Wait until every pending message has been shown."""

        self._ensure_consumer()
        while self._consumer is not None and not self._consumer.done():
            await asyncio.shield(self._consumer)

    async def close(self) -> None:
        """Stop the consumer at process shutdown, dropping pending messages."""

        if self._consumer and not self._consumer.done():
            self._consumer.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await self._consumer
        self._consumer = None
        self._pending.clear()

    def _ensure_consumer(self) -> None:
        if self._consumer is not None and not self._consumer.done():
            return
        if not self._pending:
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            LOGGER.debug(
                "[NotificationQueue] No running event loop; %d notification(s) pending",
                len(self._pending),
            )
            return
        self._consumer = loop.create_task(self._process_queue())

    async def _process_queue(self) -> None:
        try:
            while self._pending:
                message = self._pending.popleft()
                self._state = QueueState.DISPLAYING
                self._current = message
                self._emit(NOTIFICATION_SHOW, {"text": message, "duration": self.display_duration})
                if self._metrics is not None:
                    self._metrics.record_notification()
                if self._event_bus is not None:
                    self._event_bus.publish(EventType.NOTIFICATION_SHOWN, message)

                await self._sleep(self.display_duration)

                self._emit(NOTIFICATION_HIDE, {"text": message})
                self._current = None

                # Wait before showing next notification
                if self._pending:
                    await self._sleep(self.queue_delay)
        finally:
            self._current = None
            self._state = QueueState.IDLE

    def _emit(self, kind: str, payload: Dict[str, Any]) -> None:
        if self._ui_event_sink is None:
            return
        try:
            self._ui_event_sink.emit(UIEvent(kind, payload))
        except Exception as exc:
            LOGGER.error("[NotificationQueue] UI sink failed for %s: %s", kind, exc)
            if self._metrics is not None:
                self._metrics.record_error()
