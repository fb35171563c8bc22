"""Simulation metrics collection for monitoring."""

from collections import deque
from typing import Any, Deque, Dict


class SimulationMetrics:
    """Counters and timings gathered while the pet is alive."""

    def __init__(self) -> None:
        self.tick_times: Deque[float] = deque(maxlen=100)
        self.ticks: int = 0
        self.alerts_raised: int = 0
        self.notifications_shown: int = 0
        self.interactions: int = 0
        self.errors: int = 0

    def record_tick(self, duration: float) -> None:
        """Record a tick and how long its consumers took."""
        self.ticks += 1
        self.tick_times.append(duration)

    def record_alerts(self, count: int) -> None:
        self.alerts_raised += max(0, count)

    def record_notification(self) -> None:
        """Record a notification shown on screen."""
        self.notifications_shown += 1

    def record_interaction(self) -> None:
        self.interactions += 1

    def record_error(self) -> None:
        """Record an error."""
        self.errors += 1

    def get_stats(self) -> Dict[str, Any]:
        """Get simulation statistics."""
        return {
            "avg_tick_time_ms": (
                sum(self.tick_times) / len(self.tick_times) * 1000
                if self.tick_times else 0
            ),
            "total_ticks": self.ticks,
            "total_alerts": self.alerts_raised,
            "total_notifications": self.notifications_shown,
            "total_interactions": self.interactions,
            "total_errors": self.errors,
        }
