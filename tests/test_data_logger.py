"""Tests for the analytics event cache."""

import unittest
from unittest.mock import MagicMock

from piggy.data_logger import DataLogger
from piggy.stat_model import StatModel


class TestDataLogger(unittest.TestCase):
    def test_log_tick_records_vitals(self):
        logger = DataLogger()
        logger.log_tick(StatModel(hunger=10, thirst=20, happiness=30, health=40, age_hours=3))

        [event] = logger.cached_events
        self.assertEqual(event.event_type, "PetStats")
        self.assertEqual(
            event.parameters,
            {"Hunger": 10, "Thirst": 20, "Happiness": 30, "Health": 40, "AgeHours": 3},
        )

    def test_disabled_logger_caches_nothing(self):
        logger = DataLogger(enable_logging=False)
        logger.log_tick(StatModel())
        logger.log_action("Feed")

        self.assertEqual(logger.cached_events, [])

    def test_cache_drops_oldest_events(self):
        logger = DataLogger(max_cached_events=2)
        for action in ("Feed", "Drink", "Play"):
            logger.log_action(action)

        self.assertEqual([e.event_type for e in logger.cached_events], ["Drink", "Play"])

    def test_flush_hands_batch_to_structured_logger(self):
        structured = MagicMock()
        logger = DataLogger(structured)
        logger.log_action("Play", {"bond_points": 5})

        self.assertEqual(logger.flush(), 1)
        [batch] = structured.log_cached_events.call_args.args
        self.assertEqual(batch[0]["event_type"], "Play")
        self.assertEqual(batch[0]["parameters"], {"bond_points": 5})
        self.assertEqual(logger.cached_events, [])
        self.assertEqual(logger.flush(), 0)

    def test_console_mirroring(self):
        logger = DataLogger(log_to_console=True)

        with self.assertLogs("piggy.data_logger", level="INFO") as captured:
            logger.log_action("Feed", {"bond_points": 1})
        self.assertIn("Feed", captured.output[0])
        self.assertIn("bond_points=1", captured.output[0])


if __name__ == "__main__":
    unittest.main()
