"""Tests for QuestManager."""

import unittest

from piggy.errors import ConfigurationError
from piggy.event_bus import EventBus, EventType
from piggy.quest_manager import QuestManager
from piggy.stat_model import StatModel


class TestQuestManager(unittest.TestCase):
    def setUp(self):
        self.bus = EventBus()
        self.completed = []
        self.bus.subscribe(EventType.QUEST_COMPLETED, self.completed.append)
        self.manager = QuestManager(3, event_bus=self.bus)
        self.stats = StatModel()

    def test_quest_completes_after_required_checks(self):
        results = [self.manager.check_quests(self.stats) for _ in range(3)]

        self.assertEqual(results, [False, False, True])
        self.assertEqual(self.manager.completed, 1)
        self.assertEqual(self.manager.interaction_count, 0)
        self.assertEqual(self.completed, [1])

    def test_counter_restarts_after_completion(self):
        for _ in range(7):
            self.manager.check_quests(self.stats)

        self.assertEqual(self.completed, [1, 2])
        self.assertEqual(self.manager.interaction_count, 1)

    def test_missing_stats_do_not_count(self):
        with self.assertLogs("piggy.quest_manager", level="ERROR"):
            self.assertFalse(self.manager.check_quests(None))
        self.assertEqual(self.manager.interaction_count, 0)

    def test_requirement_must_be_positive(self):
        with self.assertRaises(ConfigurationError):
            QuestManager(0)


if __name__ == "__main__":
    unittest.main()
