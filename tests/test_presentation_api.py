"""Tests for the headless presentation adapters."""

import unittest

from piggy.presentation_api import (
    NOTIFICATION_HIDE,
    NOTIFICATION_SHOW,
    LoggingUISink,
    NullAvatarClient,
    UIEvent,
)


class TestLoggingUISink(unittest.TestCase):
    def test_show_is_logged_with_author(self):
        sink = LoggingUISink(author="Oink")

        with self.assertLogs("piggy.presentation_api", level="INFO") as captured:
            sink.emit(UIEvent(NOTIFICATION_SHOW, {"text": "I'm parched! 💧", "duration": 3.0}))

        self.assertEqual(len(captured.records), 1)
        self.assertIn("[Oink] I'm parched!", captured.output[0])

    def test_hide_is_debug_only(self):
        sink = LoggingUISink()

        with self.assertLogs("piggy.presentation_api", level="DEBUG") as captured:
            sink.emit(UIEvent(NOTIFICATION_HIDE, {"text": "bye"}))

        self.assertEqual(captured.records[0].levelname, "DEBUG")

    def test_null_avatar_accepts_any_animation(self):
        with self.assertLogs("piggy.presentation_api", level="DEBUG"):
            NullAvatarClient().play_animation("Eat")


if __name__ == "__main__":
    unittest.main()
