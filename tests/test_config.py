"""Tests for configuration loading and validation."""

import unittest

from config import ENV_VARS, PetConfig
from piggy.constants import DEFAULT_POINTS_PER_LEVEL
from piggy.emotion_engine import EmotionThresholds
from piggy.errors import ConfigurationError


class TestPetConfig(unittest.TestCase):
    def test_defaults(self):
        config = PetConfig()
        self.assertEqual(config.hour_duration, 60.0)
        self.assertEqual(config.hunger_rate, 5)
        self.assertEqual(config.thirst_rate, 5)
        self.assertEqual(config.happiness_decay, 2)
        self.assertEqual(config.points_per_level, DEFAULT_POINTS_PER_LEVEL)
        self.assertEqual(config.max_bond_level, 4)
        self.assertEqual(config.display_duration, 3.0)
        self.assertEqual(config.queue_delay, 1.0)
        self.assertEqual(config.emotion_thresholds(), EmotionThresholds(85, 20, 80))

    def test_config_is_immutable(self):
        config = PetConfig()
        with self.assertRaises(Exception):
            config.hunger_rate = 50

    def test_from_mapping_rejects_missing_mapping(self):
        with self.assertRaises(ConfigurationError):
            PetConfig.from_mapping(None)

    def test_from_mapping_rejects_invalid_values(self):
        bad_values = [
            {"hour_duration": 0},
            {"hunger_rate": -1},
            {"display_duration": 0},
            {"points_per_level": []},
            {"points_per_level": [10, -5]},
            {"initial_health": 0},
            {"unknown_setting": 1},
        ]
        for data in bad_values:
            with self.subTest(data=data):
                with self.assertRaises(ConfigurationError):
                    PetConfig.from_mapping(data)

    def test_from_mapping_accepts_zero_requirement(self):
        config = PetConfig.from_mapping({"points_per_level": [0, 10]})
        self.assertEqual(config.points_per_level, (0, 10))


class TestPetConfigFromEnv(unittest.TestCase):
    def test_empty_environment_uses_defaults(self):
        self.assertEqual(PetConfig.from_env({}), PetConfig())

    def test_values_are_parsed(self):
        env = {
            "PIGGY_HOUR_DURATION": "0.5",
            "PIGGY_HUNGER_RATE": "7",
            "PIGGY_POINTS_PER_LEVEL": "5, 15,30",
            "PIGGY_MAX_BOND_LEVEL": "3",
            "PIGGY_DATA_LOGGING": "false",
        }
        config = PetConfig.from_env(env)
        self.assertEqual(config.hour_duration, 0.5)
        self.assertEqual(config.hunger_rate, 7)
        self.assertEqual(config.points_per_level, (5, 15, 30))
        self.assertEqual(config.max_bond_level, 3)
        self.assertFalse(config.enable_data_logging)

    def test_blank_values_are_ignored(self):
        config = PetConfig.from_env({"PIGGY_HUNGER_RATE": "   "})
        self.assertEqual(config.hunger_rate, 5)

    def test_malformed_values_raise(self):
        for name, value in (
            ("PIGGY_HOUR_DURATION", "soon"),
            ("PIGGY_THIRST_RATE", "-3"),
            ("PIGGY_POINTS_PER_LEVEL", "10,abc"),
            ("PIGGY_POINTS_PER_LEVEL", ","),
        ):
            with self.subTest(name=name, value=value):
                with self.assertRaises(ConfigurationError):
                    PetConfig.from_env({name: value})

    def test_every_field_has_an_environment_variable(self):
        self.assertEqual(set(ENV_VARS), set(PetConfig.model_fields))
        for env_name in ENV_VARS.values():
            self.assertTrue(env_name.startswith("PIGGY_"))


if __name__ == "__main__":
    unittest.main()
