"""Integration tests for the assembled virtual pet."""

from __future__ import annotations

import asyncio
import random

import pytest

from config import PetConfig
from piggy.constants import HUNGER_ALERT
from piggy.errors import ConfigurationError
from piggy.event_bus import EventType
from piggy.reward_manager import RewardConfig
from tests.fixtures.recording import RecordingAvatar
from virtual_pet import Temperament, VirtualPet


def _pet(config, sink=None, **kwargs):
    avatar = RecordingAvatar()
    pet = VirtualPet(
        config,
        ui_event_sink=sink,
        avatar_client=avatar,
        rng=random.Random(7),
        **kwargs,
    )
    return pet, avatar


def test_missing_config_is_rejected():
    with pytest.raises(ConfigurationError):
        VirtualPet(None)


def test_pet_spawns_with_configured_seeds():
    pet, _ = _pet(PetConfig(initial_hunger=10, initial_health=80))

    snapshot = pet.snapshot()
    assert snapshot["stats"]["hunger"] == 10
    assert snapshot["stats"]["health"] == 80
    assert snapshot["bond"] == {"level": 0, "points": 0, "progress": 0.0}
    assert snapshot["alive"] is True
    assert snapshot["temperament"] in {t.value for t in Temperament}


def test_interactions_adjust_stats_and_bond():
    pet, avatar = _pet(PetConfig())

    assert pet.feed() is True
    assert (pet.stats.hunger, pet.stats.happiness) == (20, 60)
    assert pet.drink() is True
    assert (pet.stats.thirst, pet.stats.happiness) == (20, 65)
    assert pet.play() is True
    assert (pet.stats.hunger, pet.stats.thirst, pet.stats.happiness) == (25, 25, 80)

    assert pet.affection.points == 7
    assert avatar.animations == ["Eat", "Drink", "Play"]
    assert pet.get_metrics()["total_interactions"] == 3
    assert [e.event_type for e in pet.data_logger.cached_events] == ["Feed", "Drink", "Play"]


def test_interactions_are_published():
    pet, _ = _pet(PetConfig())
    actions = []
    pet.event_bus.subscribe(EventType.INTERACTION, actions.append)

    pet.feed()
    pet.play()

    assert actions == ["Feed", "Play"]


def test_dead_pet_ignores_interactions():
    pet, avatar = _pet(PetConfig())
    pet.stats.penalize_health(100)

    assert pet.is_alive is False
    assert pet.feed() is False
    assert pet.stats.hunger == 50
    assert pet.affection.points == 0
    assert avatar.animations == []


async def test_bond_level_up_shows_a_notification(recording_sink):
    pet, _ = _pet(PetConfig(points_per_level=(5,), max_bond_level=1, display_duration=0.01), recording_sink)

    pet.play()
    await pet.notifications.wait_idle()

    assert pet.affection.level == 1
    assert recording_sink.shown == ["Our bond grew stronger! Level 1 💖"]
    await pet.shutdown()


async def test_tick_feeds_every_consumer(recording_sink):
    pet, _ = _pet(
        PetConfig(initial_hunger=75, display_duration=0.01, quest_interactions_required=1),
        recording_sink,
        reward_configs=[RewardConfig("Tick", 1.0)],
    )
    completed, rewards = [], []
    pet.event_bus.subscribe(EventType.QUEST_COMPLETED, completed.append)
    pet.event_bus.subscribe(EventType.REWARD_TRIGGERED, rewards.append)
    pet.scheduler.configure(pet.config)

    result = pet.scheduler.tick()
    await pet.notifications.wait_idle()

    assert result.alerts == [HUNGER_ALERT]
    assert recording_sink.shown == [HUNGER_ALERT]
    assert completed == [1]
    assert rewards == ["Tick"]
    assert pet.data_logger.cached_events[-1].parameters["AgeHours"] == 1
    await pet.shutdown()


async def test_simulation_runs_until_death(recording_sink):
    config = PetConfig(
        hour_duration=0.001,
        hunger_rate=100,
        thirst_rate=100,
        initial_health=10,
        display_duration=0.001,
        queue_delay=0.0,
    )
    pet, _ = _pet(config, recording_sink)
    deaths = []
    pet.event_bus.subscribe(EventType.PET_DIED, deaths.append)

    await pet.start()
    await asyncio.wait_for(pet.scheduler.wait_finished(), timeout=5)
    await pet.shutdown()

    assert not pet.is_alive
    assert pet.stats.age_hours == 2
    assert len(deaths) == 1
    assert pet.get_metrics()["total_ticks"] == 2
    assert pet.data_logger.cached_events == []


async def test_shutdown_stops_ticking():
    pet, _ = _pet(PetConfig(hour_duration=60))

    await pet.start()
    assert pet.scheduler.is_running
    await pet.shutdown()

    assert not pet.scheduler.is_running
    assert pet.stats.age_hours == 0
