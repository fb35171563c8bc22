"""Pytest fixtures shared across the test suite."""

from __future__ import annotations

import asyncio
import inspect

import pytest

from config import PetConfig
from tests.fixtures.recording import RecordingUISink, Timeline


def pytest_pyfunc_call(pyfuncitem):  # pragma: no cover - pytest hook
    """Allow ``async def`` tests without requiring pytest-asyncio."""

    if inspect.iscoroutinefunction(pyfuncitem.obj):
        testargs = {
            name: pyfuncitem.funcargs[name]
            for name in pyfuncitem._fixtureinfo.argnames  # pylint: disable=protected-access
        }
        asyncio.run(pyfuncitem.obj(**testargs))
        return True
    return None


@pytest.fixture
def timeline() -> Timeline:
    return Timeline()


@pytest.fixture
def recording_sink(timeline: Timeline) -> RecordingUISink:
    return RecordingUISink(timeline)


@pytest.fixture
def fast_config() -> PetConfig:
    """Config with instant pacing; pair with ``timeline.sleep`` in tests."""
    return PetConfig(hour_duration=0.01, display_duration=0.01, queue_delay=0.005)
