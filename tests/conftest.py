"""Shared pytest fixtures for keylargo tests."""

from __future__ import annotations

import typing as typ

import pytest

from keylargo import steps
from keylargo.state import STATE, ScenarioState
from tests.helpers.doubles import RecordingCommand, RecordingSuite

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture
def scenario_state() -> ScenarioState:
    """Provide an isolated scenario state."""
    return ScenarioState()


@pytest.fixture
def suite(scenario_state: ScenarioState) -> RecordingSuite:
    """Register the keylargo steps on a recording suite."""
    recording = RecordingSuite()
    steps.register_with(recording, scenario_state)
    return recording


@pytest.fixture
def command() -> RecordingCommand:
    """Provide a command double that succeeds silently."""
    return RecordingCommand()


@pytest.fixture
def global_state() -> cabc.Iterator[ScenarioState]:
    """Expose the process-wide state and restore it afterwards."""
    saved = (STATE.root_command, STATE.last_output, STATE.last_error)
    STATE.reset()
    yield STATE
    STATE.root_command, STATE.last_output, STATE.last_error = saved
