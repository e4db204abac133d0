"""Shared fixtures for behaviour-driven keylargo tests."""

from __future__ import annotations

import typing as typ

import pytest

from keylargo import CycloptsCommand, bind_root_command
from keylargo.state import STATE

from .sample_app import app

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@pytest.fixture(autouse=True)
def greeter_command() -> cabc.Iterator[CycloptsCommand]:
    """Bind the sample application for the duration of a scenario."""
    previous = STATE.root_command
    command = CycloptsCommand(app)
    bind_root_command(command)
    yield command
    STATE.root_command = previous
