"""Aruba-style BDD steps for driving in-process CLI applications."""

from __future__ import annotations

from .capture import CapturedRun, capture_stdout
from .command import Command, CycloptsCommand, MainCommand
from .config import CaptureConfig, load_capture_config
from .errors import (
    CommandExitError,
    ConfigurationError,
    KeylargoError,
    RootCommandNotBoundError,
    UnexpectedFailureError,
    UnexpectedSuccessError,
)
from .state import STATE, ScenarioState
from .steps import (
    FAILS_PATTERN,
    RUN_PATTERN,
    SUCCEEDS_PATTERN,
    Suite,
    bind_root_command,
    i_run,
    last_output,
    register_with,
    reset_state,
    the_command_fails,
    the_command_succeeds,
)

__all__ = [
    "FAILS_PATTERN",
    "RUN_PATTERN",
    "STATE",
    "SUCCEEDS_PATTERN",
    "CaptureConfig",
    "CapturedRun",
    "Command",
    "CommandExitError",
    "ConfigurationError",
    "CycloptsCommand",
    "KeylargoError",
    "MainCommand",
    "RootCommandNotBoundError",
    "ScenarioState",
    "Suite",
    "UnexpectedFailureError",
    "UnexpectedSuccessError",
    "bind_root_command",
    "capture_stdout",
    "i_run",
    "last_output",
    "load_capture_config",
    "register_with",
    "reset_state",
    "the_command_fails",
    "the_command_succeeds",
]
