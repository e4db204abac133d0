"""Step handlers, suite registration and the public binding helpers."""

from __future__ import annotations

import functools
import logging
import typing as typ

from .capture import capture_stdout
from .config import load_capture_config
from .errors import (
    RootCommandNotBoundError,
    UnexpectedFailureError,
    UnexpectedSuccessError,
)
from .state import STATE, ScenarioState

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .command import Command

_logger = logging.getLogger(__name__)

RUN_PATTERN = r'^I run "([^"]*)"$'
SUCCEEDS_PATTERN = r"^the command succeeds$"
FAILS_PATTERN = r"^the command fails$"


class Suite(typ.Protocol):
    """Registration surface keylargo needs from a host BDD framework."""

    def step(self, pattern: str, handler: cabc.Callable[..., None]) -> None:
        """Bind ``handler`` to steps whose text matches ``pattern``."""
        ...

    def before_scenario(self, hook: cabc.Callable[[], None]) -> None:
        """Run ``hook`` before the first step of every scenario."""
        ...


def _resolve(state: ScenarioState | None) -> ScenarioState:
    return STATE if state is None else state


def _bind(
    handler: cabc.Callable[..., None], state: ScenarioState | None
) -> cabc.Callable[..., None]:
    if state is None:
        return handler
    return functools.partial(handler, state=state)


def tokenize(command_line: str) -> list[str]:
    """Split a command line on single spaces and drop the program name.

    No quoting or escaping is supported and runs of spaces yield empty
    arguments, so an argument containing a space cannot be expressed.
    """
    return command_line.split(" ")[1:]


def i_run(command_line: str, *, state: ScenarioState | None = None) -> None:
    """Run the bound root command and record its output and outcome.

    A failing command does not fail this step; use the assertion steps.

    Raises:
        RootCommandNotBoundError: If ``bind_root_command`` was never called.

    """
    current = _resolve(state)
    command = current.root_command
    if command is None:
        raise RootCommandNotBoundError

    args = tokenize(command_line)
    command.set_args(args)
    _logger.debug("Running %r with arguments %r", command, args)

    result = capture_stdout(command.execute, load_capture_config())
    current.last_output = result.output
    current.last_error = result.outcome
    if result.outcome is not None:
        _logger.debug("Command reported failure: %s", result.outcome)


def the_command_succeeds(*, state: ScenarioState | None = None) -> None:
    """Fail unless the last run reported success."""
    error = _resolve(state).last_error
    if error is not None:
        raise UnexpectedFailureError(error)


def the_command_fails(*, state: ScenarioState | None = None) -> None:
    """Fail unless the last run reported a failure value."""
    if _resolve(state).last_error is None:
        raise UnexpectedSuccessError


def reset_state(*, state: ScenarioState | None = None) -> None:
    """Clear the captured output and failure before a scenario starts."""
    _resolve(state).reset()


def register_with(suite: Suite, state: ScenarioState | None = None) -> None:
    """Add the keylargo steps and the state reset hook to ``suite``.

    Call this during suite setup. When ``state`` is given the handlers operate
    on it rather than the process-wide state.
    """
    suite.step(RUN_PATTERN, _bind(i_run, state))
    suite.step(SUCCEEDS_PATTERN, _bind(the_command_succeeds, state))
    suite.step(FAILS_PATTERN, _bind(the_command_fails, state))
    suite.before_scenario(_bind(reset_state, state))


def bind_root_command(command: Command, state: ScenarioState | None = None) -> None:
    """Install the application under test for the ``I run`` step."""
    _resolve(state).root_command = command


def last_output(state: ScenarioState | None = None) -> str:
    """Return the stdout captured by the most recent ``I run`` step."""
    return _resolve(state).last_output
