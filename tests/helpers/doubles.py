"""Test doubles for the command contract and the host suite."""

from __future__ import annotations

import dataclasses
import re
import sys
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dataclasses.dataclass
class RecordingCommand:
    """Command double that writes canned output and returns a canned outcome."""

    stdout: str = ""
    outcome: BaseException | None = None
    received: list[tuple[str, ...]] = dataclasses.field(default_factory=list)
    executions: int = 0

    def set_args(self, args: cabc.Sequence[str]) -> None:
        """Record the argument vector for later inspection."""
        self.received.append(tuple(args))

    def execute(self) -> BaseException | None:
        """Write the configured output and return the configured outcome."""
        self.executions += 1
        sys.stdout.write(self.stdout)
        return self.outcome


class RaisingCommand(RecordingCommand):
    """Command double whose execution raises instead of returning."""

    def execute(self) -> BaseException | None:
        """Write partial output, then raise."""
        sys.stdout.write("partial")
        raise RuntimeError("exploded")


class StepNotFoundError(LookupError):
    """Raised when no registered pattern matches the step text."""

    def __init__(self, text: str) -> None:
        """Name the unmatched step text."""
        super().__init__(f"No step matches {text!r}")


@dataclasses.dataclass
class RecordingSuite:
    """Host-suite double that records registrations and dispatches steps."""

    steps: dict[str, cabc.Callable[..., None]] = dataclasses.field(
        default_factory=dict
    )
    before_scenario_hooks: list[cabc.Callable[[], None]] = dataclasses.field(
        default_factory=list
    )

    def step(self, pattern: str, handler: cabc.Callable[..., None]) -> None:
        """Record a step definition."""
        self.steps[pattern] = handler

    def before_scenario(self, hook: cabc.Callable[[], None]) -> None:
        """Record a pre-scenario hook."""
        self.before_scenario_hooks.append(hook)

    def start_scenario(self) -> None:
        """Run every pre-scenario hook, as the host does before each scenario."""
        for hook in self.before_scenario_hooks:
            hook()

    def run_step(self, text: str) -> None:
        """Dispatch ``text`` to the first matching handler with its groups."""
        for pattern, handler in self.steps.items():
            if match := re.match(pattern, text):
                handler(*match.groups())
                return
        raise StepNotFoundError(text)
