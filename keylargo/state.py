"""Scenario state shared between the keylargo steps."""

from __future__ import annotations

import dataclasses
import typing as typ

if typ.TYPE_CHECKING:
    from .command import Command


@dataclasses.dataclass(slots=True)
class ScenarioState:
    """Hold the bound root command and the result of the last run."""

    root_command: Command | None = None
    last_output: str = ""
    last_error: BaseException | None = None

    def reset(self) -> None:
        """Forget the previous run; the root command binding survives."""
        self.last_output = ""
        self.last_error = None


# Scenarios run sequentially, so one process-wide instance is sufficient.
STATE = ScenarioState()
