"""The command contract and adapters for common Python CLI shapes.

Any object with ``set_args`` and ``execute`` can be bound as the root
command. Most Python applications expose a cyclopts ``App`` or a
``main(argv)`` function instead, so adapters are provided for both. They map
exit codes, ``SystemExit`` and raised exceptions onto the failure value
``execute`` returns.
"""

from __future__ import annotations

import abc
import typing as typ

from .errors import CommandExitError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from cyclopts import App


@typ.runtime_checkable
class Command(typ.Protocol):
    """Capabilities the application under test must provide."""

    def set_args(self, args: cabc.Sequence[str]) -> None:
        """Use ``args`` as the argument vector for the next execution."""
        ...

    def execute(self) -> BaseException | None:
        """Run the command, returning ``None`` or a failure value."""
        ...


def _outcome_from_status(status: object) -> BaseException | None:
    """Translate a return value or exit status into an outcome."""
    if status is None:
        return None
    if isinstance(status, bool):
        return None if status else CommandExitError(1)
    if isinstance(status, int):
        return CommandExitError(status) if status else None
    if isinstance(status, str):
        return CommandExitError(status)
    # Other return values are command results, not statuses.
    return None


class _AdaptedCommand(abc.ABC):
    """Store arguments and turn an invocation's exit behaviour into an outcome."""

    _args: tuple[str, ...] = ()

    def set_args(self, args: cabc.Sequence[str]) -> None:
        """Store the argument vector for the next execution."""
        self._args = tuple(args)

    @property
    def args(self) -> tuple[str, ...]:
        """Return the arguments the next execution will receive."""
        return self._args

    def execute(self) -> BaseException | None:
        """Run the wrapped application and report its outcome."""
        try:
            status = self._invoke(list(self._args))
        except SystemExit as exit_:
            return _outcome_from_status(exit_.code)
        except Exception as error:  # noqa: BLE001 - surfaced as the outcome
            return error
        return _outcome_from_status(status)

    @abc.abstractmethod
    def _invoke(self, args: list[str]) -> object:
        """Run the wrapped application with ``args``."""


class CycloptsCommand(_AdaptedCommand):
    """Adapt a :class:`cyclopts.App` to the command contract."""

    def __init__(self, app: App) -> None:
        """Wrap the application under test."""
        self._app = app

    def _invoke(self, args: list[str]) -> object:
        # Parse errors are raised so they become the outcome.
        return self._app(args, exit_on_error=False)


class MainCommand(_AdaptedCommand):
    """Adapt a ``main(argv) -> int | None`` entry point to the contract."""

    def __init__(self, main: cabc.Callable[[list[str]], int | None]) -> None:
        """Wrap the entry point under test."""
        self._main = main

    def _invoke(self, args: list[str]) -> object:
        return self._main(args)
