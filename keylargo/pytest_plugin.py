"""pytest-bdd integration for the keylargo steps.

Enable it from the root ``conftest.py`` and bind the application there::

    import keylargo
    from myapp.cli import app

    pytest_plugins = ("keylargo.pytest_plugin",)

    keylargo.bind_root_command(keylargo.CycloptsCommand(app))

The steps match ``Given``, ``When`` and ``Then`` lines alike.
"""

from __future__ import annotations

import inspect
import typing as typ

import pytest
from pytest_bdd import parsers, step

from .steps import last_output, register_with

if typ.TYPE_CHECKING:
    import collections.abc as cabc


class _CollectingSuite:
    """Record registrations so they can be published to pytest-bdd."""

    def __init__(self) -> None:
        self.steps: list[tuple[str, cabc.Callable[..., None]]] = []
        self.hooks: list[cabc.Callable[[], None]] = []

    def step(self, pattern: str, handler: cabc.Callable[..., None]) -> None:
        self.steps.append((pattern, handler))

    def before_scenario(self, hook: cabc.Callable[[], None]) -> None:
        self.hooks.append(hook)


def name_groups(pattern: str, handler: cabc.Callable[..., None]) -> str:
    """Name the capturing groups in ``pattern`` after ``handler``'s parameters.

    pytest-bdd's regex parser only passes named groups to step functions, so
    each unnamed capturing group takes the name of the next positional
    parameter. Groups beyond the parameter list stay unnamed.
    """
    names = iter(
        name
        for name, parameter in inspect.signature(handler).parameters.items()
        if parameter.kind is parameter.POSITIONAL_OR_KEYWORD
    )
    pieces: list[str] = []
    in_class = False
    index = 0
    while index < len(pattern):
        char = pattern[index]
        if char == "\\":
            pieces.append(pattern[index : index + 2])
            index += 2
            continue
        pieces.append(char)
        if in_class:
            in_class = char != "]"
        elif char == "[":
            in_class = True
        elif char == "(" and not pattern.startswith("?", index + 1):
            if (name := next(names, None)) is not None:
                pieces.append(f"?P<{name}>")
        index += 1
    return "".join(pieces)


_suite = _CollectingSuite()
register_with(_suite)

# Publishing from module scope places the step fixtures in this module.
for _pattern, _handler in _suite.steps:
    step(parsers.re(name_groups(_pattern, _handler)))(_handler)


def pytest_bdd_before_scenario() -> None:
    """Reset the captured run before each scenario's first step."""
    for hook in _suite.hooks:
        hook()


@pytest.fixture
def keylargo_output() -> str:
    """Return the stdout captured by the most recent ``I run`` step."""
    return last_output()
