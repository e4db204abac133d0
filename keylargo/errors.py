"""Shared exception types for the keylargo step library."""

from __future__ import annotations

ERROR_ROOT_COMMAND_NOT_BOUND = (
    "No root command is bound. Call keylargo.bind_root_command() in your "
    "suite setup before using the 'I run' step."
)
ERROR_EXPECTED_SUCCESS = "Expected a good exit status, got {message!r}"
ERROR_EXPECTED_FAILURE = "Expected a bad exit status, got success"


class KeylargoError(AssertionError):
    """Base error for keylargo step failures."""


class RootCommandNotBoundError(KeylargoError):
    """Raised when a command is run before the root command is bound."""

    def __init__(self) -> None:
        """Point the caller at the missing binder call."""
        super().__init__(ERROR_ROOT_COMMAND_NOT_BOUND)


class UnexpectedFailureError(KeylargoError):
    """Raised when a command failed but the scenario expected success."""

    def __init__(self, error: BaseException) -> None:
        """Embed the command's failure message."""
        self.error = error
        super().__init__(ERROR_EXPECTED_SUCCESS.format(message=str(error)))


class UnexpectedSuccessError(KeylargoError):
    """Raised when a command succeeded but the scenario expected failure."""

    def __init__(self) -> None:
        """Use the fixed expectation message."""
        super().__init__(ERROR_EXPECTED_FAILURE)


class ConfigurationError(KeylargoError):
    """Raised when capture settings from the environment are invalid."""


class CommandExitError(RuntimeError):
    """Failure value for commands that exit with a non-zero status."""

    def __init__(self, exit_code: int | str) -> None:
        """Record the exit status reported by the command."""
        self.exit_code = exit_code
        super().__init__(f"command exited with status {exit_code}")
