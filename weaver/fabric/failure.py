"""
Execution failure policies for command builders.

A failed configtxgen run can either halt the host process (fail-fast, the
default for CLI workflows) or surface as ProcessExecutionError so library
callers can handle it. The choice is injected into the builder.
"""

from __future__ import annotations

from typing import NoReturn

from ..core.exceptions import ConfigValidationError, ProcessExecutionError
from ..core.interfaces.process import IFailureHandler


class ExitOnFailure(IFailureHandler):
    """Terminate the host process with a non-zero exit status."""

    name = "exit"

    def __init__(self, exit_code: int = 1) -> None:
        if exit_code == 0:
            raise ConfigValidationError(
                "Failure exit code must be non-zero", key="exit_code", value="0"
            )
        self.exit_code = exit_code

    def handle(self, error: BaseException, command: str) -> NoReturn:
        raise SystemExit(self.exit_code) from error


class RaiseOnFailure(IFailureHandler):
    """Propagate the failure to the caller as ProcessExecutionError."""

    name = "raise"

    def handle(self, error: BaseException, command: str) -> NoReturn:
        if isinstance(error, ProcessExecutionError):
            raise error
        raise ProcessExecutionError(
            f"Failed to execute the command: {error}",
            command=command,
            cause=error if isinstance(error, Exception) else None,
        ) from error


def get_failure_handler(policy: str, exit_code: int = 1) -> IFailureHandler:
    """
    Map a policy name to its handler.

    Args:
        policy: 'exit' or 'raise'
        exit_code: Exit status used by the 'exit' policy

    Raises:
        ConfigValidationError: For an unknown policy name
    """
    if policy == ExitOnFailure.name:
        return ExitOnFailure(exit_code)
    if policy == RaiseOnFailure.name:
        return RaiseOnFailure()
    raise ConfigValidationError(
        f"Unknown failure policy '{policy}' (expected 'exit' or 'raise')",
        key="execution.on_failure",
        value=policy,
    )
