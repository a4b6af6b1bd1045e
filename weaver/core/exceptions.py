"""
Custom exception hierarchy for weaver.

Provides typed exceptions for configuration, validation and execution
failures so callers can decide how to react instead of parsing messages.
"""

from __future__ import annotations


class WeaverException(Exception):
    """
    Base exception for all weaver errors.

    Attributes:
        message: Human-readable error description
        context: Additional debugging context (binary, command, exit code, etc.)
        exit_code: Suggested exit code for CLI (default: 1)
        recoverable: Whether retry/recovery may be possible
    """

    exit_code: int = 1
    recoverable: bool = True

    def __init__(
        self,
        message: str,
        *,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.message = message
        self.context = context or {}
        if cause is not None:
            self.__cause__ = cause
        super().__init__(message)

    def __str__(self) -> str:
        if self.context:
            ctx_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({ctx_str})"
        return self.message


# =============================================================================
# Configuration Errors
# =============================================================================


class WeaverConfigError(WeaverException):
    """Base class for configuration-related errors."""

    pass


class ConfigFileError(WeaverConfigError):
    """
    Error reading or parsing a configuration file.

    Raised for TOML parsing errors, permission errors, etc.
    """

    def __init__(
        self,
        message: str,
        *,
        file_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if file_path:
            ctx["file_path"] = file_path
        super().__init__(message, context=ctx, cause=cause)


class ConfigValidationError(WeaverConfigError, ValueError):
    """Invalid or missing configuration value."""

    def __init__(
        self,
        message: str,
        *,
        key: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if key:
            ctx["key"] = key
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)


# =============================================================================
# Execution Errors
# =============================================================================


class WeaverExecutionError(WeaverException):
    """Base class for execution-related errors."""

    pass


class BinaryNotFoundError(WeaverExecutionError):
    """
    A Fabric binary was not found.

    Raised when the binary is neither in the configured bin directory
    nor on PATH.
    """

    exit_code: int = 127
    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        binary: str | None = None,
        search_path: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if binary:
            ctx["binary"] = binary
        if search_path:
            ctx["search_path"] = search_path
        super().__init__(message, context=ctx, cause=cause)


class ProcessExecutionError(WeaverExecutionError):
    """
    A Fabric binary exited with a non-zero status or could not be started.

    ``returncode`` holds the child's exit status when one is known.
    """

    recoverable: bool = False

    def __init__(
        self,
        message: str,
        *,
        exit_code: int | None = None,
        command: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if exit_code is not None:
            ctx["exit_code"] = exit_code
        if command:
            ctx["command"] = command
        super().__init__(message, context=ctx, cause=cause)
        self.returncode = exit_code
        self.command = command


class ProcessTimeoutError(ProcessExecutionError):
    """The child process did not finish within the configured timeout."""

    def __init__(
        self,
        message: str,
        *,
        timeout: float | None = None,
        command: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if timeout is not None:
            ctx["timeout"] = timeout
        super().__init__(message, command=command, context=ctx, cause=cause)


# =============================================================================
# Validation Errors
# =============================================================================


class WeaverValidationError(WeaverException, ValueError):
    """
    Base class for input validation errors.

    Inherits from ValueError so callers catching ValueError keep working.
    """

    pass


class InvalidArgumentError(WeaverValidationError):
    """
    Invalid option name or value passed to a command builder.
    """

    def __init__(
        self,
        message: str,
        *,
        argument: str | None = None,
        value: str | None = None,
        context: dict | None = None,
        cause: Exception | None = None,
    ) -> None:
        ctx = context or {}
        if argument:
            ctx["argument"] = argument
        if value is not None:
            ctx["value"] = value
        super().__init__(message, context=ctx, cause=cause)
