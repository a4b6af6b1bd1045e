"""
Click decorators for weaver CLI commands.

- handle_errors: Turns WeaverException into a readable message and exit code
- debug_option: Adds -d/--debug, switching logging to debug on stderr
"""

from __future__ import annotations

import functools
from collections.abc import Callable
from typing import Any, TypeVar

import click

from ..core.exceptions import WeaverException

F = TypeVar("F", bound=Callable[..., Any])


def handle_errors(f: F) -> F:
    """Decorator converting weaver errors into CLI errors.

    The message goes to stderr and the process exits with the exception's
    exit_code. SystemExit raised by the 'exit' failure policy passes through.
    """

    @functools.wraps(f)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return f(*args, **kwargs)
        except WeaverException as e:
            click.secho(f"Error: {e}", fg="red", err=True)
            raise SystemExit(e.exit_code) from e

    return wrapper  # type: ignore[return-value]


def _enable_debug(ctx: click.Context, param: click.Parameter, value: bool) -> bool:
    if value:
        from ..core.container import get_container
        from ..core.interfaces.logger import ILogger
        from ..services.logging import WeaverLogger

        logger = get_container().try_resolve(ILogger)  # type: ignore[type-abstract]
        if isinstance(logger, WeaverLogger):
            logger.enable_console("debug")
    return value


def debug_option(f: F) -> F:
    """Add a -d/--debug flag that turns on debug logging to stderr."""
    return click.option(  # type: ignore[return-value]
        "-d",
        "--debug",
        is_flag=True,
        expose_value=False,
        is_eager=True,
        callback=_enable_debug,
        help="Enable debug logging",
    )(f)
