"""
Click-based CLI for weaver.

Usage:
    from weaver.cli import cli
    cli()  # Invokes the CLI
"""

from __future__ import annotations

from pathlib import Path

import click

from ..core.bootstrap import bootstrap
from ..core.exceptions import ConfigFileError
from ..core.settings import WeaverSettings, load_settings
from .decorators import handle_errors

try:
    from importlib.metadata import version

    __version__ = version("weaver-fabric")
except Exception:
    __version__ = "0.1.0"


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="weaver")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Config file (defaults to the nearest .weaver/config.toml)",
)
@click.pass_context
@handle_errors
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """weaver - Hyperledger Fabric network tooling

    \b
    Channel artifacts:
        weaver configtxgen       Run configtxgen with any of its options
        weaver genesis-block     Create a channel genesis block
    """
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)

    bootstrap(settings=_load_cli_settings(config_path))


def _load_cli_settings(config_path: Path | None) -> WeaverSettings:
    """Load settings, failing on an unreadable file passed with --config."""
    settings = load_settings(config_path=config_path)
    if settings.config_error:
        if config_path is not None:
            raise ConfigFileError(settings.config_error, file_path=str(config_path))
        click.secho(f"Warning: {settings.config_error}", fg="yellow", err=True)
    return settings


def register_commands() -> None:
    """Register all CLI commands with the main group."""
    from .commands import COMMANDS

    for cmd in COMMANDS:
        cli.add_command(cmd)


register_commands()


__all__ = [
    "__version__",
    "cli",
    "register_commands",
]
