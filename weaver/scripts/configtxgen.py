"""
configtxgen tasks used when bootstrapping a Fabric network.

Each task configures a ConfigtxgenCommandBuilder and executes it. Values
left as None are not passed to configtxgen. The logger, runner and
on_failure keywords are forwarded to the builder.
"""

from __future__ import annotations

from ..core.interfaces.logger import ILogger
from ..core.interfaces.process import IFailureHandler, IProcessRunner
from ..fabric.configtxgen import ConfigtxgenCommandBuilder
from ..services.logging import get_logger


def create_genesis_block(
    config_path: str | None = None,
    profile: str | None = None,
    channel_id: str | None = None,
    output_block: str | None = None,
    *,
    logger: ILogger | None = None,
    runner: IProcessRunner | None = None,
    on_failure: IFailureHandler | str | None = None,
) -> None:
    """Generate a channel genesis block."""
    log = logger or get_logger("create_genesis_block")
    log.debug("Creating genesis block...")

    (
        ConfigtxgenCommandBuilder(logger, runner, on_failure)
        .set_config_path(config_path)
        .set_profile(profile)
        .set_channel_id(channel_id)
        .set_output_block(output_block)
        .execute()
    )

    log.debug("Genesis block created...")


def create_channel_tx(
    config_path: str | None = None,
    profile: str | None = None,
    channel_id: str | None = None,
    output_create_channel_tx: str | None = None,
    *,
    logger: ILogger | None = None,
    runner: IProcessRunner | None = None,
    on_failure: IFailureHandler | str | None = None,
) -> None:
    """Generate a channel creation transaction."""
    log = logger or get_logger("create_channel_tx")
    log.debug("Creating channel creation transaction for %s...", channel_id)

    (
        ConfigtxgenCommandBuilder(logger, runner, on_failure)
        .set_config_path(config_path)
        .set_profile(profile)
        .set_channel_id(channel_id)
        .set_output_create_channel_tx(output_create_channel_tx)
        .execute()
    )

    log.debug("Channel creation transaction created...")


def create_anchor_peers_update(
    config_path: str | None = None,
    profile: str | None = None,
    channel_id: str | None = None,
    as_org: str | None = None,
    output_anchor_peers_update: str | None = None,
    *,
    logger: ILogger | None = None,
    runner: IProcessRunner | None = None,
    on_failure: IFailureHandler | str | None = None,
) -> None:
    log = logger or get_logger("create_anchor_peers_update")
    log.debug("Creating anchor peers update for %s...", as_org)

    (
        ConfigtxgenCommandBuilder(logger, runner, on_failure)
        .set_config_path(config_path)
        .set_profile(profile)
        .set_channel_id(channel_id)
        .set_as_org(as_org)
        .set_output_anchor_peers_update(output_anchor_peers_update)
        .execute()
    )

    log.debug("Anchor peers update created...")


def configtxgen(
    as_org: str | None = None,
    channel_create_tx_base_profile: str | None = None,
    channel_id: str | None = None,
    config_path: str | None = None,
    inspect_block: str | None = None,
    inspect_channel_create_tx: str | None = None,
    output_anchor_peers_update: str | None = None,
    output_block: str | None = None,
    output_create_channel_tx: str | None = None,
    print_org: str | None = None,
    profile: str | None = None,
    version: bool = False,
    *,
    logger: ILogger | None = None,
    runner: IProcessRunner | None = None,
    on_failure: IFailureHandler | str | None = None,
    dry_run: bool = False,
) -> ConfigtxgenCommandBuilder:
    """
    Run configtxgen with any combination of its options.

    Args:
        dry_run: Build and log the command without executing it

    Returns:
        The builder, so callers can inspect the command line
    """
    log = logger or get_logger("configtxgen")
    log.debug("Running configtxgen...")

    builder = (
        ConfigtxgenCommandBuilder(logger, runner, on_failure)
        .set_as_org(as_org)
        .set_channel_create_tx_base_profile(channel_create_tx_base_profile)
        .set_channel_id(channel_id)
        .set_config_path(config_path)
        .set_inspect_block(inspect_block)
        .set_inspect_channel_create_tx(inspect_channel_create_tx)
        .set_output_anchor_peers_update(output_anchor_peers_update)
        .set_output_block(output_block)
        .set_output_create_channel_tx(output_create_channel_tx)
        .set_print_org(print_org)
        .set_profile(profile)
        .set_version(version)
    )

    builder.build()
    if not dry_run:
        builder.execute()
        log.debug("configtxgen finished")

    return builder
