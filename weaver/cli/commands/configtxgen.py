"""
Native Click implementation of the configtxgen commands.

Usage:
    weaver configtxgen [options]
    weaver genesis-block --config-path DIR --profile NAME --channel-id ID --output-block FILE
"""

from __future__ import annotations

import click

from ...scripts.configtxgen import configtxgen as run_configtxgen
from ...scripts.configtxgen import create_genesis_block
from ..decorators import debug_option, handle_errors

_failure_choice = click.Choice(["exit", "raise"])


@click.command("configtxgen")
@debug_option
@click.option("--as-org", help="Organization to act as (anchor peers update)")
@click.option(
    "--channel-create-txbase-profile",
    "channel_create_tx_base_profile",
    help="Base profile for the channel creation tx",
)
@click.option("--channel-id", help="Channel ID")
@click.option("--config-path", help="Directory containing configtx.yaml")
@click.option("--inspect-block", help="Block to inspect")
@click.option("--inspect-channel-create-tx", help="Channel creation tx to inspect")
@click.option("--output-anchor-peers-update", help="Output file for the anchor peers update")
@click.option("--output-block", help="Output file for the genesis block")
@click.option("--output-create-channel-tx", help="Output file for the channel creation tx")
@click.option("--print-org", help="Organization definition to print")
@click.option("--profile", help="Profile from configtx.yaml")
@click.option("--configtxgen-version", is_flag=True, help="Show configtxgen version")
@click.option(
    "--on-failure",
    type=_failure_choice,
    default=None,
    help="Exit (default) or raise when configtxgen fails",
)
@click.option("--dry-run", is_flag=True, help="Print the command without running it")
@handle_errors
def configtxgen(
    as_org: str | None,
    channel_create_tx_base_profile: str | None,
    channel_id: str | None,
    config_path: str | None,
    inspect_block: str | None,
    inspect_channel_create_tx: str | None,
    output_anchor_peers_update: str | None,
    output_block: str | None,
    output_create_channel_tx: str | None,
    print_org: str | None,
    profile: str | None,
    configtxgen_version: bool,
    on_failure: str | None,
    dry_run: bool,
) -> None:
    """Generate configuration transactions with configtxgen.

    \b
    Examples:
        weaver configtxgen --config-path ./config --profile OrgsChannel \\
            --channel-id mychannel --output-block ./mychannel.block
        weaver configtxgen --print-org Org1MSP
    """
    builder = run_configtxgen(
        as_org=as_org,
        channel_create_tx_base_profile=channel_create_tx_base_profile,
        channel_id=channel_id,
        config_path=config_path,
        inspect_block=inspect_block,
        inspect_channel_create_tx=inspect_channel_create_tx,
        output_anchor_peers_update=output_anchor_peers_update,
        output_block=output_block,
        output_create_channel_tx=output_create_channel_tx,
        print_org=print_org,
        profile=profile,
        version=configtxgen_version,
        on_failure=on_failure,
        dry_run=dry_run,
    )

    if dry_run:
        click.echo(builder.build())
    else:
        click.echo("Command completed successfully!")


@click.command("genesis-block")
@debug_option
@click.option("--config-path", required=True, help="Directory containing configtx.yaml")
@click.option("--profile", required=True, help="Profile from configtx.yaml")
@click.option("--channel-id", required=True, help="Channel ID")
@click.option("--output-block", required=True, help="Output file for the genesis block")
@click.option("--on-failure", type=_failure_choice, default=None)
@handle_errors
def genesis_block(
    config_path: str,
    profile: str,
    channel_id: str,
    output_block: str,
    on_failure: str | None,
) -> None:
    """Create a channel genesis block."""
    create_genesis_block(
        config_path=config_path,
        profile=profile,
        channel_id=channel_id,
        output_block=output_block,
        on_failure=on_failure,
    )
    click.echo(f"Genesis block written to {output_block}")
