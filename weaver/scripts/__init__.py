"""
Task functions that drive the Fabric command builders.
"""

from .configtxgen import (
    configtxgen,
    create_anchor_peers_update,
    create_channel_tx,
    create_genesis_block,
)

__all__ = [
    "configtxgen",
    "create_anchor_peers_update",
    "create_channel_tx",
    "create_genesis_block",
]
