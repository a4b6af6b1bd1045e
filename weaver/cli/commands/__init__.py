"""
Click commands registered on the weaver CLI group.
"""

from .configtxgen import configtxgen, genesis_block

COMMANDS = [configtxgen, genesis_block]

__all__ = ["COMMANDS", "configtxgen", "genesis_block"]
