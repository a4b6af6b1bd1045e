"""
weaver - command builders for Hyperledger Fabric tooling.
"""

from .fabric.configtxgen import ConfigtxgenCommandBuilder

__all__ = ["ConfigtxgenCommandBuilder"]
