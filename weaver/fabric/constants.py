"""
Hyperledger Fabric constants shared by the command builders.
"""

from enum import Enum


class FabricBinaries(str, Enum):
    """Executable names of the Fabric tools weaver drives."""

    CLIENT = "fabric-ca-client"
    SERVER = "fabric-ca-server"
    ORDERER = "orderer"
    PEER = "peer"
    CONFIGTXGEN = "configtxgen"
    CONFIGTXLATOR = "configtxlator"
    OSNADMIN = "osnadmin"

    def __str__(self) -> str:
        return self.value
