"""
Hyperledger Fabric command builders and their shared building blocks.
"""

from .constants import FabricBinaries
from .failure import ExitOnFailure, RaiseOnFailure, get_failure_handler
from .options import Flag, ListValue, OptionValue, Scalar, to_option_value

__all__ = [
    "ExitOnFailure",
    "FabricBinaries",
    "Flag",
    "ListValue",
    "OptionValue",
    "RaiseOnFailure",
    "Scalar",
    "get_failure_handler",
    "to_option_value",
]
