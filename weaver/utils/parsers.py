"""
Parsing and serialization helpers for command builders.
"""

from __future__ import annotations

from collections.abc import Mapping

from ..fabric.options import Flag, ListValue, OptionValue, Scalar


def map_parser(options: Mapping[str, OptionValue]) -> list[str]:
    """
    Serialize an option map into argv tokens, in the map's order.

    Flag(True) -> ``--name``; Flag(False) -> nothing;
    ListValue -> ``--name`` plus one comma-joined token;
    Scalar -> ``--name`` plus ``str(value)``.
    """
    tokens: list[str] = []
    for name, value in options.items():
        if isinstance(value, Flag):
            if value.enabled:
                tokens.append(f"--{name}")
        elif isinstance(value, ListValue):
            tokens.extend([f"--{name}", value.joined()])
        elif isinstance(value, Scalar):
            tokens.extend([f"--{name}", str(value)])
        else:
            raise TypeError(f"Unknown option value for --{name}: {value!r}")
    return tokens
