"""
Option values stored by command builders.

An option is one of three variants. Serialization dispatches on the
variant type, so every stored value is known to be emittable.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Union

from ..core.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Flag:
    """Presence-only option; emitted as ``--name`` when enabled."""

    enabled: bool


@dataclass(frozen=True)
class Scalar:
    """Single-valued option; emitted as ``--name value``."""

    value: str | int | float

    def __str__(self) -> str:
        # integral floats print without a fraction or exponent: 1.0 -> "1"
        if isinstance(self.value, float) and self.value.is_integer():
            return str(int(self.value))
        return str(self.value)


@dataclass(frozen=True)
class ListValue:
    """Multi-valued option; emitted as ``--name a,b,c``."""

    items: tuple[str, ...]

    def joined(self) -> str:
        return ",".join(self.items)


OptionValue = Union[Flag, Scalar, ListValue]


def to_option_value(raw: object, name: str = "") -> OptionValue:
    """
    Wrap a raw Python value in its option variant.

    bool -> Flag, str/int/float/PathLike -> Scalar, list/tuple of str -> ListValue.
    Existing variants are returned unchanged.

    Raises:
        InvalidArgumentError: For any other type (including None)
    """
    if isinstance(raw, (Flag, Scalar, ListValue)):
        return raw
    # bool before int: bool is an int subclass
    if isinstance(raw, bool):
        return Flag(raw)
    if isinstance(raw, (str, int, float)):
        return Scalar(raw)
    if isinstance(raw, os.PathLike):
        return Scalar(os.fspath(raw))
    if isinstance(raw, Sequence) and all(isinstance(item, str) for item in raw):
        return ListValue(tuple(raw))
    raise InvalidArgumentError(
        f"Unsupported value type {type(raw).__name__} for option",
        argument=name or None,
        value=repr(raw),
    )
