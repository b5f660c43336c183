"""Primitive type tags and the typed value they produce.

The five tags form a closed set; every dispatch over them is an exhaustive
``match`` so a new member cannot be silently ignored.
"""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import StrEnum
from typing import assert_never

from valuecast.domain.errors import InvalidTypeError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class PrimitiveType(StrEnum):
    """The value kinds a user can enter and display."""

    TEXT = "text"
    INTEGER = "integer"
    FLOAT32 = "float32"
    FLOAT64 = "float64"
    BOOLEAN = "boolean"

    @property
    def label(self) -> str:
        """Display label used in ``Label: value`` output."""
        return _LABELS[self]


_LABELS: dict[PrimitiveType, str] = {
    PrimitiveType.TEXT: "Text",
    PrimitiveType.INTEGER: "Integer",
    PrimitiveType.FLOAT32: "Float32",
    PrimitiveType.FLOAT64: "Float64",
    PrimitiveType.BOOLEAN: "Boolean",
}

# Names accepted from the command line in addition to the canonical values.
TYPE_ALIASES: dict[str, PrimitiveType] = {
    "string": PrimitiveType.TEXT,
    "str": PrimitiveType.TEXT,
    "int": PrimitiveType.INTEGER,
    "float": PrimitiveType.FLOAT32,
    "double": PrimitiveType.FLOAT64,
    "bool": PrimitiveType.BOOLEAN,
}


def parse_type_name(token: str) -> PrimitiveType:
    """Resolve a user-supplied type name (case-insensitive).

    Raises:
        InvalidTypeError: If *token* names no primitive type.
    """
    normalized = token.strip().lower()
    try:
        return PrimitiveType(normalized)
    except ValueError:
        pass
    alias = TYPE_ALIASES.get(normalized)
    if alias is None:
        raise InvalidTypeError(token)
    return alias


def to_float32(value: float) -> float:
    """Round *value* to the nearest IEEE-754 binary32 value.

    Raises:
        OverflowError: If the magnitude is finite but beyond the binary32 range.
    """
    return struct.unpack("<f", struct.pack("<f", value))[0]


def is_float32(value: float) -> bool:
    """Whether *value* is exactly representable as binary32."""
    if math.isnan(value):
        return True
    try:
        return to_float32(value) == value
    except OverflowError:
        return False


@dataclass(frozen=True)
class TypedValue:
    """A value tagged with the primitive type it was produced under.

    The payload's Python type always matches ``kind``: ``str`` for TEXT,
    a signed 64-bit ``int`` for INTEGER, ``float`` for FLOAT32/FLOAT64
    (FLOAT32 payloads are binary32-exact) and ``bool`` for BOOLEAN.
    """

    kind: PrimitiveType
    value: str | int | float | bool

    def __post_init__(self) -> None:
        if not _payload_matches(self.kind, self.value):
            msg = f"{type(self.value).__name__} payload {self.value!r} does not match {self.kind}"
            raise TypeError(msg)


def _payload_matches(kind: PrimitiveType, value: object) -> bool:
    match kind:
        case PrimitiveType.TEXT:
            return isinstance(value, str)
        case PrimitiveType.INTEGER:
            return (
                isinstance(value, int)
                and not isinstance(value, bool)
                and INT64_MIN <= value <= INT64_MAX
            )
        case PrimitiveType.FLOAT32:
            return isinstance(value, float) and is_float32(value)
        case PrimitiveType.FLOAT64:
            return isinstance(value, float)
        case PrimitiveType.BOOLEAN:
            return isinstance(value, bool)
        case _:
            assert_never(kind)
