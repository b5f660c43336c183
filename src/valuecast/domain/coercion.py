"""Type coercion — raw text to typed values, typed values back to text.

``parse`` is strict: base-10 integers with an optional sign, decimal or
scientific float literals, and the case-insensitive tokens ``true``/``false``.
Whitespace, digit separators and locale-specific forms are rejected.

``format_value`` is total and canonical: ``format_value(parse(raw, t))``
re-parses to the same value for every valid literal.

``convert`` renders an already-coerced value under a target type.  Numeric
targets are reached by widening or rounding the number itself; a TEXT source
is re-parsed under the target, so a TEXT value that is not a valid literal of
the target fails here with ParseError.
"""

from __future__ import annotations

import math
import re
from typing import assert_never

from valuecast.domain.compatibility import ensure_allowed
from valuecast.domain.errors import ParseError
from valuecast.domain.types import (
    INT64_MAX,
    INT64_MIN,
    PrimitiveType,
    TypedValue,
    to_float32,
)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_FLOAT_SPECIALS: dict[str, float] = {
    "NaN": math.nan,
    "Infinity": math.inf,
    "+Infinity": math.inf,
    "-Infinity": -math.inf,
}
_INT64_MAX_DIGITS = len(str(INT64_MAX))
# Enough significant digits to round-trip any binary32 value.
_FLOAT32_MAX_DIGITS = 9


# ── Parsing ───────────────────────────────────────────────────────────


def parse(raw: str, kind: PrimitiveType) -> TypedValue:
    """Coerce *raw* text into a value of *kind*.

    Raises:
        ParseError: If *raw* is not a valid literal of *kind*.
    """
    match kind:
        case PrimitiveType.TEXT:
            return TypedValue(kind, raw)
        case PrimitiveType.INTEGER:
            return TypedValue(kind, _parse_integer(raw))
        case PrimitiveType.FLOAT32:
            return TypedValue(kind, _parse_float32(raw))
        case PrimitiveType.FLOAT64:
            return TypedValue(kind, _parse_float64(raw))
        case PrimitiveType.BOOLEAN:
            return TypedValue(kind, _parse_boolean(raw))
        case _:
            assert_never(kind)


def _parse_integer(raw: str) -> int:
    if not _INTEGER_RE.fullmatch(raw):
        raise ParseError(raw, PrimitiveType.INTEGER)
    # Bound the digit count first; int() refuses very long strings outright.
    sign = "-" if raw.startswith("-") else ""
    digits = raw.lstrip("+-").lstrip("0") or "0"
    value = int(sign + digits, 10) if len(digits) <= _INT64_MAX_DIGITS else None
    if value is None or not INT64_MIN <= value <= INT64_MAX:
        raise ParseError(
            raw,
            PrimitiveType.INTEGER,
            f"'{raw}' is out of range for a 64-bit Integer",
        )
    return value


def _parse_float_literal(raw: str, kind: PrimitiveType) -> float:
    special = _FLOAT_SPECIALS.get(raw)
    if special is not None:
        return special
    if not _FLOAT_RE.fullmatch(raw):
        raise ParseError(raw, kind)
    return float(raw)


def _parse_float64(raw: str) -> float:
    value = _parse_float_literal(raw, PrimitiveType.FLOAT64)
    if math.isinf(value) and raw not in _FLOAT_SPECIALS:
        raise ParseError(raw, PrimitiveType.FLOAT64, f"'{raw}' is out of range for Float64")
    return value


def _parse_float32(raw: str) -> float:
    value = _parse_float_literal(raw, PrimitiveType.FLOAT32)
    try:
        narrowed = to_float32(value)
    except OverflowError:
        narrowed = math.inf
    if math.isinf(narrowed) and raw not in _FLOAT_SPECIALS:
        raise ParseError(raw, PrimitiveType.FLOAT32, f"'{raw}' is out of range for Float32")
    return narrowed


def _parse_boolean(raw: str) -> bool:
    lowered = raw.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ParseError(raw, PrimitiveType.BOOLEAN)


# ── Formatting ────────────────────────────────────────────────────────


def format_value(value: TypedValue) -> str:
    """Return the canonical textual form of *value*. Never fails."""
    kind = value.kind
    match kind:
        case PrimitiveType.TEXT:
            return str(value.value)
        case PrimitiveType.INTEGER:
            return str(int(value.value))
        case PrimitiveType.FLOAT32:
            return _format_float32(float(value.value))
        case PrimitiveType.FLOAT64:
            return _format_float64(float(value.value))
        case PrimitiveType.BOOLEAN:
            return "true" if value.value else "false"
        case _:
            assert_never(kind)


def _format_special(number: float) -> str | None:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    return None


def _format_float64(number: float) -> str:
    return _format_special(number) or repr(number)


def _format_float32(number: float) -> str:
    special = _format_special(number)
    if special is not None:
        return special
    # Shortest decimal that still rounds to the same binary32 value.
    for digits in range(1, _FLOAT32_MAX_DIGITS + 1):
        candidate = float(f"{number:.{digits}g}")
        if to_float32(candidate) == number:
            return repr(candidate)
    return repr(number)


# ── Rendering ─────────────────────────────────────────────────────────


def convert(value: TypedValue, target: PrimitiveType) -> TypedValue:
    """Render *value* under *target*, gated by the compatibility matrix.

    Raises:
        IncompatibleConversionError: If the matrix forbids the pair.
        ParseError: If a TEXT value is not a valid *target* literal, or a
            Float64 value is beyond the Float32 range.
    """
    source = value.kind
    ensure_allowed(source, target)
    if source is target:
        return value
    match target:
        case PrimitiveType.TEXT:
            return TypedValue(target, format_value(value))
        case PrimitiveType.INTEGER | PrimitiveType.BOOLEAN:
            # Only TEXT reaches these targets from another type.
            return parse(str(value.value), target)
        case PrimitiveType.FLOAT32:
            if source is PrimitiveType.TEXT:
                return parse(str(value.value), target)
            return TypedValue(target, _narrow_to_float32(value))
        case PrimitiveType.FLOAT64:
            if source is PrimitiveType.TEXT:
                return parse(str(value.value), target)
            return TypedValue(target, float(value.value))
        case _:
            assert_never(target)


def _narrow_to_float32(value: TypedValue) -> float:
    try:
        return to_float32(float(value.value))
    except OverflowError:
        raise ParseError(
            format_value(value),
            PrimitiveType.FLOAT32,
            f"{format_value(value)} is out of range for Float32",
        ) from None
