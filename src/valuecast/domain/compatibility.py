"""Compatibility matrix — which source types may be displayed as which targets.

Textual and numeric values may always collapse to text.  Numeric types
cross-convert among themselves but never become booleans, and booleans only
render as themselves or as text.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from valuecast.domain.errors import IncompatibleConversionError
from valuecast.domain.types import PrimitiveType

_T = PrimitiveType

# Target order per row is the display order used by ``valuecast matrix``.
_TABLE: dict[PrimitiveType, tuple[PrimitiveType, ...]] = {
    _T.TEXT: (_T.TEXT, _T.INTEGER, _T.FLOAT32, _T.FLOAT64, _T.BOOLEAN),
    _T.INTEGER: (_T.INTEGER, _T.TEXT, _T.FLOAT32, _T.FLOAT64),
    _T.FLOAT32: (_T.FLOAT32, _T.TEXT, _T.FLOAT64),
    _T.FLOAT64: (_T.FLOAT64, _T.TEXT, _T.FLOAT32),
    _T.BOOLEAN: (_T.BOOLEAN, _T.TEXT),
}

COMPATIBILITY: Mapping[PrimitiveType, frozenset[PrimitiveType]] = MappingProxyType(
    {source: frozenset(targets) for source, targets in _TABLE.items()}
)


def is_allowed(source: object, target: object) -> bool:
    """Return True if a *source* value may be displayed as *target*.

    Unknown sources have no allowed targets.
    """
    allowed = COMPATIBILITY.get(source)  # type: ignore[call-overload]
    return allowed is not None and target in allowed


def allowed_targets(source: object) -> tuple[PrimitiveType, ...]:
    """Allowed targets for *source* in table order (empty when unknown)."""
    return _TABLE.get(source, ())  # type: ignore[call-overload]


def ensure_allowed(source: PrimitiveType, target: PrimitiveType) -> None:
    """Raise IncompatibleConversionError unless *source* → *target* is allowed."""
    if not is_allowed(source, target):
        raise IncompatibleConversionError(source, target)
