"""Conversion error taxonomy.

Every error carries a stable ``code`` (used in ``ServiceError.code``) and a
user-facing message.  All three kinds are terminal for a conversion run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from valuecast.domain.types import PrimitiveType


class ConversionError(Exception):
    """Base class for failures detected while converting a value."""

    code: ClassVar[str] = "CONVERSION_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def detail(self) -> dict[str, Any]:
        """Structured context for the error (serialized into ServiceError.detail)."""
        return {}


class InvalidTypeError(ConversionError):
    """A type-name token does not match any known primitive type."""

    code: ClassVar[str] = "INVALID_TYPE"

    def __init__(self, token: str) -> None:
        super().__init__(f"'{token}' is not a valid type")
        self.token = token

    @property
    def detail(self) -> dict[str, Any]:
        return {"token": self.token}


class ParseError(ConversionError):
    """Raw text is not a valid literal of the requested type."""

    code: ClassVar[str] = "PARSE_ERROR"

    def __init__(self, raw: str, kind: PrimitiveType, message: str | None = None) -> None:
        super().__init__(message or f"'{raw}' is not a valid {kind.label} literal")
        self.raw = raw
        self.kind = kind

    @property
    def detail(self) -> dict[str, Any]:
        return {"raw": self.raw, "type": self.kind.value}


class IncompatibleConversionError(ConversionError):
    """Both types are valid but the pair is not in the compatibility matrix."""

    code: ClassVar[str] = "INCOMPATIBLE_CONVERSION"

    def __init__(self, source: PrimitiveType, target: PrimitiveType) -> None:
        super().__init__(
            f"conversion from {source.label} to {target.label} is not permitted"
        )
        self.source = source
        self.target = target

    @property
    def detail(self) -> dict[str, Any]:
        return {"source": self.source.value, "target": self.target.value}
