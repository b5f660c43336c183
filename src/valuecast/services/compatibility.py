"""CompatibilityService — read-only queries over the compatibility matrix."""

from __future__ import annotations

from valuecast.domain.compatibility import allowed_targets, ensure_allowed
from valuecast.domain.errors import ConversionError
from valuecast.domain.types import PrimitiveType, parse_type_name
from valuecast.services.result import ServiceResult


class CompatibilityService:
    """Describes the matrix and checks individual source/target pairs."""

    def describe(self) -> ServiceResult:
        """One row per source type with its allowed targets in table order."""
        rows = [
            {
                "source": source.value,
                "targets": [target.value for target in allowed_targets(source)],
            }
            for source in PrimitiveType
        ]
        return ServiceResult(
            ok=True,
            op="matrix",
            data={"types": [t.value for t in PrimitiveType], "rows": rows},
        )

    def check(self, source_token: str, target_token: str) -> ServiceResult:
        """Whether *source_token* values may be displayed as *target_token*."""
        op = "check"
        try:
            source = parse_type_name(source_token)
            target = parse_type_name(target_token)
            ensure_allowed(source, target)
        except ConversionError as exc:
            return ServiceResult.failure(op, exc)
        return ServiceResult(
            ok=True,
            op=op,
            data={"source": source.value, "target": target.value, "allowed": True},
        )
