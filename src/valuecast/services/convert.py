"""ConvertService — the single end-to-end conversion run.

Pipeline: SOURCE TYPE → RAW VALUE → COERCE → TARGET TYPE → VALIDATE → RENDER

Each stage blocks on the previous one and any failure ends the run: the
error is reported once through the writer and returned as a failed
ServiceResult.  Nothing is displayed on failure besides that report.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Any

from valuecast.domain.coercion import convert, format_value, parse
from valuecast.domain.compatibility import ensure_allowed
from valuecast.domain.errors import ConversionError, ParseError
from valuecast.domain.types import PrimitiveType, parse_type_name
from valuecast.services.result import ServiceResult

if TYPE_CHECKING:
    from valuecast.backends.base import InputPort, OutputPort

logger = logging.getLogger(__name__)

_TYPE_CHOICES = "/".join(t.value for t in PrimitiveType)

SOURCE_TYPE_PROMPT = f"Which type of value do you want to enter? ({_TYPE_CHOICES})"
VALUE_PROMPT = "Enter the value"
TARGET_TYPE_PROMPT = f"Which type do you want to see the value as? ({_TYPE_CHOICES})"


class Stage(StrEnum):
    """States of a conversion run, in order."""

    AWAIT_SOURCE_TYPE = "await_source_type"
    AWAIT_RAW_VALUE = "await_raw_value"
    COERCE = "coerce"
    AWAIT_TARGET_TYPE = "await_target_type"
    VALIDATE = "validate"
    RENDER = "render"
    DONE = "done"
    REJECTED = "rejected"


class ConvertService:
    """Drives one conversion run against an injected reader and writer."""

    op = "convert"

    def __init__(self, reader: InputPort, writer: OutputPort) -> None:
        self._reader = reader
        self._writer = writer
        self.stage = Stage.AWAIT_SOURCE_TYPE

    def run(self) -> ServiceResult:
        """Execute the run once. Never raises ConversionError."""
        data: dict[str, Any] = {}
        try:
            self._enter(Stage.AWAIT_SOURCE_TYPE)
            source = parse_type_name(self._reader.request_text(SOURCE_TYPE_PROMPT))
            data["source"] = source.value

            self._enter(Stage.AWAIT_RAW_VALUE)
            raw = self._reader.request_text(VALUE_PROMPT)
            data["raw"] = raw

            self._enter(Stage.COERCE)
            try:
                value = parse(raw, source)
            except ParseError as exc:
                raise ParseError(
                    raw,
                    source,
                    f"value '{raw}' does not match declared source type {source.label}",
                ) from exc

            self._enter(Stage.AWAIT_TARGET_TYPE)
            target = parse_type_name(self._reader.request_text(TARGET_TYPE_PROMPT))
            data["target"] = target.value

            self._enter(Stage.VALIDATE)
            ensure_allowed(source, target)

            self._enter(Stage.RENDER)
            rendered = format_value(convert(value, target))
        except ConversionError as exc:
            return self._reject(exc, data)

        self._writer.display(target, rendered)
        self._enter(Stage.DONE)
        data["value"] = rendered
        return ServiceResult(ok=True, op=self.op, data=data)

    def _enter(self, stage: Stage) -> None:
        logger.debug("convert: %s -> %s", self.stage, stage)
        self.stage = stage

    def _reject(self, exc: ConversionError, data: dict[str, Any]) -> ServiceResult:
        logger.info("convert rejected at %s: %s [%s]", self.stage, exc.message, exc.code)
        self._enter(Stage.REJECTED)
        self._writer.report_error(exc.message)
        return ServiceResult.failure(self.op, exc, data=data)
