"""Diagnostic logging for valuecast runs.

Conversion results and error reports belong to the I/O backends; logging
only traces the conversion stages and rejections.  Everything goes to
stderr through a single root handler, so ``--json`` output on stdout stays
machine-readable.  ``-v`` turns on stage transitions (DEBUG) for the
``valuecast`` logger tree and ``--log-json`` switches the handler to one
JSON object per line.
"""

from __future__ import annotations

import logging
import sys

import structlog

APP_LOGGER = "valuecast"

_TIMESTAMPER = structlog.processors.TimeStamper(fmt="iso")


def _event_processors() -> list[structlog.types.Processor]:
    """Processors shared by structlog loggers and stdlib ``logging`` records."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _TIMESTAMPER,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def _build_formatter(log_json: bool) -> structlog.stdlib.ProcessorFormatter:
    renderer: structlog.types.Processor
    if log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_event_processors(),
        processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
    )


def configure_logging(*, verbose: bool = False, log_json: bool = False) -> None:
    """Route valuecast logs to stderr.

    Called once per CLI invocation from ``AppContext``; calling it again
    swaps the root handler rather than adding a second one.

    Args:
        verbose: Log conversion stage transitions at DEBUG.
        log_json: Render records as JSON lines.
    """
    structlog.configure(
        processors=[*_event_processors(), structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_build_formatter(log_json))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.WARNING)

    logging.getLogger(APP_LOGGER).setLevel(logging.DEBUG if verbose else logging.WARNING)
