"""structlog configuration for applications embedding rsaid.

The library itself only emits stdlib DEBUG records under the ``rsaid``
logger and never installs handlers on import. Applications that want
to see them call :func:`configure_logging` once at startup.

Two output modes:
- Human (default): colored console output to stderr
- JSON (``log_json=True``): structured JSON lines to stderr

Every record passes through :func:`redact_id_numbers`, so a full
13-digit ID number never reaches the output.
"""

from __future__ import annotations

import logging
import re
import sys
from typing import Any

import structlog

_ID_RUN = re.compile(r"(?<!\d)(\d{6})\d{7}(?!\d)")

# Marks the handler this module installs so reconfiguring replaces it
# without touching handlers owned by the host application.
_HANDLER_NAME = "rsaid"


def redact_id_numbers(
    logger: Any, method_name: str, event_dict: structlog.types.EventDict
) -> structlog.types.EventDict:
    """Mask the last seven digits of any 13-digit run in string values."""
    for key, value in event_dict.items():
        if isinstance(value, str):
            event_dict[key] = _ID_RUN.sub(r"\1*******", value)
    return event_dict


def _shared_processors() -> list[structlog.types.Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.PositionalArgumentsFormatter(),
        redact_id_numbers,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.UnicodeDecoder(),
    ]


def configure_logging(
    *,
    verbose: bool = False,
    log_json: bool = False,
) -> None:
    """Route ``rsaid`` log records through structlog to stderr.

    Safe to call repeatedly; the previous rsaid handler is replaced.

    Args:
        verbose: Enable DEBUG-level output. When False, only WARNING+.
        log_json: Use JSON renderer instead of console renderer.
    """
    shared = _shared_processors()

    if log_json:
        renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())

    structlog.configure(
        processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        structlog.stdlib.ProcessorFormatter(
            foreign_pre_chain=shared,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                renderer,
            ],
        )
    )

    rsaid_logger = logging.getLogger("rsaid")
    for existing in list(rsaid_logger.handlers):
        if existing.get_name() == _HANDLER_NAME:
            rsaid_logger.removeHandler(existing)
    rsaid_logger.addHandler(handler)
    rsaid_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    rsaid_logger.propagate = False
