"""
Structured logging for TruthLens.

JSON lines by default (LOG_FORMAT=json), a colored console renderer otherwise.
Modules log through get_logger(__name__) with an event name and key/value pairs:

    logger.info("analysis_completed", verdict="Likely Fake", confidence=20)
"""

import logging
import sys
from typing import Any

import structlog

from truthlens.config import LOG_FORMAT, LOG_LEVEL

LOG_LEVEL_VALUE = getattr(logging, LOG_LEVEL, logging.INFO)


def configure_structlog() -> None:
    processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.format_exc_info,
    ]
    if LOG_FORMAT == "json":
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty()))
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(LOG_LEVEL_VALUE),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


if not structlog.is_configured():
    configure_structlog()


def get_logger(name: str) -> Any:
    return structlog.get_logger(name).bind(logger=name)
