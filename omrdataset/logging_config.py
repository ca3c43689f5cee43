"""Structured logging setup for annotation processing."""

import logging
from typing import Optional

import structlog

from omrdataset.config import settings


def configure_logging(
    log_level: Optional[str] = None,
    json_output: Optional[bool] = None,
    cache_loggers: bool = True,
) -> None:
    """
    Configure structlog on top of the standard library logging.

    Codec diagnostics (unknown shape names, unclassified symbols) are
    emitted as key/value events, rendered as JSON lines by default.

    Args:
        log_level: Minimum level name, defaults to settings.log_level
        json_output: Render JSON lines instead of console text
        cache_loggers: Cache bound loggers on first use
    """
    level = (log_level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.log_json

    logging.basicConfig(format="%(message)s", level=level)
    logging.getLogger().setLevel(level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache_loggers,
    )
