"""
Structured logging configuration using structlog.

Log lines always go to stderr: the CLI writes zapped blocks to stdout, which has
to stay parseable JSON.
"""

import logging
import sys
from typing import Optional, TextIO

import structlog

from .config import settings


def setup_logging(
    log_level: Optional[str] = None,
    log_json: Optional[bool] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure structlog for zap runs.

    Args:
        log_level: Level name, overrides settings.log_level (the CLI passes
            DEBUG for --verbose so per-node "node_zapped" events show up)
        log_json: JSON lines instead of console output, overrides settings.log_json
        stream: Output stream (default: sys.stderr at call time)
    """
    level = (log_level or settings.log_level).upper()
    use_json = settings.log_json if log_json is None else log_json

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            (
                structlog.processors.JSONRenderer()
                if use_json
                else structlog.dev.ConsoleRenderer(colors=False)
            ),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=stream or sys.stderr),
        # Bound to this call's stream; a later setup_logging() must take effect
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger (usually get_logger(__name__))."""
    return structlog.get_logger(name)
