"""
Logging configuration
"""
from __future__ import annotations

import logging
import sys

import structlog


def setup_logger(name: str | None = None, level: str = "WARNING") -> structlog.BoundLogger:
    """
    Set up structured logging.

    structlog renders the line and hands it to stdlib logging, whose handler
    writes to stderr so that CLI output on stdout stays clean.
    """
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        format="%(message)s",
        level=log_level,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.set_exc_info,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    return structlog.get_logger(name)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    return structlog.get_logger(name)
