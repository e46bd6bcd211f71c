"""Structured logging helpers."""

from __future__ import annotations

import logging
from typing import TextIO

import structlog


def configure_logging(level: int = logging.INFO, *, stream: TextIO | None = None) -> None:
    """Render log events as JSON lines on ``stream`` (stdout by default)."""

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[logging.StreamHandler(stream)],
    )
    structlog.configure(
        processors=[
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.dev.set_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(stream),
        # Loggers are rebuilt per call so a reconfigured stream takes effect.
        cache_logger_on_first_use=False,
    )


logger = structlog.get_logger()

__all__ = ["configure_logging", "logger"]
