"""Structured logging setup.

Configures structlog on top of the standard library logging module and
provides a timing helper for catalog operations.
"""

import logging
import sys
import time
from contextlib import contextmanager
from typing import Any, Iterator

import structlog

logger = structlog.get_logger()


def configure_logging(level: str = "INFO") -> None:
    """Configure structlog with JSON output.

    Args:
        level: Minimum log level name (e.g. "INFO", "DEBUG").
    """
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, level.upper(), logging.INFO),
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )


@contextmanager
def log_duration(event: str, **fields: Any) -> Iterator[dict[str, Any]]:
    """Log how long the wrapped block took.

    The yielded dict can be filled with extra fields (result sizes and
    the like) that are logged together with the duration.

    Args:
        event: Log event name.
        fields: Static fields to include in the log entry.

    Yields:
        Mutable dict merged into the log entry.
    """
    extra: dict[str, Any] = {}
    start_time = time.perf_counter()
    try:
        yield extra
    finally:
        duration_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(event, duration_ms=round(duration_ms, 2), **fields, **extra)
