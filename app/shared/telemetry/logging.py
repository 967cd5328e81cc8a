"""Logging configuration for the application.

Every record carries the request correlation id (from app.shared.context), so
a partially applied cascade can be traced step by step from logs alone.
"""

import logging
import sys

from app.core.config import get_settings
from app.shared.context import get_correlation_id

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - [cid=%(correlation_id)s] %(message)s"
)


class CorrelationIdFilter(logging.Filter):
    """Attach correlation_id to each record ("-" outside a request)."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "correlation_id", None):
            record.correlation_id = get_correlation_id() or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(CorrelationIdFilter())
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[handler],
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name."""
    return logging.getLogger(name)
