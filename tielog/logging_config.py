"""
Centralized logging configuration for tielog.

Provides one log format for every entry point:
Format: 2026-01-06T14:05:52Z [source] LEVEL message

Environment Variables:
    LOG_LEVEL: Set to "TRACE", "DEBUG" or "INFO" to override the configured level
               - INFO: Link changes that succeed, trend computations
               - DEBUG: Rejected link changes, neighborhood summaries, cache hits
               - TRACE: Per-layer breadth-first expansion detail

Usage:
    from tielog.logging_config import configure_logging, get_logger

    configure_logging()
    logger = get_logger(__name__)
    logger.info("Network loaded")
"""

from __future__ import annotations

import logging
import os
import sys
from datetime import UTC, datetime

from .settings import get_settings

# Custom TRACE level for very verbose diagnostics
TRACE = 5
logging.addLevelName(TRACE, "TRACE")


def _trace(self: logging.Logger, message: object, *args: object, **kw: object) -> None:
    """Log a message at TRACE level (5)."""
    if self.isEnabledFor(TRACE):
        self._log(TRACE, message, args, **kw)  # type: ignore[arg-type]


# Add trace method to Logger class
logging.Logger.trace = _trace  # type: ignore[attr-defined]


class ISO8601Formatter(logging.Formatter):
    """Custom formatter producing ISO8601 timestamps in UTC.

    Output format: 2026-01-06T14:05:52Z [source] LEVEL message
    """

    def __init__(self, source: str = "tielog"):
        """Initialize formatter with a source identifier.

        Args:
            source: Identifier shown in brackets (e.g., "tielog", "trend")
        """
        self.source = source
        super().__init__()

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record with ISO8601 UTC timestamp."""
        timestamp = datetime.now(UTC).strftime("%Y-%m-%dT%H:%M:%SZ")

        message = record.getMessage()

        # Handle exceptions
        if record.exc_info:
            exception_text = self.formatException(record.exc_info)
            message = f"{message}\n{exception_text}"

        return f"{timestamp} [{self.source}] {record.levelname} {message}"


def _resolve_level(level_name: str) -> int:
    if level_name == "TRACE":
        return TRACE
    resolved = logging.getLevelName(level_name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    source: str | None = None,
    level: int | None = None,
    debug: bool | None = None,
) -> logging.Logger:
    """Configure logging for a tielog entry point.

    Args:
        source: Source identifier for log messages (defaults to settings.log_source)
        level: Logging level (defaults to LOG_LEVEL env var, then settings.log_level)
        debug: Enable debug mode (overrides level to DEBUG)

    Returns:
        Configured root logger
    """
    settings = get_settings()

    if level is None:
        log_level_env = os.getenv("LOG_LEVEL", "").upper()
        if debug:
            level = logging.DEBUG
        elif log_level_env:
            level = _resolve_level(log_level_env)
        else:
            level = _resolve_level(settings.log_level)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(ISO8601Formatter(source=source or settings.log_source))

    root_logger.addHandler(handler)

    return root_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger for the given module name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger instance
    """
    return logging.getLogger(name)
