"""
Structured logging configuration for slicekit.

The library only emits records; applications (and the slicekit CLI) decide
where they go by calling setup_logging().

Environment Variables:
    SLICEKIT_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    SLICEKIT_LOG_FORMAT: Log format (json, text) - default: text

Usage:
    from slicekit.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, trace_id="counter")
    logger.debug("Built slice with %d actions", 2)
"""

import logging
import os
import sys
from typing import Optional

from pythonjsonlogger import jsonlogger

LEVEL_MAP = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class TraceIDFilter(logging.Filter):
    """
    Logging filter that adds trace_id to all log records.

    Ensures all records have a trace_id field, even if not set via LoggerAdapter.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "trace_id"):
            record.trace_id = "N/A"  # type: ignore
        return True


def setup_logging(stream=None) -> logging.Handler:
    """
    Configure root logger with structured logging.

    Reads configuration from environment variables:
    - SLICEKIT_LOG_LEVEL: DEBUG, INFO, WARNING, ERROR (default: WARNING)
    - SLICEKIT_LOG_FORMAT: json, text (default: text)

    Args:
        stream: Output stream (default: stderr, keeps stdout clean for CLI output)

    Returns:
        The installed handler
    """
    log_level = os.getenv("SLICEKIT_LOG_LEVEL", "WARNING").upper()
    log_format = os.getenv("SLICEKIT_LOG_FORMAT", "text").lower()
    level = LEVEL_MAP.get(log_level, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.addFilter(TraceIDFilter())

    if log_format == "json":
        formatter = jsonlogger.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(trace_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [trace_id=%(trace_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    return handler


def get_logger(name: str, trace_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger with optional trace_id for correlation.

    Args:
        name: Logger name (typically __name__)
        trace_id: Trace ID for correlating logs (typically the slice name)

    Returns:
        LoggerAdapter with trace_id in extra fields
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"trace_id": trace_id or "N/A"})
