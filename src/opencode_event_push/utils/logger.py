"""
Module: logger.py
Description: Structured logging configuration for the event push plugin.

Configures structlog for JSON output on stdout. Diagnostics raised while
loading configuration or delivering events go through here; delivery
failures that the host should see go through the host logger instead.

Key Components:
- JSON output, one record per line
- Timestamp and log level processors
- Level threshold taken from settings
- get_logger() helper function

Dependencies: structlog, datetime
Author: Event Push Team
"""

import logging
from datetime import datetime, timezone

import structlog

from opencode_event_push.config.settings import settings


def _add_timestamp(logger, method_name, event_dict):
    """
    Add ISO 8601 timestamp to log entries.

    Args:
        logger: Logger instance
        method_name: Log method name (info, error, etc.)
        event_dict: Current log event dictionary

    Returns:
        Updated event dictionary with timestamp
    """
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(level: str = settings.log_level) -> None:
    """
    Configure structlog for JSON output.

    Args:
        level: Minimum level name to emit (DEBUG, INFO, WARNING, ...)
    """
    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.getLevelName(level)
        ),
        cache_logger_on_first_use=True,
    )


configure_logging()


def get_logger(name: str) -> structlog.typing.FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Config file unreadable", path="/tmp/x.json")
        {"path": "/tmp/x.json", "event": "Config file unreadable", "timestamp": "...", "level": "WARNING"}
    """
    return structlog.get_logger(name)
