"""
Module: logger.py
Description: Structured logging configuration for the Events client.

Configures structlog for JSON output. Provides consistent logging
across all modules with proper context and structured data.

Key Components:
- JSON output
- Timestamp and log level processors
- Level filtering from PAGERDUTY_LOG_LEVEL
- get_logger() helper function

Dependencies: structlog, datetime, logging
"""

import logging
from datetime import datetime, timezone

import structlog

from pagerduty_events.config.settings import settings


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


def configure_logging(level: str = "INFO") -> None:
    """
    Configure structlog for JSON output filtered at ``level``.

    Loggers are cached on first use, so this should run before any
    logging happens.

    Args:
        level: Standard logging level name
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
            logging.getLevelName(level.upper())
        ),
        cache_logger_on_first_use=True,
    )


configure_logging(settings.log_level)


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.debug("Retrying event delivery", status_code=429, retry=1)
        {"event": "Retrying event delivery", "status_code": 429, "retry": 1, "timestamp": "2024-01-15T10:30:00+00:00", "level": "DEBUG"}
    """
    return structlog.get_logger(name)
