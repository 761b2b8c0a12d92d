"""
Module: logger.py
Description: Structured logging helpers for the simple_queue package.

Importing the package leaves structlog configuration untouched, so the
host application's setup stays in effect. Applications without their
own setup can call configure_logging() to get JSON output.

Key Components:
- configure_logging(): opt-in JSON output with timestamp and level processors
- get_logger() helper function

Dependencies: structlog, logging, datetime
Author: Simple Queue Team
"""

import logging
from datetime import datetime, timezone
from typing import Optional

import structlog
from structlog.typing import FilteringBoundLogger

from simple_queue.config.settings import settings


def _add_timestamp(logger, method_name, event_dict):
    """Add ISO 8601 timestamp to log entries."""
    event_dict["timestamp"] = datetime.now(timezone.utc).isoformat()
    return event_dict


def _add_log_level(logger, method_name, event_dict):
    """Add log level to event dictionary."""
    event_dict["level"] = method_name.upper()
    return event_dict


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Configure structlog for JSON output.

    Args:
        log_level: Minimum level name; defaults to settings.log_level
    """
    level = logging.getLevelName((log_level or settings.log_level).upper())

    structlog.configure(
        processors=[
            _add_timestamp,
            _add_log_level,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ],
        logger_factory=structlog.WriteLoggerFactory(),
        wrapper_class=structlog.make_filtering_bound_logger(level),
        # Module-level loggers must pick up later reconfiguration
        cache_logger_on_first_use=False,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a structlog logger using whatever configuration is in effect.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> logger.warning("Attribute value left unformatted", attribute="CreatedTimestamp")
    """
    return structlog.get_logger(name)
