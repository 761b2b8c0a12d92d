"""
Module: time_format.py
Description: Human-readable rendering of durations and epoch timestamps.

Used by the attribute formatting rules for MessageRetentionPeriod,
CreatedTimestamp and LastModifiedTimestamp.

Key Components:
- format_duration(): compact "4d 2h 5m 10s" style durations
- format_timestamp(): "YYYY-MM-DD HH:MM:SS TZ" in the configured display zone

Dependencies: datetime, zoneinfo, settings
Author: Simple Queue Team
"""

from datetime import datetime, timezone
from typing import Optional
from zoneinfo import ZoneInfo

from simple_queue.config.settings import settings

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S %Z"

_DURATION_UNITS = (
    ("d", 86400),
    ("h", 3600),
    ("m", 60),
    ("s", 1),
)


def format_duration(seconds: int) -> str:
    """
    Format a number of seconds as a compact duration.

    Zero-valued units are omitted; a zero duration renders as '0s'.

    Args:
        seconds: Non-negative duration in whole seconds

    Returns:
        Duration string, e.g. '4d' or '1h 1m 1s'

    Raises:
        ValueError: If seconds is negative
    """
    if seconds < 0:
        raise ValueError("duration must not be negative")

    parts = []
    remaining = seconds
    for suffix, size in _DURATION_UNITS:
        count, remaining = divmod(remaining, size)
        if count:
            parts.append(f"{count}{suffix}")

    return " ".join(parts) if parts else "0s"


def format_timestamp(epoch_seconds: int, tz: Optional[str] = None) -> str:
    """
    Format epoch seconds as a date/time string.

    Args:
        epoch_seconds: Seconds since the Unix epoch
        tz: IANA zone name; defaults to settings.display_timezone

    Returns:
        Timestamp string, e.g. '2014-05-13 16:53:20 UTC'
    """
    zone = ZoneInfo(tz or settings.display_timezone)
    moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc).astimezone(zone)
    return moment.strftime(TIMESTAMP_FORMAT)
