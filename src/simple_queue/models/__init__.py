"""
Module: models
Description: Package initialization for queue identity models.

This package contains:
- SimpleQueue: queue identity with URL/ARN derivation and parsing
- Region: region codes accepted by SimpleQueue.from_parts()
- ParseSuccess / ParseFailure: tagged results of explicit parsing
- Formatting rules for human-readable attribute values

All models are exported here for convenient importing.
"""

from .region import Region
from .queue import DELAY_SECONDS_ATTR_NAME, VISIBILITY_TIMEOUT_ATTR_NAME, SimpleQueue
from .parse import (
    ParseFailure,
    ParseResult,
    ParseSuccess,
    parse_queue_arn,
    parse_queue_identifier,
    parse_queue_url,
)
from .formatting import (
    ATTRIBUTE_FORMAT_RULES,
    AppendUnit,
    DurationSeconds,
    EpochSecondsTimestamp,
    PassThrough,
    format_attribute_value,
    rule_for_attribute,
)

__all__ = [
    "ATTRIBUTE_FORMAT_RULES",
    "AppendUnit",
    "DELAY_SECONDS_ATTR_NAME",
    "DurationSeconds",
    "EpochSecondsTimestamp",
    "ParseFailure",
    "ParseResult",
    "ParseSuccess",
    "PassThrough",
    "Region",
    "SimpleQueue",
    "VISIBILITY_TIMEOUT_ATTR_NAME",
    "format_attribute_value",
    "parse_queue_arn",
    "parse_queue_identifier",
    "parse_queue_url",
    "rule_for_attribute",
]
