"""
Package: simple_queue
Description: Identity model for Simple Queue Service (SQS) queues.

Builds and parses queue URLs and ARNs and renders queue attributes
for display. No AWS calls are made.
"""

from .exceptions import AttributeFormatError, QueueParseError, SimpleQueueError
from .utils.logger import configure_logging
from .models import (
    DELAY_SECONDS_ATTR_NAME,
    VISIBILITY_TIMEOUT_ATTR_NAME,
    ParseFailure,
    ParseSuccess,
    Region,
    SimpleQueue,
    parse_queue_arn,
    parse_queue_identifier,
    parse_queue_url,
)

__version__ = "0.1.0"

__all__ = [
    "AttributeFormatError",
    "DELAY_SECONDS_ATTR_NAME",
    "ParseFailure",
    "ParseSuccess",
    "QueueParseError",
    "Region",
    "SimpleQueue",
    "SimpleQueueError",
    "VISIBILITY_TIMEOUT_ATTR_NAME",
    "configure_logging",
    "parse_queue_arn",
    "parse_queue_identifier",
    "parse_queue_url",
]
