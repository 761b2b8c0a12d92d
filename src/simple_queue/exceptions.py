"""
Module: exceptions.py
Description: Exception hierarchy for queue identity parsing and attribute formatting.
"""


class SimpleQueueError(Exception):
    """Base class for all simple_queue errors."""


class QueueParseError(SimpleQueueError, ValueError):
    """
    Raised when a queue URL or ARN cannot be parsed.

    Attributes:
        text: The input that failed to parse
        reason: Human-readable explanation of the failure
    """

    def __init__(self, text, reason: str):
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse queue identifier {text!r}: {reason}")


class AttributeFormatError(SimpleQueueError, ValueError):
    """
    Raised when a queue attribute value does not fit its formatting rule.

    Attributes:
        attribute: Attribute name (e.g. 'MessageRetentionPeriod')
        value: The raw attribute value
        reason: Human-readable explanation of the failure
    """

    def __init__(self, attribute: str, value, reason: str):
        self.attribute = attribute
        self.value = value
        self.reason = reason
        super().__init__(f"Cannot format {attribute}={value!r}: {reason}")
