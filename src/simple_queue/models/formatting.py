"""
Module: formatting.py
Description: Rules for rendering queue attribute values for display.

Each attribute name maps to a formatting rule variant. Rules are plain
data, so the table can be inspected and tested on its own; the dispatch
lives in format_attribute_value().

Key Components:
- AppendUnit, DurationSeconds, EpochSecondsTimestamp, PassThrough: rule variants
- ATTRIBUTE_FORMAT_RULES: attribute name -> rule table
- format_attribute_value(): apply the rule for one attribute

Dependencies: pydantic, time_format helpers
Author: Simple Queue Team
"""

import re
from typing import Dict, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from simple_queue.exceptions import AttributeFormatError
from simple_queue.utils.time_format import format_duration, format_timestamp


class AppendUnit(BaseModel):
    """Append a unit word to the raw value ('30' -> '30 seconds')."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["append_unit"] = "append_unit"
    unit: str = Field(..., min_length=1, description="Unit word appended after a space")


class DurationSeconds(BaseModel):
    """Interpret the value as whole seconds and render a duration."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["duration_seconds"] = "duration_seconds"


class EpochSecondsTimestamp(BaseModel):
    """Interpret the value as epoch seconds and render a date/time."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["epoch_seconds_timestamp"] = "epoch_seconds_timestamp"


class PassThrough(BaseModel):
    """Leave the value unchanged."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["pass_through"] = "pass_through"


FormatRule = Union[AppendUnit, DurationSeconds, EpochSecondsTimestamp, PassThrough]

ATTRIBUTE_FORMAT_RULES: Dict[str, FormatRule] = {
    "VisibilityTimeout": AppendUnit(unit="seconds"),
    "MaximumMessageSize": AppendUnit(unit="bytes"),
    "MessageRetentionPeriod": DurationSeconds(),
    "CreatedTimestamp": EpochSecondsTimestamp(),
    "LastModifiedTimestamp": EpochSecondsTimestamp(),
}

PASS_THROUGH = PassThrough()


def rule_for_attribute(attribute: str) -> FormatRule:
    """Return the formatting rule for an attribute name, PassThrough if none."""
    return ATTRIBUTE_FORMAT_RULES.get(attribute, PASS_THROUGH)


_WHOLE_NUMBER = re.compile(r"-?[0-9]+")


def _parse_whole_number(attribute: str, value: str) -> int:
    if not isinstance(value, str) or not _WHOLE_NUMBER.fullmatch(value):
        raise AttributeFormatError(attribute, value, "expected a whole number")
    return int(value)


def format_attribute_value(attribute: str, value: str) -> str:
    """
    Render one attribute value according to its rule.

    Args:
        attribute: Original attribute name (e.g. 'VisibilityTimeout')
        value: Raw attribute value as returned by SQS

    Returns:
        Display string for the value

    Raises:
        AttributeFormatError: If the value does not fit a numeric rule
    """
    rule = rule_for_attribute(attribute)

    if rule.kind == "append_unit":
        return f"{value} {rule.unit}"

    if rule.kind == "duration_seconds":
        seconds = _parse_whole_number(attribute, value)
        try:
            return format_duration(seconds)
        except ValueError as e:
            raise AttributeFormatError(attribute, value, str(e))

    if rule.kind == "epoch_seconds_timestamp":
        epoch_seconds = _parse_whole_number(attribute, value)
        try:
            return format_timestamp(epoch_seconds)
        except (OverflowError, OSError, ValueError) as e:
            raise AttributeFormatError(attribute, value, f"timestamp out of range ({e})")

    return value
