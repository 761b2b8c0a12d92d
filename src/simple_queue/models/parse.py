"""
Module: parse.py
Description: Explicit, checkable parsing of queue URLs and ARNs.

SimpleQueue.from_url() and SimpleQueue.from_arn() signal failure
differently (an empty queue versus None). The functions here return one
tagged result for both forms so callers always check the same way.

Key Components:
- ParseSuccess / ParseFailure: tagged parse outcome
- parse_queue_url(), parse_queue_arn(): parse one specific form
- parse_queue_identifier(): parse either form, chosen by prefix

Dependencies: pydantic, typing
Author: Simple Queue Team
"""

from typing import Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from simple_queue.exceptions import QueueParseError
from simple_queue.models.queue import (
    SimpleQueue,
    match_queue_arn,
    match_queue_url,
)
from simple_queue.utils.logger import get_logger

logger = get_logger(__name__)


class ParseSuccess(BaseModel):
    """A queue identifier that parsed cleanly."""

    model_config = ConfigDict(frozen=True)

    ok: Literal[True] = True
    queue: SimpleQueue = Field(..., description="Parsed queue identity")

    def unwrap(self) -> SimpleQueue:
        return self.queue


class ParseFailure(BaseModel):
    """
    A queue identifier that did not parse.

    Attributes:
        text: The rejected input
        kind: Which form was expected ('url' or 'arn')
        reason: Human-readable explanation
    """

    model_config = ConfigDict(frozen=True)

    ok: Literal[False] = False
    text: Any = Field(default=None, description="Rejected input")
    kind: Literal["url", "arn"] = Field(..., description="Expected identifier form")
    reason: str = Field(..., description="Why the input was rejected")

    def unwrap(self) -> SimpleQueue:
        """Raise QueueParseError describing this failure."""
        raise QueueParseError(self.text, self.reason)


ParseResult = Union[ParseSuccess, ParseFailure]


def _failure(text, kind: str, reason: str) -> ParseFailure:
    logger.debug("Queue identifier rejected", text=repr(text), kind=kind, reason=reason)
    return ParseFailure(text=text, kind=kind, reason=reason)


def parse_queue_url(text) -> ParseResult:
    """
    Parse https://sqs.<region>.amazonaws.com/<account_number>/<name>.

    Args:
        text: Candidate queue URL

    Returns:
        ParseSuccess with the queue, or ParseFailure; never raises
    """
    if not isinstance(text, str):
        return _failure(text, "url", "queue URL must be a string")

    parts = match_queue_url(text)
    if parts is None:
        return _failure(text, "url", "does not match https://sqs.<region>.amazonaws.com/<account>/<name>")

    region, account_number, name = parts
    return ParseSuccess(queue=SimpleQueue.from_parts(region, account_number, name))


def parse_queue_arn(text) -> ParseResult:
    """
    Parse arn:aws:sqs:<region>:<account_number>:<name>.

    Args:
        text: Candidate queue ARN

    Returns:
        ParseSuccess with the queue, or ParseFailure; never raises
    """
    if not isinstance(text, str):
        return _failure(text, "arn", "queue ARN must be a string")

    parts = match_queue_arn(text)
    if parts is None:
        return _failure(text, "arn", "does not match arn:aws:sqs:<region>:<account>:<name>")

    region, account_number, name = parts
    return ParseSuccess(queue=SimpleQueue.from_parts(region, account_number, name))


def parse_queue_identifier(text) -> ParseResult:
    """Parse a queue URL or ARN; input starting with 'arn:' is treated as an ARN."""
    if isinstance(text, str) and text.startswith("arn:"):
        return parse_queue_arn(text)
    return parse_queue_url(text)
