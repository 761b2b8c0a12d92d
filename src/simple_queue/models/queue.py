"""
Module: queue.py
Description: SimpleQueue model identifying an SQS queue.

A queue is identified by region, account number and name. From those
three fields the model derives the queue URL and ARN, and it can be
rebuilt by parsing either form. A flat mapping of queue attributes
can be attached and rendered for display.

Not named Queue to avoid confusion with queue.Queue from the standard
library.

Key Components:
- SimpleQueue: queue identity with URL/ARN derivation and parsing
- VISIBILITY_TIMEOUT_ATTR_NAME, DELAY_SECONDS_ATTR_NAME: attribute names
  used when building SQS requests

Dependencies: pydantic, re, typing
Author: Simple Queue Team
"""

import re
from typing import ClassVar, Dict, Mapping, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field

from simple_queue.config.settings import settings
from simple_queue.exceptions import AttributeFormatError
from simple_queue.models.formatting import format_attribute_value
from simple_queue.models.region import Region
from simple_queue.utils.logger import get_logger
from simple_queue.utils.text import split_camel_case

logger = get_logger(__name__)

VISIBILITY_TIMEOUT_ATTR_NAME = "VisibilityTimeout"
DELAY_SECONDS_ATTR_NAME = "DelaySeconds"

URL_PREFIX = "https://sqs."
URL_HOST_SUFFIX = ".amazonaws.com/"
ARN_PREFIX = "arn:aws:sqs:"

REGION_PATTERN = r"[-a-z0-9]+"
ACCOUNT_NUMBER_PATTERN = r"[0-9]+"

URL_PATTERN = re.compile(
    re.escape(URL_PREFIX)
    + f"({REGION_PATTERN})"
    + re.escape(URL_HOST_SUFFIX)
    + f"({ACCOUNT_NUMBER_PATTERN})/(.*)"
)
ARN_PATTERN = re.compile(
    re.escape(ARN_PREFIX) + f"({REGION_PATTERN}):({ACCOUNT_NUMBER_PATTERN}):(.*)"
)


def match_queue_url(url) -> Optional[Tuple[str, str, str]]:
    """Return (region, account_number, name) if url is a queue URL, else None."""
    if not isinstance(url, str):
        return None
    match = URL_PATTERN.fullmatch(url)
    return match.groups() if match else None


def match_queue_arn(arn) -> Optional[Tuple[str, str, str]]:
    """Return (region, account_number, name) if arn is a queue ARN, else None."""
    if not isinstance(arn, str):
        return None
    match = ARN_PATTERN.fullmatch(arn)
    return match.groups() if match else None


class SimpleQueue(BaseModel):
    """
    Identity of a Simple Queue Service queue.

    Region, account number and name are fixed once the queue is
    built; only the attribute mapping can change, and only through
    with_attributes(), which replaces it wholesale.

    Queues compare equal by value but are not hashable, since the
    attribute mapping is mutable. Use the arn string as a set member
    or dict key instead.

    Attributes:
        region: Short region code (e.g. 'us-east-1')
        account_number: Numeric account id, kept as a string
        name: Queue name
        attributes: Queue attributes as returned by GetQueueAttributes
    """

    model_config = ConfigDict(validate_assignment=True)

    VISIBILITY_TIMEOUT_ATTR_NAME: ClassVar[str] = VISIBILITY_TIMEOUT_ATTR_NAME
    DELAY_SECONDS_ATTR_NAME: ClassVar[str] = DELAY_SECONDS_ATTR_NAME

    region: str = Field(..., frozen=True, description="Short region code")
    account_number: str = Field(..., frozen=True, description="Account number")
    name: str = Field(..., frozen=True, description="Queue name")
    attributes: Dict[str, str] = Field(
        default_factory=dict,
        description="Queue attributes keyed by attribute name"
    )

    @classmethod
    def from_parts(
        cls,
        region: Union[Region, str],
        account_number: str,
        name: str
    ) -> "SimpleQueue":
        """
        Build a queue from its region, account number and name.

        Args:
            region: Region member or short region code
            account_number: Account number
            name: Queue name

        Returns:
            SimpleQueue with an empty attribute mapping
        """
        if isinstance(region, Region):
            region = region.code
        return cls(region=region, account_number=account_number, name=name)

    @classmethod
    def from_url(cls, url: str) -> "SimpleQueue":
        """
        Build a queue by parsing its URL.

        An unrecognised URL yields a queue whose region, account number
        and name are all empty strings. Use parse_queue_url() when the
        caller needs to tell a failure apart explicitly.
        """
        parts = match_queue_url(url)
        if parts is None:
            logger.debug("Queue URL did not match", url=url)
            return cls(region="", account_number="", name="")
        region, account_number, name = parts
        return cls(region=region, account_number=account_number, name=name)

    @classmethod
    def from_arn(cls, arn: str) -> Optional["SimpleQueue"]:
        """Build a queue by parsing its ARN; None if the ARN does not match."""
        parts = match_queue_arn(arn)
        if parts is None:
            logger.debug("Queue ARN did not match", arn=arn)
            return None
        region, account_number, name = parts
        return cls(region=region, account_number=account_number, name=name)

    @computed_field
    @property
    def url(self) -> str:
        """Queue URL, e.g. https://sqs.us-east-1.amazonaws.com/123456789012/jobs."""
        return f"{URL_PREFIX}{self.region}{URL_HOST_SUFFIX}{self.account_number}/{self.name}"

    @computed_field
    @property
    def arn(self) -> str:
        """Queue ARN, e.g. arn:aws:sqs:us-east-1:123456789012:jobs."""
        return f"{ARN_PREFIX}{self.region}:{self.account_number}:{self.name}"

    def get_url(self) -> str:
        return self.url

    def get_arn(self) -> str:
        return self.arn

    def with_attributes(self, attributes: Optional[Mapping[str, str]]) -> "SimpleQueue":
        """
        Replace the attribute mapping and return this queue.

        The previous attributes are discarded, not merged.

        Args:
            attributes: New attribute mapping (None clears it)

        Returns:
            This SimpleQueue instance, for chaining
        """
        self.attributes = dict(attributes or {})
        return self

    def human_readable_attributes(self) -> Dict[str, str]:
        """
        Render attributes for display.

        Keys are split into words ('VisibilityTimeout' -> 'Visibility
        Timeout') and values are formatted by the rule for the original
        attribute name. A value that does not fit its rule is passed
        through unchanged, or raises when strict attribute formatting is
        enabled.

        Returns:
            Mapping of display name to display value

        Raises:
            AttributeFormatError: Only with settings.strict_attribute_formatting
        """
        readable = {}
        for key, value in self.attributes.items():
            try:
                display_value = format_attribute_value(key, value)
            except AttributeFormatError as e:
                if settings.strict_attribute_formatting:
                    raise
                logger.warning(
                    "Attribute value left unformatted",
                    queue_arn=self.arn,
                    attribute=key,
                    value=value,
                    error=e.reason
                )
                display_value = value
            readable[split_camel_case(key)] = display_value
        return readable

    def get_human_readable_attributes(self) -> Dict[str, str]:
        return self.human_readable_attributes()
