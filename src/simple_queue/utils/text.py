"""
Module: text.py
Description: Text helpers for rendering attribute names.
"""

import re

# lower->Upper, acronym->Word, and letter<->non-letter boundaries
_CAMEL_BOUNDARY = re.compile(
    r'(?<=[A-Z])(?=[A-Z][a-z])'
    r'|(?<=[^A-Z])(?=[A-Z])'
    r'|(?<=[A-Za-z])(?=[^A-Za-z])'
)


def split_camel_case(text: str) -> str:
    """
    Split a camel-case identifier into space-separated words.

    Examples:
        >>> split_camel_case('VisibilityTimeout')
        'Visibility Timeout'
        >>> split_camel_case('SQSQueueArn')
        'SQS Queue Arn'
    """
    if not text:
        return text
    return _CAMEL_BOUNDARY.sub(' ', text)
