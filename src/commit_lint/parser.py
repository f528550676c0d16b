"""Commit header parsing."""
import re

from commit_lint.types import ParsedHeader

# type, optional (scope), then ": " and the subject
HEADER_PATTERN = re.compile(r"(\w*)(?:\(([\w$.\-* ]*)\))?: (.*)", re.ASCII)


def parse(text: str) -> ParsedHeader:
    """Split a header line into type, scope and subject.

    The whole string must match. When it doesn't, only ``header`` is set.

    Args:
        text: Header line without trailing newline

    Returns:
        ParsedHeader for the text
    """
    match = HEADER_PATTERN.fullmatch(text)
    if match is None:
        return ParsedHeader(header=text)

    msg_type, scope, subject = match.groups()
    return ParsedHeader(header=text, type=msg_type, scope=scope, subject=subject)
