"""Reading the header line from stdin or a message file."""
from pathlib import Path
from typing import BinaryIO

from commit_lint.logging_config import get_logger

logger = get_logger(__name__)


def strip_newline(text: str) -> str:
    """Remove one trailing line ending, if there is one.

    Args:
        text: Raw line as read from the input

    Returns:
        Text without its trailing ``\\n`` or ``\\r\\n``
    """
    if text.endswith("\n"):
        text = text[:-1]
        if text.endswith("\r"):
            text = text[:-1]
    return text


def decode_text(data: bytes, source: str) -> str:
    """Decode input bytes, trying UTF-8 first and falling back to latin-1.

    Args:
        data: Raw bytes
        source: Where the bytes came from, for the log message

    Returns:
        Decoded text
    """
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning(f"{source} is not valid UTF-8, trying latin-1")
        return data.decode("latin-1")


def read_header(stream: BinaryIO) -> str:
    """Read the first line of a binary stream as the header.

    EOF without a newline is fine; whatever was read is used as is.

    Args:
        stream: Binary stream, usually stdin

    Returns:
        Header text without trailing newline
    """
    return strip_newline(decode_text(stream.readline(), "Input"))


def read_header_file(file_path: Path) -> str:
    """Read the header from the first line of a message file.

    Args:
        file_path: Path to the message file

    Returns:
        Header text without trailing newline

    Raises:
        OSError: If the file cannot be read
    """
    content = decode_text(file_path.read_bytes(), f"File {file_path}")

    line_end = content.find("\n")
    first_line = content if line_end == -1 else content[: line_end + 1]
    return strip_newline(first_line)
