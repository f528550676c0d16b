"""Logging configuration for commit-lint.

Log records always go to stderr so that stdout carries only the report.
With ``--json`` the records are JSON lines too, so a consumer reading both
streams never has to parse free text.
"""
import json
import logging
import sys
from typing import TextIO

LOGGER_NAME = "commit_lint"
TEXT_FORMAT = "commit-lint: %(levelname)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """Render a log record as a single JSON object."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def resolve_level(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level.

    Raises:
        ValueError: If both flags are set
    """
    if verbose and quiet:
        raise ValueError("--verbose and --quiet cannot be used together")
    if quiet:
        return logging.ERROR
    if verbose:
        return logging.INFO
    return logging.WARNING


def setup_logging(
    verbose: bool = False,
    quiet: bool = False,
    json_output: bool = False,
    stream: TextIO | None = None,
) -> None:
    """Configure the commit_lint logger.

    Args:
        verbose: Enable verbose (INFO level) logging
        quiet: Enable quiet (ERROR only) logging
        json_output: Emit log records as JSON lines
        stream: Destination, stderr when not given
    """
    level = resolve_level(verbose=verbose, quiet=quiet)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(JsonFormatter() if json_output else logging.Formatter(TEXT_FORMAT))
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    """Get logger for module, under the commit_lint namespace."""
    if not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)
