"""Exceptions raised by commit-lint."""


class ConfigError(ValueError):
    """Configuration file is missing, unreadable or invalid."""
