"""Commit-lint: commit message header linter."""

from commit_lint.__version__ import __version__
from commit_lint.checker import check, lint
from commit_lint.config import LintConfig, load_config
from commit_lint.errors import ConfigError
from commit_lint.parser import parse
from commit_lint.types import LintError, ParsedHeader

__all__ = [
    "__version__",
    "LintConfig",
    "load_config",
    "ConfigError",
    "parse",
    "check",
    "lint",
    "ParsedHeader",
    "LintError",
]
