"""Configuration management for commit-lint."""
import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from commit_lint.errors import ConfigError
from commit_lint.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_FILE = ".commitlint"


class LintConfig(BaseModel):
    """Rule set for commit header validation.

    Missing values fall back to zero: a length limit of 0 and no allowed
    types. Every rule still evaluates sanely against that.
    """

    header_max_length: int = Field(
        default=0, ge=0, strict=True, description="Maximum header length in characters"
    )
    types: frozenset[str] = Field(default_factory=frozenset, description="Allowed commit types")

    model_config = {"frozen": True}


def load_config(config_path: Path) -> LintConfig:
    """Load configuration from a JSON file.

    Accepts the ``header-max-length`` key as well as ``header_max_length``.
    Missing or null values give a zero-valued configuration.

    Args:
        config_path: Path to .commitlint file

    Returns:
        LintConfig with loaded values

    Raises:
        ConfigError: If the file is missing, unreadable or invalid
    """
    try:
        with config_path.open(encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError as e:
        raise ConfigError(f"config {config_path} not found") from e
    except OSError as e:
        raise ConfigError(f"cannot read config {config_path}: {e}") from e
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise ConfigError(f"error decoding config {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"config {config_path} must contain a JSON object")

    header_max_length = data.get("header-max-length")
    if header_max_length is None:
        header_max_length = data.get("header_max_length")
    types = data.get("types")

    # null reads as the zero value, same as a missing key
    config_data = {
        "header_max_length": 0 if header_max_length is None else header_max_length,
        "types": [] if types is None else types,
    }

    try:
        config = LintConfig(**config_data)
    except ValidationError as e:
        raise ConfigError(f"invalid config {config_path}: {e}") from e

    logger.info(f"Loaded config from {config_path}")
    return config
