"""
Configuration management for verparse.

Settings come from defaults, an optional ``verparse.yaml`` file and
``VERPARSE_*`` environment variables (highest priority).
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_CONFIG_FILE = "verparse.yaml"
ENV_PREFIX = "VERPARSE_"


class Settings(BaseSettings):
    """Application settings."""

    # Logging
    log_level: str = "WARNING"

    # Fixture files
    fixture_separator: str = ","
    ignored_entries: list[str] = ["list"]

    # Batch mode validates every rendering against the composer grammar
    check_output: bool = True

    model_config = {"env_prefix": ENV_PREFIX}

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Normalize to upper case and reject names logging doesn't know."""
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value}")
        return level


def load_config(config_path: str | Path | None = None) -> dict[str, Any]:
    """
    Load the ``verparse`` section of a YAML config file.

    Args:
        config_path: Explicit config file. When None, ``verparse.yaml`` in the
            working directory is used if present.

    Returns:
        Configuration dictionary (empty if no file is found)

    Raises:
        FileNotFoundError: If an explicit ``config_path`` doesn't exist
        ValueError: If the file or its ``verparse`` section is not a mapping
    """
    if config_path is None:
        path = Path(DEFAULT_CONFIG_FILE)
        if not path.exists():
            return {}
    else:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

    with open(path) as f:
        config = yaml.safe_load(f) or {}

    if not isinstance(config, dict):
        raise ValueError(f"Config file must contain a mapping: {path}")

    section = config.get("verparse") or {}
    if not isinstance(section, dict):
        raise ValueError(f"'verparse' section must be a mapping: {path}")
    if not all(isinstance(key, str) for key in section):
        raise ValueError(f"'verparse' section keys must be strings: {path}")

    return section


def get_settings(config_path: str | Path | None = None) -> Settings:
    """
    Get application settings.

    Returns:
        Settings built from the config file, with environment variables
        taking precedence over file values

    Raises:
        pydantic.ValidationError: If a setting has an unknown name or bad value
    """
    # pydantic-settings matches env names case-insensitively
    env_names = {name.upper() for name in os.environ}
    file_values = {
        key: value
        for key, value in load_config(config_path).items()
        if f"{ENV_PREFIX}{key.upper()}" not in env_names
    }
    return Settings(**file_values)
