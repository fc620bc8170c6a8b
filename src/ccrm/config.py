"""Configuration loading for CCRM.

The application builds exactly one ``AppConfig`` at startup and hands it to
whichever component needs it. There is no module-level instance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml

from ccrm.exceptions import CcrmError

CONFIG_FILENAME = "ccrm.yaml"
DEFAULT_DATA_FOLDER = "ccrm_data"
DEFAULT_LOG_DIR = "logs"
DEFAULT_LOG_LEVEL = "INFO"


class ConfigError(CcrmError):
    """Raised when configuration is invalid or missing."""


@dataclass(frozen=True)
class AppConfig:
    """Application configuration.

    Attributes:
        data_folder: Directory reserved for backup and export files.
        log_dir: Directory for rotating log files.
        log_level: Log level name (DEBUG, INFO, WARNING, ERROR).
    """

    data_folder: Path = field(default_factory=lambda: Path.cwd() / DEFAULT_DATA_FOLDER)
    log_dir: Path = field(default_factory=lambda: Path.cwd() / DEFAULT_LOG_DIR)
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_dict(cls, data: dict[str, Any], root_path: Path) -> AppConfig:
        """Create config from dictionary.

        Relative paths are resolved against ``root_path``.

        Args:
            data: Configuration dictionary from YAML.
            root_path: Directory containing the config file.

        Returns:
            Parsed configuration object.

        Raises:
            ConfigError: If a value has the wrong type.
        """
        data_folder = _resolve_path(data, "data_folder", DEFAULT_DATA_FOLDER, root_path)
        log_dir = _resolve_path(data, "log_dir", DEFAULT_LOG_DIR, root_path)

        log_level = data.get("log_level", DEFAULT_LOG_LEVEL)
        if not isinstance(log_level, str):
            raise ConfigError(f"'log_level' must be a string, got {type(log_level).__name__}")

        return cls(data_folder=data_folder, log_dir=log_dir, log_level=log_level.upper())

    def with_env_overrides(self) -> AppConfig:
        """Return a copy with CCRM_DATA_DIR, CCRM_LOG_DIR and CCRM_LOG_LEVEL applied."""
        config = self
        data_dir = os.environ.get("CCRM_DATA_DIR")
        if data_dir:
            config = replace(config, data_folder=Path(data_dir))
        log_dir = os.environ.get("CCRM_LOG_DIR")
        if log_dir:
            config = replace(config, log_dir=Path(log_dir))
        log_level = os.environ.get("CCRM_LOG_LEVEL")
        if log_level:
            config = replace(config, log_level=log_level.upper())
        return config


def _resolve_path(data: dict[str, Any], key: str, default: str, root_path: Path) -> Path:
    value = data.get(key, default)
    if not isinstance(value, str):
        raise ConfigError(f"'{key}' must be a string path, got {type(value).__name__}")
    path = Path(value)
    if not path.is_absolute():
        path = root_path / path
    return path


def load_config(config_path: Path | str | None = None) -> AppConfig:
    """Load CCRM configuration.

    Args:
        config_path: Path to a YAML config file. When omitted, ``ccrm.yaml`` in
            the current directory is used if present, otherwise defaults.

    Returns:
        Parsed configuration with environment overrides applied.

    Raises:
        ConfigError: If the given file doesn't exist or is invalid.
    """
    if config_path is None:
        candidate = Path.cwd() / CONFIG_FILENAME
        if not candidate.exists():
            return AppConfig().with_env_overrides()
        config_path = candidate

    config_path = Path(config_path)

    if not config_path.exists():
        raise ConfigError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    # An empty file means "all defaults"
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration must be a YAML mapping, got {type(data).__name__}")

    return AppConfig.from_dict(data, config_path.parent).with_env_overrides()
