"""
Configuration management for disteval.

Provides a dataclass for settings and utilities for loading them
from YAML files.
"""

import os
from dataclasses import dataclass, fields, asdict
from pathlib import Path
from typing import Optional
import yaml

from ..core.exceptions import ConfigurationError


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class Settings:
    """
    Settings container for disteval.

    Attributes:
        log_level: Logging level for disteval loggers
        log_format: Custom log format string (None for the default)
        log_file: Optional file to mirror log records to
        label_results: Copy a matrix's column labels onto the rows and
            columns of its pairwise distance matrix
    """
    log_level: str = "WARNING"
    log_format: Optional[str] = None
    log_file: Optional[str] = None
    label_results: bool = True

    def __post_init__(self):
        """Validate values and normalise the log level."""
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ConfigurationError(
                f"log_level must be one of {list(LOG_LEVELS)}, got {self.log_level!r}"
            )
        self.log_level = self.log_level.upper()

        for name in ("log_format", "log_file"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, str):
                raise ConfigurationError(
                    f"{name} must be a string or null, got {type(value).__name__}"
                )

        if not isinstance(self.label_results, bool):
            raise ConfigurationError(
                f"label_results must be a boolean, got {type(self.label_results).__name__}"
            )

    @classmethod
    def from_dict(cls, data: dict) -> "Settings":
        """Create Settings from dictionary."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration keys: {unknown}. Allowed: {sorted(known)}"
            )
        return cls(**data)

    def to_dict(self) -> dict:
        """Convert Settings to dictionary."""
        return asdict(self)


def get_default_config_path() -> Path:
    """Get path to default configuration file."""
    env_config = os.environ.get("DISTEVAL_CONFIG")
    if env_config:
        return Path(env_config)

    # Check for config in current directory
    local_config = Path("./config/disteval.yaml")
    if local_config.exists():
        return local_config

    # Fall back to the config shipped with the package
    return Path(__file__).parent / "default_config.yaml"


def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file.

    Args:
        config_path: Path to config file. If None, uses default.

    Returns:
        Settings object with loaded configuration

    Example:
        >>> settings = load_config()
        >>> settings = load_config("./my_config.yaml")
    """
    if config_path is None:
        path = get_default_config_path()
    else:
        path = Path(config_path)

    if not path.exists():
        # Return default settings if no config file
        return Settings()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping, got {type(data).__name__}"
        )

    return Settings.from_dict(data)


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Return the process-wide settings, loading them on first use."""
    global _settings
    if _settings is None:
        _settings = load_config()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next access reloads them."""
    global _settings
    _settings = None
