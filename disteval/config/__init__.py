"""
Configuration module for disteval.

Example:
    >>> from disteval.config import load_config
    >>>
    >>> settings = load_config()
    >>> print(settings.log_level)
"""

from .settings import (
    Settings,
    load_config,
    get_default_config_path,
    get_settings,
    reset_settings,
)

__all__ = [
    "Settings",
    "load_config",
    "get_default_config_path",
    "get_settings",
    "reset_settings",
]
