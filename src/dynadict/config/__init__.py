"""
Configuration module for dynadict.

Uses pydantic-settings for environment variable loading.
"""

from dynadict.config.settings import (
    DEFAULT_COMPARER_NAME,
    Settings,
    get_settings,
    reset_settings,
)

__all__ = ["DEFAULT_COMPARER_NAME", "Settings", "get_settings", "reset_settings"]
