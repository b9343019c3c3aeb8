"""Configuration management for bmfontloader.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LoaderConfig: Descriptor loading settings
- LoggingConfig: Logging settings
- BitmapFontSettings: Main application settings
"""

from bmfontloader.config.settings import (
    BitmapFontSettings,
    LoaderConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "BitmapFontSettings",
    "LoaderConfig",
    "LoggingConfig",
    "get_default_settings",
]
