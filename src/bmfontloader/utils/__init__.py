"""Utility functions for bmfontloader.

This module provides utility functions including:

- Logging setup and configuration
- Load statistics for command-line runs
"""

from bmfontloader.utils.logging import (
    LoadLogger,
    LoadStats,
    configure_logging,
)

__all__ = [
    "LoadLogger",
    "LoadStats",
    "configure_logging",
]
