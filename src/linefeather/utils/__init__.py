"""Utility functions for linefeather.

This module provides utility functions including:

- Logging setup and configuration
- Rendering statistics
"""

from linefeather.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
