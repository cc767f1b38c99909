"""Configuration management for linefeather.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- StrokeStyle: Line width, dash pattern and cap style of a stroke
- RenderConfig: Preview canvas settings
- LoggingConfig: Logging settings
- LineFeatherSettings: Main application settings
"""

from linefeather.config.settings import (
    LineFeatherSettings,
    LoggingConfig,
    RenderConfig,
    StrokeStyle,
    get_default_settings,
)
from linefeather.domain import LineCap

__all__ = [
    "LineCap",
    "LineFeatherSettings",
    "LoggingConfig",
    "RenderConfig",
    "StrokeStyle",
    "get_default_settings",
]
