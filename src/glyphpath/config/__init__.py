"""Configuration management for glyphpath.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LayoutConfig: Point size, resolution and buffer reuse settings
- LoggingConfig: Logging settings
- GlyphPathSettings: Main application settings
"""

from glyphpath.config.settings import (
    DEFAULT_DPI,
    GlyphPathSettings,
    LayoutConfig,
    LoggingConfig,
    get_default_settings,
)

__all__ = [
    "DEFAULT_DPI",
    "GlyphPathSettings",
    "LayoutConfig",
    "LoggingConfig",
    "get_default_settings",
]
