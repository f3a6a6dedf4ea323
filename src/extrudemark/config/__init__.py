"""Configuration management for extrudemark.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments, a flat option mapping,
or defaults.

Key classes:
- PaletteConfig: Face, outline and background colors
- ExtrusionConfig: Depth, jitter and flattening settings
- LayoutConfig: Text, font size, tracking and canvas sizing
- OutputConfig: Output locations and the outline source
- LoggingConfig: Logging settings
- BrandSettings: Main application settings
"""

from extrudemark.config.settings import (
    BrandSettings,
    ExtrusionConfig,
    LayoutConfig,
    LoggingConfig,
    OutputConfig,
    PaletteConfig,
    get_default_settings,
)

__all__ = [
    "BrandSettings",
    "ExtrusionConfig",
    "LayoutConfig",
    "LoggingConfig",
    "OutputConfig",
    "PaletteConfig",
    "get_default_settings",
]
