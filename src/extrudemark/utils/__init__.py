"""Utility functions for extrudemark.

This module provides utility functions including:

- Logging setup and configuration
- Render statistics collection
"""

from extrudemark.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
