"""Utility functions for arcglyph.

This module provides logging setup and render statistics.
"""

from arcglyph.utils.logging import (
    RenderLogger,
    RenderStats,
    configure_logging,
)

__all__ = [
    "RenderLogger",
    "RenderStats",
    "configure_logging",
]
