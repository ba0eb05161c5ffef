"""Configuration management for arcglyph.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ApproximationConfig: Curve-to-arc approximation settings
- RenderConfig: Debug SVG output settings
- ProcessingConfig: Parallel processing settings
- LoggingConfig: Logging settings
- ArcGlyphSettings: Main application settings
"""

from arcglyph.config.settings import (
    ApproximationConfig,
    ArcGlyphSettings,
    LoggingConfig,
    ProcessingConfig,
    RenderConfig,
    get_default_settings,
)

__all__ = [
    "ApproximationConfig",
    "ArcGlyphSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "RenderConfig",
    "get_default_settings",
]
