"""Configuration management for glif2svg.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ConversionConfig: Per-glyph conversion settings
- ProcessingConfig: Batch processing settings
- LoggingConfig: Logging settings
- Glif2SvgSettings: Main application settings
"""

from glif2svg.config.settings import (
    ContourPolicy,
    ConversionConfig,
    Glif2SvgSettings,
    LoggingConfig,
    ProcessingConfig,
    get_default_settings,
)

__all__ = [
    "ContourPolicy",
    "ConversionConfig",
    "Glif2SvgSettings",
    "LoggingConfig",
    "ProcessingConfig",
    "get_default_settings",
]
