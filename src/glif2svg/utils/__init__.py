"""Utility functions for glif2svg.

This module provides utility functions including:

- Logging setup and configuration
- Conversion statistics and progress logging
"""

from glif2svg.utils.logging import (
    ProcessingLogger,
    ProcessingStats,
    configure_logging,
)

__all__ = [
    "ProcessingLogger",
    "ProcessingStats",
    "configure_logging",
]
