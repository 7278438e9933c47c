"""Utility functions for glyphtrace.

This module provides utility functions including:

- Logging setup and configuration
- Per-stroke statistics collection
"""

from glyphtrace.utils.logging import (
    StrokeLogger,
    StrokeStats,
    configure_logging,
)

__all__ = [
    "StrokeLogger",
    "StrokeStats",
    "configure_logging",
]
