"""Configuration management for glyphtrace.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- LineStyle: Explicit line drawing styles
- LineConfig: Line drawing settings
- StrokeConfig: Freehand stroke settings
- LoggingConfig: Logging settings
- GlyphtraceSettings: Main application settings
"""

from glyphtrace.config.settings import (
    GlyphtraceSettings,
    LineConfig,
    LineStyle,
    LoggingConfig,
    StrokeConfig,
    get_default_settings,
)

__all__ = [
    "GlyphtraceSettings",
    "LineConfig",
    "LineStyle",
    "LoggingConfig",
    "StrokeConfig",
    "get_default_settings",
]
