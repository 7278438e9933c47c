"""Configuration settings for Glyphtrace."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class LineStyle(str, Enum):
    """How an explicit start-to-end line is drawn."""

    ADAPTIVE = "adaptive"
    MONOCHAR = "monochar"
    RIGHT_ANGLE_LINE = "right_angle_line"
    RIGHT_ANGLE_ARROW = "right_angle_arrow"
    RIGHT_ANGLE_UNICODE = "right_angle_unicode"
    RIGHT_ANGLE_MONOCHAR = "right_angle_monochar"

    @property
    def is_right_angle(self) -> bool:
        return self.value.startswith("right_angle")


class LineConfig(BaseModel):
    """Configuration for explicit line drawing."""

    style: LineStyle = Field(
        default=LineStyle.ADAPTIVE,
        description="Line drawing style",
    )
    char: str = Field(
        default="*",
        min_length=1,
        max_length=1,
        description="Drawing character for monochar styles",
    )
    color_index: int = Field(
        default=0,
        ge=0,
        description="Palette color assigned to every drawn character",
    )


class StrokeConfig(BaseModel):
    """Configuration for freehand strokes."""

    color_index: int = Field(
        default=0,
        ge=0,
        description="Palette color assigned to every glyph of a stroke",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class GlyphtraceSettings(BaseModel):
    """Main application settings."""

    line: LineConfig = Field(default_factory=LineConfig)
    stroke: StrokeConfig = Field(default_factory=StrokeConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> GlyphtraceSettings:
    """Get default application settings."""
    return GlyphtraceSettings()
