"""Unit tests for configuration and logging utilities."""

import logging

import pytest
from pydantic import ValidationError

from glyphtrace.config import (
    GlyphtraceSettings,
    LineConfig,
    LineStyle,
    StrokeConfig,
    get_default_settings,
)
from glyphtrace.utils import StrokeLogger, StrokeStats, configure_logging


class RecordingLogger:
    """Collects events in place of a structlog logger."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str, dict]] = []

    def debug(self, event: str, **fields) -> None:
        self.events.append(("debug", event, fields))

    def info(self, event: str, **fields) -> None:
        self.events.append(("info", event, fields))


@pytest.fixture
def restore_root_handlers():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


class TestSettings:
    """Tests for pydantic settings models."""

    def test_defaults(self):
        settings = get_default_settings()
        assert settings.line.style is LineStyle.ADAPTIVE
        assert settings.line.char == "*"
        assert settings.line.color_index == 0
        assert settings.stroke.color_index == 0
        assert settings.logging.log_file is None
        assert settings.logging.log_level == "WARNING"

    def test_style_from_string(self):
        config = LineConfig(style="right_angle_unicode")
        assert config.style is LineStyle.RIGHT_ANGLE_UNICODE

    @pytest.mark.parametrize("char", ["", "ab"])
    def test_char_must_be_single(self, char: str):
        with pytest.raises(ValidationError):
            LineConfig(char=char)

    def test_negative_color_rejected(self):
        with pytest.raises(ValidationError):
            StrokeConfig(color_index=-1)
        with pytest.raises(ValidationError):
            LineConfig(color_index=-1)

    def test_right_angle_styles(self):
        assert LineStyle.RIGHT_ANGLE_ARROW.is_right_angle
        assert LineStyle.RIGHT_ANGLE_MONOCHAR.is_right_angle
        assert not LineStyle.ADAPTIVE.is_right_angle
        assert not LineStyle.MONOCHAR.is_right_angle

    def test_nested_settings(self):
        settings = GlyphtraceSettings(line={"style": "monochar", "char": "#"})
        assert settings.line.style is LineStyle.MONOCHAR
        assert settings.stroke == StrokeConfig()


class TestStrokeLogger:
    """Tests for stroke statistics and events."""

    def test_stats_without_logger(self):
        """Statistics are collected even with nothing to log to."""
        stroke_logger = StrokeLogger()
        stroke_logger.log_sample(0, 0, 0.5, 0.5)
        stroke_logger.log_cell_entered(0, 0)
        stroke_logger.log_interpolated("C(r=0, c=0)", "C(r=0, c=3)", 2)
        stroke_logger.log_pruned(0, 1, 0.1)
        stroke_logger.log_revisited(0, 0)
        stroke_logger.log_finalized(3, 1, 4)

        stats = stroke_logger.stats
        assert stats.samples == 1
        assert stats.cells_entered == 1
        assert stats.interpolated_count == 2
        assert stats.pruned_count == 1
        assert stats.revisited_count == 1
        assert stats.final_cell_count == 3

    def test_events_emitted(self):
        logger = RecordingLogger()
        stroke_logger = StrokeLogger(logger)  # type: ignore[arg-type]
        stroke_logger.log_cell_entered(2, 3)
        stroke_logger.log_finalized(1, 1, 1)

        assert logger.events[0] == ("debug", "Cell entered", {"row": 2, "col": 3})
        level, event, fields = logger.events[1]
        assert (level, event) == ("info", "Stroke finalized")
        assert fields["cells"] == 1

    def test_reset(self):
        stroke_logger = StrokeLogger()
        stroke_logger.log_sample(0, 0, 0.0, 0.0)
        stroke_logger.reset()
        assert stroke_logger.stats == StrokeStats()

    def test_kept_ratio(self):
        assert StrokeStats().kept_ratio == 0.0
        stats = StrokeStats(cells_entered=3, interpolated_count=1, final_cell_count=2)
        assert stats.kept_ratio == 0.5


class TestConfigureLogging:
    """Tests for structured logging setup."""

    def test_file_handler_added(self, tmp_path, restore_root_handlers):
        log_file = tmp_path / "glyphtrace.log"
        logger = configure_logging(log_file=log_file, quiet=True)
        logger.info("Stroke finalized", cells=3)

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Stroke finalized" in log_file.read_text(encoding="utf-8")

    def test_quiet_without_file_adds_no_handlers(self, restore_root_handlers):
        before = len(logging.getLogger().handlers)
        configure_logging(quiet=True)
        assert len(logging.getLogger().handlers) == before

    def test_reconfiguring_replaces_handlers(self, tmp_path, restore_root_handlers):
        root = logging.getLogger()
        before = len(root.handlers)
        first_file = tmp_path / "first.log"
        second_file = tmp_path / "second.log"

        configure_logging(log_file=first_file)
        logger = configure_logging(log_file=second_file)
        logger.info("Stroke finalized", cells=1)

        for handler in root.handlers:
            handler.flush()
        assert len(root.handlers) == before + 2
        assert second_file.read_text(encoding="utf-8").count("Stroke finalized") == 1
        assert "Stroke finalized" not in first_file.read_text(encoding="utf-8")
