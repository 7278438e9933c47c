"""Integration tests for the glyphtrace command-line interface."""

import json
import logging

import pytest
from typer.testing import CliRunner

from glyphtrace import __version__
from glyphtrace.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_handlers():
    """Each invocation configures logging; drop its handlers afterwards."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers = handlers
    root.setLevel(level)


@pytest.fixture
def recording(tmp_path):
    path = tmp_path / "stroke.json"
    samples = [{"row": 0, "col": c, "x": 0.5, "y": 0.5} for c in range(3)]
    path.write_text(json.dumps({"samples": samples}), encoding="utf-8")
    return path


class TestGlobalOptions:
    """Tests for options shared by every command."""

    def test_version(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output

    def test_invalid_log_level(self):
        result = runner.invoke(app, ["--log-level", "LOUD", "line", "0", "0", "0", "1"])
        assert result.exit_code == 1
        assert "Invalid log level" in result.output

    def test_log_file(self, tmp_path, recording):
        log_file = tmp_path / "trace.log"
        result = runner.invoke(app, ["--log-file", str(log_file), "-q", "trace", str(recording)])
        assert result.exit_code == 0
        assert "Stroke finalized" in log_file.read_text(encoding="utf-8")

    def test_repeated_runs_log_once_each(self, tmp_path, recording):
        log_file = tmp_path / "trace.log"
        for _ in range(2):
            result = runner.invoke(
                app, ["--log-file", str(log_file), "-q", "trace", str(recording)]
            )
            assert result.exit_code == 0

        assert log_file.read_text(encoding="utf-8").count("Stroke finalized") == 2


class TestLineCommand:
    """Tests for the line command."""

    def test_adaptive_line(self):
        result = runner.invoke(app, ["line", "0", "0", "0", "7"])
        assert result.exit_code == 0
        assert "--------" in result.output
        assert "Glyphtrace" in result.output

    def test_quiet_prints_grid_only(self):
        result = runner.invoke(app, ["-q", "line", "0", "0", "3", "3"])
        assert result.exit_code == 0
        lines = [line.rstrip() for line in result.output.rstrip("\n").split("\n")]
        assert lines == ["\\", " \\", "  \\", "   \\"]

    def test_right_angle_to_file(self, tmp_path):
        output = tmp_path / "corner.txt"
        result = runner.invoke(
            app,
            ["line", "0", "0", "2", "2", "--style", "right_angle_unicode", "-o", str(output)],
        )
        assert result.exit_code == 0
        assert output.read_text(encoding="utf-8") == "│  \n│  \n└──\n"
        assert "Saved" in result.output

    def test_change_route(self):
        result = runner.invoke(
            app,
            ["-q", "line", "0", "0", "1", "2", "--style", "right_angle_arrow", "--change-route"],
        )
        assert result.exit_code == 0
        assert result.output.rstrip("\n").split("\n") == ["--+", "  v"]

    def test_monochar_json(self, tmp_path):
        output = tmp_path / "line.json"
        result = runner.invoke(
            app,
            ["-q", "line", "1", "1", "1", "3", "-s", "monochar", "-c", "#", "--color", "2",
             "-o", str(output)],
        )
        assert result.exit_code == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["chars"] == [["#", "#", "#"]]
        assert data["colors"] == [[2, 2, 2]]
        assert data["origin"] == {"row": 1, "col": 1}

    def test_invalid_style(self):
        result = runner.invoke(app, ["line", "0", "0", "1", "1", "--style", "zigzag"])
        assert result.exit_code == 1
        assert "Invalid style" in result.output

    def test_invalid_char(self):
        result = runner.invoke(app, ["line", "0", "0", "1", "1", "-s", "monochar", "-c", "ab"])
        assert result.exit_code == 1
        assert "Invalid line options" in result.output

    def test_invalid_format(self, tmp_path):
        result = runner.invoke(
            app, ["line", "0", "0", "1", "1", "-o", str(tmp_path / "x"), "--format", "xml"]
        )
        assert result.exit_code == 1
        assert "Invalid format" in result.output

    def test_unwritable_output(self, tmp_path):
        result = runner.invoke(
            app, ["line", "0", "0", "0", "3", "-o", str(tmp_path / "missing" / "x.txt")]
        )
        assert result.exit_code == 1
        assert "Failed to write glyph grid" in result.output


class TestTraceCommand:
    """Tests for the trace command."""

    def test_trace_recording(self, recording):
        result = runner.invoke(app, ["trace", str(recording)])
        assert result.exit_code == 0
        assert "---" in result.output
        assert "3 samples" in result.output

    def test_trace_quiet(self, recording):
        result = runner.invoke(app, ["-q", "trace", str(recording)])
        assert result.exit_code == 0
        assert result.output.strip() == "---"

    def test_trace_to_json(self, tmp_path, recording):
        output = tmp_path / "stroke.json.out"
        result = runner.invoke(
            app, ["-q", "trace", str(recording), "--color", "9", "-o", str(output), "-f", "json"]
        )
        assert result.exit_code == 0

        data = json.loads(output.read_text(encoding="utf-8"))
        assert data["chars"] == [["-", "-", "-"]]
        assert data["colors"] == [[9, 9, 9]]

    def test_missing_recording(self, tmp_path):
        result = runner.invoke(app, ["trace", str(tmp_path / "nope.json")])
        assert result.exit_code == 1
        assert "Could not load recording" in result.output

    def test_invalid_recording(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"samples": [{"row": 0, "col": 0, "x": 3, "y": 0}]}))
        result = runner.invoke(app, ["trace", str(path)])
        assert result.exit_code == 1
        assert "Could not load recording" in result.output
