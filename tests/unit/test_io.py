"""Unit tests for recording and grid I/O.

Tests cover:
- Loading and validating pointer recordings
- Error reporting for missing or malformed recordings
- Writing grids as text and JSON
"""

import json

import pytest

from glyphtrace.domain import Cell, GlyphGrid, PointerSample, UnitPoint
from glyphtrace.exceptions import GridWriteError, RecordingLoadError
from glyphtrace.io import GridFormat, GridWriter, RecordingReader, read_recording, write_grid


@pytest.fixture
def recording_path(tmp_path):
    path = tmp_path / "stroke.json"
    path.write_text(
        json.dumps(
            {
                "samples": [
                    {"row": 0, "col": 0, "x": 0.5, "y": 0.5},
                    {"row": 0, "col": 1, "x": 0.25, "y": 0.5},
                    {"row": 2, "col": 3, "x": 1.0, "y": 0.0},
                ]
            }
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def grid() -> GlyphGrid:
    return GlyphGrid.from_cells({Cell(1, 1): "\\", Cell(2, 2): "\\"}, color_index=4)


class TestRecordingReader:
    """Tests for loading pointer recordings."""

    def test_read_samples(self, recording_path):
        samples = read_recording(recording_path)
        assert samples[0] == PointerSample(Cell(0, 0), UnitPoint(0.5, 0.5))
        assert samples[2] == PointerSample(Cell(2, 3), UnitPoint(1.0, 0.0))
        assert len(samples) == 3

    def test_context_manager(self, recording_path):
        with RecordingReader(recording_path) as reader:
            assert reader.sample_count == 3
            cells = [s.cell for s in reader.iter_samples()]
        assert cells == [Cell(0, 0), Cell(0, 1), Cell(2, 3)]

    def test_not_loaded(self, recording_path):
        reader = RecordingReader(recording_path)
        with pytest.raises(RuntimeError):
            _ = reader.sample_count

    def test_missing_file(self, tmp_path):
        with pytest.raises(RecordingLoadError, match="file not found"):
            read_recording(tmp_path / "missing.json")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(RecordingLoadError) as exc_info:
            read_recording(path)
        assert exc_info.value.path == str(path)

    def test_point_out_of_range(self, tmp_path):
        """Sample coordinates must lie in the unit square."""
        path = tmp_path / "range.json"
        path.write_text(json.dumps({"samples": [{"row": 0, "col": 0, "x": 1.5, "y": 0.5}]}))
        with pytest.raises(RecordingLoadError, match="samples.0.x"):
            read_recording(path)

    def test_empty_recording(self, tmp_path):
        """A stroke needs at least its pointer-down sample."""
        path = tmp_path / "empty.json"
        path.write_text(json.dumps({"samples": []}))
        with pytest.raises(RecordingLoadError):
            read_recording(path)

    def test_missing_field(self, tmp_path):
        path = tmp_path / "partial.json"
        path.write_text(json.dumps({"samples": [{"row": 0, "x": 0.5, "y": 0.5}]}))
        with pytest.raises(RecordingLoadError, match="col"):
            read_recording(path)


class TestGridWriter:
    """Tests for writing glyph grids."""

    def test_write_text(self, grid, tmp_path):
        path = tmp_path / "grid.txt"
        GridWriter(grid, path).save(GridFormat.TEXT)
        assert path.read_text(encoding="utf-8") == "\\ \n \\\n"

    def test_write_json(self, grid, tmp_path):
        path = tmp_path / "grid.json"
        GridWriter(grid, path).save(GridFormat.JSON)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["origin"] == {"row": 1, "col": 1}
        assert data["chars"] == [["\\", ""], ["", "\\"]]
        assert data["colors"] == [[4, None], [None, 4]]
        assert GlyphGrid.from_dict(data) == grid

    def test_json_keeps_unicode(self, tmp_path):
        grid = GlyphGrid.single("└", Cell(0, 0), 0)
        path = tmp_path / "box.json"
        GridWriter(grid, path).save(GridFormat.JSON)
        assert "└" in path.read_text(encoding="utf-8")

    def test_format_for_path(self, tmp_path):
        assert GridWriter.format_for_path(tmp_path / "a.json") is GridFormat.JSON
        assert GridWriter.format_for_path(tmp_path / "a.JSON") is GridFormat.JSON
        assert GridWriter.format_for_path(tmp_path / "a.txt") is GridFormat.TEXT
        assert GridWriter.format_for_path(tmp_path / "a") is GridFormat.TEXT

    def test_write_grid_infers_format(self, grid, tmp_path):
        path = tmp_path / "grid.json"
        write_grid(grid, path)
        assert json.loads(path.read_text(encoding="utf-8"))["origin"] == {"row": 1, "col": 1}

    def test_write_grid_explicit_format(self, grid, tmp_path):
        path = tmp_path / "grid.json"
        write_grid(grid, path, "text")
        assert path.read_text(encoding="utf-8").startswith("\\")

    def test_write_failure(self, grid, tmp_path):
        """Writing into a missing directory is reported as a write error."""
        path = tmp_path / "missing" / "grid.txt"
        with pytest.raises(GridWriteError) as exc_info:
            write_grid(grid, path)
        assert exc_info.value.path == str(path)
