"""Glyph grid writer.

This module provides the GridWriter class for saving rasterized glyph grids
as plain text or JSON.
"""

import json
from enum import Enum
from pathlib import Path

from glyphtrace.domain import GlyphGrid
from glyphtrace.exceptions import GridWriteError


class GridFormat(str, Enum):
    """Output format for a saved glyph grid."""

    TEXT = "text"
    JSON = "json"


class GridWriter:
    """Writes glyph grids to disk.

    Text output holds the characters only, with transparent positions shown
    as spaces. JSON output keeps the colors and origin as well.

    Example:
        writer = GridWriter(grid, Path("line.txt"))
        writer.save()
    """

    def __init__(self, grid: GlyphGrid, output_path: Path) -> None:
        """Initialize the grid writer.

        Args:
            grid: Glyph grid to write
            output_path: Path where the grid will be saved
        """
        self._grid = grid
        self._output_path = output_path

    def render(self, fmt: GridFormat = GridFormat.TEXT) -> str:
        """Render the grid in the given format without writing it."""
        if fmt is GridFormat.JSON:
            return json.dumps(self._grid.to_dict(), ensure_ascii=False, indent=2)
        return self._grid.to_text() + "\n"

    def save(self, fmt: GridFormat = GridFormat.TEXT) -> None:
        """Save the grid to the output path.

        Raises:
            GridWriteError: If the file cannot be written
        """
        try:
            self._output_path.write_text(self.render(fmt), encoding="utf-8")
        except OSError as e:
            raise GridWriteError(str(self._output_path), str(e)) from e

    @staticmethod
    def format_for_path(path: Path) -> GridFormat:
        """Guess the output format from a file extension.

        Converts: grid.json -> json
                  grid.txt  -> text
        """
        if path.suffix.lower() == ".json":
            return GridFormat.JSON
        return GridFormat.TEXT


def write_grid(grid: GlyphGrid, path: Path, fmt: GridFormat | str | None = None) -> None:
    """Write a glyph grid, picking the format from the extension if not given.

    Raises:
        GridWriteError: If the file cannot be written
    """
    chosen = GridFormat(fmt) if fmt is not None else GridWriter.format_for_path(path)
    GridWriter(grid, path).save(chosen)
