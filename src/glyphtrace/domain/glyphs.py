"""Dense glyph grids handed to the compositor.

This module defines the only artifact that leaves the rasterizer: a dense
2D array of characters and color indexes anchored at an origin cell.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from glyphtrace.domain.cell import Cell
from glyphtrace.exceptions import EmptyStrokeError

# Transparent placeholder; the compositor never writes it over existing content
EMPTY_CHAR = ""


@dataclass
class GlyphGrid:
    """Rasterized output of a stroke or line.

    Attributes:
        chars: Dense rows of characters; EMPTY_CHAR marks transparent positions
        colors: Dense rows of color indexes; None where nothing was placed
        origin: Absolute cell of chars[0][0] (minimum row/col touched)
    """

    chars: list[list[str]]
    colors: list[list[int | None]]
    origin: Cell

    @classmethod
    def from_cells(cls, placed: Mapping[Cell, str], color_index: int | None) -> "GlyphGrid":
        """Compact a sparse mapping of absolute cells into a dense grid.

        The origin is computed from the final bounds, so cells may sit at any
        (including negative) position.

        Args:
            placed: Mapping of absolute cell to character
            color_index: Color assigned to every placed character

        Returns:
            GlyphGrid covering the bounding box of all placed cells

        Raises:
            EmptyStrokeError: If no cells were placed
        """
        if not placed:
            raise EmptyStrokeError("Cannot build a glyph grid from zero cells")

        min_row = min(cell.row for cell in placed)
        min_col = min(cell.col for cell in placed)
        max_row = max(cell.row for cell in placed)
        max_col = max(cell.col for cell in placed)

        grid = cls.empty(max_row - min_row + 1, max_col - min_col + 1, Cell(min_row, min_col))
        for cell, char in placed.items():
            grid.set(cell, char, color_index)
        return grid

    @classmethod
    def empty(cls, num_rows: int, num_cols: int, origin: Cell) -> "GlyphGrid":
        """Create a fully transparent grid of the given size."""
        return cls(
            chars=[[EMPTY_CHAR] * num_cols for _ in range(num_rows)],
            colors=[[None] * num_cols for _ in range(num_rows)],
            origin=origin,
        )

    @classmethod
    def single(cls, char: str, origin: Cell, color_index: int | None) -> "GlyphGrid":
        """Create a 1x1 grid holding one character."""
        return cls(chars=[[char]], colors=[[color_index]], origin=origin)

    @property
    def num_rows(self) -> int:
        return len(self.chars)

    @property
    def num_cols(self) -> int:
        return len(self.chars[0]) if self.chars else 0

    def set(self, cell: Cell, char: str, color_index: int | None) -> None:
        """Place a character at an absolute cell inside the grid.

        Raises:
            IndexError: If the cell falls outside the grid
        """
        row, col = self._local(cell)
        self.chars[row][col] = char
        self.colors[row][col] = color_index

    def char_at(self, cell: Cell) -> str:
        """Get the character at an absolute cell (EMPTY_CHAR outside the grid)."""
        row, col = cell.row - self.origin.row, cell.col - self.origin.col
        if 0 <= row < self.num_rows and 0 <= col < self.num_cols:
            return self.chars[row][col]
        return EMPTY_CHAR

    def iter_cells(self) -> Iterator[tuple[Cell, str, int | None]]:
        """Iterate over non-empty positions as (absolute cell, char, color)."""
        for r, row in enumerate(self.chars):
            for c, char in enumerate(row):
                if char != EMPTY_CHAR:
                    yield self.origin.translate(r, c), char, self.colors[r][c]

    def char_count(self) -> int:
        """Count non-empty positions."""
        return sum(1 for _ in self.iter_cells())

    def to_text(self, fill: str = " ") -> str:
        """Render the characters as text lines.

        Args:
            fill: Character shown for transparent positions

        Returns:
            Newline-joined rows
        """
        return "\n".join(
            "".join(char if char != EMPTY_CHAR else fill for char in row)
            for row in self.chars
        )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with chars, colors and origin fields
        """
        return {
            "chars": [list(row) for row in self.chars],
            "colors": [list(row) for row in self.colors],
            "origin": self.origin.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GlyphGrid":
        """Deserialize from dictionary."""
        return cls(
            chars=[list(row) for row in data["chars"]],
            colors=[list(row) for row in data["colors"]],
            origin=Cell.from_dict(data["origin"]),
        )

    def _local(self, cell: Cell) -> tuple[int, int]:
        row, col = cell.row - self.origin.row, cell.col - self.origin.col
        if not (0 <= row < self.num_rows and 0 <= col < self.num_cols):
            raise IndexError(f"{cell} is outside grid anchored at {self.origin}")
        return row, col
