"""Core positional types for the character grid.

This module defines the fundamental positional types used throughout glyphtrace:
- Cell: A row/column position in the character grid
- UnitPoint: A position inside a single cell's unit square
"""

import math
from dataclasses import dataclass
from typing import Any

from glyphtrace.exceptions import PointOutOfRangeError


@dataclass(frozen=True, slots=True)
class Cell:
    """A discrete row/column position in the character grid.

    Immutable and hashable for use in sets/dicts. Rows grow downward and
    columns grow to the right; negative values are allowed for offsets.

    Attributes:
        row: Row index
        col: Column index
    """

    row: int
    col: int

    def is_adjacent_to(self, other: "Cell") -> bool:
        """Check if another cell touches this one (diagonals included).

        A cell is never adjacent to itself.

        Args:
            other: Cell to compare against

        Returns:
            True if the cells are distinct 8-neighbours
        """
        if self == other:
            return False
        return abs(self.row - other.row) <= 1 and abs(self.col - other.col) <= 1

    def relative_to(self, origin: "Cell") -> "Cell":
        """Express this cell as an offset from an origin cell."""
        return Cell(self.row - origin.row, self.col - origin.col)

    def translate(self, row_delta: int, col_delta: int) -> "Cell":
        """Return a new cell shifted by the given deltas."""
        return Cell(self.row + row_delta, self.col + col_delta)

    def to_tuple(self) -> tuple[int, int]:
        """Convert to simple (row, col) tuple."""
        return (self.row, self.col)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with row and col fields
        """
        return {"row": self.row, "col": self.col}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Cell":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with row and col fields

        Returns:
            Cell instance
        """
        return cls(row=int(data["row"]), col=int(data["col"]))

    def __str__(self) -> str:
        return f"C(r={self.row}, c={self.col})"


@dataclass(frozen=True, slots=True)
class UnitPoint:
    """A position within a single cell's unit square.

    Both coordinates are in [0, 1]. x grows to the right and y grows
    downward, matching row order in the grid.

    Attributes:
        x: Horizontal position (0 = left edge, 1 = right edge)
        y: Vertical position (0 = top edge, 1 = bottom edge)

    Raises:
        PointOutOfRangeError: If either coordinate is outside [0, 1]
    """

    x: float
    y: float

    def __post_init__(self) -> None:
        if not (0.0 <= self.x <= 1.0 and 0.0 <= self.y <= 1.0):
            raise PointOutOfRangeError(self.x, self.y)

    @classmethod
    def center(cls) -> "UnitPoint":
        """Midpoint of the unit square."""
        return cls(0.5, 0.5)

    @classmethod
    def clamped(cls, x: float, y: float) -> "UnitPoint":
        """Build a point, clamping both coordinates into the unit square.

        Used where float rounding can push an interpolated coordinate a hair
        past an edge.
        """
        return cls(min(1.0, max(0.0, x)), min(1.0, max(0.0, y)))

    def distance_to(self, other: "UnitPoint") -> float:
        """Euclidean distance to another point in unit-square space."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple."""
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "UnitPoint":
        """Deserialize from dictionary."""
        return cls(x=float(data["x"]), y=float(data["y"]))
