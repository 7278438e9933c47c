"""Stroke records produced while tracking a pointer.

A stroke is an ordered sequence of ClassifiedCells. Each record remembers
where the pointer entered a cell and where it last was inside that cell,
along with the glyph chosen for that motion.
"""

from dataclasses import dataclass
from typing import Any

from glyphtrace.domain.cell import Cell, UnitPoint


@dataclass(frozen=True, slots=True)
class ClassifiedCell:
    """A cell of a stroke together with its chosen glyph.

    Records are never mutated; when the pointer keeps moving inside a cell a
    new record is derived with the updated exit point.

    Attributes:
        cell: Grid position of the record
        entry: Point where the pointer entered the cell
        exit: Latest point of the pointer inside the cell
        char: Glyph chosen from the entry/exit geometry
        distance: Euclidean entry-to-exit distance in unit-square space
        prunable: Advisory flag; True when the traversal is too short to matter
    """

    cell: Cell
    entry: UnitPoint
    exit: UnitPoint
    char: str
    distance: float
    prunable: bool

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the record
        """
        return {
            "cell": self.cell.to_dict(),
            "entry": self.entry.to_dict(),
            "exit": self.exit.to_dict(),
            "char": self.char,
            "distance": self.distance,
            "prunable": self.prunable,
        }


@dataclass(frozen=True, slots=True)
class PointerSample:
    """A single pointer position mapped onto the grid.

    Attributes:
        cell: Cell containing the pointer
        point: Pointer position within that cell's unit square
    """

    cell: Cell
    point: UnitPoint

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the flat recording format."""
        return {
            "row": self.cell.row,
            "col": self.cell.col,
            "x": self.point.x,
            "y": self.point.y,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PointerSample":
        """Deserialize from the flat recording format."""
        return cls(
            cell=Cell(row=int(data["row"]), col=int(data["col"])),
            point=UnitPoint(x=float(data["x"]), y=float(data["y"])),
        )
