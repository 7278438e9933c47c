"""Domain models for glyphtrace.

This module contains the core domain models representing grid positions,
sub-cell pointer positions, stroke records and glyph grids. All models are
designed to be:

- Immutable where possible (using frozen dataclasses)
- Serializable to plain dictionaries
- Independent of the algorithms that produce them

Key classes:
- Cell: A row/column position in the character grid
- UnitPoint: A position inside one cell's unit square
- ClassifiedCell: A stroke cell with its chosen glyph
- PointerSample: A pointer position mapped onto the grid
- GlyphGrid: Dense rasterized output anchored at an origin cell
"""

from glyphtrace.domain.cell import Cell, UnitPoint
from glyphtrace.domain.glyphs import EMPTY_CHAR, GlyphGrid
from glyphtrace.domain.stroke import ClassifiedCell, PointerSample

__all__: list[str] = [
    # Constants
    "EMPTY_CHAR",
    # Core types
    "Cell",
    "UnitPoint",
    "ClassifiedCell",
    "PointerSample",
    "GlyphGrid",
]
