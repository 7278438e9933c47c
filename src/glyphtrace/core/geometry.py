"""Discrete and sub-cell geometry helpers.

This module provides core mathematical utilities for:
- Discrete line traversal between cells (Bresenham)
- Slope computation that never divides by zero
- Distances in unit-square space

All functions are pure and stateless.
"""

import math

from glyphtrace.domain import Cell, UnitPoint


def slope(rise: float, run: float) -> float:
    """Calculate rise over run, treating a zero run as an infinite slope.

    Args:
        rise: Vertical delta (positive is downward)
        run: Horizontal delta (positive is rightward)

    Returns:
        rise / run, or math.inf when run is zero

    Examples:
        >>> slope(1.0, 2.0)
        0.5
        >>> slope(3.0, 0.0)
        inf
    """
    if run == 0:
        return math.inf
    return rise / run


def unit_distance(a: UnitPoint, b: UnitPoint) -> float:
    """Euclidean distance between two points in unit-square space."""
    return math.hypot(b.x - a.x, b.y - a.y)


def line_cells(start: Cell, end: Cell) -> list[Cell]:
    """Compute the discrete traversal from one cell to another.

    Uses Bresenham's line algorithm, inclusive of both endpoints and ordered
    from start to end. Ties are always broken as if the line were drawn from
    the lexicographically smaller endpoint, so the set of cells does not
    depend on the direction of travel.

    Args:
        start: First cell of the traversal
        end: Last cell of the traversal

    Returns:
        Ordered list of cells from start to end

    Examples:
        >>> [c.to_tuple() for c in line_cells(Cell(0, 0), Cell(3, 3))]
        [(0, 0), (1, 1), (2, 2), (3, 3)]
    """
    if end.to_tuple() < start.to_tuple():
        return list(reversed(_bresenham(end, start)))
    return _bresenham(start, end)


def _bresenham(start: Cell, end: Cell) -> list[Cell]:
    d_row = end.row - start.row
    d_col = end.col - start.col
    abs_row = abs(d_row)
    abs_col = abs(d_col)
    step_row = 1 if d_row > 0 else -1
    step_col = 1 if d_col > 0 else -1

    cells: list[Cell] = []
    row, col = start.row, start.col
    error = 0

    if abs_col > abs_row:
        # Column-major: one cell per column
        for _ in range(abs_col + 1):
            cells.append(Cell(row, col))
            error += abs_row
            if 2 * error >= abs_col:
                row += step_row
                error -= abs_col
            col += step_col
    else:
        # Row-major: one cell per row (also covers the zero-length case)
        for _ in range(abs_row + 1):
            cells.append(Cell(row, col))
            error += abs_col
            if 2 * error >= abs_row:
                col += step_col
                error -= abs_row
            row += step_row

    return cells
