"""Interpolation of cells skipped by fast pointer motion.

When the pointer jumps across several cells between two samples, the missing
cells are recovered with a discrete line traversal. The traversal is split
into groups of cells that share a row (for mostly horizontal lines) or a
column (for mostly vertical lines). Say we go from [0,0] to [2,6]:

      AB
        CDE
           FG

Groups are AB, CDE and FG. A straight line is drawn through each group from
the near corner of its first cell to the far corner of its last cell, and the
points where that line crosses each cell's edges become the cell's entry and
exit. Groups may have slightly different slopes: CDE is flatter than AB.
"""

from dataclasses import dataclass

from glyphtrace.core.geometry import line_cells
from glyphtrace.domain import Cell, UnitPoint


@dataclass(frozen=True, slots=True)
class InterpolatedCell:
    """A recovered cell with the line's entry and exit points.

    Attributes:
        cell: Grid position
        entry: Where the fitted line enters the cell
        exit: Where the fitted line leaves the cell
    """

    cell: Cell
    entry: UnitPoint
    exit: UnitPoint


class CellInterpolator:
    """Fills in the cells between two cells of a stroke.

    The interpolator keeps track of the direction of travel: a line drawn from
    bottom-left to top-right has the same slope as one drawn from top-right to
    bottom-left, but cells are visited (and entered) from opposite sides.

    Example:
        interpolator = CellInterpolator(Cell(0, 0), Cell(3, 3))
        for item in interpolator.interpolate():
            print(item.cell, item.entry, item.exit)
    """

    def __init__(self, from_cell: Cell, to_cell: Cell) -> None:
        """Initialize the interpolator.

        Args:
            from_cell: Cell the line starts in
            to_cell: Cell the line ends in
        """
        self.from_cell = from_cell
        self.to_cell = to_cell

        self.line_rise = to_cell.row - from_cell.row
        self.line_run = to_cell.col - from_cell.col

        # Steep lines are grouped by column, flat lines by row
        self.group_by_col = abs(self.line_rise) > abs(self.line_run)

        self.left_to_right = to_cell.col >= from_cell.col
        self.top_to_bottom = to_cell.row >= from_cell.row

    def interpolate(
        self,
        inclusive_start: bool = False,
        inclusive_end: bool = False,
    ) -> list[InterpolatedCell]:
        """Compute the ordered cells of the line with their entry/exit points.

        The endpoints always count towards their group's size (and thus its
        slope), even when they are excluded from the output.

        Args:
            inclusive_start: Include from_cell in the output
            inclusive_end: Include to_cell in the output

        Returns:
            Cells in direction of travel. Empty for a zero-length line.
        """
        if self.from_cell == self.to_cell:
            return []

        traversal = line_cells(self.from_cell, self.to_cell)
        last_index = len(traversal) - 1

        result: list[InterpolatedCell] = []
        index_within_line = 0

        for group in self._group_cells(traversal):
            step = self._group_step(group)

            for index_within_group, cell in enumerate(group):
                skip = (index_within_line == 0 and not inclusive_start) or (
                    index_within_line == last_index and not inclusive_end
                )
                if not skip:
                    entry, exit = self._cell_points(step, index_within_group)
                    result.append(InterpolatedCell(cell=cell, entry=entry, exit=exit))

                index_within_line += 1

        return result

    def _group_cells(self, traversal: list[Cell]) -> list[list[Cell]]:
        """Split the traversal into runs sharing a row or column.

        Unlike sorting into buckets, group order follows the traversal, which
        matters when travelling upward or leftward.
        """
        groups: list[list[Cell]] = []
        current_key: int | None = None

        for cell in traversal:
            key = cell.col if self.group_by_col else cell.row
            if not groups or key != current_key:
                groups.append([cell])
                current_key = key
            else:
                groups[-1].append(cell)

        return groups

    def _group_step(self, group: list[Cell]) -> float:
        """Minor-axis distance covered per cell along the group's line.

        The line goes to the far CORNER of the group's last cell, so the
        deltas are widened by one in the direction of travel. Axis-aligned
        lines are not going corner to corner and are left alone.
        """
        first, last = group[0], group[-1]

        group_rise = last.row - first.row
        if self.line_rise != 0:
            group_rise += 1 if self.top_to_bottom else -1

        group_run = last.col - first.col
        if self.line_run != 0:
            group_run += 1 if self.left_to_right else -1

        if self.group_by_col:
            if group_rise == 0:
                return 0.0
            return abs(group_run / group_rise)

        if group_run == 0:
            return 0.0
        return abs(group_rise / group_run)

    def _cell_points(self, step: float, index_within_group: int) -> tuple[UnitPoint, UnitPoint]:
        if self.group_by_col:
            entry_y, exit_y = 0.0, 1.0
            if self.line_run == 0:
                # Purely vertical; ride the middle of the cell
                entry_x = exit_x = 0.5
            else:
                entry_x = index_within_group * step
                exit_x = (index_within_group + 1) * step
        else:
            entry_x, exit_x = 0.0, 1.0
            if self.line_rise == 0:
                # Purely horizontal; ride the middle of the cell
                entry_y = exit_y = 0.5
            else:
                entry_y = index_within_group * step
                exit_y = (index_within_group + 1) * step

        if not self.left_to_right:
            entry_x, exit_x = 1 - entry_x, 1 - exit_x

        if not self.top_to_bottom:
            entry_y, exit_y = 1 - entry_y, 1 - exit_y

        return UnitPoint.clamped(entry_x, entry_y), UnitPoint.clamped(exit_x, exit_y)


def interpolate(
    from_cell: Cell,
    to_cell: Cell,
    inclusive_start: bool = False,
    inclusive_end: bool = False,
) -> list[InterpolatedCell]:
    """Interpolate the cells between two cells.

    Convenience wrapper around CellInterpolator.

    Args:
        from_cell: Cell the line starts in
        to_cell: Cell the line ends in
        inclusive_start: Include from_cell in the output
        inclusive_end: Include to_cell in the output

    Returns:
        Cells in direction of travel with their entry/exit points
    """
    return CellInterpolator(from_cell, to_cell).interpolate(
        inclusive_start=inclusive_start,
        inclusive_end=inclusive_end,
    )
