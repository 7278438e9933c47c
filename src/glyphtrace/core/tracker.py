"""Stateful tracking of a freehand pointer stroke.

The tracker consumes a serialized stream of pointer samples (down, move...,
up) and keeps an ordered record of the cells the stroke passed through, each
with the glyph that best fits the local motion. On pointer-up the records are
compacted into a dense GlyphGrid for the compositor.

The tracker has exactly two states:
- Idle: no stroke in progress
- Tracking: one or more classified cells recorded
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import ClassVar

from glyphtrace.core.classifier import classify_cell, recompute
from glyphtrace.core.interpolator import CellInterpolator
from glyphtrace.domain import Cell, ClassifiedCell, GlyphGrid, PointerSample, UnitPoint
from glyphtrace.exceptions import EmptyStrokeError, StrokeStateError
from glyphtrace.utils import StrokeLogger, StrokeStats


@dataclass(frozen=True)
class Idle:
    """No stroke in progress."""

    name: ClassVar[str] = "idle"


@dataclass
class Tracking:
    """A stroke in progress.

    Attributes:
        records: Classified cells in stroke order; the last one is current
    """

    records: list[ClassifiedCell] = field(default_factory=list)

    name: ClassVar[str] = "tracking"

    @property
    def current(self) -> ClassifiedCell:
        return self.records[-1]


TrackerState = Idle | Tracking


class StrokeTracker:
    """Accumulates classified cells as the pointer moves.

    Not safe to share across concurrent pointer streams; one tracker serves
    one stroke at a time.

    Example:
        tracker = StrokeTracker(color_index=3)
        tracker.pointer_down(UnitPoint(0.1, 0.5), Cell(0, 0))
        tracker.pointer_move(UnitPoint(0.2, 0.5), Cell(0, 1))
        grid = tracker.pointer_up(Cell(0, 1))
    """

    def __init__(
        self,
        color_index: int | None = 0,
        logger: StrokeLogger | None = None,
    ) -> None:
        """Initialize an idle tracker.

        Args:
            color_index: Color assigned to every glyph of the finalized stroke
            logger: Stroke logger for events (statistics-only if None)
        """
        self.color_index = color_index
        self._logger = logger if logger is not None else StrokeLogger()
        self._state: TrackerState = Idle()

    @property
    def state(self) -> TrackerState:
        return self._state

    @property
    def is_tracking(self) -> bool:
        return isinstance(self._state, Tracking)

    @property
    def records(self) -> tuple[ClassifiedCell, ...]:
        """Snapshot of the current stroke records (empty while idle)."""
        if isinstance(self._state, Tracking):
            return tuple(self._state.records)
        return ()

    @property
    def stats(self) -> StrokeStats:
        """Statistics for the current (or most recently finished) stroke."""
        return self._logger.stats

    def pointer_down(self, point: UnitPoint, cell: Cell) -> None:
        """Start a new stroke.

        Args:
            point: Pointer position within the cell
            cell: Cell containing the pointer

        Raises:
            StrokeStateError: If a stroke is already in progress
        """
        if isinstance(self._state, Tracking):
            raise StrokeStateError("start a stroke", self._state.name)

        self._logger.reset()
        self._logger.log_sample(cell.row, cell.col, point.x, point.y)
        self._logger.log_cell_entered(cell.row, cell.col)
        self._state = Tracking(records=[classify_cell(cell, point, point)])

    def pointer_move(self, point: UnitPoint, cell: Cell) -> None:
        """Feed a pointer sample of an in-progress stroke.

        Args:
            point: Pointer position within the cell
            cell: Cell containing the pointer

        Raises:
            StrokeStateError: If no stroke is in progress
        """
        state = self._require_tracking("move the pointer")
        self._logger.log_sample(cell.row, cell.col, point.x, point.y)

        if cell != state.current.cell and not self._resume_previous(state, cell):
            self._enter_cell(state, cell, point)

        state.records[-1] = recompute(state.current, point)

    def pointer_up(self, cell: Cell | None = None) -> GlyphGrid:
        """Finish the stroke and compact it into a glyph grid.

        Args:
            cell: Cell under the pointer on release. The last move already
                placed the pointer, so this is informational only.

        Returns:
            GlyphGrid anchored at the minimum row/col of the stroke

        Raises:
            StrokeStateError: If no stroke is in progress
        """
        state = self._require_tracking("finish a stroke")
        grid = self._build_grid(state)
        self._logger.log_finalized(len(state.records), grid.num_rows, grid.num_cols)
        self._state = Idle()
        return grid

    def preview(self) -> GlyphGrid:
        """Glyph grid of the stroke so far, without finishing it.

        Raises:
            StrokeStateError: If no stroke is in progress
        """
        return self._build_grid(self._require_tracking("preview a stroke"))

    def cancel(self) -> None:
        """Discard any in-progress stroke. Does nothing while idle."""
        if isinstance(self._state, Tracking):
            self._logger.log_cancelled(len(self._state.records))
        self._state = Idle()

    def _require_tracking(self, action: str) -> Tracking:
        if not isinstance(self._state, Tracking):
            raise StrokeStateError(action, self._state.name)
        return self._state

    def _resume_previous(self, state: Tracking, cell: Cell) -> bool:
        """Handle the pointer doubling back into the record before the current one.

        A short-lived current record is dropped; a significant one is kept and
        the revisited record moves to the tail so it becomes current again.
        """
        records = state.records
        if len(records) < 2 or records[-2].cell != cell:
            return False

        current = records.pop()
        if current.prunable:
            self._logger.log_pruned(current.cell.row, current.cell.col, current.distance)
            revisited = records.pop()
        else:
            revisited = records.pop()
            records.append(current)

        records.append(revisited)
        self._logger.log_revisited(cell.row, cell.col)
        return True

    def _enter_cell(self, state: Tracking, cell: Cell, point: UnitPoint) -> None:
        records = state.records

        # Drop a barely-touched current cell, as long as the stroke stays
        # connected without it. This keeps diagonals one glyph wide.
        current = records[-1]
        if (
            len(records) > 1
            and current.prunable
            and records[-2].cell.is_adjacent_to(cell)
            and _stays_connected(records[:-1], cell)
        ):
            records.pop()
            self._logger.log_pruned(current.cell.row, current.cell.col, current.distance)

        tail = records[-1].cell
        if not tail.is_adjacent_to(cell):
            # Pointer outran sampling; recover the skipped cells
            interpolated = CellInterpolator(tail, cell).interpolate()
            for item in interpolated:
                records.append(classify_cell(item.cell, item.entry, item.exit))
            self._logger.log_interpolated(str(tail), str(cell), len(interpolated))

        records.append(classify_cell(cell, point, point))
        self._logger.log_cell_entered(cell.row, cell.col)

    def _build_grid(self, state: Tracking) -> GlyphGrid:
        # Later records win where a cell was recorded more than once
        placed = {record.cell: record.char for record in state.records}
        return GlyphGrid.from_cells(placed, self.color_index)


def _stays_connected(records: list[ClassifiedCell], cell: Cell) -> bool:
    """Check that the recorded cells plus a new cell form one connected shape.

    Doubling back reorders the tail, so the record before the current one is
    not always its neighbour along the stroke.
    """
    remaining = {record.cell for record in records}
    remaining.add(cell)

    seen = {cell}
    frontier = [cell]
    while frontier:
        here = frontier.pop()
        for other in remaining - seen:
            if here.is_adjacent_to(other):
                seen.add(other)
                frontier.append(other)
    return len(seen) == len(remaining)


def trace_samples(
    samples: Iterable[PointerSample],
    tracker: StrokeTracker | None = None,
) -> GlyphGrid:
    """Replay a recorded stroke through a tracker.

    The first sample is the pointer-down, every later one a move, and the
    stroke is released at the last sample's cell.

    Args:
        samples: Recorded pointer samples in order
        tracker: Idle tracker to drive (a fresh one if None)

    Returns:
        GlyphGrid of the finished stroke

    Raises:
        EmptyStrokeError: If there are no samples
        StrokeStateError: If the tracker already has a stroke in progress
    """
    tracker = tracker if tracker is not None else StrokeTracker()
    iterator = iter(samples)

    first = next(iterator, None)
    if first is None:
        raise EmptyStrokeError("Cannot trace a stroke without samples")

    tracker.pointer_down(first.point, first.cell)
    last = first
    for sample in iterator:
        tracker.pointer_move(sample.point, sample.cell)
        last = sample
    return tracker.pointer_up(last.cell)
