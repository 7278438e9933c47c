"""Per-cell glyph classification from sub-cell motion.

A cell's glyph is chosen from the line drawn between the point where the
pointer entered the cell and the latest point it reached inside it. The
slope of that line selects a family of characters; the average height of the
line picks a character within the family.

The thresholds below are empirically tuned and must not be re-derived.
"""

from dataclasses import dataclass

from glyphtrace.core.geometry import slope, unit_distance
from glyphtrace.domain import Cell, ClassifiedCell, UnitPoint

VERTICAL_SLOPE = 3.0
DIAGONAL_SLOPE = 0.85
SHALLOW_SLOPE = 0.35

PRUNE_DISTANCE = 0.5
STEEP_PRUNE_DISTANCE = 0.7

# How close both x values must sit to a side edge to draw a curve glyph
EDGE_MARGIN = 0.05

# Near-horizontal glyphs from the top band of the cell to the bottom one
HORIZONTAL_BANDS: tuple[tuple[float, str], ...] = (
    (1 / 6, "`"),
    (2 / 6, "'"),
    (3 / 6, "-"),
    (4 / 6, "."),
    (5 / 6, ","),
)
BOTTOM_HORIZONTAL_CHAR = "_"


@dataclass(frozen=True, slots=True)
class Classification:
    """Result of classifying one entry/exit pair.

    Attributes:
        char: Chosen glyph
        distance: Entry-to-exit distance in unit-square space
        prunable: True if the traversal is short enough to be dropped
    """

    char: str
    distance: float
    prunable: bool


def classify(entry: UnitPoint, exit: UnitPoint) -> Classification:
    """Classify the pointer motion through one cell.

    Args:
        entry: Point where the pointer entered the cell
        exit: Latest pointer position in the cell

    Returns:
        Classification with glyph, traversal distance and prune judgment
    """
    distance = unit_distance(entry, exit)
    m = slope(exit.y - entry.y, exit.x - entry.x)
    return Classification(
        char=choose_char(entry, exit),
        distance=distance,
        prunable=is_prunable(m, distance),
    )


def classify_cell(cell: Cell, entry: UnitPoint, exit: UnitPoint) -> ClassifiedCell:
    """Build a fully classified stroke record for a cell."""
    result = classify(entry, exit)
    return ClassifiedCell(
        cell=cell,
        entry=entry,
        exit=exit,
        char=result.char,
        distance=result.distance,
        prunable=result.prunable,
    )


def recompute(record: ClassifiedCell, exit: UnitPoint) -> ClassifiedCell:
    """Derive a new record for the same cell and entry with a new exit point."""
    return classify_cell(record.cell, record.entry, exit)


def choose_char(entry: UnitPoint, exit: UnitPoint) -> str:
    """Choose the glyph that best fits the line from entry to exit.

    Buckets by absolute slope:
    - above 3: vertical bar, or a curve glyph when hugging a side edge
    - 0.85 to 3: diagonal
    - 0.35 to 0.85: shallow diagonal, by which half of the cell it rides in
    - up to 0.35: near-horizontal, by which sixth of the cell it rides in

    Args:
        entry: Point where the pointer entered the cell
        exit: Latest pointer position in the cell

    Returns:
        Single-character glyph
    """
    rise = exit.y - entry.y
    run = exit.x - entry.x
    m = slope(rise, run)
    abs_slope = abs(m)

    # A stationary sample (first pointer-down) is drawn as a horizontal stroke
    if rise == 0 and run == 0:
        abs_slope = 0.0

    avg_y = (entry.y + exit.y) / 2

    if abs_slope > VERTICAL_SLOPE:
        if entry.x < EDGE_MARGIN and exit.x < EDGE_MARGIN:
            return ")"
        if entry.x > 1 - EDGE_MARGIN and exit.x > 1 - EDGE_MARGIN:
            return "("
        return "|"

    if abs_slope >= DIAGONAL_SLOPE:
        return "\\" if m > 0 else "/"

    if abs_slope > SHALLOW_SLOPE:
        return "'" if avg_y < 0.5 else "."

    for upper_bound, char in HORIZONTAL_BANDS:
        if avg_y <= upper_bound:
            return char
    return BOTTOM_HORIZONTAL_CHAR


def is_prunable(slope_value: float, distance: float) -> bool:
    """Judge whether a cell's traversal is too short to keep.

    Steep traversals get a larger threshold because a diagonal crossing of a
    cell corner is geometrically shorter for the same visual weight.

    Args:
        slope_value: Slope of the traversal (may be infinite)
        distance: Entry-to-exit distance in unit-square space

    Returns:
        True if the cell is a pruning candidate
    """
    if abs(slope_value) > DIAGONAL_SLOPE:
        return distance < STEEP_PRUNE_DISTANCE
    return distance < PRUNE_DISTANCE
