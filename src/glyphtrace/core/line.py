"""Straight and right-angle line rendering between two cells.

Unlike freehand strokes, explicit lines are placed once from a start cell to
an end cell. Three families are supported:

- Template lines: a pre-authored tile picked by closest slope and repeated
  along the line, approximating any angle out of many different characters
- Monochar lines: the discrete traversal filled with one character
- Right-angle lines: two axis-aligned legs joined by a bend glyph, with
  optional start and arrow glyphs at the endpoints
"""

from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass, field

from glyphtrace.config import LineConfig, LineStyle
from glyphtrace.core.geometry import line_cells
from glyphtrace.core.templates import BLANK, LINE_TEMPLATES, LineTemplate, find_closest_template
from glyphtrace.domain import Cell, GlyphGrid

SINGLE_CELL_CHAR = "-"

# Direction keys used by char sheets
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"


@dataclass(frozen=True)
class CharSheet:
    """Characters used to draw a right-angle line.

    Each entry is either a single character or a mapping keyed by direction.
    Edge entries are keyed by one direction (e.g. "UP"); bend entries by the
    two leg directions joined with an underscore (e.g. "UP_RIGHT"). Missing
    start/bend/end entries fall back to the line entry.

    Attributes:
        line: Edge characters along each leg
        bend: Character at the corner
        start: Character at the start cell
        end: Character at the end cell
    """

    line: str | Mapping[str, str]
    bend: str | Mapping[str, str] | None = None
    start: str | Mapping[str, str] | None = None
    end: str | Mapping[str, str] | None = None

    def char_for(self, kind: str, direction: str) -> str:
        entry = getattr(self, kind)
        if entry is None:
            entry = self.line
        if isinstance(entry, str):
            return entry
        if direction in entry:
            return entry[direction]
        # Bend lookups on a single-direction sheet use the first leg
        return entry[direction.split("_")[0]]


_EDGES = {UP: "|", RIGHT: "-", DOWN: "|", LEFT: "-"}

ASCII_LINE_SHEET = CharSheet(line=_EDGES, bend="+")

ASCII_ARROW_SHEET = CharSheet(
    line=_EDGES,
    bend="+",
    end={UP: "^", RIGHT: ">", DOWN: "v", LEFT: "<"},
)

UNICODE_SHEET = CharSheet(
    line={UP: "│", RIGHT: "─", DOWN: "│", LEFT: "─"},
    bend={
        "UP_RIGHT": "┌",
        "UP_LEFT": "┐",
        "RIGHT_UP": "┘",
        "RIGHT_DOWN": "┐",
        "DOWN_RIGHT": "└",
        "DOWN_LEFT": "┘",
        "LEFT_UP": "└",
        "LEFT_DOWN": "┌",
    },
)


def monochar_sheet(char: str) -> CharSheet:
    """Char sheet drawing every part of the line with one character."""
    return CharSheet(line=char, bend=char)


def direction_between(from_cell: Cell, to_cell: Cell) -> str:
    """Axis direction from one cell to another; no movement counts as DOWN.

    Raises:
        ValueError: If the cells are not on a shared row or column
    """
    if from_cell.row != to_cell.row and from_cell.col != to_cell.col:
        raise ValueError(f"{from_cell} and {to_cell} are not on a horizontal or vertical line")
    if from_cell.row < to_cell.row:
        return DOWN
    if from_cell.row > to_cell.row:
        return UP
    if from_cell.col < to_cell.col:
        return RIGHT
    if from_cell.col > to_cell.col:
        return LEFT
    return DOWN


@dataclass
class _SparseGlyphs:
    """Accumulates characters at signed offsets before compaction."""

    placed: dict[Cell, str] = field(default_factory=dict)

    def put(self, cell: Cell, char: str) -> None:
        self.placed[cell] = char

    def compact(self, color_index: int | None) -> GlyphGrid:
        return GlyphGrid.from_cells(self.placed, color_index)


class TemplateLineRenderer:
    """Renders explicit start-to-end lines.

    The renderer is stateless apart from its template catalog, which is
    read-only and can be shared freely.

    Example:
        renderer = TemplateLineRenderer()
        grid = renderer.render(Cell(0, 0), Cell(2, 8))
        print(grid.to_text())
    """

    def __init__(self, templates: tuple[LineTemplate, ...] = LINE_TEMPLATES) -> None:
        self.templates = templates

    def render(self, start: Cell, end: Cell, color_index: int | None = 0) -> GlyphGrid:
        """Draw a straight line by repeating the closest-slope template.

        Args:
            start: Start cell
            end: End cell
            color_index: Color assigned to every drawn character

        Returns:
            GlyphGrid anchored at the top-left of everything drawn
        """
        if start == end:
            return GlyphGrid.single(SINGLE_CELL_CHAR, start, color_index)

        rise = end.row - start.row
        run = end.col - start.col
        template = find_closest_template(rise, run, self.templates)
        length = max(abs(rise), abs(run)) + 1

        buffer = _SparseGlyphs()
        for row_offset, col_offset, char in self.follow_line_path(template, rise, run, length):
            buffer.put(start.translate(row_offset, col_offset), char)
        return buffer.compact(color_index)

    def follow_line_path(
        self,
        template: LineTemplate,
        rise: int,
        run: int,
        length: int,
    ) -> Iterator[tuple[int, int, str]]:
        """Repeat a template along a line until enough characters are emitted.

        Copy k of the tile is offset by k times the template's step, oriented
        towards the target direction. Within a tile, rows are walked bottom-up
        when the line rises and columns right-to-left when it runs leftward,
        so that the first emitted character always sits at offset (0, 0) side
        of the line. Offsets can therefore be negative.

        Args:
            template: Tile to repeat
            rise: Row delta of the target line
            run: Column delta of the target line
            length: Number of non-blank characters to emit

        Yields:
            (row offset, column offset, char) relative to the start cell
        """
        step_row = _oriented(template.rise, rise)
        step_col = _oriented(template.run, run)
        rows = _axis(template.num_rows, step_row < 0 or (step_row == 0 and rise < 0))
        cols = _axis(template.num_cols, step_col < 0 or (step_col == 0 and run < 0))

        emitted = 0
        copy_index = 0
        while True:
            base_row = copy_index * step_row
            base_col = copy_index * step_col
            for tile_row, glyph_row in rows:
                for tile_col, glyph_col in cols:
                    char = template.tile[tile_row][tile_col]
                    if char == BLANK:
                        continue
                    yield base_row + glyph_row, base_col + glyph_col, char
                    emitted += 1
                    if emitted >= length:
                        return
            copy_index += 1

    def render_right_angle(
        self,
        start: Cell,
        end: Cell,
        sheet: CharSheet = ASCII_LINE_SHEET,
        change_route: bool = False,
        color_index: int | None = 0,
    ) -> GlyphGrid:
        """Draw two axis-aligned legs joined at a bend.

        The bend sits at (end.row, start.col), going vertical first, unless
        change_route flips it to (start.row, end.col). When the bend coincides
        with an endpoint a single straight leg is drawn.

        Args:
            start: Start cell
            end: End cell
            sheet: Characters for edges, bend and endpoints
            change_route: Go horizontal first instead of vertical first
            color_index: Color assigned to every drawn character

        Returns:
            GlyphGrid spanning the rectangle between start and end
        """
        bend = Cell(start.row, end.col) if change_route else Cell(end.row, start.col)
        grid = GlyphGrid.empty(
            abs(start.row - end.row) + 1,
            abs(start.col - end.col) + 1,
            Cell(min(start.row, end.row), min(start.col, end.col)),
        )

        def put(cell: Cell, char: str) -> None:
            grid.set(cell, char, color_index)

        if bend in (start, end):
            direction = direction_between(start, end)
            put(start, sheet.char_for("start", direction))
            for cell in _between(start, end):
                put(cell, sheet.char_for("line", direction))
            put(end, sheet.char_for("end", direction))
        else:
            first_leg = direction_between(start, bend)
            second_leg = direction_between(bend, end)
            put(start, sheet.char_for("start", first_leg))
            for cell in _between(start, bend):
                put(cell, sheet.char_for("line", first_leg))
            put(bend, sheet.char_for("bend", f"{first_leg}_{second_leg}"))
            for cell in _between(bend, end):
                put(cell, sheet.char_for("line", second_leg))
            put(end, sheet.char_for("end", second_leg))

        return grid

    def render_monochar(
        self,
        start: Cell,
        end: Cell,
        char: str,
        color_index: int | None = 0,
    ) -> GlyphGrid:
        """Fill the discrete traversal from start to end with one character."""
        return GlyphGrid.from_cells({cell: char for cell in line_cells(start, end)}, color_index)


def _oriented(template_step: int, target_delta: int) -> int:
    """Point a template step the same way as the target line.

    Only the shared horizontal and vertical templates ever disagree in sign
    with their target.
    """
    if target_delta < 0 < template_step or template_step < 0 < target_delta:
        return -template_step
    return template_step


def _axis(size: int, in_reverse: bool) -> list[tuple[int, int]]:
    """Pairs of (tile index, glyph offset) along one tile axis.

    In reverse the last tile index comes first at offset 0 and earlier ones
    get negative offsets.
    """
    last = size - 1
    if in_reverse:
        return [(i, i - last) for i in range(last, -1, -1)]
    return [(i, i) for i in range(size)]


def _between(from_cell: Cell, to_cell: Cell) -> list[Cell]:
    """Cells strictly between two cells on a shared row or column."""
    return line_cells(from_cell, to_cell)[1:-1]


_RIGHT_ANGLE_SHEETS: dict[LineStyle, Callable[[str], CharSheet]] = {
    LineStyle.RIGHT_ANGLE_LINE: lambda _char: ASCII_LINE_SHEET,
    LineStyle.RIGHT_ANGLE_ARROW: lambda _char: ASCII_ARROW_SHEET,
    LineStyle.RIGHT_ANGLE_UNICODE: lambda _char: UNICODE_SHEET,
    LineStyle.RIGHT_ANGLE_MONOCHAR: monochar_sheet,
}


def draw_line(
    start: Cell,
    end: Cell,
    config: LineConfig,
    change_route: bool = False,
    renderer: TemplateLineRenderer | None = None,
) -> GlyphGrid:
    """Draw a line between two cells in the configured style.

    Args:
        start: Start cell
        end: End cell
        config: Line style, drawing character and color
        change_route: For right-angle styles, go horizontal first
        renderer: Renderer to use (a default one if None)

    Returns:
        GlyphGrid for the compositor
    """
    renderer = renderer or TemplateLineRenderer()

    if config.style is LineStyle.ADAPTIVE:
        return renderer.render(start, end, config.color_index)
    if config.style is LineStyle.MONOCHAR:
        return renderer.render_monochar(start, end, config.char, config.color_index)

    sheet = _RIGHT_ANGLE_SHEETS[config.style](config.char)
    return renderer.render_right_angle(start, end, sheet, change_route, config.color_index)
