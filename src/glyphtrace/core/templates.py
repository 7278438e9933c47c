"""Pre-authored line templates for straight ASCII lines.

Every template is a small tile of characters that draws a short straight
segment at one particular slope, tagged with the (rise, run) offset where the
next copy of the tile begins. Repeating a tile along its offset draws a line
of any length.

All directions are covered, like the hand of a clock sweeping the whole face.
Half of them cannot simply be mirrored from the other half: the tile for
(2, 8) inverted does not produce a good (-2, -8) line, so each direction has
its own entry. Horizontal and vertical lines are the exception: one tile
serves both directions.
"""

import math
from dataclasses import dataclass

from glyphtrace.exceptions import TemplateNotFoundError

BLANK = " "


@dataclass(frozen=True, slots=True)
class LineTemplate:
    """A repeatable tile that draws a straight line segment.

    Attributes:
        rise: Row offset of the next tile copy (negative is upward)
        run: Column offset of the next tile copy (negative is leftward)
        tile: Rows of the tile, all the same width; spaces are not drawn
    """

    rise: int
    run: int
    tile: tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.tile or len({len(row) for row in self.tile}) != 1:
            raise ValueError(f"Template ({self.rise}, {self.run}) rows must share one width")

    @property
    def slope(self) -> float:
        """Rise over run; infinite for a vertical template."""
        if self.run == 0:
            return math.copysign(math.inf, self.rise)
        return self.rise / self.run

    @property
    def num_rows(self) -> int:
        return len(self.tile)

    @property
    def num_cols(self) -> int:
        return len(self.tile[0])

    def is_vertical(self) -> bool:
        return self.run == 0 and self.rise != 0

    def is_horizontal(self) -> bool:
        return self.rise == 0 and self.run != 0


LINE_TEMPLATES: tuple[LineTemplate, ...] = (
    LineTemplate(0, 8, (
        "--------",
    )),
    LineTemplate(1, 8, (
        "-.._    ",
        "    `''-",
    )),
    LineTemplate(2, 8, (
        "-._     ",
        "   `-._ ",
        "       `",
    )),
    LineTemplate(4, 8, (
        "`.      ",
        "  `.    ",
        "    `.  ",
        "      `.",
    )),
    LineTemplate(3, 4, (
        "\\   ",
        " '  ",
        "  `.",
    )),
    LineTemplate(4, 4, (
        "\\   ",
        " \\  ",
        "  \\ ",
        "   \\",
    )),
    LineTemplate(4, 2, (
        "\\  ",
        " | ",
        " \\ ",
        "  |",
    )),
    LineTemplate(4, 1, (
        "| ",
        "\\ ",
        " |",
        " \\",
    )),
    LineTemplate(4, 0, (
        "|",
        "|",
        "|",
        "|",
    )),
    LineTemplate(4, -1, (
        " |",
        " /",
        "| ",
        "/ ",
    )),
    LineTemplate(4, -2, (
        "  /",
        " | ",
        " / ",
        "|  ",
    )),
    LineTemplate(4, -4, (
        "   /",
        "  / ",
        " /  ",
        "/   ",
    )),
    LineTemplate(3, -4, (
        "   /",
        "  ' ",
        ".`  ",
    )),
    LineTemplate(4, -8, (
        "      .'",
        "    .'  ",
        "  .'    ",
        ".'      ",
    )),
    LineTemplate(2, -8, (
        "     _,-",
        " _,-'   ",
        "'       ",
    )),
    LineTemplate(1, -8, (
        "    _..-",
        "-''`    ",
    )),
    LineTemplate(-1, -8, (
        "-..,_   ",
        "     ''-",
    )),
    LineTemplate(-2, -8, (
        "._      ",
        "  `-._  ",
        "      `-",
    )),
    LineTemplate(-4, -8, (
        "`.      ",
        "  `.    ",
        "    `.  ",
        "      `.",
    )),
    LineTemplate(-3, -4, (
        "`.  ",
        "  . ",
        "   \\",
    )),
    LineTemplate(-4, -4, (
        "\\   ",
        " \\  ",
        "  \\ ",
        "   \\",
    )),
    LineTemplate(-4, -2, (
        "|  ",
        " \\ ",
        " | ",
        "  \\",
    )),
    LineTemplate(-4, -1, (
        "\\ ",
        "| ",
        " \\",
        " |",
    )),
    LineTemplate(-4, 1, (
        " /",
        " |",
        "/ ",
        "| ",
    )),
    LineTemplate(-4, 2, (
        "  |",
        " / ",
        " | ",
        "/  ",
    )),
    LineTemplate(-4, 4, (
        "   /",
        "  / ",
        " /  ",
        "/   ",
    )),
    LineTemplate(-3, 4, (
        "  ,'",
        " .  ",
        "/   ",
    )),
    LineTemplate(-4, 8, (
        "      .'",
        "    .'  ",
        "  .'    ",
        ".'      ",
    )),
    LineTemplate(-2, 8, (
        "      _,",
        "  _,-'  ",
        "-'      ",
    )),
    LineTemplate(-1, 8, (
        "   _,..-",
        "-''     ",
    )),
)


def find_closest_template(
    rise: int,
    run: int,
    templates: tuple[LineTemplate, ...] = LINE_TEMPLATES,
) -> LineTemplate:
    """Find the template that most closely matches a line direction.

    Exactly vertical and exactly horizontal lines map to the single vertical
    or horizontal template. Otherwise only templates heading into the same
    quadrant are considered, and the one with the nearest rise/run wins.
    Earlier templates win ties.

    Args:
        rise: Row delta of the line
        run: Column delta of the line
        templates: Catalog to search

    Returns:
        Closest matching template

    Raises:
        TemplateNotFoundError: If the direction is zero-length or nothing matches
    """
    if rise == 0 and run == 0:
        raise TemplateNotFoundError(rise, run)

    if run == 0:
        return _first(templates, LineTemplate.is_vertical, rise, run)
    if rise == 0:
        return _first(templates, LineTemplate.is_horizontal, rise, run)

    target = rise / run
    candidates = [
        template
        for template in templates
        if rise * template.rise >= 0 and run * template.run >= 0
    ]
    if not candidates:
        raise TemplateNotFoundError(rise, run)

    best = candidates[0]
    for template in candidates[1:]:
        if abs(template.slope - target) < abs(best.slope - target):
            best = template
    return best


def _first(templates, predicate, rise: int, run: int) -> LineTemplate:
    for template in templates:
        if predicate(template):
            return template
    raise TemplateNotFoundError(rise, run)
