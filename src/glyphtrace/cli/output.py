"""Rich console output helpers for the CLI.

This module provides user-friendly console output using the Rich library
for headers, rendered glyph grids, stroke summaries and errors.
"""

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from glyphtrace.domain import GlyphGrid
from glyphtrace.utils import StrokeStats

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Glyphtrace[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_grid_info(grid: GlyphGrid) -> None:
    """Print the size and placement of a glyph grid."""
    console.print(
        f"  {grid.num_rows}x{grid.num_cols} grid {SYM_DOT} "
        f"origin ({grid.origin.row}, {grid.origin.col}) {SYM_DOT} {grid.char_count()} chars"
    )


def print_grid(grid: GlyphGrid, framed: bool = True) -> None:
    """Print the characters of a glyph grid.

    Args:
        grid: Grid to print
        framed: Draw a panel around the grid
    """
    # Text keeps brackets in glyphs from being read as markup
    body = Text(grid.to_text())
    if framed:
        console.print(Panel.fit(body, padding=(0, 1)))
    else:
        console.print(body)


def print_stroke_stats(stats: StrokeStats) -> None:
    """Print stroke tracking statistics.

    Args:
        stats: Statistics of the finished stroke
    """
    console.print(
        f"  {stats.samples} samples {SYM_DOT} {stats.cells_entered} cells entered {SYM_DOT} "
        f"{stats.interpolated_count} interpolated"
    )
    console.print(
        f"  {stats.pruned_count} pruned {SYM_DOT} {stats.revisited_count} revisited {SYM_DOT} "
        f"{stats.final_cell_count} kept ({stats.kept_ratio:.0%})"
    )


def print_saved(output_path: str, fmt: str) -> None:
    """Print where a grid was saved.

    Args:
        output_path: Path of the written file
        fmt: Output format name
    """
    line = Text(f"\n{SYM_OK} Saved ", style="bold green")
    line.append(output_path, style="bold")
    line.append(f" ({fmt})")
    console.print(line)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")
