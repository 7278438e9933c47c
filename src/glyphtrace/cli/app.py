"""CLI application entry point for glyphtrace.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import structlog
import typer
from pydantic import ValidationError

from glyphtrace import __version__
from glyphtrace.cli.output import (
    console,
    print_error,
    print_grid,
    print_grid_info,
    print_header,
    print_saved,
    print_step,
    print_stroke_stats,
)
from glyphtrace.config import (
    GlyphtraceSettings,
    LineConfig,
    LineStyle,
    LoggingConfig,
    StrokeConfig,
)
from glyphtrace.core import StrokeTracker, draw_line, trace_samples
from glyphtrace.domain import Cell, GlyphGrid
from glyphtrace.exceptions import GlyphtraceError, GridWriteError, RecordingLoadError
from glyphtrace.io import GridFormat, GridWriter, read_recording, write_grid
from glyphtrace.utils import StrokeLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="glyphtrace",
    help="Rasterize freehand strokes and straight lines into ASCII glyphs.",
    add_completion=False,
    no_args_is_help=True,
)


class CliState:
    """Options shared by every command."""

    def __init__(self, logging_config: LoggingConfig, quiet: bool) -> None:
        self.logging = logging_config
        self.quiet = quiet

    def logger(self) -> structlog.stdlib.BoundLogger:
        return configure_logging(
            log_file=self.logging.log_file,
            console_level=self.logging.log_level,
            file_level=self.logging.file_log_level,
            quiet=self.quiet,
        )


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Glyphtrace[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_options(
    ctx: typer.Context,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Rasterize freehand strokes and straight lines into ASCII glyphs."""
    if log_level.upper() not in ("DEBUG", "INFO", "WARNING", "ERROR"):
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    ctx.obj = CliState(
        LoggingConfig(log_file=log_file, log_level=log_level.upper()),
        quiet=quiet,
    )


@app.command()
def line(
    ctx: typer.Context,
    start_row: Annotated[int, typer.Argument(help="Start cell row", show_default=False)],
    start_col: Annotated[int, typer.Argument(help="Start cell column", show_default=False)],
    end_row: Annotated[int, typer.Argument(help="End cell row", show_default=False)],
    end_col: Annotated[int, typer.Argument(help="End cell column", show_default=False)],
    style: Annotated[
        str,
        typer.Option(
            "--style",
            "-s",
            help="Line style (adaptive|monochar|right_angle_line|right_angle_arrow|"
            "right_angle_unicode|right_angle_monochar)",
        ),
    ] = "adaptive",
    char: Annotated[
        str,
        typer.Option(
            "--char",
            "-c",
            help="Drawing character for monochar styles",
        ),
    ] = "*",
    change_route: Annotated[
        bool,
        typer.Option(
            "--change-route",
            help="Right-angle styles: go horizontal first instead of vertical first",
        ),
    ] = False,
    color: Annotated[
        int,
        typer.Option(
            "--color",
            help="Palette color index",
            min=0,
        ),
    ] = 0,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the grid to a file instead of the console",
        ),
    ] = None,
    fmt: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output file format (text|json, default: from extension)",
        ),
    ] = None,
) -> None:
    """Draw a straight or right-angle line between two cells.

    Example:
        glyphtrace line 0 0 3 12 --style adaptive
    """
    state: CliState = ctx.obj

    try:
        line_style = LineStyle(style.lower())
    except ValueError:
        print_error(
            f"Invalid style: {style}",
            details="Valid values: " + ", ".join(s.value for s in LineStyle),
        )
        raise typer.Exit(code=1)

    try:
        config = LineConfig(style=line_style, char=char, color_index=color)
    except ValidationError as e:
        print_error("Invalid line options", details=str(e.errors()[0]["msg"]))
        raise typer.Exit(code=1)

    output_format = _parse_format(fmt, output)
    settings = GlyphtraceSettings(line=config, logging=state.logging)
    logger = state.logger()

    if not state.quiet:
        print_header(__version__)
        print_step(f"Drawing {settings.line.style.value} line")
        if change_route and not settings.line.style.is_right_angle:
            console.print("  --change-route only affects right-angle styles")

    start = Cell(start_row, start_col)
    end = Cell(end_row, end_col)

    try:
        grid = draw_line(start, end, settings.line, change_route=change_route)
        logger.info(
            "Line drawn",
            start=str(start),
            end=str(end),
            style=settings.line.style.value,
            rows=grid.num_rows,
            cols=grid.num_cols,
        )
        _emit_grid(grid, output, output_format, state.quiet)

    except GlyphtraceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def trace(
    ctx: typer.Context,
    recording: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON pointer recording",
            show_default=False,
        ),
    ],
    color: Annotated[
        int,
        typer.Option(
            "--color",
            help="Palette color index",
            min=0,
        ),
    ] = 0,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the grid to a file instead of the console",
        ),
    ] = None,
    fmt: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Output file format (text|json, default: from extension)",
        ),
    ] = None,
) -> None:
    """Replay a recorded freehand stroke and rasterize it.

    The first sample of the recording is the pointer-down, every later one a
    move, and the stroke is released at the last sample.

    Example:
        glyphtrace trace stroke.json -o stroke.txt
    """
    state: CliState = ctx.obj
    output_format = _parse_format(fmt, output)
    settings = GlyphtraceSettings(stroke=StrokeConfig(color_index=color), logging=state.logging)

    if not state.quiet:
        print_header(__version__)
        print_step("Loading recording")

    try:
        samples = read_recording(recording)
        if not state.quiet:
            console.print(f"  {len(samples)} samples")
            print_step("Tracing stroke")

        tracker = StrokeTracker(
            color_index=settings.stroke.color_index,
            logger=StrokeLogger(state.logger()),
        )
        grid = trace_samples(samples, tracker)

        if not state.quiet:
            print_stroke_stats(tracker.stats)

        _emit_grid(grid, output, output_format, state.quiet)

    except RecordingLoadError as e:
        print_error(f"Could not load recording: {e.reason}")
        raise typer.Exit(code=1)
    except GridWriteError as e:
        print_error(f"Could not save grid: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphtraceError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def _parse_format(fmt: str | None, output: Path | None) -> GridFormat:
    """Resolve the output format from the option or the output extension."""
    if fmt is None:
        return GridWriter.format_for_path(output) if output is not None else GridFormat.TEXT
    try:
        return GridFormat(fmt.lower())
    except ValueError:
        print_error(f"Invalid format: {fmt}", details="Valid values: text, json")
        raise typer.Exit(code=1)


def _emit_grid(grid: GlyphGrid, output: Path | None, fmt: GridFormat, quiet: bool) -> None:
    """Write the grid to a file or print it to the console."""
    if output is not None:
        write_grid(grid, output, fmt)
        if not quiet:
            print_grid_info(grid)
            print_saved(str(output), fmt.value)
        return

    if quiet:
        print_grid(grid, framed=False)
    else:
        print_grid_info(grid)
        print_grid(grid)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
