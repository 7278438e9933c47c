"""Command-line interface for glyphtrace.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Straight and right-angle line drawing between two cells
- Replay of recorded freehand strokes
- Text or JSON grid output
- Quiet mode for piping grids into other tools
"""

from glyphtrace.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
