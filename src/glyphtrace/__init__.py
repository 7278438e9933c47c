"""Glyphtrace - Rasterize pointer strokes into character-grid glyphs.

Glyphtrace converts a continuous pointer stroke, or an explicit start/end pair,
into a discrete grid of characters that visually approximates the stroke's
geometry. It is the rasterizer underneath a character-grid drawing surface.

Example:
    $ glyphtrace line 0 0 3 12

This prints a straight line from cell (0, 0) to cell (3, 12) built from
pre-authored ASCII line templates.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
