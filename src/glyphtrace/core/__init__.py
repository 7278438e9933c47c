"""Core rasterization algorithms for glyphtrace.

This module contains the core algorithms for:

- Glyph classification (entry/exit motion to a single character)
- Discrete traversal (canonical cell lines between two cells)
- Interpolation (recovering cells skipped by fast pointer motion)
- Stroke tracking (pointer stream to glyph grid)
- Line rendering (template, monochar and right-angle lines)

Everything except StrokeTracker is stateless and safe to share.

Key functions:
- classify: Pick a glyph and pruning verdict for an entry/exit pair
- line_cells: Cells visited by a straight line between two cells
- interpolate: Cells between two cells with entry/exit points
- find_closest_template: Line template nearest to a direction
- draw_line: Render a line in a configured style
- trace_samples: Replay recorded pointer samples into a glyph grid

Key classes:
- CellInterpolator: Recovers skipped cells with entry/exit points
- StrokeTracker: Accumulates classified cells for a freehand stroke
- TemplateLineRenderer: Renders explicit start-to-end lines
- CharSheet: Characters for right-angle lines
"""

from glyphtrace.core.classifier import Classification, classify, classify_cell, recompute
from glyphtrace.core.geometry import line_cells, slope, unit_distance
from glyphtrace.core.interpolator import CellInterpolator, InterpolatedCell, interpolate
from glyphtrace.core.line import (
    ASCII_ARROW_SHEET,
    ASCII_LINE_SHEET,
    UNICODE_SHEET,
    CharSheet,
    TemplateLineRenderer,
    draw_line,
    monochar_sheet,
)
from glyphtrace.core.templates import LINE_TEMPLATES, LineTemplate, find_closest_template
from glyphtrace.core.tracker import Idle, StrokeTracker, Tracking, trace_samples

__all__ = [
    # Char sheets
    "ASCII_ARROW_SHEET",
    "ASCII_LINE_SHEET",
    # Interpolator classes
    "CellInterpolator",
    "CharSheet",
    # Classifier
    "Classification",
    "Idle",
    "InterpolatedCell",
    # Templates
    "LINE_TEMPLATES",
    "LineTemplate",
    # Tracker classes
    "StrokeTracker",
    # Line rendering
    "TemplateLineRenderer",
    "Tracking",
    "UNICODE_SHEET",
    "classify",
    "classify_cell",
    "draw_line",
    "find_closest_template",
    "interpolate",
    # Geometry functions
    "line_cells",
    "monochar_sheet",
    "recompute",
    "slope",
    "trace_samples",
    "unit_distance",
]
