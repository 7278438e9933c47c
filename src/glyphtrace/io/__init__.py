"""I/O layer for glyphtrace.

This module handles reading pointer recordings and writing glyph grids.
It keeps file formats and validation out of the domain models.

Key responsibilities:
- Load and validate JSON pointer recordings
- Convert recorded samples to domain models
- Write glyph grids as text or JSON

Key classes:
- RecordingReader: Load recordings and iterate samples
- GridWriter: Save glyph grids
"""

from glyphtrace.io.recording import RecordingReader, read_recording
from glyphtrace.io.writer import GridFormat, GridWriter, write_grid

__all__ = [
    "GridFormat",
    "GridWriter",
    "RecordingReader",
    "read_recording",
    "write_grid",
]
