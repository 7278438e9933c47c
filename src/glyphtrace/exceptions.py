"""Exception hierarchy for Glyphtrace."""


class GlyphtraceError(Exception):
    """Base exception for all Glyphtrace errors."""

    pass


class StrokeError(GlyphtraceError):
    """Errors related to stroke tracking."""

    pass


class StrokeStateError(StrokeError):
    """Tracker was driven through an invalid state transition."""

    def __init__(self, action: str, state: str) -> None:
        self.action = action
        self.state = state
        super().__init__(f"Cannot {action} while tracker is {state}")


class EmptyStrokeError(StrokeError):
    """A stroke or glyph grid was requested without any cells."""

    pass


class GeometryError(GlyphtraceError):
    """Errors in geometric calculations."""

    pass


class PointOutOfRangeError(GeometryError):
    """Unit point lies outside the cell's unit square."""

    def __init__(self, x: float, y: float) -> None:
        self.x = x
        self.y = y
        super().__init__(f"Unit point ({x}, {y}) is outside the unit square")


class TemplateError(GlyphtraceError):
    """Errors related to line templates."""

    pass


class TemplateNotFoundError(TemplateError):
    """No line template matches the requested direction."""

    def __init__(self, rise: int, run: int) -> None:
        self.rise = rise
        self.run = run
        super().__init__(f"No line template for direction (rise={rise}, run={run})")


class RecordingError(GlyphtraceError):
    """Errors related to pointer recordings and grid output."""

    pass


class RecordingLoadError(RecordingError):
    """Error loading a pointer recording."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load recording '{path}': {reason}")


class GridWriteError(RecordingError):
    """Error writing a glyph grid."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to write glyph grid '{path}': {reason}")
