"""Recording reader for replaying pointer strokes.

This module provides the RecordingReader class for loading JSON recordings
of pointer samples and converting them into domain models.

Recording format:

    {"samples": [{"row": 0, "col": 0, "x": 0.1, "y": 0.5}, ...]}
"""

from collections.abc import Iterator
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from glyphtrace.domain import Cell, PointerSample, UnitPoint
from glyphtrace.exceptions import RecordingLoadError


class SampleModel(BaseModel):
    """One recorded pointer sample."""

    row: int
    col: int
    x: float = Field(ge=0.0, le=1.0)
    y: float = Field(ge=0.0, le=1.0)

    def to_domain(self) -> PointerSample:
        return PointerSample(cell=Cell(self.row, self.col), point=UnitPoint(self.x, self.y))


class RecordingModel(BaseModel):
    """A full recorded stroke; the first sample is the pointer-down."""

    samples: list[SampleModel] = Field(min_length=1)


class RecordingReader:
    """Loads pointer recordings and yields domain samples.

    Example:
        with RecordingReader(Path("stroke.json")) as reader:
            for sample in reader.iter_samples():
                print(sample.cell, sample.point)
    """

    def __init__(self, path: Path) -> None:
        """Initialize the recording reader.

        Args:
            path: Path to the JSON recording
        """
        self._path = path
        self._recording: RecordingModel | None = None

    def load(self) -> None:
        """Load and validate the recording.

        Raises:
            RecordingLoadError: If the file is missing, unreadable or invalid
        """
        if not self._path.exists():
            raise RecordingLoadError(str(self._path), "file not found")

        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise RecordingLoadError(str(self._path), str(e)) from e

        try:
            self._recording = RecordingModel.model_validate_json(text)
        except ValidationError as e:
            raise RecordingLoadError(str(self._path), _summarize(e)) from e

    @property
    def sample_count(self) -> int:
        """Return the number of recorded samples.

        Raises:
            RuntimeError: If the recording has not been loaded yet
        """
        return len(self._require_loaded().samples)

    def iter_samples(self) -> Iterator[PointerSample]:
        """Iterate over the recorded samples in order.

        Raises:
            RuntimeError: If the recording has not been loaded yet
        """
        for sample in self._require_loaded().samples:
            yield sample.to_domain()

    def close(self) -> None:
        """Release the loaded recording."""
        self._recording = None

    def __enter__(self) -> "RecordingReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()

    def _require_loaded(self) -> RecordingModel:
        if self._recording is None:
            raise RuntimeError("Recording not loaded. Call load() first.")
        return self._recording


def read_recording(path: Path) -> list[PointerSample]:
    """Load every sample of a recording.

    Args:
        path: Path to the JSON recording

    Returns:
        Samples in recorded order

    Raises:
        RecordingLoadError: If the recording cannot be loaded
    """
    with RecordingReader(path) as reader:
        return list(reader.iter_samples())


def _summarize(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"]) or "recording"
    count = error.error_count()
    more = f" (+{count - 1} more)" if count > 1 else ""
    return f"{location}: {first['msg']}{more}"
