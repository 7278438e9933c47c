"""Logging utilities for Glyphtrace."""

import logging
from dataclasses import dataclass
from pathlib import Path

import structlog

# Handlers installed by configure_logging, replaced on every call
_installed_handlers: list[logging.Handler] = []


@dataclass
class StrokeStats:
    """Statistics for one tracked stroke."""

    samples: int = 0
    cells_entered: int = 0
    interpolated_count: int = 0
    pruned_count: int = 0
    revisited_count: int = 0
    final_cell_count: int = 0

    @property
    def kept_ratio(self) -> float:
        """Fraction of created cells that survived pruning."""
        created = self.cells_entered + self.interpolated_count
        if created == 0:
            return 0.0
        return self.final_cell_count / created


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    while _installed_handlers:
        handler = _installed_handlers.pop()
        root_logger.removeHandler(handler)
        handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("glyphtrace")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class StrokeLogger:
    """Logger for tracking stroke events and statistics.

    Statistics are always collected; events are only emitted when a bound
    logger is supplied.
    """

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger
        self._stats = StrokeStats()

    def reset(self) -> None:
        """Start counting a new stroke."""
        self._stats = StrokeStats()

    def log_sample(self, row: int, col: int, x: float, y: float) -> None:
        """Log a pointer sample."""
        self._stats.samples += 1
        self._emit("debug", "Pointer sample", row=row, col=col, x=round(x, 3), y=round(y, 3))

    def log_cell_entered(self, row: int, col: int) -> None:
        """Log the pointer entering a new cell."""
        self._stats.cells_entered += 1
        self._emit("debug", "Cell entered", row=row, col=col)

    def log_interpolated(self, from_cell: str, to_cell: str, count: int) -> None:
        """Log cells recovered between two non-adjacent cells."""
        self._stats.interpolated_count += count
        self._emit(
            "debug",
            "Cells interpolated",
            from_cell=from_cell,
            to_cell=to_cell,
            count=count,
        )

    def log_pruned(self, row: int, col: int, distance: float) -> None:
        """Log a cell dropped for a short traversal."""
        self._stats.pruned_count += 1
        self._emit("debug", "Cell pruned", row=row, col=col, distance=round(distance, 3))

    def log_revisited(self, row: int, col: int) -> None:
        """Log the pointer doubling back into the previous cell."""
        self._stats.revisited_count += 1
        self._emit("debug", "Cell revisited", row=row, col=col)

    def log_finalized(self, cell_count: int, num_rows: int, num_cols: int) -> None:
        """Log a finalized stroke."""
        self._stats.final_cell_count = cell_count
        self._emit(
            "info",
            "Stroke finalized",
            cells=cell_count,
            rows=num_rows,
            cols=num_cols,
            samples=self._stats.samples,
            pruned=self._stats.pruned_count,
            interpolated=self._stats.interpolated_count,
        )

    def log_cancelled(self, cell_count: int) -> None:
        """Log a discarded in-progress stroke."""
        self._emit("info", "Stroke cancelled", cells=cell_count)

    @property
    def stats(self) -> StrokeStats:
        """Get current stroke statistics."""
        return self._stats

    def _emit(self, level: str, event: str, **fields: object) -> None:
        if self._logger is not None:
            getattr(self._logger, level)(event, **fields)
