"""Logging utilities for Amigurumizer."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Marks handlers installed by configure_logging so reconfiguring replaces them
_HANDLER_TAG = "_amigurumizer_handler"


@dataclass
class GenerationStats:
    """Statistics from a generation run."""

    rows_generated: int = 0
    total_stitches: int = 0
    increases: int = 0
    decreases: int = 0
    errors: list[tuple[int, str]] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate generation duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Safe to call repeatedly; handlers from a previous call are replaced.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if getattr(handler, _HANDLER_TAG, False):
            root_logger.removeHandler(handler)
            handler.close()

    levels = []

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        setattr(file_handler, _HANDLER_TAG, True)
        root_logger.addHandler(file_handler)
        levels.append(file_handler.level)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    setattr(console_handler, _HANDLER_TAG, True)
    root_logger.addHandler(console_handler)
    levels.append(console_handler.level)

    root_logger.setLevel(min(levels))

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

    logger = structlog.get_logger("amigurumizer")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=console_level,
    )

    return logger


class GenerationLogger:
    """Logger for tracking pattern generation and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = GenerationStats()

    def log_generation_start(self, total_rows: int, total_height_cm: float) -> None:
        """Log start of a generation run."""
        self._logger.info(
            "Generating pattern",
            rows=total_rows,
            height_cm=round(total_height_cm, 2),
        )

    def log_row_planned(
        self,
        row_number: int,
        radius_cm: float,
        stitch_count: int,
        increases: int,
        decreases: int,
    ) -> None:
        """Log a planned row."""
        self._logger.debug(
            "Row planned",
            row=row_number,
            radius_cm=round(radius_cm, 3),
            stitches=stitch_count,
            inc=increases,
            dec=decreases,
        )
        self._stats.rows_generated += 1
        self._stats.total_stitches += stitch_count
        self._stats.increases += increases
        self._stats.decreases += decreases

    def log_row_error(self, row_index: int, error: Exception) -> None:
        """Log a row that could not be planned."""
        self._logger.error(
            "Row planning failed",
            row=row_index + 1,
            error=str(error),
            error_type=type(error).__name__,
        )
        self._stats.errors.append((row_index, str(error)))

    def log_checkpoint(self, completed: int, total: int) -> None:
        """Log a progress checkpoint."""
        self._logger.debug("Checkpoint", completed=completed, total=total)

    def log_cancelled(self, completed: int, pending: int) -> None:
        """Log a cancelled run."""
        self._logger.warning("Generation cancelled", completed=completed, pending=pending)

    def log_generation_complete(self, duration_ms: float) -> None:
        """Log a finished run."""
        self._logger.info(
            "Pattern generated",
            rows=self._stats.rows_generated,
            stitches=self._stats.total_stitches,
            inc=self._stats.increases,
            dec=self._stats.decreases,
            duration_ms=round(duration_ms, 2),
        )

    @property
    def stats(self) -> GenerationStats:
        """Get current generation statistics."""
        return self._stats
