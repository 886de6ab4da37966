"""Exception hierarchy for Amigurumizer."""

from typing import Self


class AmigurumizerError(Exception):
    """Base exception for all Amigurumizer errors."""

    pass


class ProfileError(AmigurumizerError):
    """Errors related to the revolution profile."""

    pass


class InvalidProfileError(ProfileError):
    """Profile curve cannot describe a closed solid of revolution."""

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Invalid profile: {reason}")


class GaugeError(AmigurumizerError):
    """Errors related to gauge values."""

    pass


class InvalidGaugeError(GaugeError):
    """Gauge value is not a positive finite number."""

    def __init__(self, field: str, value: float) -> None:
        self.field = field
        self.value = value
        super().__init__(f"Invalid gauge: {field} must be positive, got {value!r}")


class RowError(AmigurumizerError):
    """Error detected while building a specific row.

    The planner and the stitch count deriver raise these without a location;
    the assembler re-raises them with the row index and height attached.
    """

    def __init__(
        self,
        message: str,
        row_index: int | None = None,
        height_cm: float | None = None,
    ) -> None:
        self.message = message
        self.row_index = row_index
        self.height_cm = height_cm
        if row_index is None:
            super().__init__(message)
        else:
            where = f"row {row_index + 1}"
            if height_cm is not None:
                where += f" (height {height_cm:.2f} cm)"
            super().__init__(f"{where}: {message}")

    def _located_args(self) -> tuple:
        raise NotImplementedError

    def at_row(self, row_index: int, height_cm: float | None = None) -> Self:
        """Return a copy of this error located at the given row.

        Args:
            row_index: 0-based index of the offending row
            height_cm: Sample height of the offending row

        Returns:
            New exception of the same type with location attached
        """
        return type(self)(*self._located_args(), row_index=row_index, height_cm=height_cm)


class OverIncreaseError(RowError):
    """Row needs more increases than the previous row has stitches."""

    def __init__(
        self,
        previous: int,
        target: int,
        row_index: int | None = None,
        height_cm: float | None = None,
    ) -> None:
        self.previous = previous
        self.target = target
        super().__init__(
            f"cannot grow from {previous} to {target} stitches in one row "
            f"({target - previous} increases > {previous} stitches)",
            row_index=row_index,
            height_cm=height_cm,
        )

    def _located_args(self) -> tuple:
        return (self.previous, self.target)


class OverDecreaseError(RowError):
    """Row needs more decrease pairs than the previous row can supply."""

    def __init__(
        self,
        previous: int,
        target: int,
        row_index: int | None = None,
        height_cm: float | None = None,
    ) -> None:
        self.previous = previous
        self.target = target
        super().__init__(
            f"cannot shrink from {previous} to {target} stitches in one row "
            f"({previous - target} decreases need {2 * (previous - target)} stitches)",
            row_index=row_index,
            height_cm=height_cm,
        )

    def _located_args(self) -> tuple:
        return (self.previous, self.target)


class DegenerateRowError(RowError):
    """Row would have fewer than one stitch."""

    def __init__(
        self,
        count: int,
        reason: str = "stitch count must be at least 1",
        row_index: int | None = None,
        height_cm: float | None = None,
    ) -> None:
        self.count = count
        self.reason = reason
        super().__init__(
            f"degenerate row with {count} stitches: {reason}",
            row_index=row_index,
            height_cm=height_cm,
        )

    def _located_args(self) -> tuple:
        return (self.count, self.reason)


class GenerationCancelledError(AmigurumizerError):
    """Pattern generation was cancelled by the caller."""

    def __init__(self, completed_rows: int, pending_rows: int) -> None:
        self.completed_rows = completed_rows
        self.pending_rows = pending_rows
        super().__init__(
            f"Generation cancelled: {completed_rows} rows completed, {pending_rows} pending"
        )


class PatternFormatError(AmigurumizerError):
    """Compressed row text could not be parsed."""

    def __init__(self, text: str, reason: str) -> None:
        self.text = text
        self.reason = reason
        super().__init__(f"Cannot parse row instructions '{text}': {reason}")


class ProfileLoadError(ProfileError):
    """Error loading a profile file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load profile '{path}': {reason}")


class PatternSaveError(AmigurumizerError):
    """Error saving a pattern file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to save pattern '{path}': {reason}")
