"""Crochet pattern representation.

This module defines the output side of the pipeline:
- RowSample: A sampled profile radius for one row
- Row: The actions worked in one row and the resulting stitch count
- PatternMetadata: Aggregate production estimates
- CrochetPattern: The complete, immutable pattern
"""

from dataclasses import dataclass
from typing import Any

from amigurumizer.domain.stitch import StitchAction


@dataclass(frozen=True, slots=True)
class RowSample:
    """Profile radius sampled at the middle of a row.

    Attributes:
        row_index: 0-based row index
        height: Sample height in centimeters
        radius: Profile radius at that height in centimeters
    """

    row_index: int
    height: float
    radius: float


@dataclass(frozen=True)
class Row:
    """A single round of the pattern.

    Actions are worked in order into the previous row; for row 1 they are
    worked into the magic ring.

    Attributes:
        row_number: 1-based row number
        actions: Ordered stitch actions
        stitch_count_after: Stitches in the row once it is worked
    """

    row_number: int
    actions: tuple[StitchAction, ...]
    stitch_count_after: int

    @property
    def stitches_consumed(self) -> int:
        """Previous-row stitches worked into."""
        return sum(action.consumes for action in self.actions)

    @property
    def stitches_emitted(self) -> int:
        """New stitches produced by the actions."""
        return sum(action.emits for action in self.actions)

    @property
    def increase_count(self) -> int:
        """Number of increases in the row."""
        return sum(1 for action in self.actions if action is StitchAction.INCREASE)

    @property
    def decrease_count(self) -> int:
        """Number of decreases (either style) in the row."""
        return sum(1 for action in self.actions if action.is_decrease)

    def tags(self) -> list[str]:
        """Action abbreviations in order."""
        return [action.abbreviation for action in self.actions]

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the row
        """
        return {
            "row_number": self.row_number,
            "actions": self.tags(),
            "stitch_count_after": self.stitch_count_after,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Row":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a row

        Returns:
            Row instance
        """
        return cls(
            row_number=data["row_number"],
            actions=tuple(StitchAction(tag) for tag in data["actions"]),
            stitch_count_after=data["stitch_count_after"],
        )


@dataclass(frozen=True)
class PatternMetadata:
    """Aggregate numbers for a pattern.

    Attributes:
        total_rows: Number of rows
        total_stitches: Sum of every row's stitch count
        estimated_time_minutes: Working time estimate
        yarn_length_meters: Yarn length estimate
    """

    total_rows: int
    total_stitches: int
    estimated_time_minutes: float
    yarn_length_meters: float

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "total_rows": self.total_rows,
            "total_stitches": self.total_stitches,
            "estimated_time_minutes": self.estimated_time_minutes,
            "yarn_length_meters": self.yarn_length_meters,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PatternMetadata":
        """Deserialize from dictionary."""
        return cls(
            total_rows=data["total_rows"],
            total_stitches=data["total_stitches"],
            estimated_time_minutes=data["estimated_time_minutes"],
            yarn_length_meters=data["yarn_length_meters"],
        )


@dataclass(frozen=True)
class CrochetPattern:
    """A complete round-by-round pattern.

    Every generation request produces a new instance; patterns are never
    updated in place.

    Attributes:
        rows: Rows in working order
        metadata: Aggregate numbers
    """

    rows: tuple[Row, ...]
    metadata: PatternMetadata

    def stitch_counts(self) -> list[int]:
        """Stitch count of every row in order."""
        return [row.stitch_count_after for row in self.rows]

    @property
    def max_stitch_count(self) -> int:
        """Largest stitch count of any row."""
        return max((row.stitch_count_after for row in self.rows), default=0)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary representation of the pattern
        """
        return {
            "rows": [row.to_dict() for row in self.rows],
            "metadata": self.metadata.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CrochetPattern":
        """Deserialize from dictionary.

        Args:
            data: Dictionary representation of a pattern

        Returns:
            CrochetPattern instance
        """
        return cls(
            rows=tuple(Row.from_dict(row) for row in data["rows"]),
            metadata=PatternMetadata.from_dict(data["metadata"]),
        )
