"""Stitch count derivation from sampled radii."""

import math

from amigurumizer.config import ShapingConfig
from amigurumizer.domain import RowSample
from amigurumizer.exceptions import DegenerateRowError


def circumference_stitches(radius: float, stitches_per_cm: float) -> int:
    """Stitches around a circle of the given radius, rounded to the nearest."""
    return round(2.0 * math.pi * max(0.0, radius) * stitches_per_cm)


def target_count(
    radius: float,
    stitches_per_cm: float,
    minimum: int = 6,
    limits: tuple[int, int] | None = None,
) -> int:
    """Convert a radius into a stitch count.

    The circumference count is brought within `limits` first and raised to
    `minimum` afterwards.

    Args:
        radius: Row radius in centimeters
        stitches_per_cm: Stitch gauge
        minimum: Counts below this are raised to it
        limits: Optional (lowest, highest) range for the circumference count

    Returns:
        round(2 * pi * radius * stitches_per_cm), limited, at least `minimum`

    Raises:
        DegenerateRowError: If the result is below one stitch
    """
    count = circumference_stitches(radius, stitches_per_cm)
    if limits is not None:
        lowest, highest = limits
        count = min(max(count, lowest), highest)
    count = max(count, minimum)
    if count < 1:
        raise DegenerateRowError(count, f"radius {radius:.3f} cm gives no stitches")
    return count


def row_change_limits(previous_count: int) -> tuple[int, int]:
    """Smallest and largest count reachable from a row in one round.

    A round can at most increase into every stitch (doubling) or decrease
    every pair of stitches (halving, rounded up).

    Args:
        previous_count: Stitches in the previous row

    Returns:
        Tuple of (lowest, highest) reachable stitch count
    """
    return (previous_count - previous_count // 2, 2 * previous_count)


class StitchCountDeriver:
    """Derives the target stitch count of each row.

    Row 0 is the magic ring and always has the configured starting count.
    Other rows follow the profile circumference, clamped to a minimum that
    is lower on the final closing row.

    Example:
        deriver = StitchCountDeriver(ShapingConfig())
        count = deriver.count_for_row(sample, previous_count=6,
                                      stitches_per_cm=3.0, is_final=False)
    """

    def __init__(self, config: ShapingConfig | None = None) -> None:
        """Initialize with shaping configuration.

        Args:
            config: Shaping settings (defaults if None)
        """
        self.config = config or ShapingConfig()

    def minimum_for_row(self, is_final: bool) -> int:
        """Minimum stitch count for a row."""
        if is_final:
            return self.config.closing_min_stitch_count
        return self.config.min_stitch_count

    def count_for_row(
        self,
        sample: RowSample,
        previous_count: int | None,
        stitches_per_cm: float,
        is_final: bool,
        starting_stitch_count: int | None = None,
    ) -> int:
        """Derive the target stitch count for one row.

        When row change limiting is enabled, the radius-derived count is first
        brought within what one round can reach from the previous row. The
        minimum clamp is applied afterwards and is not reconciled with that
        limit, so a minimum the previous row cannot reach is left for the
        planner to reject.

        Args:
            sample: Row sample
            previous_count: Stitch count of the previous row (None for row 0)
            stitches_per_cm: Stitch gauge
            is_final: Whether this is the closing row
            starting_stitch_count: Override for the magic ring count

        Returns:
            Target stitch count

        Raises:
            DegenerateRowError: If the count falls below one stitch
        """
        if sample.row_index == 0 or previous_count is None:
            start = (
                self.config.starting_stitch_count
                if starting_stitch_count is None
                else starting_stitch_count
            )
            if start < 1:
                raise DegenerateRowError(start, "starting stitch count must be at least 1")
            return start

        limits = row_change_limits(previous_count) if self.config.limit_row_change else None
        return target_count(
            sample.radius, stitches_per_cm, self.minimum_for_row(is_final), limits=limits
        )
