"""Unit tests for stitch count derivation."""

import pytest

from amigurumizer.config import ShapingConfig
from amigurumizer.core.stitch_count import (
    StitchCountDeriver,
    circumference_stitches,
    row_change_limits,
    target_count,
)
from amigurumizer.domain import RowSample
from amigurumizer.exceptions import DegenerateRowError


def sample(index: int, radius: float) -> RowSample:
    return RowSample(row_index=index, height=index + 0.5, radius=radius)


class TestTargetCount:
    """Tests for target_count function."""

    def test_circumference(self) -> None:
        """Test count is the rounded circumference in stitches."""
        assert target_count(5.0, 3.0) == 94
        assert target_count(1.0, 3.0) == 19

    def test_minimum_applied(self) -> None:
        """Test small radii are raised to the minimum."""
        assert target_count(0.1, 3.0) == 6
        assert target_count(0.1, 3.0, minimum=3) == 3

    def test_without_minimum(self) -> None:
        """Test raw count when no minimum is applied."""
        assert target_count(0.1, 3.0, minimum=1) == 2

    def test_degenerate(self) -> None:
        """Test zero stitches raises DegenerateRowError."""
        with pytest.raises(DegenerateRowError) as exc_info:
            target_count(0.0, 3.0, minimum=0)
        assert exc_info.value.count == 0

    def test_negative_radius_treated_as_zero(self) -> None:
        """Test negative radius gives no stitches."""
        assert circumference_stitches(-1.0, 3.0) == 0

    def test_limits(self) -> None:
        """Test the circumference is brought within the limits."""
        assert target_count(5.0, 3.0, limits=(3, 12)) == 12
        assert target_count(0.5, 3.0, limits=(47, 188)) == 47

    def test_minimum_after_limits(self) -> None:
        """Test the minimum is applied after the limits."""
        assert target_count(0.1, 3.0, minimum=6, limits=(3, 4)) == 6
        assert target_count(0.1, 3.0, minimum=1, limits=(3, 4)) == 3


class TestRowChangeLimits:
    """Tests for row_change_limits function."""

    @pytest.mark.parametrize(
        ("previous", "expected"),
        [
            (6, (3, 12)),
            (5, (3, 10)),
            (1, (1, 2)),
            (94, (47, 188)),
        ],
    )
    def test_limits(self, previous: int, expected: tuple[int, int]) -> None:
        """Test reachable counts are halving to doubling."""
        assert row_change_limits(previous) == expected


class TestStitchCountDeriver:
    """Tests for StitchCountDeriver class."""

    def test_first_row_is_starting_count(self) -> None:
        """Test row 0 uses the starting count whatever the radius."""
        deriver = StitchCountDeriver(ShapingConfig(starting_stitch_count=8))
        assert deriver.count_for_row(sample(0, 4.0), None, 3.0, is_final=False) == 8

    def test_starting_count_override(self) -> None:
        """Test an explicit starting count wins over the config."""
        deriver = StitchCountDeriver()
        count = deriver.count_for_row(
            sample(0, 4.0), None, 3.0, is_final=False, starting_stitch_count=10
        )
        assert count == 10

    def test_zero_starting_count(self) -> None:
        """Test a zero starting count is degenerate."""
        deriver = StitchCountDeriver()
        with pytest.raises(DegenerateRowError):
            deriver.count_for_row(
                sample(0, 4.0), None, 3.0, is_final=False, starting_stitch_count=0
            )

    def test_follows_radius(self) -> None:
        """Test later rows follow the profile radius."""
        deriver = StitchCountDeriver()
        assert deriver.count_for_row(sample(10, 5.0), 94, 3.0, is_final=False) == 94

    def test_limited_to_doubling(self) -> None:
        """Test a large radius is limited to doubling the previous row."""
        deriver = StitchCountDeriver()
        assert deriver.count_for_row(sample(1, 5.0), 6, 3.0, is_final=False) == 12

    def test_limited_to_halving(self) -> None:
        """Test a small radius is limited to halving the previous row."""
        deriver = StitchCountDeriver()
        assert deriver.count_for_row(sample(20, 1.0), 94, 3.0, is_final=False) == 47

    def test_unlimited(self) -> None:
        """Test disabling the row change limit returns the raw count."""
        deriver = StitchCountDeriver(ShapingConfig(limit_row_change=False))
        assert deriver.count_for_row(sample(1, 5.0), 6, 3.0, is_final=False) == 94

    def test_minimum_on_body_rows(self) -> None:
        """Test body rows never drop below the minimum."""
        deriver = StitchCountDeriver()
        assert deriver.count_for_row(sample(5, 0.05), 6, 3.0, is_final=False) == 6

    def test_closing_minimum(self) -> None:
        """Test the final row may close down to the lower minimum."""
        deriver = StitchCountDeriver()
        assert deriver.count_for_row(sample(5, 0.05), 6, 3.0, is_final=True) == 3

    def test_minimum_for_row(self) -> None:
        """Test minimum selection by row position."""
        deriver = StitchCountDeriver(
            ShapingConfig(min_stitch_count=8, closing_min_stitch_count=4)
        )
        assert deriver.minimum_for_row(is_final=False) == 8
        assert deriver.minimum_for_row(is_final=True) == 4

    def test_minimum_applied_after_limit(self) -> None:
        """Test the minimum can exceed what the limit allows."""
        deriver = StitchCountDeriver(ShapingConfig(min_stitch_count=20))
        assert deriver.count_for_row(sample(3, 0.1), 6, 3.0, is_final=False) == 20

    @pytest.mark.parametrize("radius", [0.0, 0.05, 0.4, 1.0, 2.5, 5.0, 9.0])
    @pytest.mark.parametrize("previous", [3, 6, 11, 48, 94])
    @pytest.mark.parametrize("is_final", [False, True])
    def test_matches_target_count(self, radius: float, previous: int, is_final: bool) -> None:
        """Test row counts agree with target_count under the row change limits."""
        deriver = StitchCountDeriver()
        expected = target_count(
            radius,
            3.0,
            deriver.minimum_for_row(is_final),
            limits=row_change_limits(previous),
        )
        assert deriver.count_for_row(sample(4, radius), previous, 3.0, is_final) == expected
