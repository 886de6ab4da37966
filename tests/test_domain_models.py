"""Tests for domain models to verify they work correctly."""

import pytest

from amigurumizer.domain import (
    STITCH_KEY,
    BezierSegment,
    ControlPoint,
    CrochetPattern,
    Gauge,
    PatternMetadata,
    Row,
    RowSample,
    StitchAction,
)
from amigurumizer.exceptions import InvalidGaugeError

SC = StitchAction.SINGLE_CROCHET
INC = StitchAction.INCREASE
DEC = StitchAction.DECREASE
INVDEC = StitchAction.INVISIBLE_DECREASE


class TestControlPoint:
    """Tests for ControlPoint class."""

    def test_point_creation(self) -> None:
        """Test basic point creation."""
        p = ControlPoint(5.0, 1.0)
        assert p.x == 5.0
        assert p.y == 1.0

    def test_point_to_tuple(self) -> None:
        """Test point to tuple conversion."""
        assert ControlPoint(2.5, 7.0).to_tuple() == (2.5, 7.0)

    def test_point_serialization(self) -> None:
        """Test point serialization and deserialization."""
        p1 = ControlPoint(2.5, 7.0)
        p2 = ControlPoint.from_dict(p1.to_dict())
        assert p2 == p1

    def test_point_from_dict_converts_ints(self) -> None:
        """Test integer coordinates are stored as floats."""
        p = ControlPoint.from_dict({"x": 3, "y": 4})
        assert isinstance(p.x, float)
        assert isinstance(p.y, float)

    def test_point_immutable(self) -> None:
        """Test that point is immutable."""
        p = ControlPoint(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0  # type: ignore

    def test_point_hashable(self) -> None:
        """Test that equal points hash equally."""
        assert len({ControlPoint(1.0, 2.0), ControlPoint(1.0, 2.0)}) == 1


class TestBezierSegment:
    """Tests for BezierSegment class."""

    @pytest.fixture
    def segment(self) -> BezierSegment:
        return BezierSegment(
            p0=ControlPoint(0.0, 0.0),
            p1=ControlPoint(1.0, 1.0),
            p2=ControlPoint(4.0, 2.0),
            p3=ControlPoint(5.0, 3.0),
        )

    def test_points_order(self, segment: BezierSegment) -> None:
        """Test the four points are returned in order."""
        assert segment.points == [segment.p0, segment.p1, segment.p2, segment.p3]

    def test_height_range(self, segment: BezierSegment) -> None:
        """Test height range spans the end points."""
        assert segment.height_range == (0.0, 3.0)

    def test_contains_height(self, segment: BezierSegment) -> None:
        """Test inclusive height containment."""
        assert segment.contains_height(0.0)
        assert segment.contains_height(3.0)
        assert segment.contains_height(1.5)
        assert not segment.contains_height(3.1)

    def test_segment_serialization(self, segment: BezierSegment) -> None:
        """Test segment serialization and deserialization."""
        assert BezierSegment.from_dict(segment.to_dict()) == segment


class TestStitchAction:
    """Tests for StitchAction enum."""

    @pytest.mark.parametrize(
        ("action", "consumes", "emits"),
        [
            (SC, 1, 1),
            (INC, 1, 2),
            (DEC, 2, 1),
            (INVDEC, 2, 1),
        ],
    )
    def test_stitch_arithmetic(self, action: StitchAction, consumes: int, emits: int) -> None:
        """Test stitches consumed and emitted by each action."""
        assert action.consumes == consumes
        assert action.emits == emits

    def test_abbreviations(self) -> None:
        """Test abbreviations match the pattern tags."""
        assert [a.abbreviation for a in StitchAction] == ["sc", "inc", "dec", "invdec"]

    def test_is_decrease(self) -> None:
        """Test both decrease styles count as decreases."""
        assert DEC.is_decrease
        assert INVDEC.is_decrease
        assert not SC.is_decrease
        assert not INC.is_decrease

    def test_from_abbreviation_case_insensitive(self) -> None:
        """Test abbreviation lookup ignores case and whitespace."""
        assert StitchAction.from_abbreviation(" INVDEC ") is INVDEC

    def test_from_abbreviation_unknown(self) -> None:
        """Test unknown abbreviation raises ValueError."""
        with pytest.raises(ValueError):
            StitchAction.from_abbreviation("hdc")

    def test_stitch_key_covers_actions(self) -> None:
        """Test every action has a stitch key entry."""
        for action in StitchAction:
            assert action.abbreviation in STITCH_KEY


class TestGauge:
    """Tests for Gauge class."""

    def test_gauge_creation(self) -> None:
        """Test gauge stores densities and derived sizes."""
        gauge = Gauge(stitches_per_cm=4.0, rows_per_cm=2.0)
        assert gauge.stitch_width_cm == 0.25
        assert gauge.row_height_cm == 0.5

    @pytest.mark.parametrize("value", [0.0, -1.0, float("nan"), float("inf")])
    def test_invalid_stitches_per_cm(self, value: float) -> None:
        """Test non-positive or non-finite stitch gauge is rejected."""
        with pytest.raises(InvalidGaugeError) as exc_info:
            Gauge(stitches_per_cm=value, rows_per_cm=3.0)
        assert exc_info.value.field == "stitches_per_cm"

    def test_invalid_rows_per_cm(self) -> None:
        """Test non-positive row gauge is rejected."""
        with pytest.raises(InvalidGaugeError) as exc_info:
            Gauge(stitches_per_cm=3.0, rows_per_cm=0.0)
        assert exc_info.value.field == "rows_per_cm"

    def test_gauge_serialization(self) -> None:
        """Test gauge serialization and deserialization."""
        gauge = Gauge(stitches_per_cm=3.5, rows_per_cm=4.0)
        assert Gauge.from_dict(gauge.to_dict()) == gauge


class TestRow:
    """Tests for Row class."""

    def test_increase_row_counts(self) -> None:
        """Test stitch arithmetic of an increase row."""
        row = Row(row_number=3, actions=(INC, SC) * 6, stitch_count_after=18)
        assert row.stitches_consumed == 12
        assert row.stitches_emitted == 18
        assert row.increase_count == 6
        assert row.decrease_count == 0

    def test_decrease_row_counts(self) -> None:
        """Test stitch arithmetic of a decrease row."""
        row = Row(row_number=9, actions=(INVDEC, INVDEC, SC, SC) * 3, stitch_count_after=12)
        assert row.stitches_consumed == 18
        assert row.stitches_emitted == 12
        assert row.decrease_count == 6

    def test_tags(self) -> None:
        """Test tags are the action abbreviations in order."""
        row = Row(row_number=1, actions=(SC, INC, DEC), stitch_count_after=4)
        assert row.tags() == ["sc", "inc", "dec"]

    def test_row_serialization(self) -> None:
        """Test row serialization writes tags and reads them back."""
        row = Row(row_number=2, actions=(INC,) * 6, stitch_count_after=12)
        data = row.to_dict()
        assert data["actions"] == ["inc"] * 6
        assert Row.from_dict(data) == row


class TestCrochetPattern:
    """Tests for CrochetPattern class."""

    @pytest.fixture
    def pattern(self) -> CrochetPattern:
        rows = (
            Row(row_number=1, actions=(SC,) * 6, stitch_count_after=6),
            Row(row_number=2, actions=(INC,) * 6, stitch_count_after=12),
            Row(row_number=3, actions=(DEC,) * 6, stitch_count_after=6),
        )
        metadata = PatternMetadata(
            total_rows=3,
            total_stitches=24,
            estimated_time_minutes=1.2,
            yarn_length_meters=0.4,
        )
        return CrochetPattern(rows=rows, metadata=metadata)

    def test_stitch_counts(self, pattern: CrochetPattern) -> None:
        """Test stitch counts follow row order."""
        assert pattern.stitch_counts() == [6, 12, 6]
        assert pattern.max_stitch_count == 12

    def test_pattern_serialization(self, pattern: CrochetPattern) -> None:
        """Test pattern serialization and deserialization."""
        restored = CrochetPattern.from_dict(pattern.to_dict())
        assert restored == pattern

    def test_pattern_immutable(self, pattern: CrochetPattern) -> None:
        """Test that pattern is immutable."""
        with pytest.raises(AttributeError):
            pattern.rows = ()  # type: ignore


class TestRowSample:
    """Tests for RowSample class."""

    def test_sample_creation(self) -> None:
        """Test basic sample creation."""
        sample = RowSample(row_index=4, height=1.5, radius=5.0)
        assert sample.row_index == 4
        assert sample.height == 1.5
        assert sample.radius == 5.0
