"""Unit tests for ProfileCurve and the Bezier helpers."""

import math

import pytest

from amigurumizer.core._bezier import evaluate_cubic, parameter_at_height
from amigurumizer.core.profile import ProfileCurve, build_segments
from amigurumizer.domain import BezierSegment, ControlPoint
from amigurumizer.exceptions import InvalidProfileError

CYLINDER = [(0, 0), (5, 1), (5, 9), (0, 10)]
BALL = [(0, 0), (2.6, 0.7), (3.7, 2), (4, 4), (3.7, 6), (2.6, 7.3), (0, 8)]


class TestBezierHelpers:
    """Tests for cubic Bezier evaluation."""

    def test_evaluate_endpoints(self) -> None:
        """Test t=0 and t=1 return the end points."""
        points = [ControlPoint(0, 0), ControlPoint(1, 2), ControlPoint(3, 2), ControlPoint(4, 0)]
        assert evaluate_cubic(points, 0.0) == ControlPoint(0.0, 0.0)
        assert evaluate_cubic(points, 1.0) == ControlPoint(4.0, 0.0)

    def test_evaluate_midpoint(self) -> None:
        """Test midpoint of a symmetric curve."""
        points = [ControlPoint(0, 0), ControlPoint(0, 1), ControlPoint(2, 1), ControlPoint(2, 0)]
        mid = evaluate_cubic(points, 0.5)
        assert mid.x == pytest.approx(1.0)
        assert mid.y == pytest.approx(0.75)

    def test_parameter_at_height_linear(self) -> None:
        """Test bisection on a height-linear segment."""
        points = [ControlPoint(0, 0), ControlPoint(0, 1), ControlPoint(0, 2), ControlPoint(0, 3)]
        assert parameter_at_height(points, 1.5) == pytest.approx(0.5, abs=1e-8)

    def test_parameter_at_height_clamps(self) -> None:
        """Test heights outside the segment clamp to the ends."""
        points = [ControlPoint(0, 0), ControlPoint(0, 1), ControlPoint(0, 2), ControlPoint(0, 3)]
        assert parameter_at_height(points, -1.0) == 0.0
        assert parameter_at_height(points, 4.0) == 1.0


class TestProfileValidation:
    """Tests for profile control point validation."""

    def test_too_few_points(self) -> None:
        """Test fewer than three points is rejected."""
        with pytest.raises(InvalidProfileError, match="at least 3"):
            ProfileCurve.from_points([(0, 0), (0, 1)])

    def test_heights_must_increase(self) -> None:
        """Test equal heights are rejected."""
        with pytest.raises(InvalidProfileError, match="strictly increase"):
            ProfileCurve.from_points([(0, 0), (2, 1), (3, 1), (0, 2)])

    def test_heights_must_not_decrease(self) -> None:
        """Test decreasing heights are rejected."""
        with pytest.raises(InvalidProfileError):
            ProfileCurve.from_points([(0, 0), (2, 2), (3, 1), (0, 3)])

    def test_negative_radius(self) -> None:
        """Test negative radius is rejected."""
        with pytest.raises(InvalidProfileError, match="negative radius"):
            ProfileCurve.from_points([(0, 0), (-1, 1), (0, 2)])

    def test_poles_on_axis(self) -> None:
        """Test end points off the axis are rejected."""
        with pytest.raises(InvalidProfileError, match="on the axis"):
            ProfileCurve.from_points([(1, 0), (2, 1), (0, 2)])
        with pytest.raises(InvalidProfileError, match="on the axis"):
            ProfileCurve.from_points([(0, 0), (2, 1), (1, 2)])

    def test_non_finite_point(self) -> None:
        """Test NaN coordinates are rejected."""
        with pytest.raises(InvalidProfileError, match="non-finite"):
            ProfileCurve.from_points([(0, 0), (math.nan, 1), (0, 2)])

    def test_reason_attribute(self) -> None:
        """Test the error carries its reason."""
        with pytest.raises(InvalidProfileError) as exc_info:
            ProfileCurve.from_points([(0, 0), (0, 1)])
        assert "control points" in exc_info.value.reason


class TestProfileCurve:
    """Tests for ProfileCurve radius queries."""

    @pytest.fixture
    def cylinder(self) -> ProfileCurve:
        return ProfileCurve.from_points(CYLINDER)

    @pytest.fixture
    def ball(self) -> ProfileCurve:
        return ProfileCurve.from_points(BALL)

    def test_properties(self, cylinder: ProfileCurve) -> None:
        """Test basic curve properties."""
        assert cylinder.min_height == 0.0
        assert cylinder.max_height == 10.0
        assert cylinder.height == 10.0
        assert cylinder.max_radius == 5.0
        assert len(cylinder.segments) == 3

    def test_radius_at_poles(self, cylinder: ProfileCurve) -> None:
        """Test radius is zero at both poles."""
        assert cylinder.radius(0.0) == 0.0
        assert cylinder.radius(10.0) == 0.0

    def test_radius_clamped_outside(self, cylinder: ProfileCurve) -> None:
        """Test heights outside the profile clamp to the poles."""
        assert cylinder.radius(-3.0) == 0.0
        assert cylinder.radius(12.0) == 0.0

    def test_flat_body(self, cylinder: ProfileCurve) -> None:
        """Test a straight section keeps its radius exactly."""
        for height in (1.0, 2.5, 5.0, 7.25, 9.0):
            assert cylinder.radius(height) == pytest.approx(5.0)

    def test_shoulder_values(self, cylinder: ProfileCurve) -> None:
        """Test radius inside the bottom and top shoulders."""
        assert cylinder.radius(0.5) == pytest.approx(3.125)
        assert cylinder.radius(9.5) == pytest.approx(3.125)

    def test_passes_through_control_points(self, ball: ProfileCurve) -> None:
        """Test the curve interpolates every control point."""
        for x, y in BALL:
            assert ball.radius(y) == pytest.approx(x)

    def test_no_overshoot(self, ball: ProfileCurve) -> None:
        """Test the curve never exceeds the largest control radius."""
        for i in range(801):
            height = i * 0.01
            radius = ball.radius(height)
            assert 0.0 <= radius <= ball.max_radius + 1e-9

    def test_continuity_at_control_points(self, ball: ProfileCurve) -> None:
        """Test radius is continuous across segment joins."""
        for _, y in BALL[1:-1]:
            below = ball.radius(y - 1e-7)
            above = ball.radius(y + 1e-7)
            assert below == pytest.approx(above, abs=1e-5)

    def test_offset_base(self) -> None:
        """Test a profile whose bottom pole is above zero."""
        curve = ProfileCurve.from_points([(0, 2), (5, 3), (5, 11), (0, 12)])
        assert curve.min_height == 2.0
        assert curve.height == 10.0
        assert curve.radius(7.0) == pytest.approx(5.0)

    def test_segments_join_points(self, ball: ProfileCurve) -> None:
        """Test segment ends are the control points."""
        for i, segment in enumerate(ball.segments):
            assert segment.p0 == ball.points[i]
            assert segment.p3 == ball.points[i + 1]

    def test_handles_at_thirds(self, cylinder: ProfileCurve) -> None:
        """Test handles sit at one third of each segment's height."""
        segment = cylinder.segments[1]
        assert segment.p1.y == pytest.approx(1.0 + 8.0 / 3.0)
        assert segment.p2.y == pytest.approx(9.0 - 8.0 / 3.0)

    def test_equality_and_hash(self) -> None:
        """Test curves from the same points are equal."""
        a = ProfileCurve.from_points(CYLINDER)
        b = ProfileCurve.from_points(CYLINDER)
        assert a == b
        assert hash(a) == hash(b)
        assert a != ProfileCurve.from_points(BALL)

    def test_repr(self, cylinder: ProfileCurve) -> None:
        """Test repr mentions size."""
        assert "height=10.00" in repr(cylinder)


class TestProfileSerialization:
    """Tests for ProfileCurve serialization."""

    def test_round_trip(self) -> None:
        """Test serialization and deserialization."""
        curve = ProfileCurve.from_points(BALL)
        assert ProfileCurve.from_dict(curve.to_dict()) == curve

    def test_points_only(self) -> None:
        """Test segments are rebuilt when absent."""
        curve = ProfileCurve.from_points(CYLINDER)
        data = {"points": curve.to_dict()["points"]}
        assert ProfileCurve.from_dict(data) == curve

    def test_custom_segments(self) -> None:
        """Test saved segments with non-linear height are honoured."""
        points = [ControlPoint(0.0, 0.0), ControlPoint(3.0, 1.0), ControlPoint(0.0, 2.0)]
        segments = [
            BezierSegment(
                points[0], ControlPoint(1.0, 0.5), ControlPoint(2.0, 0.5), points[1]
            ),
            BezierSegment(
                points[1], ControlPoint(2.0, 1.5), ControlPoint(1.0, 1.5), points[2]
            ),
        ]
        curve = ProfileCurve(points, segments)
        assert curve.radius(0.5) == pytest.approx(1.5, abs=1e-6)
        assert curve.radius(1.5) == pytest.approx(1.5, abs=1e-6)

    def test_segment_count_mismatch(self) -> None:
        """Test the wrong number of segments is rejected."""
        points = [ControlPoint(0.0, 0.0), ControlPoint(3.0, 1.0), ControlPoint(0.0, 2.0)]
        segments = build_segments(points)[:1]
        with pytest.raises(InvalidProfileError, match="segments"):
            ProfileCurve(points, segments)

    def test_non_monotone_segment(self) -> None:
        """Test a segment folding back in height is rejected."""
        points = [ControlPoint(0.0, 0.0), ControlPoint(3.0, 1.0), ControlPoint(0.0, 2.0)]
        segments = build_segments(points)
        segments[0] = BezierSegment(
            points[0], ControlPoint(1.0, 0.8), ControlPoint(2.0, 0.2), points[1]
        )
        with pytest.raises(InvalidProfileError, match="monotone"):
            ProfileCurve(points, segments)
