"""Revolution profile curve.

A ProfileCurve is a piecewise cubic Bezier curve through ordered control
points in (radius, height) space. The first and last points lie on the axis
(the poles of the closed solid), and heights strictly increase, so the curve
describes radius as a function of height.

Segments are built with Catmull-Rom style tangents: the slope dx/dy at each
interior point is the central difference of its neighbours. Slopes are
limited the way monotone cubic interpolation (Fritsch-Carlson) limits them,
so a segment never bulges past the radii at its ends. Handles are placed at
one third of each segment's height, which keeps height linear in the curve
parameter and radius(height) C1-continuous at interior points.
"""

import math
from bisect import bisect_right
from collections.abc import Sequence
from typing import Any

from amigurumizer.core._bezier import evaluate_cubic, parameter_at_height
from amigurumizer.domain import BezierSegment, ControlPoint
from amigurumizer.exceptions import InvalidProfileError

MIN_CONTROL_POINTS = 3

# Relative tolerance for recognising height-linear segments and pole radii
_EPSILON = 1e-9


def _validate_points(points: Sequence[ControlPoint]) -> None:
    """Check profile control point invariants.

    Raises:
        InvalidProfileError: If any invariant is violated
    """
    if len(points) < MIN_CONTROL_POINTS:
        raise InvalidProfileError(
            f"need at least {MIN_CONTROL_POINTS} control points, got {len(points)}"
        )

    for i, point in enumerate(points):
        if not (math.isfinite(point.x) and math.isfinite(point.y)):
            raise InvalidProfileError(f"control point {i} has non-finite coordinates")
        if point.x < 0:
            raise InvalidProfileError(f"control point {i} has negative radius {point.x}")

    for i in range(1, len(points)):
        if points[i].y <= points[i - 1].y:
            raise InvalidProfileError(
                f"heights must strictly increase (point {i} at {points[i].y} "
                f"follows {points[i - 1].y})"
            )

    if abs(points[0].x) > _EPSILON or abs(points[-1].x) > _EPSILON:
        raise InvalidProfileError(
            f"first and last points must be on the axis (radius 0), "
            f"got {points[0].x} and {points[-1].x}"
        )


def _secant_slopes(points: Sequence[ControlPoint]) -> list[float]:
    return [
        (points[i + 1].x - points[i].x) / (points[i + 1].y - points[i].y)
        for i in range(len(points) - 1)
    ]


def _tangent_slopes(points: Sequence[ControlPoint]) -> list[float]:
    """Calculate dx/dy at every control point.

    Interior points use the central difference of their neighbours, zeroed at
    local extrema and limited to three times the smaller adjacent secant.
    End points use the one-sided secant.
    """
    secants = _secant_slopes(points)
    slopes = [secants[0]]

    for i in range(1, len(points) - 1):
        left, right = secants[i - 1], secants[i]
        if left * right <= 0:
            slopes.append(0.0)
            continue
        central = (points[i + 1].x - points[i - 1].x) / (points[i + 1].y - points[i - 1].y)
        limit = 3.0 * min(abs(left), abs(right))
        slopes.append(math.copysign(min(abs(central), limit), central))

    slopes.append(secants[-1])
    return slopes


def build_segments(points: Sequence[ControlPoint]) -> list[BezierSegment]:
    """Build the cubic Bezier segments through validated control points.

    Args:
        points: Profile control points (already validated)

    Returns:
        One segment per consecutive pair of control points
    """
    slopes = _tangent_slopes(points)
    segments = []

    for i in range(len(points) - 1):
        start, end = points[i], points[i + 1]
        h = end.y - start.y
        segments.append(
            BezierSegment(
                p0=start,
                p1=ControlPoint(start.x + h * slopes[i] / 3.0, start.y + h / 3.0),
                p2=ControlPoint(end.x - h * slopes[i + 1] / 3.0, end.y - h / 3.0),
                p3=end,
            )
        )

    return segments


def _validate_segments(
    points: Sequence[ControlPoint], segments: Sequence[BezierSegment]
) -> None:
    if len(segments) != len(points) - 1:
        raise InvalidProfileError(
            f"expected {len(points) - 1} segments for {len(points)} points, got {len(segments)}"
        )

    for i, segment in enumerate(segments):
        if segment.p0 != points[i] or segment.p3 != points[i + 1]:
            raise InvalidProfileError(f"segment {i} does not join control points {i} and {i + 1}")
        ys = [p.y for p in segment.points]
        if any(ys[k] > ys[k + 1] for k in range(3)):
            raise InvalidProfileError(f"segment {i} is not monotone in height")


def _is_height_linear(segment: BezierSegment) -> bool:
    y0, y3 = segment.height_range
    h = y3 - y0
    return (
        abs(segment.p1.y - (y0 + h / 3.0)) <= _EPSILON * max(1.0, abs(h))
        and abs(segment.p2.y - (y3 - h / 3.0)) <= _EPSILON * max(1.0, abs(h))
    )


class ProfileCurve:
    """Piecewise cubic profile of a solid of revolution.

    Immutable once constructed. Radii and heights are in centimeters.

    Example:
        curve = ProfileCurve.from_points([(0, 0), (5, 1), (5, 9), (0, 10)])
        curve.radius(5.0)  # 5.0
    """

    __slots__ = ("_points", "_segments", "_starts", "_linear")

    def __init__(
        self,
        points: Sequence[ControlPoint],
        segments: Sequence[BezierSegment] | None = None,
    ) -> None:
        """Validate control points and build (or check) the segments.

        Args:
            points: Ordered control points
            segments: Precomputed segments, e.g. from a saved profile

        Raises:
            InvalidProfileError: If the points or segments are invalid
        """
        points = tuple(points)
        _validate_points(points)

        if segments is None:
            built = tuple(build_segments(points))
        else:
            built = tuple(segments)
            _validate_segments(points, built)

        self._points = points
        self._segments = built
        self._starts = [segment.p0.y for segment in built]
        self._linear = [_is_height_linear(segment) for segment in built]

    @classmethod
    def from_points(
        cls, points: Sequence[ControlPoint | tuple[float, float]]
    ) -> "ProfileCurve":
        """Create a curve from control points or (x, y) tuples.

        Args:
            points: Control points or (radius, height) tuples

        Returns:
            ProfileCurve instance
        """
        converted = [
            p if isinstance(p, ControlPoint) else ControlPoint(float(p[0]), float(p[1]))
            for p in points
        ]
        return cls(converted)

    @property
    def points(self) -> tuple[ControlPoint, ...]:
        """Control points in height order."""
        return self._points

    @property
    def segments(self) -> tuple[BezierSegment, ...]:
        """Cubic segments between consecutive control points."""
        return self._segments

    @property
    def min_height(self) -> float:
        """Height of the bottom pole."""
        return self._points[0].y

    @property
    def max_height(self) -> float:
        """Height of the top pole."""
        return self._points[-1].y

    @property
    def height(self) -> float:
        """Distance between the poles."""
        return self.max_height - self.min_height

    @property
    def max_radius(self) -> float:
        """Largest radius of the curve.

        Segments never overshoot their end radii, so this is the largest
        control point radius.
        """
        return max(p.x for p in self._points)

    def radius(self, height: float) -> float:
        """Radius of the profile at a height.

        Heights outside the profile clamp to the nearest pole radius.

        Args:
            height: Height in centimeters

        Returns:
            Radius in centimeters (never negative)
        """
        if height <= self.min_height:
            return self._points[0].x
        if height >= self.max_height:
            return self._points[-1].x

        index = bisect_right(self._starts, height) - 1
        index = min(max(index, 0), len(self._segments) - 1)
        segment = self._segments[index]
        y0, y3 = segment.height_range

        if self._linear[index]:
            t = (height - y0) / (y3 - y0)
        else:
            t = parameter_at_height(segment.points, height)

        return max(0.0, evaluate_cubic(segment.points, t).x)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with control points and segments
        """
        return {
            "points": [p.to_dict() for p in self._points],
            "segments": [s.to_dict() for s in self._segments],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProfileCurve":
        """Deserialize from dictionary.

        Segments are optional; when absent they are rebuilt from the points.

        Args:
            data: Dictionary representation of a profile curve

        Returns:
            ProfileCurve instance
        """
        points = [ControlPoint.from_dict(p) for p in data["points"]]
        segments = data.get("segments")
        if segments is None:
            return cls(points)
        return cls(points, [BezierSegment.from_dict(s) for s in segments])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProfileCurve):
            return NotImplemented
        return self._points == other._points and self._segments == other._segments

    def __hash__(self) -> int:
        return hash((self._points, self._segments))

    def __repr__(self) -> str:
        return (
            f"ProfileCurve(points={len(self._points)}, "
            f"height={self.height:.2f}, max_radius={self.max_radius:.2f})"
        )
