"""Internal cubic Bezier evaluation helpers.

This is an internal module containing helper functions for ProfileCurve.
Not intended for public use.
"""

from amigurumizer.domain import ControlPoint

def evaluate_cubic(points: list[ControlPoint], t: float) -> ControlPoint:
    """Evaluate a cubic Bezier curve using the Bernstein form.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        t: Curve parameter in [0, 1]

    Returns:
        Point on the curve at t
    """
    p0, p1, p2, p3 = points
    mt = 1.0 - t

    b0 = mt * mt * mt
    b1 = 3.0 * mt * mt * t
    b2 = 3.0 * mt * t * t
    b3 = t * t * t

    return ControlPoint(
        b0 * p0.x + b1 * p1.x + b2 * p2.x + b3 * p3.x,
        b0 * p0.y + b1 * p1.y + b2 * p2.y + b3 * p3.y,
    )


def parameter_at_height(
    points: list[ControlPoint],
    height: float,
    tolerance: float = 1e-9,
    max_iterations: int = 64,
) -> float:
    """Find the parameter t where a height-monotone cubic reaches a height.

    Uses bisection, so it only requires y(t) to be non-decreasing.

    Args:
        points: List of 4 control points with non-decreasing y
        height: Target height between points[0].y and points[3].y
        tolerance: Stop when the bracket is narrower than this
        max_iterations: Upper bound on bisection steps

    Returns:
        Parameter t in [0, 1]
    """
    low, high = 0.0, 1.0
    if height <= points[0].y:
        return low
    if height >= points[3].y:
        return high

    for _ in range(max_iterations):
        mid = (low + high) / 2
        if evaluate_cubic(points, mid).y < height:
            low = mid
        else:
            high = mid
        if high - low <= tolerance:
            break

    return (low + high) / 2
