"""Row sampling of a profile curve.

Rows are sampled at their mid-height: row i of a piece worked at r rows per
centimeter is sampled at base + (i + 0.5) / r, where base is the height of
the profile's bottom pole.
"""

import math

from amigurumizer.core.profile import MIN_CONTROL_POINTS, ProfileCurve
from amigurumizer.domain import RowSample
from amigurumizer.exceptions import InvalidGaugeError, InvalidProfileError


def row_count(total_height_cm: float, rows_per_cm: float) -> int:
    """Number of rows needed for a height at a row gauge."""
    return max(1, round(total_height_cm * rows_per_cm))


def gaussian_smooth(values: list[float], sigma: float) -> list[float]:
    """Smooth values with a normalized Gaussian kernel.

    Indices beyond either end are clamped to the end values.

    Args:
        values: Values to smooth
        sigma: Kernel standard deviation in samples (<= 0 returns a copy)

    Returns:
        Smoothed values, same length as the input
    """
    if sigma <= 0 or len(values) <= 2:
        return list(values)

    half_width = max(1, math.ceil(3.0 * sigma))
    kernel = [math.exp(-(k * k) / (2.0 * sigma * sigma)) for k in range(-half_width, half_width + 1)]
    total = sum(kernel)
    kernel = [k / total for k in kernel]

    last = len(values) - 1
    smoothed = []
    for i in range(len(values)):
        acc = 0.0
        for offset, weight in zip(range(-half_width, half_width + 1), kernel):
            acc += values[min(max(i + offset, 0), last)] * weight
        smoothed.append(acc)

    return smoothed


class RowSampler:
    """Samples a profile curve once per row.

    Example:
        sampler = RowSampler()
        samples = sampler.sample(curve, total_height_cm=10, rows_per_cm=3)
    """

    def __init__(self, smoothing_sigma_rows: float = 0.0) -> None:
        """Initialize the sampler.

        Args:
            smoothing_sigma_rows: Gaussian smoothing of sampled radii in rows
        """
        self.smoothing_sigma_rows = smoothing_sigma_rows

    def sample(
        self,
        curve: ProfileCurve,
        total_height_cm: float,
        rows_per_cm: float,
    ) -> list[RowSample]:
        """Sample the curve at the mid-height of every row.

        Args:
            curve: Profile curve
            total_height_cm: Height of the finished piece
            rows_per_cm: Row gauge

        Returns:
            One RowSample per row, in working order

        Raises:
            InvalidProfileError: If the height is not positive or the curve
                has too few control points
            InvalidGaugeError: If rows_per_cm is not positive
        """
        if not math.isfinite(total_height_cm) or total_height_cm <= 0:
            raise InvalidProfileError(f"total height must be positive, got {total_height_cm}")
        if len(curve.points) < MIN_CONTROL_POINTS:
            raise InvalidProfileError(
                f"need at least {MIN_CONTROL_POINTS} control points, got {len(curve.points)}"
            )
        if not math.isfinite(rows_per_cm) or rows_per_cm <= 0:
            raise InvalidGaugeError("rows_per_cm", rows_per_cm)

        count = row_count(total_height_cm, rows_per_cm)
        heights = [curve.min_height + (i + 0.5) / rows_per_cm for i in range(count)]
        radii = [curve.radius(h) for h in heights]
        radii = gaussian_smooth(radii, self.smoothing_sigma_rows)

        return [
            RowSample(row_index=i, height=h, radius=max(0.0, r))
            for i, (h, r) in enumerate(zip(heights, radii))
        ]
