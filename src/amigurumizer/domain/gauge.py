"""Gauge: the stitch and row density of a yarn/hook/tension combination."""

import math
from dataclasses import dataclass
from typing import Any

from amigurumizer.exceptions import InvalidGaugeError


@dataclass(frozen=True, slots=True)
class Gauge:
    """Stitch and row density used to convert centimeters into stitches.

    Attributes:
        stitches_per_cm: Stitches per centimeter of circumference
        rows_per_cm: Rows per centimeter of height

    Raises:
        InvalidGaugeError: If either value is not a positive finite number
    """

    stitches_per_cm: float
    rows_per_cm: float

    def __post_init__(self) -> None:
        for name in ("stitches_per_cm", "rows_per_cm"):
            value = getattr(self, name)
            if not math.isfinite(value) or value <= 0:
                raise InvalidGaugeError(name, value)

    @property
    def stitch_width_cm(self) -> float:
        """Width of one stitch."""
        return 1.0 / self.stitches_per_cm

    @property
    def row_height_cm(self) -> float:
        """Height of one row."""
        return 1.0 / self.rows_per_cm

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "stitches_per_cm": self.stitches_per_cm,
            "rows_per_cm": self.rows_per_cm,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Gauge":
        """Deserialize from dictionary."""
        return cls(
            stitches_per_cm=float(data["stitches_per_cm"]),
            rows_per_cm=float(data["rows_per_cm"]),
        )
