"""Geometric types for revolution profiles.

This module defines the data types a profile curve is made of:
- ControlPoint: A point of the profile in (radius, height) space
- BezierSegment: One cubic Bezier piece of the profile
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class ControlPoint:
    """A profile point in centimeters.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: Radius, i.e. horizontal offset from the axis of revolution
        y: Height along the axis of revolution
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ControlPoint":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            ControlPoint instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class BezierSegment:
    """A cubic Bezier segment between two profile control points.

    Attributes:
        p0: Start point (a profile control point)
        p1: First handle
        p2: Second handle
        p3: End point (the next profile control point)
    """

    p0: ControlPoint
    p1: ControlPoint
    p2: ControlPoint
    p3: ControlPoint

    @property
    def points(self) -> list[ControlPoint]:
        """The four Bezier control points in order."""
        return [self.p0, self.p1, self.p2, self.p3]

    @property
    def height_range(self) -> tuple[float, float]:
        """Heights of the segment's start and end points."""
        return (self.p0.y, self.p3.y)

    def contains_height(self, height: float) -> bool:
        """Check whether a height lies within this segment (inclusive)."""
        return self.p0.y <= height <= self.p3.y

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with the four control points
        """
        return {
            "p0": self.p0.to_dict(),
            "p1": self.p1.to_dict(),
            "p2": self.p2.to_dict(),
            "p3": self.p3.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BezierSegment":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with p0..p3 fields

        Returns:
            BezierSegment instance
        """
        return cls(
            p0=ControlPoint.from_dict(data["p0"]),
            p1=ControlPoint.from_dict(data["p1"]),
            p2=ControlPoint.from_dict(data["p2"]),
            p3=ControlPoint.from_dict(data["p3"]),
        )
