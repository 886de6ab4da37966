"""Profile reader for loading profile curves from JSON files.

This module provides the ProfileReader class for loading profile files
written by a curve editor and converting them into ProfileCurve objects.

File format:
    {
        "units": "cm",
        "points": [{"x": 0, "y": 0}, {"x": 5, "y": 1}, ...]
    }

"points" may also be a list of [x, y] pairs; "units" is one of cm, mm, in
and defaults to cm.
"""

import json
from pathlib import Path
from typing import Any

from amigurumizer.core.profile import ProfileCurve
from amigurumizer.domain import ControlPoint
from amigurumizer.exceptions import ProfileLoadError

# Conversion factors to centimeters
UNIT_SCALE: dict[str, float] = {
    "cm": 1.0,
    "mm": 0.1,
    "in": 2.54,
}


def _parse_point(raw: Any, scale: float) -> ControlPoint:
    if isinstance(raw, dict):
        x, y = raw["x"], raw["y"]
    else:
        x, y = raw
    return ControlPoint(float(x) * scale, float(y) * scale)


def profile_from_data(data: dict[str, Any]) -> ProfileCurve:
    """Build a profile curve from decoded profile file data.

    Args:
        data: Decoded JSON object with "points" and optional "units"

    Returns:
        ProfileCurve in centimeters

    Raises:
        ValueError: If the units are unknown or points are malformed
        InvalidProfileError: If the points do not form a valid profile
    """
    units = str(data.get("units", "cm")).lower()
    if units not in UNIT_SCALE:
        raise ValueError(f"unknown units '{units}' (expected one of {', '.join(UNIT_SCALE)})")

    raw_points = data.get("points")
    if not isinstance(raw_points, list):
        raise ValueError("'points' must be a list")

    try:
        points = [_parse_point(raw, UNIT_SCALE[units]) for raw in raw_points]
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"malformed control point: {e}") from e

    return ProfileCurve(points)


class ProfileReader:
    """Loads profile files and builds profile curves.

    Example:
        with ProfileReader(Path("egg.json")) as reader:
            curve = reader.curve
    """

    def __init__(self, profile_path: Path) -> None:
        """Initialize the profile reader.

        Args:
            profile_path: Path to the JSON profile file
        """
        self._profile_path = profile_path
        self._data: dict[str, Any] | None = None
        self._curve: ProfileCurve | None = None

    def load(self) -> None:
        """Load and validate the profile file.

        Raises:
            FileNotFoundError: If the profile file does not exist
            ProfileLoadError: If the file is not a valid profile
            InvalidProfileError: If the points do not form a valid profile
        """
        if not self._profile_path.exists():
            raise FileNotFoundError(f"Profile file not found: {self._profile_path}")

        try:
            data = json.loads(self._profile_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ProfileLoadError(str(self._profile_path), f"invalid JSON: {e}") from e

        if not isinstance(data, dict):
            raise ProfileLoadError(str(self._profile_path), "expected a JSON object")

        try:
            self._curve = profile_from_data(data)
        except ValueError as e:
            raise ProfileLoadError(str(self._profile_path), str(e)) from e
        self._data = data

    @property
    def curve(self) -> ProfileCurve:
        """Return the loaded profile curve.

        Raises:
            RuntimeError: If the profile has not been loaded yet
        """
        if self._curve is None:
            raise RuntimeError("Profile not loaded. Call load() first.")
        return self._curve

    @property
    def name(self) -> str:
        """Return the profile name ("name" field, or the file stem).

        Raises:
            RuntimeError: If the profile has not been loaded yet
        """
        if self._data is None:
            raise RuntimeError("Profile not loaded. Call load() first.")
        return str(self._data.get("name") or self._profile_path.stem)

    def close(self) -> None:
        """Release the loaded data."""
        self._data = None
        self._curve = None

    def __enter__(self) -> "ProfileReader":
        """Context manager entry."""
        self.load()
        return self

    def __exit__(self, _exc_type: object, _exc_val: object, _exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
