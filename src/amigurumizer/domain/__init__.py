"""Domain models for amigurumizer.

This module contains the core domain models representing profiles, gauge,
stitches and patterns. All models are designed to be:

- Immutable (using frozen dataclasses)
- Serializable field-for-field for import/export collaborators
- Independent of the algorithms that produce them

Key classes:
- ControlPoint: A profile point in (radius, height) space
- BezierSegment: One cubic piece of a profile curve
- Gauge: Stitch and row density
- StitchAction: The closed set of stitch actions
- RowSample: Profile radius sampled for a row
- Row: One round of the pattern
- CrochetPattern: The complete pattern with metadata
"""

from amigurumizer.domain.gauge import Gauge
from amigurumizer.domain.pattern import CrochetPattern, PatternMetadata, Row, RowSample
from amigurumizer.domain.profile import BezierSegment, ControlPoint
from amigurumizer.domain.stitch import STITCH_KEY, StitchAction

__all__: list[str] = [
    # Enums
    "StitchAction",
    "STITCH_KEY",
    # Core types
    "ControlPoint",
    "BezierSegment",
    "Gauge",
    "RowSample",
    "Row",
    "PatternMetadata",
    "CrochetPattern",
]
