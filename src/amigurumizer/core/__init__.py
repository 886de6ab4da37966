"""Core processing algorithms for amigurumizer.

This module contains the core algorithms for:

- Profile curves (cubic Bezier segments through control points)
- Row sampling (radius at the mid-height of every row)
- Stitch count derivation (circumference to stitches, clamps, row limits)
- Row transition planning (evenly spread increases and decreases)
- Pattern assembly (the row loop and metadata)
- Pattern compression and text rendering

All services are designed to be:
- Stateless between calls
- Pure (no side effects besides logging)

Key functions:
- target_count: Convert a radius into a stitch count
- spread_positions: Evenly spread marks over slots
- generate_pattern: Run the whole pipeline from settings

Key classes:
- ProfileCurve: Piecewise cubic profile with radius(height)
- RowSampler: Samples the profile per row
- StitchCountDeriver: Target stitch count per row
- RowTransitionPlanner: Stitch actions between two counts
- PatternAssembler: Builds CrochetPattern objects
- PatternCompressor: Repeat-aware row instructions
- PatternFormatter: Printable text document
"""

from amigurumizer.core.assembler import PatternAssembler, generate_pattern
from amigurumizer.core.compressor import PatternCompressor
from amigurumizer.core.formatter import PatternFormatter
from amigurumizer.core.planner import RowTransitionPlanner, spread_positions
from amigurumizer.core.profile import ProfileCurve
from amigurumizer.core.sampler import RowSampler
from amigurumizer.core.stitch_count import StitchCountDeriver, target_count

__all__ = [
    # Assembly
    "PatternAssembler",
    "PatternCompressor",
    "PatternFormatter",
    # Profile
    "ProfileCurve",
    "RowSampler",
    "RowTransitionPlanner",
    "StitchCountDeriver",
    "generate_pattern",
    "spread_positions",
    "target_count",
]
