"""Amigurumizer - Turn revolution profiles into amigurumi crochet patterns.

Amigurumizer takes a 2D profile (radius as a function of height, swept around
a vertical axis) and produces a round-by-round single crochet pattern with
explicit increases and decreases, plus time and yarn estimates.

Example:
    $ amigurumizer egg.json --height 8

This will print the pattern for the profile in egg.json, worked from a
6-stitch magic ring at a gauge of 3 stitches and 3 rows per centimeter.
"""

__version__ = "0.1.0"
__author__ = "Dimosthenis Kaponis"

__all__ = ["__author__", "__version__"]
