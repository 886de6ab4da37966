"""Profile and pattern I/O layer for amigurumizer.

This module handles reading profile files and writing pattern files.
It sits outside the core algorithms, which never touch the file system.

Key responsibilities:
- Load JSON profiles and convert units to centimeters
- Write patterns as JSON (field-for-field) or printable text
- Read JSON patterns back

Key classes:
- ProfileReader: Load profile curves
- PatternWriter: Save generated patterns
"""

from amigurumizer.io.reader import ProfileReader
from amigurumizer.io.writer import PatternWriter, load_pattern

__all__ = [
    "PatternWriter",
    "ProfileReader",
    "load_pattern",
]
