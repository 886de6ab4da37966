"""Pattern writer for saving generated patterns.

This module provides the PatternWriter class for writing patterns as
machine-readable JSON or as a printable text document.
"""

import json
from datetime import datetime
from pathlib import Path
from typing import Any

from amigurumizer import __version__
from amigurumizer.config import AmigurumizerSettings
from amigurumizer.core.formatter import PatternFormatter
from amigurumizer.domain import CrochetPattern
from amigurumizer.exceptions import PatternSaveError


def pattern_document(
    pattern: CrochetPattern,
    settings: AmigurumizerSettings,
    name: str | None = None,
) -> dict[str, Any]:
    """Build the JSON document for a pattern.

    The "pattern" entry is the field-for-field serialization of the
    CrochetPattern; the rest records how it was generated.

    Args:
        pattern: Generated pattern
        settings: Settings used to generate it
        name: Optional pattern name

    Returns:
        JSON-serializable dictionary
    """
    return {
        "name": name,
        "generator": {
            "version": __version__,
            "created": datetime.now().strftime("%Y-%m-%dT%H:%M:%S"),
        },
        "settings": settings.model_dump(mode="json", exclude={"logging"}),
        "pattern": pattern.to_dict(),
    }


class PatternWriter:
    """Writes patterns to JSON or text files.

    Example:
        writer = PatternWriter(settings)
        writer.write_text(pattern, Path("egg.txt"), title="Egg")
    """

    def __init__(self, settings: AmigurumizerSettings | None = None) -> None:
        """Initialize the pattern writer.

        Args:
            settings: Settings the patterns were generated with
        """
        self._settings = settings or AmigurumizerSettings()

    def _write(self, output_path: Path, content: str) -> Path:
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise PatternSaveError(str(output_path), str(e)) from e
        return output_path

    def write_json(
        self,
        pattern: CrochetPattern,
        output_path: Path,
        name: str | None = None,
    ) -> Path:
        """Write a pattern as JSON.

        Raises:
            PatternSaveError: If the file cannot be written
        """
        document = pattern_document(pattern, self._settings, name)
        return self._write(output_path, json.dumps(document, indent=2) + "\n")

    def write_text(
        self,
        pattern: CrochetPattern,
        output_path: Path,
        title: str = "Amigurumi Crochet Pattern",
    ) -> Path:
        """Write a pattern as a printable text document.

        Raises:
            PatternSaveError: If the file cannot be written
        """
        text = PatternFormatter(self._settings).to_text(pattern, title=title)
        return self._write(output_path, text)

    @staticmethod
    def get_pattern_path(input_path: Path, extension: str = ".txt") -> Path:
        """Generate output path next to the profile file.

        Converts: egg.json -> egg-pattern.txt

        Args:
            input_path: Profile file path
            extension: Output extension including the dot

        Returns:
            Path with -pattern suffix and the given extension
        """
        return input_path.parent / f"{input_path.stem}-pattern{extension}"


def load_pattern(path: Path) -> CrochetPattern:
    """Load a pattern previously written by PatternWriter.write_json.

    Args:
        path: JSON file path

    Returns:
        CrochetPattern instance
    """
    document = json.loads(path.read_text(encoding="utf-8"))
    return CrochetPattern.from_dict(document["pattern"])
