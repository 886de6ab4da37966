"""Repeat-aware row instruction compression.

A row is written either as a repeat of its shortest period,
"[1 sc, 1 inc] repeat 6 times", or, when it has no period, as run-length
encoded groups, "3 sc, 1 inc, 4 sc". A row of one repeated stitch is a
repeat too, "[1 sc] repeat 94 times", unless `collapse_single_run` is set.
Actions are compared by tag only.
"""

import re
from collections.abc import Sequence
from itertools import groupby

from amigurumizer.domain import Row, StitchAction
from amigurumizer.exceptions import PatternFormatError

_REPEAT_RE = re.compile(r"^\[(?P<body>[^\[\]]+)\]\s+repeat\s+(?P<times>\d+)\s+times?$")
_GROUP_RE = re.compile(r"(?P<count>\d+)\s+(?P<tag>[a-zA-Z]+)")
_SEPARATOR_FORBIDDEN_RE = re.compile(r"[\w\[\]]")


def run_length_groups(actions: Sequence[StitchAction]) -> list[tuple[int, StitchAction]]:
    """Group consecutive equal actions.

    Args:
        actions: Stitch actions

    Returns:
        List of (count, action) tuples in order
    """
    return [(len(list(group)), action) for action, group in groupby(actions)]


def smallest_period(actions: Sequence[StitchAction]) -> int | None:
    """Find the shortest prefix the sequence is an exact repeat of.

    Args:
        actions: Stitch actions

    Returns:
        Period length p with 1 <= p <= len/2 and len % p == 0, or None
    """
    n = len(actions)
    for period in range(1, n // 2 + 1):
        if n % period:
            continue
        if all(actions[i] is actions[i % period] for i in range(period, n)):
            return period
    return None


class PatternCompressor:
    """Writes row actions as short, human-readable instructions.

    Example:
        compressor = PatternCompressor()
        compressor.compress(row)  # "[1 inc, 1 sc] repeat 6 times"
    """

    def __init__(self, separator: str = ", ", collapse_single_run: bool = False) -> None:
        """Initialize the compressor.

        Args:
            separator: Text placed between run-length groups
            collapse_single_run: Write a row of one repeated stitch as "94 sc"

        Raises:
            ValueError: If the separator is empty or holds letters, digits or brackets
        """
        if not separator or _SEPARATOR_FORBIDDEN_RE.search(separator):
            raise ValueError(f"Invalid group separator: {separator!r}")
        self.separator = separator
        self.collapse_single_run = collapse_single_run

    def _groups_text(self, actions: Sequence[StitchAction]) -> str:
        return self.separator.join(
            f"{count} {action.abbreviation}" for count, action in run_length_groups(actions)
        )

    def compress(self, row: Row | Sequence[StitchAction]) -> str:
        """Compress a row's actions into instruction text.

        Args:
            row: Row or action sequence

        Returns:
            Instruction text
        """
        actions = list(row.actions if isinstance(row, Row) else row)
        if not actions:
            return ""

        if self.collapse_single_run and len(run_length_groups(actions)) == 1:
            return self._groups_text(actions)

        period = smallest_period(actions)
        if period is not None:
            repeats = len(actions) // period
            return f"[{self._groups_text(actions[:period])}] repeat {repeats} times"

        return self._groups_text(actions)

    def _parse_groups(self, text: str, source: str) -> list[StitchAction]:
        actions: list[StitchAction] = []
        gap_start = 0
        for index, match in enumerate(_GROUP_RE.finditer(text)):
            gap = text[gap_start : match.start()].strip()
            expected = "" if index == 0 else self.separator.strip()
            if gap != expected:
                raise PatternFormatError(
                    source, f"expected '{expected}' before '{match[0]}', found '{gap}'"
                )
            try:
                action = StitchAction.from_abbreviation(match["tag"])
            except ValueError:
                raise PatternFormatError(source, f"unknown stitch '{match['tag']}'") from None
            actions.extend([action] * int(match["count"]))
            gap_start = match.end()

        rest = text[gap_start:].strip()
        if rest or gap_start == 0:
            raise PatternFormatError(source, f"bad stitch group '{rest or text}'")
        return actions

    def expand(self, text: str) -> list[StitchAction]:
        """Expand instruction text back into the action sequence.

        Args:
            text: Text produced by compress()

        Returns:
            Ordered stitch actions

        Raises:
            PatternFormatError: If the text is not valid instruction text
        """
        text = text.strip()
        if not text:
            return []

        match = _REPEAT_RE.match(text)
        if match is not None:
            body = self._parse_groups(match["body"], text)
            return body * int(match["times"])

        return self._parse_groups(text, text)
