"""Plain-text rendering of crochet patterns."""

import math
from collections.abc import Sequence

from amigurumizer.config import AmigurumizerSettings
from amigurumizer.core.compressor import PatternCompressor
from amigurumizer.domain import STITCH_KEY, CrochetPattern, Gauge, Row


def row_line(row: Row, compressor: PatternCompressor) -> str:
    """Format one row as "Row <n>: <instructions> (<count> stitches total)"."""
    return f"Row {row.row_number}: {compressor.compress(row)} ({row.stitch_count_after} stitches total)"


def group_rows(rows: Sequence[Row]) -> list[list[Row]]:
    """Split rows into runs of consecutive identical rows.

    Rows are identical when they share their actions and their stitch count.
    The first row is worked into the magic ring and always stands alone.

    Args:
        rows: Rows in working order

    Returns:
        Runs of rows, each holding at least one row
    """
    groups: list[list[Row]] = []
    for index, row in enumerate(rows):
        if index > 1 and _same_row(groups[-1][-1], row):
            groups[-1].append(row)
        else:
            groups.append([row])
    return groups


def _same_row(first: Row, second: Row) -> bool:
    return (
        first.stitch_count_after == second.stitch_count_after
        and first.actions == second.actions
    )


def group_line(rows: Sequence[Row], compressor: PatternCompressor) -> str:
    """Format a run of identical rows as "Rows <a>-<b>: ..." or a single row line."""
    if len(rows) == 1:
        return row_line(rows[0], compressor)
    first, last = rows[0], rows[-1]
    return (
        f"Rows {first.row_number}-{last.row_number}: {compressor.compress(first)} "
        f"({first.stitch_count_after} stitches total)"
    )


def format_duration(minutes: float) -> str:
    """Format minutes as "2h 05m" or "45m"."""
    total = round(minutes)
    hours, mins = divmod(total, 60)
    if hours:
        return f"{hours}h {mins:02d}m"
    return f"{mins}m"


class PatternFormatter:
    """Renders a pattern as a printable text document.

    Example:
        formatter = PatternFormatter(settings)
        text = formatter.to_text(pattern, title="Egg")
    """

    def __init__(
        self,
        config: AmigurumizerSettings | None = None,
        compressor: PatternCompressor | None = None,
    ) -> None:
        self.config = config or AmigurumizerSettings()
        self.compressor = compressor or PatternCompressor(
            separator=self.config.output.separator,
            collapse_single_run=self.config.output.collapse_single_run,
        )

    def header_lines(self, pattern: CrochetPattern, gauge: Gauge, title: str) -> list[str]:
        """Build the header block: materials, gauge and finished size."""
        gauge_config = self.config.gauge
        finished_height = pattern.metadata.total_rows * gauge.row_height_cm
        widest_diameter = pattern.max_stitch_count * gauge.stitch_width_cm / math.pi

        underline = "=" * len(title)
        return [
            title,
            underline,
            "",
            "Materials:",
            f"  {gauge_config.yarn_weight.value.capitalize()} weight yarn "
            f"(about {pattern.metadata.yarn_length_meters:.1f} m)",
            f"  {gauge_config.hook_size_mm:.2f} mm crochet hook",
            "  Fiberfill stuffing, stitch marker, tapestry needle",
            "",
            f"Gauge: {gauge.stitches_per_cm:g} sts x {gauge.rows_per_cm:g} rows = 1 cm in sc",
            f"Finished size: about {finished_height:.1f} cm tall, "
            f"{widest_diameter:.1f} cm at the widest",
            f"Rows: {pattern.metadata.total_rows}  Stitches: {pattern.metadata.total_stitches}",
            f"Estimated time: {format_duration(pattern.metadata.estimated_time_minutes)}",
            "",
        ]

    def to_text(
        self,
        pattern: CrochetPattern,
        gauge: Gauge | None = None,
        title: str = "Amigurumi Crochet Pattern",
    ) -> str:
        """Render the full pattern document.

        Args:
            pattern: Pattern to render
            gauge: Gauge used for size figures (settings gauge if None)
            title: Document title

        Returns:
            Text with a trailing newline
        """
        if gauge is None:
            gauge = Gauge(
                stitches_per_cm=self.config.gauge.stitches_per_cm,
                rows_per_cm=self.config.gauge.rows_per_cm,
            )

        lines = self.header_lines(pattern, gauge, title)
        lines.append("--- PATTERN ---")
        lines.append("Work in continuous rounds; mark the first stitch of each round.")
        lines.append("Magic ring (row 1 is worked into the ring)")
        if self.config.output.group_rows:
            lines += [group_line(run, self.compressor) for run in group_rows(pattern.rows)]
        else:
            lines += [row_line(row, self.compressor) for row in pattern.rows]

        lines += [
            "Fasten off, leave a long tail and close the opening.",
            "--- END ---",
            "",
            "Stitch key:",
        ]
        lines += [f"  {abbr:<7}= {meaning}" for abbr, meaning in STITCH_KEY.items()]

        return "\n".join(lines) + "\n"
