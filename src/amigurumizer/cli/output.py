"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""


from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from amigurumizer.core.compressor import PatternCompressor
from amigurumizer.domain import CrochetPattern

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for row generation.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Amigurumizer[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_profile_info(
    profile_path: str, point_count: int, height_cm: float, max_radius_cm: float
) -> None:
    """Print profile information.

    Args:
        profile_path: Path to the profile file
        point_count: Number of control points
        height_cm: Pole-to-pole height
        max_radius_cm: Largest radius
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(profile_path)
    console.print(line1)
    console.print(
        f"  {point_count} points {SYM_DOT} {height_cm:.1f} cm tall {SYM_DOT} "
        f"{2 * max_radius_cm:.1f} cm wide"
    )


def print_gauge_info(stitches_per_cm: float, rows_per_cm: float, total_height_cm: float) -> None:
    """Print gauge and target size.

    Args:
        stitches_per_cm: Stitch gauge
        rows_per_cm: Row gauge
        total_height_cm: Target height
    """
    console.print(
        f"  {stitches_per_cm:g} sts/cm {SYM_DOT} {rows_per_cm:g} rows/cm {SYM_DOT} "
        f"{total_height_cm:g} cm"
    )


def print_row_table(pattern: CrochetPattern, compressor: PatternCompressor) -> None:
    """Print the rows as a table.

    Args:
        pattern: Generated pattern
        compressor: Compressor used for the instruction column
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Row", justify="right")
    table.add_column("Instructions")
    table.add_column("Sts", justify="right")

    for row in pattern.rows:
        table.add_row(
            str(row.row_number),
            Text(compressor.compress(row)),
            str(row.stitch_count_after),
        )

    console.print(table)


def print_pattern_text(text: str) -> None:
    """Print a rendered pattern document without markup processing.

    Args:
        text: Rendered pattern text
    """
    console.print(Text(text.rstrip("\n")))


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_success(
    output_path: str | None,
    total_time_s: float,
    rows: int,
    stitches: int,
    estimated_minutes: float,
    yarn_meters: float,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file, or None when printed to console
        total_time_s: Total generation time in seconds
        rows: Number of rows
        stitches: Total number of stitches
        estimated_minutes: Estimated crochet time
        yarn_meters: Estimated yarn length
    """
    time_str = _format_time(total_time_s)

    # Success header
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    # Output file info
    if output_path is not None:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    # Stats line
    console.print(f"  {rows} rows {SYM_DOT} {stitches} stitches")
    console.print(
        f"  ~{estimated_minutes / 60:.1f} h to crochet {SYM_DOT} ~{yarn_meters:.1f} m of yarn"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")


def print_cancellation_notice(completed: int, pending: int) -> None:
    """Print cancellation summary.

    Args:
        completed: Rows generated before cancellation
        pending: Rows not generated
    """
    console.print(f"\n{SYM_DOT} [bold]Cancelled[/bold]")
    console.print(f"  {completed} rows completed {SYM_DOT} {pending} rows pending")
    console.print("  No pattern created")
