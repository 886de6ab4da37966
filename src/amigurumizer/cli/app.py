"""CLI application entry point for amigurumizer.

This module provides the main CLI interface using Typer.
"""

import json
import time
from pathlib import Path
from typing import Annotated

import typer

from amigurumizer import __version__
from amigurumizer.cli.output import (
    console,
    create_progress,
    print_cancellation_notice,
    print_error,
    print_gauge_info,
    print_header,
    print_pattern_text,
    print_profile_info,
    print_row_table,
    print_step,
    print_success,
)
from amigurumizer.config import (
    AmigurumizerSettings,
    DecreaseStyle,
    GaugeConfig,
    LoggingConfig,
    OutputConfig,
    ShapingConfig,
    YarnWeight,
)
from amigurumizer.core import PatternAssembler, PatternFormatter
from amigurumizer.domain import CrochetPattern
from amigurumizer.exceptions import (
    AmigurumizerError,
    GenerationCancelledError,
    PatternSaveError,
    ProfileLoadError,
    RowError,
)
from amigurumizer.io import PatternWriter, ProfileReader
from amigurumizer.io.writer import pattern_document

OUTPUT_FORMATS = ("text", "json")

# Create the Typer app
app = typer.Typer(
    name="amigurumizer",
    help="Turn revolution profiles into round-by-round amigurumi crochet patterns.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Amigurumizer[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def generate(
    profile: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON profile file (control points in cm, mm or in)",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Write the pattern to this file instead of the console",
        ),
    ] = None,
    output_format: Annotated[
        str,
        typer.Option(
            "--format",
            "-f",
            help="Output format (text|json)",
        ),
    ] = "text",
    height: Annotated[
        float | None,
        typer.Option(
            "--height",
            "-H",
            help="Finished height in cm (default: profile height)",
        ),
    ] = None,
    stitches_per_cm: Annotated[
        float,
        typer.Option(
            "--stitches-per-cm",
            "-s",
            help="Stitch gauge (stitches per cm)",
        ),
    ] = 3.0,
    rows_per_cm: Annotated[
        float,
        typer.Option(
            "--rows-per-cm",
            "-r",
            help="Row gauge (rows per cm)",
        ),
    ] = 3.0,
    start: Annotated[
        int,
        typer.Option(
            "--start",
            help="Stitches in the magic ring",
            min=1,
            max=24,
        ),
    ] = 6,
    decrease_style: Annotated[
        str,
        typer.Option(
            "--decrease-style",
            "-d",
            help="Decrease style (invisible|standard)",
        ),
    ] = "invisible",
    no_limit: Annotated[
        bool,
        typer.Option(
            "--no-limit",
            help="Do not limit rows to doubling/halving; report impossible rows instead",
        ),
    ] = False,
    no_stagger: Annotated[
        bool,
        typer.Option(
            "--no-stagger",
            help="Start every shaping row at the same place",
        ),
    ] = False,
    no_group_rows: Annotated[
        bool,
        typer.Option(
            "--no-group-rows",
            help="Write every row on its own line",
        ),
    ] = False,
    collapse_runs: Annotated[
        bool,
        typer.Option(
            "--collapse-runs",
            help="Write rows of one repeated stitch as \"94 sc\"",
        ),
    ] = False,
    hook: Annotated[
        float,
        typer.Option(
            "--hook",
            help="Hook size in mm (materials list)",
            min=0.5,
            max=25.0,
        ),
    ] = 3.5,
    yarn_weight: Annotated[
        str,
        typer.Option(
            "--yarn-weight",
            help="Yarn weight (lace|fingering|sport|worsted|bulky)",
        ),
    ] = "worsted",
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Generate an amigurumi pattern from a revolution profile.

    The profile is a list of (radius, height) control points whose first and
    last points lie on the axis. The pattern starts with a magic ring and
    follows the profile row by row.

    Example:
        amigurumizer egg.json -o egg.txt

    This will write a printable pattern for egg.json to egg.txt.
    """
    # Validate mutually exclusive options
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    # Validate input file exists
    if not profile.exists():
        print_error(
            f"Input file not found: {profile}",
            details=f"The file '{profile}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if not profile.is_file():
        print_error(
            f"Input path is not a file: {profile}",
            details="Please provide a path to a JSON profile file.",
        )
        raise typer.Exit(code=1)

    output_format = output_format.lower()
    if output_format not in OUTPUT_FORMATS:
        print_error(
            f"Invalid format: {output_format}",
            details=f"Valid values: {', '.join(OUTPUT_FORMATS)}",
        )
        raise typer.Exit(code=1)

    try:
        style = DecreaseStyle(decrease_style.lower())
        weight = YarnWeight(yarn_weight.lower())
    except ValueError as e:
        print_error(
            str(e),
            details="Decrease styles: invisible, standard. "
            "Yarn weights: lace, fingering, sport, worsted, bulky",
        )
        raise typer.Exit(code=1)

    # Print header
    if not quiet:
        print_header(__version__)

    completed_rows = 0

    try:
        if not quiet:
            print_step("Loading profile")

        with ProfileReader(profile) as reader:
            curve = reader.curve
            name = reader.name

        total_height = curve.height if height is None else height

        if not quiet:
            print_profile_info(str(profile), len(curve.points), curve.height, curve.max_radius)
            print_gauge_info(stitches_per_cm, rows_per_cm, total_height)

        # Create settings from CLI arguments
        settings = AmigurumizerSettings(
            gauge=GaugeConfig(
                stitches_per_cm=stitches_per_cm,
                rows_per_cm=rows_per_cm,
                hook_size_mm=hook,
                yarn_weight=weight,
            ),
            shaping=ShapingConfig(
                total_height_cm=total_height,
                starting_stitch_count=start,
                limit_row_change=not no_limit,
                stagger_shaping=not no_stagger,
                decrease_style=style,
            ),
            output=OutputConfig(group_rows=not no_group_rows, collapse_single_run=collapse_runs),
            logging=LoggingConfig(
                log_file=log_file,
                log_level=log_level if not quiet else "WARNING",
            ),
        )

        assembler = PatternAssembler(settings)
        start_time = time.time()

        if not quiet:
            print_step("Generating rows")
            with create_progress() as progress:
                task_id = progress.add_task("Rows", total=None)

                def update_progress(done: int, total: int) -> None:
                    nonlocal completed_rows
                    completed_rows = done
                    progress.update(task_id, completed=done, total=total)

                pattern = assembler.generate(curve, progress_callback=update_progress)
        else:
            pattern = assembler.generate(curve)

        elapsed = time.time() - start_time

        _emit_pattern(pattern, settings, name, output, output_format, quiet, verbose)

        if not quiet:
            print_success(
                output_path=str(output) if output is not None else None,
                total_time_s=elapsed,
                rows=pattern.metadata.total_rows,
                stitches=pattern.metadata.total_stitches,
                estimated_minutes=pattern.metadata.estimated_time_minutes,
                yarn_meters=pattern.metadata.yarn_length_meters,
            )

    except KeyboardInterrupt:
        if not quiet:
            print_cancellation_notice(completed_rows, 0)
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    except GenerationCancelledError as e:
        if not quiet:
            print_cancellation_notice(e.completed_rows, e.pending_rows)
        raise typer.Exit(code=130) from None
    except ProfileLoadError as e:
        print_error(f"Could not load profile: {e.reason}")
        raise typer.Exit(code=1)
    except PatternSaveError as e:
        print_error(f"Could not save pattern: {e.reason}")
        raise typer.Exit(code=1)
    except RowError as e:
        details = None
        if e.height_cm is not None:
            details = f"Adjust the profile near {e.height_cm:.2f} cm or change the gauge."
        print_error(str(e), details=details)
        raise typer.Exit(code=1)
    except AmigurumizerError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        # Re-raise typer.Exit to allow clean exits
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)


def _emit_pattern(
    pattern: CrochetPattern,
    settings: AmigurumizerSettings,
    name: str,
    output: Path | None,
    output_format: str,
    quiet: bool,
    verbose: bool,
) -> None:
    """Write the pattern to a file or the console.

    Args:
        pattern: Generated pattern
        settings: Settings used to generate it
        name: Pattern name (profile name)
        output: Output file, or None for the console
        output_format: "text" or "json"
        quiet: Suppress extra console output
        verbose: Show the row table as well
    """
    writer = PatternWriter(settings)
    title = f"{name.replace('_', ' ').replace('-', ' ').title()} Amigurumi"

    if output is not None:
        if not quiet:
            print_step(f"Writing {output_format}")
        if output_format == "json":
            writer.write_json(pattern, output, name=name)
        else:
            writer.write_text(pattern, output, title=title)
        if verbose:
            print_row_table(pattern, PatternFormatter(settings).compressor)
        return

    if output_format == "json":
        console.print_json(json.dumps(pattern_document(pattern, settings, name)))
        return

    if not quiet:
        print_step("Pattern")
    print_pattern_text(PatternFormatter(settings).to_text(pattern, title=title))


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
