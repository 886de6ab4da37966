"""Pattern assembly: the row-by-row generation pipeline.

This module coordinates the full generation workflow:
sample the profile once per row, derive each row's stitch count, plan the
transition from the previous row, and aggregate the pattern metadata.

Key components:
- PatternAssembler: Orchestrator class, stateless between calls
- generate_pattern: Convenience function using settings only
"""

import time
from collections.abc import Callable

from amigurumizer.config import AmigurumizerSettings
from amigurumizer.core.planner import RowTransitionPlanner
from amigurumizer.core.profile import ProfileCurve
from amigurumizer.core.sampler import RowSampler
from amigurumizer.core.stitch_count import StitchCountDeriver
from amigurumizer.domain import CrochetPattern, Gauge, PatternMetadata, Row, StitchAction
from amigurumizer.exceptions import GenerationCancelledError, RowError
from amigurumizer.utils import GenerationLogger, configure_logging

ProgressCallback = Callable[[int, int], None]
CancelCheck = Callable[[], bool]


class PatternAssembler:
    """Builds crochet patterns from profile curves.

    Manages the complete workflow:
    1. Sample the profile at every row's mid-height
    2. Derive the target stitch count of each row
    3. Plan the actions from the previous row's count
    4. Aggregate totals and production estimates

    The assembler keeps no state between calls; every call returns a new
    CrochetPattern or raises, never a partial pattern.

    Example:
        assembler = PatternAssembler(AmigurumizerSettings())
        pattern = assembler.generate(curve)
    """

    def __init__(self, config: AmigurumizerSettings | None = None) -> None:
        """Initialize the assembler with configuration.

        Args:
            config: Amigurumizer settings (defaults if None)
        """
        self.config = config or AmigurumizerSettings()
        self.logger = configure_logging(
            log_file=self.config.logging.log_file,
            console_level=self.config.logging.log_level,
            file_level=self.config.logging.file_log_level,
        )
        self.sampler = RowSampler(self.config.shaping.smoothing_sigma_rows)
        self.deriver = StitchCountDeriver(self.config.shaping)
        self.planner = RowTransitionPlanner(self.config.shaping.decrease_style)

    def _gauge_from_config(self) -> Gauge:
        return Gauge(
            stitches_per_cm=self.config.gauge.stitches_per_cm,
            rows_per_cm=self.config.gauge.rows_per_cm,
        )

    def calculate_metadata(self, rows: list[Row], gauge: Gauge) -> PatternMetadata:
        """Aggregate totals and estimates for a list of rows.

        Args:
            rows: Generated rows
            gauge: Gauge the rows were generated at

        Returns:
            PatternMetadata for the rows
        """
        estimates = self.config.estimates
        total_stitches = sum(row.stitch_count_after for row in rows)
        yarn_cm_per_stitch = estimates.get_yarn_cm_per_stitch(
            gauge.stitches_per_cm, gauge.rows_per_cm
        )

        return PatternMetadata(
            total_rows=len(rows),
            total_stitches=total_stitches,
            estimated_time_minutes=total_stitches * estimates.seconds_per_stitch / 60.0,
            yarn_length_meters=total_stitches * yarn_cm_per_stitch / 100.0,
        )

    def generate(
        self,
        curve: ProfileCurve,
        gauge: Gauge | None = None,
        total_height_cm: float | None = None,
        starting_stitch_count: int | None = None,
        progress_callback: ProgressCallback | None = None,
        should_cancel: CancelCheck | None = None,
    ) -> CrochetPattern:
        """Generate a crochet pattern for a profile curve.

        Arguments left as None are taken from the settings.

        Args:
            curve: Profile curve in centimeters
            gauge: Stitch and row gauge
            total_height_cm: Height of the finished piece
            starting_stitch_count: Stitches in the magic ring
            progress_callback: Called as (rows_done, total_rows) at checkpoints
            should_cancel: Polled at checkpoints; returning True cancels

        Returns:
            New CrochetPattern

        Raises:
            InvalidProfileError: If the height is not positive
            InvalidGaugeError: If the gauge is not positive
            RowError: If a row cannot be built; carries the row index
            GenerationCancelledError: If should_cancel returned True
        """
        start_time = time.time()
        gauge = gauge or self._gauge_from_config()
        height = self.config.shaping.total_height_cm if total_height_cm is None else total_height_cm
        interval = self.config.processing.checkpoint_interval

        samples = self.sampler.sample(curve, height, gauge.rows_per_cm)
        total = len(samples)
        row_logger = GenerationLogger(self.logger)
        row_logger.stats.start_time = start_time
        row_logger.log_generation_start(total, height)

        rows: list[Row] = []
        previous: int | None = None
        shift = False

        for sample in samples:
            index = sample.row_index
            if index and index % interval == 0:
                row_logger.log_checkpoint(index, total)
                if progress_callback is not None:
                    progress_callback(index, total)
                if should_cancel is not None and should_cancel():
                    row_logger.log_cancelled(index, total - index)
                    raise GenerationCancelledError(index, total - index)

            try:
                count = self.deriver.count_for_row(
                    sample,
                    previous,
                    gauge.stitches_per_cm,
                    is_final=index == total - 1,
                    starting_stitch_count=starting_stitch_count,
                )
                if previous is None:
                    # Magic ring: every stitch is worked into the ring
                    actions = [StitchAction.SINGLE_CROCHET] * count
                else:
                    offset = self.planner.half_spacing(previous, count) if shift else 0
                    actions = self.planner.plan(previous, count, offset)
                    if count != previous and self.config.shaping.stagger_shaping:
                        # Alternate shaping rows start half a spacing later
                        shift = not shift
            except RowError as e:
                row_logger.log_row_error(index, e)
                raise e.at_row(index, sample.height) from e

            row = Row(row_number=index + 1, actions=tuple(actions), stitch_count_after=count)
            row_logger.log_row_planned(
                row.row_number, sample.radius, count, row.increase_count, row.decrease_count
            )
            rows.append(row)
            previous = count

        if progress_callback is not None:
            progress_callback(total, total)

        row_logger.stats.end_time = time.time()
        row_logger.log_generation_complete(row_logger.stats.duration_seconds * 1000)

        return CrochetPattern(rows=tuple(rows), metadata=self.calculate_metadata(rows, gauge))


def generate_pattern(
    curve: ProfileCurve,
    settings: AmigurumizerSettings | None = None,
) -> CrochetPattern:
    """Generate a pattern using settings for every parameter.

    Args:
        curve: Profile curve in centimeters
        settings: Amigurumizer settings (defaults if None)

    Returns:
        New CrochetPattern
    """
    return PatternAssembler(settings).generate(curve)
