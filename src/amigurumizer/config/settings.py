"""Configuration settings for Amigurumizer."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class DecreaseStyle(str, Enum):
    """How decreases are worked."""

    INVISIBLE = "invisible"
    STANDARD = "standard"


class YarnWeight(str, Enum):
    """Yarn weight category, used for the materials list."""

    LACE = "lace"
    FINGERING = "fingering"
    SPORT = "sport"
    WORSTED = "worsted"
    BULKY = "bulky"


class GaugeConfig(BaseModel):
    """Gauge and materials for the yarn/hook/tension combination.

    Stitch and row densities are deliberately unbounded here; out-of-range
    values are reported as InvalidGaugeError when a Gauge is built from them.
    """

    stitches_per_cm: float = Field(
        default=3.0,
        description="Single crochet stitches per centimeter of circumference",
    )
    rows_per_cm: float = Field(
        default=3.0,
        description="Rows (rounds) per centimeter of height",
    )
    hook_size_mm: float = Field(
        default=3.5,
        gt=0.0,
        le=25.0,
        description="Hook size in millimeters (materials list only)",
    )
    yarn_weight: YarnWeight = Field(
        default=YarnWeight.WORSTED,
        description="Yarn weight category (materials list only)",
    )


class ShapingConfig(BaseModel):
    """Configuration for turning radii into stitch counts."""

    total_height_cm: float = Field(
        default=10.0,
        description="Height of the finished piece in centimeters",
    )
    starting_stitch_count: int = Field(
        default=6,
        ge=1,
        le=24,
        description="Stitches worked into the magic ring",
    )
    min_stitch_count: int = Field(
        default=6,
        ge=1,
        description="Smallest stitch count for every row except the last",
    )
    closing_min_stitch_count: int = Field(
        default=3,
        ge=1,
        description="Smallest stitch count allowed on the final closing row",
    )
    limit_row_change: bool = Field(
        default=True,
        description="Limit each row to at most doubling or halving the previous row",
    )
    decrease_style: DecreaseStyle = Field(
        default=DecreaseStyle.INVISIBLE,
        description="Decrease style used on decrease rows",
    )
    smoothing_sigma_rows: float = Field(
        default=0.0,
        ge=0.0,
        le=10.0,
        description="Gaussian smoothing of sampled radii, in rows (0 disables)",
    )
    stagger_shaping: bool = Field(
        default=True,
        description="Shift increases and decreases by half a spacing on alternate shaping rows",
    )


class EstimateConfig(BaseModel):
    """Heuristic constants for time and yarn estimates.

    These are rules of thumb, not calibrated measurements.
    """

    seconds_per_stitch: float = Field(
        default=3.0,
        gt=0.0,
        description="Average time to work one stitch",
    )
    yarn_cm_per_stitch: float | None = Field(
        default=None,
        gt=0.0,
        description="Yarn used per stitch in cm (None = derive from gauge)",
    )
    yarn_factor: float = Field(
        default=2.5,
        gt=0.0,
        description="Yarn per stitch as a multiple of stitch width plus height",
    )

    def get_yarn_cm_per_stitch(self, stitches_per_cm: float, rows_per_cm: float) -> float:
        """Get yarn length per stitch, deriving it from gauge when not set.

        Args:
            stitches_per_cm: Horizontal gauge
            rows_per_cm: Vertical gauge

        Returns:
            Yarn length per stitch in centimeters
        """
        if self.yarn_cm_per_stitch is not None:
            return self.yarn_cm_per_stitch
        return self.yarn_factor * (1.0 / stitches_per_cm + 1.0 / rows_per_cm)


class OutputConfig(BaseModel):
    """Configuration for the printable pattern text."""

    group_rows: bool = Field(
        default=True,
        description='Write runs of identical rows as one "Rows a-b" line',
    )
    collapse_single_run: bool = Field(
        default=False,
        description='Write a row of one repeated stitch as "94 sc" instead of a repeat',
    )
    separator: str = Field(
        default=", ",
        pattern=r"^[^\w\[\]]+$",
        description="Text placed between stitch groups",
    )


class ProcessingConfig(BaseModel):
    """Configuration for the row loop."""

    checkpoint_interval: int = Field(
        default=25,
        ge=1,
        description="Rows between progress/cancellation checkpoints",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class AmigurumizerSettings(BaseModel):
    """Main application settings."""

    gauge: GaugeConfig = Field(default_factory=GaugeConfig)
    shaping: ShapingConfig = Field(default_factory=ShapingConfig)
    estimates: EstimateConfig = Field(default_factory=EstimateConfig)
    processing: ProcessingConfig = Field(default_factory=ProcessingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> AmigurumizerSettings:
    """Get default application settings."""
    return AmigurumizerSettings()
