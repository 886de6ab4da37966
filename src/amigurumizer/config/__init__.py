"""Configuration management for amigurumizer.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- GaugeConfig: Gauge and materials
- ShapingConfig: Stitch count derivation settings
- EstimateConfig: Time and yarn heuristics
- OutputConfig: Pattern text settings
- ProcessingConfig: Row loop settings
- LoggingConfig: Logging settings
- AmigurumizerSettings: Main application settings
"""

from amigurumizer.config.settings import (
    AmigurumizerSettings,
    DecreaseStyle,
    EstimateConfig,
    GaugeConfig,
    LoggingConfig,
    OutputConfig,
    ProcessingConfig,
    ShapingConfig,
    YarnWeight,
    get_default_settings,
)

__all__ = [
    "AmigurumizerSettings",
    "DecreaseStyle",
    "EstimateConfig",
    "GaugeConfig",
    "LoggingConfig",
    "OutputConfig",
    "ProcessingConfig",
    "ShapingConfig",
    "YarnWeight",
    "get_default_settings",
]
