"""Utility modules for configuration and logging."""

from src.utils.config import (
    DEFAULT_SAMPLE_RECORDS,
    HMPI_WEIGHTS,
    METAL_NAMES,
    METALS,
    STANDARD_PRESETS,
    WHO_STANDARDS,
)
from src.utils.logging_config import configure_logging, get_logger

__all__ = [
    "METALS",
    "METAL_NAMES",
    "WHO_STANDARDS",
    "STANDARD_PRESETS",
    "HMPI_WEIGHTS",
    "DEFAULT_SAMPLE_RECORDS",
    "configure_logging",
    "get_logger",
]
