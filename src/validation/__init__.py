"""Validation of incoming sample records."""

from src.validation.sample_validator import (
    ValidationResult,
    ValidationSeverity,
    validate_sample_record,
    validate_sample_records,
)

__all__ = [
    "ValidationResult",
    "ValidationSeverity",
    "validate_sample_record",
    "validate_sample_records",
]
