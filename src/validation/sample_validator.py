"""Record-level validation for incoming water sample rows."""

from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel

from src.hmpi.engine import is_finite_number, validate_panel
from src.utils.config import METALS


class ValidationSeverity(str, Enum):
    """Severity levels for validation results."""

    OK = "ok"
    WARNING = "warning"
    CRITICAL = "critical"


class ValidationResult(BaseModel):
    """Result of a validation check."""

    valid: bool
    severity: ValidationSeverity
    message: str
    field: str | None = None


def _check_coordinates(coordinates: object) -> list[ValidationResult]:
    if not isinstance(coordinates, Mapping):
        return [
            ValidationResult(
                valid=False,
                severity=ValidationSeverity.CRITICAL,
                message="Coordinates are missing",
                field="coordinates",
            )
        ]

    results = []
    for key, limit in (("lat", 90.0), ("lng", 180.0)):
        value = coordinates.get(key)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            results.append(
                ValidationResult(
                    valid=False,
                    severity=ValidationSeverity.CRITICAL,
                    message=f"Coordinate '{key}' is missing or not a number",
                    field=f"coordinates.{key}",
                )
            )
        elif not -limit <= value <= limit:
            results.append(
                ValidationResult(
                    valid=False,
                    severity=ValidationSeverity.CRITICAL,
                    message=f"Coordinate '{key}' value {value} is outside [-{limit}, {limit}]",
                    field=f"coordinates.{key}",
                )
            )
    return results


def _check_metals(metals: object) -> list[ValidationResult]:
    if validate_panel(metals):
        return []

    if not isinstance(metals, Mapping):
        return [
            ValidationResult(
                valid=False,
                severity=ValidationSeverity.CRITICAL,
                message="Metal panel is missing",
                field="metals",
            )
        ]

    results = []
    for metal in METALS:
        value = metals.get(metal)
        if is_finite_number(value) and value >= 0:
            continue
        reason = "missing" if metal not in metals else f"invalid ({metals[metal]!r})"
        results.append(
            ValidationResult(
                valid=False,
                severity=ValidationSeverity.CRITICAL,
                message=f"Concentration for '{metal}' is {reason}",
                field=f"metals.{metal}",
            )
        )
    return results


def validate_sample_record(record: dict) -> tuple[bool, list[ValidationResult]]:
    """Validate a raw sample record before it is scored.

    Args:
        record: Raw sample dict (location, coordinates, metals, ...)

    Returns:
        Tuple of (is_valid, list of validation results)
    """
    results: list[ValidationResult] = []

    location = record.get("location")
    if not isinstance(location, str) or not location.strip():
        results.append(
            ValidationResult(
                valid=False,
                severity=ValidationSeverity.CRITICAL,
                message="Location is missing",
                field="location",
            )
        )

    results.extend(_check_coordinates(record.get("coordinates")))
    results.extend(_check_metals(record.get("metals")))

    if not results:
        results.append(
            ValidationResult(
                valid=True,
                severity=ValidationSeverity.OK,
                message="Sample record is complete",
            )
        )
        return True, results

    return False, results


def validate_sample_records(records: list[dict]) -> tuple[bool, list[ValidationResult]]:
    """Validate a batch of raw sample records.

    Args:
        records: List of raw sample dicts

    Returns:
        Tuple of (all_valid, list of failed validation results)
    """
    results: list[ValidationResult] = []

    for i, record in enumerate(records):
        valid, record_results = validate_sample_record(record)
        if valid:
            continue
        for r in record_results:
            results.append(r.model_copy(update={"field": f"records[{i}].{r.field}"}))

    if not results:
        results.append(
            ValidationResult(
                valid=True,
                severity=ValidationSeverity.OK,
                message=f"Validated {len(records)} sample records",
            )
        )

    all_valid = all(r.valid for r in results)
    return all_valid, results
