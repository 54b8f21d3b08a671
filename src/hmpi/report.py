"""Batch scoring and dashboard reporting for water samples."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field

import pandas as pd

from src.hmpi.engine import (
    category_recommendation,
    format_concentration,
    metal_breakdown,
    risk_percentage,
    score_sample,
)
from src.hmpi.errors import ErrorKind, InvalidInputError, ScoringError
from src.hmpi.models import PollutionCategory, WaterSample
from src.utils.config import METALS
from src.utils.logging_config import get_logger

logger = get_logger(__name__)

ALERT_SEVERITY = {
    PollutionCategory.HIGH: "high",
    PollutionCategory.MODERATE: "medium",
}


@dataclass
class RejectedSample:
    """A sample that could not be scored."""

    sample_id: str
    kind: ErrorKind
    metal: str | None
    message: str


@dataclass
class ScoringRun:
    """Outcome of scoring a batch of samples."""

    scored: list[WaterSample] = field(default_factory=list)
    rejected: list[RejectedSample] = field(default_factory=list)


@dataclass
class Alert:
    """Pollution notice raised for a non-safe sample."""

    id: str
    severity: str
    location: str
    sample_id: str
    hmpi_value: float
    message: str


def score_samples(
    samples: Iterable[WaterSample],
    weights: Mapping[str, float] | None = None,
    standards: Mapping[str, float] | None = None,
) -> ScoringRun:
    """Score each sample independently, collecting failures.

    Args:
        samples: Unscored (or previously scored) water samples
        weights: Optional custom weights (must sum to 1.0)
        standards: Optional custom standards (mg/L)

    Returns:
        ScoringRun with scored samples and rejected records
    """
    run = ScoringRun()
    for sample in samples:
        try:
            run.scored.append(score_sample(sample, weights, standards))
        except ScoringError as e:
            logger.warning(
                "sample_rejected",
                sample_id=sample.id,
                kind=e.kind.value,
                metal=e.metal,
                error=str(e),
            )
            run.rejected.append(
                RejectedSample(
                    sample_id=sample.id,
                    kind=e.kind,
                    metal=e.metal,
                    message=str(e),
                )
            )

    logger.info("samples_scored", scored=len(run.scored), rejected=len(run.rejected))
    return run


def _require_scored(samples: list[WaterSample]) -> None:
    for s in samples:
        if not s.is_scored:
            raise InvalidInputError(f"Sample {s.id} has not been scored")


def samples_to_dataframe(samples: list[WaterSample]) -> pd.DataFrame:
    """Convert samples to a pandas DataFrame.

    Args:
        samples: List of WaterSample objects (scored or not)

    Returns:
        DataFrame with one row per sample and one column per metal
    """
    rows = []
    for s in samples:
        row = {
            "id": s.id,
            "location": s.location,
            "lat": s.coordinates.lat,
            "lng": s.coordinates.lng,
            "collection_date": pd.Timestamp(s.collection_date),
        }
        row.update(s.metals.as_mapping())
        row.update({
            "hmpi_value": s.hmpi_value,
            "category": s.category.value if s.category else None,
            "risk_percentage": risk_percentage(s.hmpi_value) if s.is_scored else None,
            "notes": s.notes,
        })
        rows.append(row)

    columns = [
        "id", "location", "lat", "lng", "collection_date", *METALS,
        "hmpi_value", "category", "risk_percentage", "notes",
    ]
    return pd.DataFrame(rows, columns=columns)


def summarize_samples(samples: list[WaterSample]) -> dict:
    """Generate dashboard statistics from scored samples.

    Args:
        samples: List of scored samples

    Returns:
        Dictionary with counts and HMPI statistics

    Raises:
        InvalidInputError: A sample has not been scored
    """
    if not samples:
        return {
            "total_samples": 0,
            "safe_water": 0,
            "polluted_water": 0,
            "category_distribution": {},
            "average_hmpi": 0.0,
            "max_hmpi": 0.0,
            "min_hmpi": 0.0,
        }

    _require_scored(samples)

    category_dist: dict[str, int] = {}
    for s in samples:
        category_dist[s.category.value] = category_dist.get(s.category.value, 0) + 1

    values = [s.hmpi_value for s in samples]
    safe = category_dist.get(PollutionCategory.SAFE.value, 0)

    return {
        "total_samples": len(samples),
        "safe_water": safe,
        "polluted_water": len(samples) - safe,
        "category_distribution": category_dist,
        "average_hmpi": sum(values) / len(values),
        "max_hmpi": max(values),
        "min_hmpi": min(values),
    }


def generate_alerts(samples: list[WaterSample]) -> list[Alert]:
    """Raise an alert for every Moderate or High sample, most severe first."""
    _require_scored(samples)

    flagged = [s for s in samples if s.category in ALERT_SEVERITY]
    flagged.sort(key=lambda s: s.hmpi_value, reverse=True)

    alerts = []
    for i, s in enumerate(flagged, start=1):
        if s.category == PollutionCategory.HIGH:
            message = f"High pollution levels detected at {s.location}"
        else:
            message = f"Moderate pollution threshold exceeded at {s.location}"
        alerts.append(
            Alert(
                id=str(i),
                severity=ALERT_SEVERITY[s.category],
                location=s.location,
                sample_id=s.id,
                hmpi_value=s.hmpi_value,
                message=message,
            )
        )
    return alerts


def format_sample_summary(
    sample: WaterSample,
    weights: Mapping[str, float] | None = None,
    standards: Mapping[str, float] | None = None,
) -> str:
    """Format a scored sample as human-readable text.

    Args:
        sample: Scored WaterSample
        weights: Weights the sample was scored with
        standards: Standards the sample was scored with

    Returns:
        Formatted string summary
    """
    _require_scored([sample])

    lines = [
        f"HMPI Report: {sample.location} (sample {sample.id})",
        f"Collected: {sample.collection_date.isoformat()}",
        f"Coordinates: {sample.coordinates.lat:.4f}, {sample.coordinates.lng:.4f}",
        "",
        f"HMPI: {sample.hmpi_value:.2f} (Category: {sample.category.value})",
        "",
        "Metal Breakdown:",
    ]

    for c in metal_breakdown(sample.metals, weights, standards):
        lines.append(
            f"  {c.name}: {format_concentration(c.concentration)} "
            f"(limit {format_concentration(c.standard)}, "
            f"rating {c.quality_rating:.1f}, weight {c.weight * 100:.0f}%)"
        )

    lines.append("")
    lines.append(f"Recommendation: {category_recommendation(sample.category)}")

    return "\n".join(lines)
