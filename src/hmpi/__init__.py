"""HMPI scoring engine and reporting modules."""

from src.hmpi.engine import (
    MetalContribution,
    categorize,
    category_color,
    category_recommendation,
    compute_index,
    compute_quality_rating,
    format_concentration,
    is_finite_number,
    metal_breakdown,
    risk_percentage,
    round_half_up,
    score_sample,
    validate_panel,
)
from src.hmpi.errors import ConfigurationError, ErrorKind, InvalidInputError, ScoringError
from src.hmpi.models import Coordinates, MetalPanel, PollutionCategory, WaterSample
from src.hmpi.report import (
    Alert,
    RejectedSample,
    ScoringRun,
    format_sample_summary,
    generate_alerts,
    samples_to_dataframe,
    score_samples,
    summarize_samples,
)

__all__ = [
    # Models
    "MetalPanel",
    "Coordinates",
    "WaterSample",
    "PollutionCategory",
    # Errors
    "ErrorKind",
    "ScoringError",
    "InvalidInputError",
    "ConfigurationError",
    # Engine
    "MetalContribution",
    "compute_quality_rating",
    "compute_index",
    "categorize",
    "score_sample",
    "validate_panel",
    "format_concentration",
    "is_finite_number",
    "risk_percentage",
    "round_half_up",
    "metal_breakdown",
    "category_color",
    "category_recommendation",
    # Reporting
    "Alert",
    "RejectedSample",
    "ScoringRun",
    "score_samples",
    "samples_to_dataframe",
    "summarize_samples",
    "generate_alerts",
    "format_sample_summary",
]
