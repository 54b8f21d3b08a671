"""Heavy Metal Pollution Index (HMPI) scoring engine.

HMPI = sum(Wi * Qi) over lead, arsenic, cadmium and mercury, where
Qi = (Ci / Si) * 100 is the quality rating of metal i with concentration Ci
and standard Si, and Wi is the metal's weight.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from numbers import Real

from pydantic import ValidationError

from src.hmpi.errors import ConfigurationError, InvalidInputError
from src.hmpi.models import MetalPanel, PollutionCategory, WaterSample
from src.utils.config import (
    CATEGORY_COLORS,
    CATEGORY_RECOMMENDATIONS,
    CONCENTRATION_DECIMALS,
    CONCENTRATION_UNIT,
    HMPI_WEIGHTS,
    INDEX_DECIMALS,
    METAL_NAMES,
    METALS,
    MODERATE_THRESHOLD,
    RISK_DISPLAY_MAX,
    SAFE_THRESHOLD,
    WEIGHT_SUM_TOLERANCE,
    WHO_STANDARDS,
)
from src.utils.logging_config import get_logger

logger = get_logger(__name__)


@dataclass
class MetalContribution:
    """One metal's share of a sample's HMPI."""

    metal: str
    name: str
    concentration: float
    standard: float
    weight: float
    quality_rating: float
    weighted_rating: float


def compute_quality_rating(concentration: float, standard: float) -> float:
    """Quality rating of one metal as a percentage of its limit.

    Not clamped: a concentration ten times the standard rates 1000.
    """
    return (concentration / standard) * 100


def round_half_up(value: float, decimals: int = INDEX_DECIMALS) -> float:
    """Round half away from zero on the shortest decimal representation.

    ``round()`` rounds half to even on the binary value, so
    ``round(2.675, 2) == 2.67``; this returns 2.68.
    """
    quantum = Decimal(1).scaleb(-decimals)
    exact = Decimal(repr(value))
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the decimals
        ctx.prec = max(ctx.prec, exact.adjusted() + decimals + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def is_finite_number(value: object) -> bool:
    """True for real, finite, non-bool numbers that fit in a float."""
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def to_panel(panel: MetalPanel | Mapping[str, float]) -> MetalPanel:
    """Coerce a mapping into a MetalPanel, raising InvalidInputError."""
    if isinstance(panel, MetalPanel):
        return panel
    if not isinstance(panel, Mapping):
        raise InvalidInputError(f"Metal panel must be a mapping, got {type(panel).__name__}")

    for metal in METALS:
        if metal not in panel:
            raise InvalidInputError(f"Metal panel is missing '{metal}'", metal=metal)

    try:
        return MetalPanel.model_validate(dict(panel))
    except ValidationError as e:
        first = e.errors()[0]
        metal = str(first["loc"][0]).rstrip("_") if first["loc"] else None
        raise InvalidInputError(
            f"Invalid concentration for '{metal}': {first['msg']}", metal=metal
        ) from e


def check_weights(weights: Mapping[str, float]) -> None:
    """Raise ConfigurationError unless weights cover every metal and sum to 1.0."""
    for metal in METALS:
        weight = weights.get(metal)
        if weight is None:
            raise ConfigurationError(f"No weight configured for '{metal}'", metal=metal)
        if not is_finite_number(weight) or weight < 0:
            raise ConfigurationError(f"Weight for '{metal}' must be a non-negative number, got {weight!r}", metal=metal)

    total = math.fsum(weights[metal] for metal in METALS)
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        raise ConfigurationError(f"Weights must sum to 1.0, got {total}")


def check_standards(standards: Mapping[str, float]) -> None:
    """Raise ConfigurationError unless every metal has a positive standard."""
    for metal in METALS:
        standard = standards.get(metal)
        if standard is None:
            raise ConfigurationError(f"No standard configured for '{metal}'", metal=metal)
        if not is_finite_number(standard) or standard <= 0:
            raise ConfigurationError(f"Standard for '{metal}' must be a positive number, got {standard!r}", metal=metal)


def metal_breakdown(
    panel: MetalPanel | Mapping[str, float],
    weights: Mapping[str, float] | None = None,
    standards: Mapping[str, float] | None = None,
) -> list[MetalContribution]:
    """Per-metal quality ratings and weighted contributions.

    Args:
        panel: Metal concentrations (mg/L)
        weights: Optional custom weights (must sum to 1.0)
        standards: Optional custom standards (mg/L, all positive)

    Returns:
        One MetalContribution per metal, in METALS order
    """
    weights = HMPI_WEIGHTS if weights is None else weights
    standards = WHO_STANDARDS if standards is None else standards

    panel = to_panel(panel)
    check_weights(weights)
    check_standards(standards)

    contributions = []
    for metal in METALS:
        concentration = panel.get(metal)
        rating = compute_quality_rating(concentration, standards[metal])
        contributions.append(
            MetalContribution(
                metal=metal,
                name=METAL_NAMES[metal],
                concentration=concentration,
                standard=standards[metal],
                weight=weights[metal],
                quality_rating=rating,
                weighted_rating=weights[metal] * rating,
            )
        )
    return contributions


def compute_index(
    panel: MetalPanel | Mapping[str, float],
    weights: Mapping[str, float] | None = None,
    standards: Mapping[str, float] | None = None,
) -> float:
    """Calculate the HMPI of a metal panel.

    Per-metal ratings are summed unrounded; only the final index is rounded.

    Args:
        panel: Metal concentrations (mg/L)
        weights: Optional custom weights (must sum to 1.0)
        standards: Optional custom standards (mg/L, all positive)

    Returns:
        HMPI rounded half-up to two decimal places

    Raises:
        InvalidInputError: A metal is missing or its concentration is invalid
        ConfigurationError: Weights or standards are unusable
    """
    contributions = metal_breakdown(panel, weights, standards)
    total = sum(c.weighted_rating for c in contributions)
    if not math.isfinite(total):
        raise InvalidInputError(f"HMPI is not finite: {total}")
    index = round_half_up(total)

    logger.debug("hmpi_computed", raw=total, index=index)
    return index


def categorize(index: float) -> PollutionCategory:
    """Convert an HMPI value to a pollution category."""
    if index <= SAFE_THRESHOLD:
        return PollutionCategory.SAFE
    elif index <= MODERATE_THRESHOLD:
        return PollutionCategory.MODERATE
    return PollutionCategory.HIGH


def score_sample(
    sample: WaterSample,
    weights: Mapping[str, float] | None = None,
    standards: Mapping[str, float] | None = None,
) -> WaterSample:
    """Return a copy of the sample with hmpi_value and category populated.

    The input sample is left untouched; on failure nothing is returned.
    """
    index = compute_index(sample.metals, weights, standards)
    return sample.model_copy(update={"hmpi_value": index, "category": categorize(index)})


def validate_panel(panel: object) -> bool:
    """Check that a panel has all four metals as finite, non-negative numbers.

    Never raises. Scoring does not call this; ingestion decides whether to.
    """
    if isinstance(panel, MetalPanel):
        return True
    if not isinstance(panel, Mapping):
        return False

    for metal in METALS:
        value = panel.get(metal)
        if not is_finite_number(value) or value < 0:
            return False
    return True


def format_concentration(value: float) -> str:
    """Format a concentration for display, e.g. ``0.008 mg/L``.

    Ties round half-up like the scores do, so 0.0625 shows as 0.063.
    """
    if math.isfinite(value):
        value = round_half_up(value, CONCENTRATION_DECIMALS)
    return f"{value:.{CONCENTRATION_DECIMALS}f} {CONCENTRATION_UNIT}"


def risk_percentage(index: float) -> float:
    """Normalize an HMPI value to 0-100 for gauges and progress bars."""
    return min(index / RISK_DISPLAY_MAX * 100, 100.0)


def category_color(category: PollutionCategory | str) -> str:
    """Hex colour used to render a category."""
    return CATEGORY_COLORS[PollutionCategory(category).value]


def category_recommendation(category: PollutionCategory | str) -> str:
    """Recommended action for a category."""
    return CATEGORY_RECOMMENDATIONS[PollutionCategory(category).value]
