"""Pydantic models for water samples and their metal panels."""

import math
from datetime import date
from enum import Enum
from numbers import Real

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from src.utils.config import METALS


class PollutionCategory(str, Enum):
    """HMPI pollution category."""

    SAFE = "Safe"
    MODERATE = "Moderate"
    HIGH = "High"


class MetalPanel(BaseModel):
    """Heavy metal concentrations of a single sample, in mg/L.

    All four metals are required. ``as`` is a Python keyword, so arsenic is
    stored on ``as_`` and read/written under the alias ``"as"``.
    """

    pb: float = Field(..., description="Lead concentration (mg/L)")
    as_: float = Field(..., alias="as", description="Arsenic concentration (mg/L)")
    cd: float = Field(..., description="Cadmium concentration (mg/L)")
    hg: float = Field(..., description="Mercury concentration (mg/L)")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @field_validator("pb", "as_", "cd", "hg", mode="before")
    @classmethod
    def reject_non_numeric(cls, v: object) -> object:
        """Only real numbers are concentrations; bools and strings are not."""
        if isinstance(v, bool) or not isinstance(v, Real):
            raise ValueError(f"Concentration {v!r} is not a number")
        try:
            float(v)
        except OverflowError as e:
            raise ValueError(f"Concentration {v!r} is too large") from e
        return v

    @field_validator("pb", "as_", "cd", "hg")
    @classmethod
    def validate_concentration(cls, v: float) -> float:
        """Ensure concentration is finite and non-negative."""
        if not math.isfinite(v):
            raise ValueError(f"Concentration {v} is not finite")
        if v < 0:
            raise ValueError(f"Concentration {v} is negative")
        return v

    def get(self, metal: str) -> float:
        """Return the concentration for a metal identifier (pb, as, cd, hg)."""
        if metal not in METALS:
            raise KeyError(metal)
        return getattr(self, "as_" if metal == "as" else metal)

    def as_mapping(self) -> dict[str, float]:
        """Return concentrations keyed by metal identifier."""
        return {metal: self.get(metal) for metal in METALS}


class Coordinates(BaseModel):
    """Geographic location of a sampling site."""

    lat: float = Field(..., ge=-90.0, le=90.0)
    lng: float = Field(..., ge=-180.0, le=180.0)

    model_config = ConfigDict(frozen=True)


class WaterSample(BaseModel):
    """A water sample with its metal panel and derived HMPI fields."""

    id: str
    location: str = Field(..., min_length=1)
    coordinates: Coordinates
    collection_date: date
    metals: MetalPanel
    hmpi_value: float | None = Field(default=None, ge=0.0)
    category: PollutionCategory | None = None
    notes: str | None = None

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def check_derived_fields(self) -> "WaterSample":
        """HMPI value and category are set together or not at all."""
        if (self.hmpi_value is None) != (self.category is None):
            raise ValueError("hmpi_value and category must be set together")
        return self

    @property
    def is_scored(self) -> bool:
        return self.hmpi_value is not None
