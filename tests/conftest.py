"""Shared pytest fixtures for HMPI Water Quality Dashboard tests."""

import pytest

from src.hmpi.models import WaterSample


@pytest.fixture
def treatment_plant_metals() -> dict:
    """Downtown Treatment Plant panel (HMPI 66.33, Moderate)."""
    return {"pb": 0.008, "as": 0.006, "cd": 0.003, "hg": 0.001}


@pytest.fixture
def riverside_metals() -> dict:
    """Riverside Community Center panel (HMPI 369.17, High)."""
    return {"pb": 0.045, "as": 0.035, "cd": 0.015, "hg": 0.008}


@pytest.fixture
def clean_metals() -> dict:
    """Every metal at a tenth of its WHO limit (HMPI 10.0, Safe)."""
    return {"pb": 0.001, "as": 0.001, "cd": 0.0003, "hg": 0.0006}


@pytest.fixture
def zero_metals() -> dict:
    """No detectable metals."""
    return {"pb": 0.0, "as": 0.0, "cd": 0.0, "hg": 0.0}


@pytest.fixture
def sample_record(treatment_plant_metals: dict) -> dict:
    """Raw sample record as produced by ingestion."""
    return {
        "id": "1",
        "location": "Downtown Treatment Plant",
        "coordinates": {"lat": 40.7589, "lng": -73.9851},
        "collection_date": "2024-01-15",
        "metals": treatment_plant_metals,
        "notes": "Regular monitoring sample",
    }


@pytest.fixture
def water_sample(sample_record: dict) -> WaterSample:
    """Unscored water sample."""
    return WaterSample.model_validate(sample_record)


@pytest.fixture
def mixed_samples(
    sample_record: dict,
    riverside_metals: dict,
    clean_metals: dict,
) -> list[WaterSample]:
    """Unscored samples covering all three categories."""
    return [
        WaterSample.model_validate(sample_record),
        WaterSample.model_validate({
            **sample_record,
            "id": "3",
            "location": "Riverside Community Center",
            "coordinates": {"lat": 40.7505, "lng": -73.9934},
            "metals": riverside_metals,
            "notes": None,
        }),
        WaterSample.model_validate({
            **sample_record,
            "id": "8",
            "location": "Central Park Reservoir",
            "coordinates": {"lat": 40.7829, "lng": -73.9654},
            "metals": clean_metals,
            "notes": None,
        }),
    ]
