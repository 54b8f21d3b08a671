"""Configuration constants for the HMPI Water Quality Dashboard."""

# Metal identifiers, in display order
METALS: tuple[str, ...] = ("pb", "as", "cd", "hg")

METAL_NAMES: dict[str, str] = {
    "pb": "Lead (Pb)",
    "as": "Arsenic (As)",
    "cd": "Cadmium (Cd)",
    "hg": "Mercury (Hg)",
}

# WHO drinking water quality standards (mg/L)
WHO_STANDARDS: dict[str, float] = {
    "pb": 0.01,
    "as": 0.01,
    "cd": 0.003,
    "hg": 0.006,
}

# Indian Standard IS 10500:2012 acceptable limits (mg/L)
IS10500_STANDARDS: dict[str, float] = {
    "pb": 0.01,
    "as": 0.01,
    "cd": 0.003,
    "hg": 0.001,
}

STANDARD_PRESETS: dict[str, dict[str, float]] = {
    "WHO": WHO_STANDARDS,
    "IS 10500": IS10500_STANDARDS,
}

# HMPI weights by relative toxicity (must sum to 1.0)
HMPI_WEIGHTS: dict[str, float] = {
    "pb": 0.25,
    "as": 0.30,
    "cd": 0.25,
    "hg": 0.20,
}
WEIGHT_SUM_TOLERANCE = 1e-9

# Category thresholds (inclusive upper bounds)
SAFE_THRESHOLD = 30.0
MODERATE_THRESHOLD = 100.0

# Rounding and display
INDEX_DECIMALS = 2
CONCENTRATION_DECIMALS = 3
CONCENTRATION_UNIT = "mg/L"
RISK_DISPLAY_MAX = 200.0  # gauge scale only, not a regulatory limit

CATEGORY_COLORS: dict[str, str] = {
    "Safe": "#22c55e",
    "Moderate": "#f59e0b",
    "High": "#ef4444",
}

CATEGORY_RECOMMENDATIONS: dict[str, str] = {
    "Safe": "Water is suitable for consumption - continue routine monitoring",
    "Moderate": "Monitoring and treatment recommended",
    "High": "Immediate action required - water is unsafe for consumption",
}

# Demo dataset (raw concentrations in mg/L, unscored)
DEFAULT_SAMPLE_RECORDS: list[dict] = [
    {
        "id": "1",
        "location": "Downtown Treatment Plant",
        "coordinates": {"lat": 40.7589, "lng": -73.9851},
        "collection_date": "2024-01-15",
        "metals": {"pb": 0.008, "as": 0.006, "cd": 0.003, "hg": 0.001},
        "notes": "Regular monitoring sample",
    },
    {
        "id": "2",
        "location": "Industrial Zone Well #3",
        "coordinates": {"lat": 40.7614, "lng": -73.9776},
        "collection_date": "2024-01-16",
        "metals": {"pb": 0.025, "as": 0.018, "cd": 0.008, "hg": 0.004},
        "notes": "Elevated metal concentrations detected",
    },
    {
        "id": "3",
        "location": "Riverside Community Center",
        "coordinates": {"lat": 40.7505, "lng": -73.9934},
        "collection_date": "2024-01-17",
        "metals": {"pb": 0.045, "as": 0.035, "cd": 0.015, "hg": 0.008},
        "notes": "URGENT: Immediate action required",
    },
    {
        "id": "4",
        "location": "North Suburban Well",
        "coordinates": {"lat": 40.7831, "lng": -73.9712},
        "collection_date": "2024-01-18",
        "metals": {"pb": 0.005, "as": 0.004, "cd": 0.002, "hg": 0.001},
        "notes": "Within acceptable limits",
    },
    {
        "id": "5",
        "location": "Chemical Plant Vicinity",
        "coordinates": {"lat": 40.7282, "lng": -73.9942},
        "collection_date": "2024-01-19",
        "metals": {"pb": 0.032, "as": 0.028, "cd": 0.012, "hg": 0.006},
        "notes": "Monitoring required",
    },
    {
        "id": "6",
        "location": "School District Water Supply",
        "coordinates": {"lat": 40.7648, "lng": -73.9808},
        "collection_date": "2024-01-20",
        "metals": {"pb": 0.007, "as": 0.005, "cd": 0.003, "hg": 0.001},
        "notes": "Safe for consumption",
    },
    {
        "id": "7",
        "location": "Mining Area Groundwater",
        "coordinates": {"lat": 40.7489, "lng": -73.9680},
        "collection_date": "2024-01-21",
        "metals": {"pb": 0.052, "as": 0.041, "cd": 0.019, "hg": 0.010},
        "notes": "Contamination source identified",
    },
    {
        "id": "8",
        "location": "Central Park Reservoir",
        "coordinates": {"lat": 40.7829, "lng": -73.9654},
        "collection_date": "2024-01-22",
        "metals": {"pb": 0.006, "as": 0.004, "cd": 0.002, "hg": 0.001},
        "notes": "Excellent water quality",
    },
    {
        "id": "9",
        "location": "Airport Runoff Area",
        "coordinates": {"lat": 40.7282, "lng": -73.9776},
        "collection_date": "2024-01-23",
        "metals": {"pb": 0.028, "as": 0.022, "cd": 0.010, "hg": 0.005},
        "notes": "Regular industrial monitoring",
    },
    {
        "id": "10",
        "location": "Residential Area Well",
        "coordinates": {"lat": 40.7505, "lng": -73.9712},
        "collection_date": "2024-01-24",
        "metals": {"pb": 0.009, "as": 0.007, "cd": 0.004, "hg": 0.002},
        "notes": "Routine residential testing",
    },
]
