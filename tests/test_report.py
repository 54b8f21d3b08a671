"""Tests for batch scoring and reporting."""

import pytest
from structlog.testing import capture_logs

from src.hmpi.errors import ErrorKind, InvalidInputError
from src.hmpi.models import PollutionCategory, WaterSample
from src.hmpi.report import (
    format_sample_summary,
    generate_alerts,
    samples_to_dataframe,
    score_samples,
    summarize_samples,
)
from src.utils.config import DEFAULT_SAMPLE_RECORDS, WHO_STANDARDS


@pytest.fixture
def scored_samples(mixed_samples: list[WaterSample]) -> list[WaterSample]:
    """Moderate, High and Safe samples, in that order."""
    return score_samples(mixed_samples).scored


class TestScoreSamples:
    """Tests for score_samples function."""

    def test_all_samples_scored(self, mixed_samples: list[WaterSample]) -> None:
        """Valid samples are all scored in order."""
        run = score_samples(mixed_samples)
        assert [s.hmpi_value for s in run.scored] == [66.33, 369.17, 10.0]
        assert run.rejected == []

    def test_configuration_error_rejects_samples(
        self, mixed_samples: list[WaterSample]
    ) -> None:
        """Bad standards reject every sample with the offending metal."""
        standards = {**WHO_STANDARDS, "pb": 0.0}
        run = score_samples(mixed_samples, standards=standards)
        assert run.scored == []
        assert len(run.rejected) == 3
        assert run.rejected[0].sample_id == "1"
        assert run.rejected[0].kind == ErrorKind.CONFIGURATION
        assert run.rejected[0].metal == "pb"

    def test_rejections_logged(self, mixed_samples: list[WaterSample]) -> None:
        """Each rejection is logged as a warning naming the metal."""
        standards = {**WHO_STANDARDS, "pb": 0.0}
        with capture_logs() as logs:
            score_samples(mixed_samples, standards=standards)
        rejected = [e for e in logs if e["event"] == "sample_rejected"]
        assert [e["sample_id"] for e in rejected] == ["1", "3", "8"]
        assert all(e["log_level"] == "warning" for e in rejected)
        assert all(e["kind"] == "configuration" and e["metal"] == "pb" for e in rejected)
        summary = [e for e in logs if e["event"] == "samples_scored"]
        assert summary[0]["scored"] == 0
        assert summary[0]["rejected"] == 3

    def test_empty_input(self) -> None:
        """No samples gives an empty run."""
        run = score_samples([])
        assert run.scored == []
        assert run.rejected == []

    def test_demo_dataset_scores(self) -> None:
        """Every demo record scores without rejection."""
        samples = [WaterSample.model_validate(r) for r in DEFAULT_SAMPLE_RECORDS]
        run = score_samples(samples)
        assert len(run.scored) == len(DEFAULT_SAMPLE_RECORDS)
        assert run.rejected == []


class TestSamplesToDataframe:
    """Tests for samples_to_dataframe function."""

    def test_one_row_per_sample(self, scored_samples: list[WaterSample]) -> None:
        """Rows and metal columns are produced."""
        df = samples_to_dataframe(scored_samples)
        assert len(df) == 3
        assert list(df["id"]) == ["1", "3", "8"]
        assert df.loc[0, "pb"] == 0.008
        assert df.loc[0, "as"] == 0.006

    def test_derived_columns(self, scored_samples: list[WaterSample]) -> None:
        """Category and risk percentage are included."""
        df = samples_to_dataframe(scored_samples)
        assert list(df["category"]) == ["Moderate", "High", "Safe"]
        assert df.loc[1, "risk_percentage"] == 100.0

    def test_unscored_samples_have_empty_scores(
        self, mixed_samples: list[WaterSample]
    ) -> None:
        """Unscored samples export without derived values."""
        df = samples_to_dataframe(mixed_samples)
        assert df["hmpi_value"].isna().all()
        assert df["category"].isna().all()

    def test_empty_list(self) -> None:
        """Empty input gives an empty frame with all columns."""
        df = samples_to_dataframe([])
        assert df.empty
        assert "hmpi_value" in df.columns


class TestSummarizeSamples:
    """Tests for summarize_samples function."""

    def test_counts_and_statistics(self, scored_samples: list[WaterSample]) -> None:
        """Counts, distribution and HMPI statistics are computed."""
        summary = summarize_samples(scored_samples)
        assert summary["total_samples"] == 3
        assert summary["safe_water"] == 1
        assert summary["polluted_water"] == 2
        assert summary["category_distribution"] == {"Moderate": 1, "High": 1, "Safe": 1}
        assert summary["max_hmpi"] == 369.17
        assert summary["min_hmpi"] == 10.0
        assert summary["average_hmpi"] == pytest.approx((66.33 + 369.17 + 10.0) / 3)

    def test_empty_list(self) -> None:
        """Empty input gives zeros."""
        summary = summarize_samples([])
        assert summary["total_samples"] == 0
        assert summary["average_hmpi"] == 0.0
        assert summary["category_distribution"] == {}

    def test_unscored_sample_raises(self, mixed_samples: list[WaterSample]) -> None:
        """Unscored samples are not counted as zero."""
        with pytest.raises(InvalidInputError):
            summarize_samples(mixed_samples)


class TestGenerateAlerts:
    """Tests for generate_alerts function."""

    def test_alerts_for_non_safe_samples(self, scored_samples: list[WaterSample]) -> None:
        """Safe samples raise no alert; most severe comes first."""
        alerts = generate_alerts(scored_samples)
        assert [a.sample_id for a in alerts] == ["3", "1"]
        assert [a.severity for a in alerts] == ["high", "medium"]

    def test_alert_message_names_location(self, scored_samples: list[WaterSample]) -> None:
        """Messages mention the sampling location."""
        alerts = generate_alerts(scored_samples)
        assert "Riverside Community Center" in alerts[0].message
        assert alerts[0].message.startswith("High pollution")

    def test_no_alerts_when_all_safe(self, scored_samples: list[WaterSample]) -> None:
        """All-safe input gives no alerts."""
        safe = [s for s in scored_samples if s.category == PollutionCategory.SAFE]
        assert generate_alerts(safe) == []


class TestFormatSampleSummary:
    """Tests for format_sample_summary function."""

    def test_contains_index_and_breakdown(self, scored_samples: list[WaterSample]) -> None:
        """Summary shows the index, category and every metal."""
        text = format_sample_summary(scored_samples[0])
        assert "HMPI: 66.33 (Category: Moderate)" in text
        assert "Lead (Pb): 0.008 mg/L (limit 0.010 mg/L, rating 80.0, weight 25%)" in text
        assert "Mercury (Hg)" in text
        assert "Recommendation:" in text

    def test_unscored_sample_raises(self, water_sample: WaterSample) -> None:
        """Unscored samples cannot be reported."""
        with pytest.raises(InvalidInputError):
            format_sample_summary(water_sample)
