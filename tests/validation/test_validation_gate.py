"""Tests for the data-sufficiency validation gate"""

import pytest
from structlog.testing import capture_logs

from market_lens.errors import ValidationFailureError
from market_lens.models.indicators import NOT_AVAILABLE, UNKNOWN
from market_lens.models.summary import IndicatorSignals, MarketContext, MarketData, StructuredSummary
from market_lens.validation.gate import count_unknown_fields, enforce, is_unresolved, validate_summary


def summary_with_unknowns(count):
    """A summary whose first ``count`` tracked fields are Unknown."""
    values = ["Upward", "Early (< 2 weeks)", "Neutral", "Stable", "Normal", "Neutral",
              "Positive", "Moderate", "Mid range", "Neutral", "Neutral", "Stable", "Stable"]
    for i in range(count):
        values[i] = UNKNOWN
    return StructuredSummary(
        market_data=MarketData(*values[0:6]),
        indicator_signals=IndicatorSignals(*values[6:10]),
        context=MarketContext(*values[10:13]),
    )


class TestIsUnresolved:
    """Test which values count as unknown"""

    @pytest.mark.parametrize("value", [UNKNOWN, NOT_AVAILABLE, "", None])
    def test_unresolved(self, value):
        assert is_unresolved(value)

    @pytest.mark.parametrize("value", ["Neutral", "Upward", "Unknown trend"])
    def test_resolved(self, value):
        assert not is_unresolved(value)


class TestValidateSummary:
    """Test the unknown-ratio gate"""

    def test_fully_resolved(self):
        result = validate_summary(summary_with_unknowns(0))

        assert result.is_valid
        assert result.unknown_count == 0
        assert result.unknown_percentage == 0.0
        assert result.total_fields == 13
        assert result.message == "Summary passed validation"

    def test_three_unknowns_pass(self):
        result = validate_summary(summary_with_unknowns(3))

        assert result.is_valid
        assert result.unknown_count == 3
        assert result.unknown_percentage == 23.1

    def test_four_unknowns_fail(self):
        """Test 4 of 13 (30.8%) exceeds the 30% limit"""
        result = validate_summary(summary_with_unknowns(4))

        assert not result.is_valid
        assert result.unknown_count == 4
        assert result.unknown_percentage == 30.8
        assert result.message == "Insufficient data for reliable interpretation"
        assert result.unknown_fields == (
            "marketData.overallTrend",
            "marketData.trendDuration",
            "marketData.volumeBehavior",
            "marketData.volatilityLevel",
        )

    def test_limit_is_inclusive(self):
        assert validate_summary(summary_with_unknowns(3), max_unknown_ratio=3 / 13).is_valid

    def test_custom_ratio(self):
        assert not validate_summary(summary_with_unknowns(1), max_unknown_ratio=0.05).is_valid
        assert validate_summary(summary_with_unknowns(13), max_unknown_ratio=1.0).is_valid

    def test_not_available_counts(self):
        summary = summary_with_unknowns(0)
        summary = StructuredSummary(
            market_data=summary.market_data,
            indicator_signals=IndicatorSignals(NOT_AVAILABLE, "Moderate", "Mid range", "Neutral"),
            context=summary.context,
        )
        assert count_unknown_fields(summary) == 1

    def test_result_serialization(self):
        data = validate_summary(summary_with_unknowns(4)).to_dict()

        assert data == {
            "isValid": False,
            "unknownCount": 4,
            "unknownPercentage": 30.8,
            "message": "Insufficient data for reliable interpretation",
        }

    def test_gate_decision_logged(self):
        with capture_logs() as logs:
            validate_summary(summary_with_unknowns(4), symbol="SPY")

        [entry] = [log for log in logs if log.get("subsystem") == "validation_gate"]
        assert entry["gate_result"] == "FAIL"
        assert entry["symbol"] == "SPY"
        assert entry["log_level"] == "warning"
        assert "audit_trail" not in entry


class TestEnforce:
    """Test rejection of failed results"""

    def test_valid_result_returned(self):
        result = validate_summary(summary_with_unknowns(2))
        assert enforce(result) is result

    def test_invalid_result_raises(self):
        result = validate_summary(summary_with_unknowns(5))

        with pytest.raises(ValidationFailureError) as exc_info:
            enforce(result)

        error = exc_info.value
        assert str(error) == "Insufficient data for interpretation: 5 of 13 fields unknown (38.5%)"
        assert error.unknown_count == 5
        assert error.total_fields == 13
        assert error.unknown_fraction == pytest.approx(5 / 13)
        assert len(error.unknown_fields) == 5
        assert not error.recoverable
