"""Integration tests for the full analysis pipeline."""

from datetime import datetime, time, timezone

import orjson
import pytest

from market_lens.data.parsers import parse_chart_payload
from market_lens.engine import MarketAnalysisEngine
from market_lens.interpretation.payload import build_messages, serialize_payload
from market_lens.models.analysis import Confidence, DirectionalBias
from market_lens.models.indicators import Trend
from market_lens.scenarios.generator import CONFLICT_RESOLUTION_TRIGGER
from market_lens.timeframes.analyzer import PULLBACK_DESCRIPTION


def to_chart_payload(series):
    """Render a daily series as a chart-style provider payload."""
    timestamps = [
        int(datetime.combine(bar.date, time(14, 30), tzinfo=timezone.utc).timestamp())
        for bar in series
    ]
    return {
        "chart": {
            "result": [{
                "timestamp": timestamps,
                "indicators": {"quote": [{
                    "open": [bar.open for bar in series],
                    "high": [bar.high for bar in series],
                    "low": [bar.low for bar in series],
                    "close": [bar.close for bar in series],
                    "volume": [bar.volume for bar in series],
                }]},
            }],
            "error": None,
        }
    }


@pytest.mark.integration
class TestFullPipeline:
    """Integration tests for the complete analysis pipeline."""

    def test_steady_uptrend(self, uptrend_series) -> None:
        """Test 250 bars of steady uptrend."""
        result = MarketAnalysisEngine().analyze(uptrend_series, "SPY")
        timeframes = result.summary.timeframes

        assert result.daily_indicators.overall_trend == Trend.UPWARD
        assert result.daily_indicators.momentum in ("Positive", "Overbought")
        assert result.raw_values.days_in_trend == 51
        assert timeframes.daily.directional_bias == DirectionalBias.BULLISH
        # 50 weekly candles cannot resolve the 200-period average
        assert result.weekly_indicators.overall_trend == Trend.UNKNOWN
        assert timeframes.weekly.directional_bias == DirectionalBias.NEUTRAL
        assert timeframes.conflict.exists is False
        assert result.validation.unknown_count == 0
        assert result.scenarios.invalidation_triggers[0] == (
            "Break below 50-day moving average with expanding volume"
        )

    @pytest.mark.parametrize("bars,confidence", [
        (250, Confidence.LOW),
        (260, Confidence.MEDIUM),
        (300, Confidence.MEDIUM_HIGH),
    ])
    def test_daily_confidence_grows_with_trend_age(self, uptrend_of_length, bars, confidence) -> None:
        """Test confidence thresholds at 60 and 90 days in trend."""
        result = MarketAnalysisEngine().analyze(uptrend_of_length(bars), "SPY")
        assert result.summary.timeframes.daily.confidence == confidence

    def test_overbought_series(self, overbought_series) -> None:
        """Test an RSI of exactly 75."""
        result = MarketAnalysisEngine().analyze(overbought_series, "SPY")

        assert result.raw_values.rsi == 75.0
        assert result.summary.indicator_signals.momentum == "Overbought"
        assert "RSI at 75.0 indicates overbought conditions" in result.summary.notes
        assert result.summary.market_data.overall_trend == "Unknown"
        assert result.validation.unknown_count == 1
        assert result.validation.is_valid

    def test_minimum_history(self, short_series) -> None:
        """Test exactly 50 bars passes with an unknown trend."""
        result = MarketAnalysisEngine().analyze(short_series, "SPY")

        assert result.summary.market_data.overall_trend == "Unknown"
        assert result.summary.indicator_signals.trend_strength == "Moderate"
        assert result.validation.unknown_fields == ("marketData.overallTrend",)
        assert result.validation.unknown_percentage == 7.7
        assert result.scenarios.invalidation_triggers == (
            "Significant change in trend direction or momentum",
        )

    def test_daily_pullback_in_weekly_uptrend(self, series_factory) -> None:
        """Test a 200-bar decline after a long advance conflicts with the weekly trend."""
        closes = [100.0 + 0.5 * i for i in range(1000)]
        closes += [closes[-1] - 0.5 * (i + 1) for i in range(200)]

        result = MarketAnalysisEngine().analyze(series_factory(closes), "SPY")
        timeframes = result.summary.timeframes

        assert timeframes.daily.directional_bias == DirectionalBias.BEARISH
        assert timeframes.weekly.directional_bias == DirectionalBias.BULLISH
        assert timeframes.conflict.exists is True
        assert timeframes.conflict.description == PULLBACK_DESCRIPTION
        assert CONFLICT_RESOLUTION_TRIGGER in result.scenarios.invalidation_triggers
        assert "timeframe conflict persists" in result.scenarios.neutral

    def test_chart_payload_to_messages(self, uptrend_series) -> None:
        """Test provider payload through to interpreter messages."""
        raw = orjson.dumps(to_chart_payload(uptrend_series))
        series = parse_chart_payload(raw)

        result = MarketAnalysisEngine().analyze(series, "SPY")
        messages = build_messages(result.summary, result.scenarios)

        assert len(series) == 250
        assert result.metadata.first_date == "2024-01-01"
        assert serialize_payload(result.to_payload()) in messages[1]["content"]

    def test_identical_input_identical_output(self, downtrend_series) -> None:
        """Test the pipeline is deterministic."""
        first = MarketAnalysisEngine().analyze(downtrend_series, "SPY").to_dict()
        second = MarketAnalysisEngine().analyze(downtrend_series, "SPY").to_dict()

        assert orjson.dumps(first) == orjson.dumps(second)
