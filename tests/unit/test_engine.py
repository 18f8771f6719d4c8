"""Unit tests for the analysis pipeline engine."""

from dataclasses import replace
from datetime import date
from pathlib import Path
from unittest.mock import Mock, patch

import pytest

from market_lens.config.defaults import get_default_config
from market_lens.data.models import PriceSeries
from market_lens.engine import AnalysisResult, MarketAnalysisEngine, analyze_market
from market_lens.errors import InsufficientDataError, MalformedDataError, ValidationFailureError


class TestMarketAnalysisEngine:
    """Test suite for the MarketAnalysisEngine class."""

    def test_engine_initialization(self) -> None:
        """Test that the engine can be initialized."""
        engine = MarketAnalysisEngine()
        assert engine.config is None
        assert engine.config_loader is not None

    def test_engine_initialization_with_config_dir(self) -> None:
        """Test engine initialization with custom config directory."""
        with patch('market_lens.engine.ConfigLoader') as mock_config_loader:
            mock_config_loader.create.return_value = Mock()
            MarketAnalysisEngine(config_dir="/custom/path")
            mock_config_loader.create.assert_called_once_with(Path("/custom/path"))

    def test_analyze_returns_result(self, uptrend_series) -> None:
        """Test a full run over a valid series."""
        result = MarketAnalysisEngine().analyze(uptrend_series, "SPY")

        assert isinstance(result, AnalysisResult)
        assert result.validation.is_valid
        assert result.metadata.symbol == "SPY"
        assert result.metadata.data_points == 250
        assert result.metadata.weekly_data_points == 50
        assert result.metadata.first_date == "2024-01-01"
        assert result.metadata.last_date == "2024-09-06"
        assert result.metadata.gaps == ()

    def test_insufficient_history(self, cycle_series) -> None:
        """Test fewer than 50 bars is rejected before any computation."""
        with pytest.raises(InsufficientDataError):
            MarketAnalysisEngine().analyze(cycle_series((1.0, -0.5), 49), "SPY")

    def test_malformed_series(self, short_series) -> None:
        """Test invalid bars are rejected."""
        bad_bar = replace(short_series.last, high=short_series.last.low - 1)
        series = PriceSeries.from_bars(short_series.bars[:-1] + (bad_bar,))

        with pytest.raises(MalformedDataError):
            MarketAnalysisEngine().analyze(series, "SPY")

    def test_gate_failure_via_override(self, short_series) -> None:
        """Test a stricter request ratio rejects the 50-bar summary."""
        engine = MarketAnalysisEngine()

        with pytest.raises(ValidationFailureError) as exc_info:
            engine.analyze(short_series, "SPY", overrides={"validation": {"max_unknown_ratio": 0.05}})

        assert exc_info.value.unknown_fields == ["marketData.overallTrend"]

    def test_invalid_override(self, uptrend_series) -> None:
        """Test invalid request overrides are rejected."""
        with pytest.raises(ValueError, match="Invalid configuration"):
            MarketAnalysisEngine().analyze(uptrend_series, "SPY", overrides={"momentum": {"rsi_period": -1}})

    def test_history_floor_cannot_be_lowered(self, cycle_series) -> None:
        """Test a request cannot push a 20-bar history past the 50-bar floor."""
        series = cycle_series((1.0, -0.5), 20)

        with pytest.raises(ValueError, match="pipeline.min_bars"):
            MarketAnalysisEngine().analyze(series, "SPY", overrides={"pipeline": {"min_bars": 1}})

    def test_gate_ratio_cannot_be_loosened(self, uptrend_series) -> None:
        """Test a request cannot relax the 30% unknown-field limit."""
        with pytest.raises(ValueError, match="validation.max_unknown_ratio"):
            MarketAnalysisEngine().analyze(
                uptrend_series, "SPY", overrides={"validation": {"max_unknown_ratio": 1.0}}
            )

    def test_explicit_config_cannot_loosen_limits(self, uptrend_series) -> None:
        """Test an explicit configuration is held to the same limits."""
        config = get_default_config()
        config = replace(config, validation=replace(config.validation, max_unknown_ratio=0.5))

        with pytest.raises(ValueError, match="Invalid configuration"):
            MarketAnalysisEngine(config=config).analyze(uptrend_series, "SPY")

    def test_symbol_yaml_cannot_lower_floor(self, tmp_path, cycle_series) -> None:
        """Test symbol overrides are validated like request overrides."""
        (tmp_path / "symbols.yaml").write_text(
            "symbols:\n  SPY:\n    pipeline:\n      min_bars: 10\n"
        )

        with pytest.raises(ValueError, match="pipeline.min_bars"):
            MarketAnalysisEngine(config_dir=tmp_path).analyze(cycle_series((1.0, -0.5), 20), "SPY")

    def test_explicit_config(self, uptrend_series) -> None:
        """Test an explicit configuration replaces defaults and symbol YAML."""
        config = get_default_config()
        config = replace(config, pipeline=replace(config.pipeline, min_bars=300))

        with pytest.raises(InsufficientDataError):
            MarketAnalysisEngine(config=config).analyze(uptrend_series, "SPY")

    def test_resolve_config_symbol_yaml(self) -> None:
        """Test symbol overrides flow into the resolved configuration."""
        config = MarketAnalysisEngine().resolve_config("^VIX")
        assert config.volatility.elevated_pct == 5.0

    def test_gaps_reported(self, series_factory) -> None:
        """Test calendar gaps are reported in metadata without failing."""
        first = series_factory([100.0 + i * 0.3 for i in range(40)])
        second = series_factory([112.0 + i * 0.3 for i in range(20)], start=date(2024, 3, 1))
        series = PriceSeries.from_bars(first.bars + second.bars)

        result = MarketAnalysisEngine().analyze(series, "SPY")

        assert result.metadata.gaps == ("Gap from 2024-02-09 to 2024-03-01",)

    def test_result_serialization(self, uptrend_series) -> None:
        """Test the result renders with interpreter field names."""
        data = analyze_market(uptrend_series, "SPY").to_dict()

        assert set(data) == {"summary", "rawValues", "validation", "metadata"}
        assert data["summary"]["marketData"]["overallTrend"] == "Upward"
        assert data["summary"]["scenarios"]["invalidationTriggers"]
        assert data["rawValues"]["daysInTrend"] == 51
        assert data["validation"]["isValid"] is True

    def test_repeated_runs_are_identical(self, uptrend_series) -> None:
        """Test the engine keeps no per-request state."""
        engine = MarketAnalysisEngine()
        assert engine.analyze(uptrend_series, "SPY") == engine.analyze(uptrend_series, "SPY")
