"""
Main analysis pipeline coordinator.

Runs the deterministic market-state pipeline for one request:
Daily Series → Indicators → Weekly Aggregation → Weekly Indicators →
Timeframe Profiles → Conflict → Scenarios → Summary → Defaults → Validation Gate
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional, Union

from .config.defaults import DefaultConfig, config_from_dict
from .config.loader import ConfigLoader
from .config.validation import ConfigValidator
from .data.models import PriceSeries
from .data.validators import SeriesValidator, find_gaps
from .interpretation.payload import build_payload
from .logging.config import get_pipeline_logger, log_stage_completed
from .metrics.calculator import IndicatorCalculator
from .models.analysis import ScenarioBundle, TimeframeSummary
from .models.indicators import IndicatorSet, RawValues
from .models.summary import StructuredSummary, ValidationResult
from .scenarios.generator import generate_scenarios
from .summary.builder import apply_safe_defaults, build_summary
from .timeframes.aggregator import aggregate_to_weekly
from .timeframes.analyzer import TimeframeAnalyzer, detect_conflict
from .validation.gate import enforce, validate_summary

logger = get_pipeline_logger(__name__)


@dataclass(frozen=True)
class PipelineMetadata:
    """Request bookkeeping returned alongside the analysis."""
    symbol: str
    data_points: int
    weekly_data_points: int
    first_date: str
    last_date: str
    gaps: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "symbol": self.symbol,
            "dataPoints": self.data_points,
            "weeklyDataPoints": self.weekly_data_points,
            "firstDate": self.first_date,
            "lastDate": self.last_date,
            "gaps": list(self.gaps),
        }


@dataclass(frozen=True)
class AnalysisResult:
    """Everything the orchestrator needs to call the interpreter."""
    summary: StructuredSummary
    scenarios: ScenarioBundle
    validation: ValidationResult
    daily_indicators: IndicatorSet
    weekly_indicators: IndicatorSet
    raw_values: RawValues
    metadata: PipelineMetadata

    def to_payload(self) -> dict[str, Any]:
        """Interpreter payload: summary fields plus scenarios."""
        return build_payload(self.summary, self.scenarios)

    def to_dict(self) -> dict[str, Any]:
        return {
            "summary": self.to_payload(),
            "rawValues": self.raw_values.to_dict(),
            "validation": self.validation.to_dict(),
            "metadata": self.metadata.to_dict(),
        }


class MarketAnalysisEngine:
    """
    Coordinator for the market-state analysis pipeline.

    The engine holds configuration only. Every call to ``analyze`` is
    independent and works on value objects created for that request.
    """

    def __init__(self, config: Optional[DefaultConfig] = None,
                 config_dir: Optional[Union[str, Path]] = None) -> None:
        self.config = config
        self.config_loader = ConfigLoader.create(Path(config_dir) if config_dir else None)
        self.validator = SeriesValidator()

    def resolve_config(self, symbol: str, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """
        Configuration for one request.

        An explicit config passed to the engine replaces defaults and symbol
        YAML; request overrides always apply last. Whatever the source, the
        merged result may tighten but never loosen the history floor and the
        unknown-field ratio.

        Raises:
            ValueError: If the merged configuration is invalid
        """
        if self.config is not None:
            merged = self.config_loader.apply_overrides(self.config, overrides or {})
        else:
            merged = self.config_loader.merge_config(symbol, overrides)

        errors = ConfigValidator.validate_config(merged)
        if errors:
            details = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
            logger.error("Configuration validation failed", symbol=symbol, errors=details)
            raise ValueError(f"Invalid configuration: {'; '.join(details)}")

        return config_from_dict(merged)

    def analyze(self, series: PriceSeries, symbol: str,
                overrides: Optional[dict[str, Any]] = None) -> AnalysisResult:
        """
        Run the full pipeline for one series.

        Args:
            series: Daily price series, oldest first
            symbol: Symbol or context label for the request
            overrides: Optional per-request configuration overrides

        Returns:
            AnalysisResult that passed the validation gate

        Raises:
            InsufficientDataError: If the daily series is shorter than the minimum
            MalformedDataError / TemporalDataError: If the series is invalid
            ValidationFailureError: If too many summary fields stay unresolved
        """
        config = self.resolve_config(symbol, overrides)
        calculator = IndicatorCalculator(config)
        timeframe_analyzer = TimeframeAnalyzer(calculator=calculator)

        self.validator.require_length(series, config.pipeline.min_bars)
        self.validator.validate_series(series)
        gaps = find_gaps(series, config.timeframe.max_gap_days)
        if gaps:
            logger.warning("Price history has calendar gaps", symbol=symbol, gaps=gaps)

        daily = calculator.compute(series)
        log_stage_completed(logger, symbol, "daily_indicators", {"bars": len(series)})

        weekly_series = aggregate_to_weekly(series, config.timeframe.weekly_chunk_size)
        weekly = calculator.compute(weekly_series, enforce_minimum=False)
        log_stage_completed(logger, symbol, "weekly_indicators", {"bars": len(weekly_series)})

        daily_profile = timeframe_analyzer.analyze(series)
        weekly_profile = timeframe_analyzer.analyze(weekly_series)
        timeframes = TimeframeSummary(
            daily=daily_profile,
            weekly=weekly_profile,
            conflict=detect_conflict(daily_profile, weekly_profile),
        )
        log_stage_completed(logger, symbol, "timeframe_analysis", timeframes.to_dict())

        scenarios = generate_scenarios(daily.indicators, weekly.indicators, timeframes.conflict)

        summary = apply_safe_defaults(build_summary(daily.indicators, daily.raw_values, timeframes))

        validation = validate_summary(summary, config.validation.max_unknown_ratio, symbol=symbol)
        enforce(validation)

        metadata = PipelineMetadata(
            symbol=symbol,
            data_points=len(series),
            weekly_data_points=len(weekly_series),
            first_date=series[0].date.isoformat(),
            last_date=series.last.date.isoformat(),
            gaps=tuple(gaps),
        )

        logger.info(
            "Analysis completed",
            symbol=symbol,
            unknown_count=validation.unknown_count,
            total_fields=validation.total_fields,
        )

        return AnalysisResult(
            summary=summary,
            scenarios=scenarios,
            validation=validation,
            daily_indicators=daily.indicators,
            weekly_indicators=weekly.indicators,
            raw_values=daily.raw_values,
            metadata=metadata,
        )


def analyze_market(series: PriceSeries, symbol: str,
                   config: Optional[DefaultConfig] = None) -> AnalysisResult:
    """Run the pipeline once with a throwaway engine."""
    return MarketAnalysisEngine(config=config).analyze(series, symbol)
