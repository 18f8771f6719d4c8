"""Structured summary construction and safe default-filling"""

from typing import Optional

from ..logging.config import get_logger
from ..metrics.labels import (
    CONFIRMING,
    DISTRIBUTION,
    ELEVATED,
    INCREASING,
    NEAR_RESISTANCE,
    NEAR_SUPPORT,
)
from ..models.analysis import TimeframeSummary
from ..models.indicators import UNKNOWN, IndicatorSet, RawValues
from ..models.summary import IndicatorSignals, MarketContext, MarketData, StructuredSummary
from .schema import SUMMARY_SCHEMA, get_field, with_field

logger = get_logger(__name__)


def build_notes(indicators: IndicatorSet, raw_values: RawValues) -> tuple[str, ...]:
    """Free-text observations; at most one note per condition group."""
    notes = []
    rsi = raw_values.rsi

    if rsi > 70:
        notes.append(f"RSI at {rsi} indicates overbought conditions")
    elif rsi < 30:
        notes.append(f"RSI at {rsi} indicates oversold conditions")
    elif rsi > 60:
        notes.append(f"RSI at {rsi} suggests positive momentum")
    elif rsi < 40:
        notes.append(f"RSI at {rsi} suggests weakening momentum")

    days = raw_values.days_in_trend
    if days > 60:
        notes.append(f"Trend has persisted for {days} days - mature phase")
    elif days < 14:
        notes.append(f"Trend is only {days} days old - early formation")

    if indicators.volume_behavior == DISTRIBUTION:
        notes.append("Volume pattern suggests distribution/accumulation by larger players")
    elif indicators.volume_behavior == CONFIRMING:
        notes.append("Volume confirms price direction")

    if indicators.volatility == INCREASING:
        notes.append("Volatility is expanding - increased uncertainty")
    elif indicators.volatility == ELEVATED:
        notes.append("Elevated volatility environment persists")

    if indicators.support_resistance == NEAR_RESISTANCE:
        notes.append("Price approaching key resistance levels")
    elif indicators.support_resistance == NEAR_SUPPORT:
        notes.append("Price near key support levels")

    return tuple(notes)


def build_summary(
    indicators: IndicatorSet,
    raw_values: RawValues,
    timeframes: Optional[TimeframeSummary] = None,
) -> StructuredSummary:
    """
    Assemble the structured summary from the daily indicator snapshot.

    Cross-asset and context fields need data sources outside this pipeline
    and start as Unknown.
    """
    return StructuredSummary(
        market_data=MarketData(
            overall_trend=indicators.overall_trend.value,
            trend_duration=indicators.trend_duration,
            volume_behavior=indicators.volume_behavior,
            volatility_level=indicators.volatility,
            correlation=UNKNOWN,
            market_breadth=UNKNOWN,
        ),
        indicator_signals=IndicatorSignals(
            momentum=indicators.momentum,
            trend_strength=indicators.trend_strength,
            support_resistance=indicators.support_resistance,
            risk_mode=indicators.risk_mode,
        ),
        context=MarketContext(
            sentiment=UNKNOWN,
            sentiment_velocity=UNKNOWN,
            macro_context=UNKNOWN,
        ),
        notes=build_notes(indicators, raw_values),
        timeframes=timeframes,
    )


def apply_safe_defaults(summary: StructuredSummary) -> StructuredSummary:
    """
    Replace unresolved values of defaultable fields with their safe defaults.

    Returns a new summary. Fields without a schema default (trend, trend
    duration, volatility, momentum) are never filled.
    """
    filled = summary
    replaced = []
    for field in SUMMARY_SCHEMA:
        if not field.has_default:
            continue
        value = get_field(filled, field)
        if not value or value == UNKNOWN:
            filled = with_field(filled, field, field.default)
            replaced.append(field.path)

    logger.debug("Applied safe defaults", replaced_fields=replaced)
    return filled
