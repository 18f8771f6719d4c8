"""
Tracked summary field schema.

The single source of truth for which summary fields the validation gate
counts, which of them default-filling may replace, and the field names the
interpreter prompt expects. Default-filling and the gate both iterate
``SUMMARY_SCHEMA``.
"""

from dataclasses import dataclass, replace
from typing import Any, Optional

from ..models.summary import StructuredSummary


@dataclass(frozen=True)
class SummaryField:
    """One tracked field: its location in the summary, wire name and safe default."""
    group: str                      # StructuredSummary attribute
    name: str                       # attribute within the group
    wire_group: str
    wire_name: str
    default: Optional[str] = None   # None: no safe default, stays Unknown

    @property
    def path(self) -> str:
        return f"{self.wire_group}.{self.wire_name}"

    @property
    def has_default(self) -> bool:
        return self.default is not None


SUMMARY_SCHEMA: tuple[SummaryField, ...] = (
    # marketData
    SummaryField("market_data", "overall_trend", "marketData", "overallTrend"),
    SummaryField("market_data", "trend_duration", "marketData", "trendDuration"),
    SummaryField("market_data", "volume_behavior", "marketData", "volumeBehavior", "Neutral"),
    SummaryField("market_data", "volatility_level", "marketData", "volatilityLevel"),
    SummaryField("market_data", "correlation", "marketData", "correlation", "Normal"),
    SummaryField("market_data", "market_breadth", "marketData", "marketBreadth", "Neutral"),
    # indicatorSignals
    SummaryField("indicator_signals", "momentum", "indicatorSignals", "momentum"),
    SummaryField("indicator_signals", "trend_strength", "indicatorSignals", "trendStrength", "Moderate"),
    SummaryField("indicator_signals", "support_resistance", "indicatorSignals", "supportResistance",
                 "Near long-term support"),
    SummaryField("indicator_signals", "risk_mode", "indicatorSignals", "riskMode", "Transitioning"),
    # context
    SummaryField("context", "sentiment", "context", "sentiment", "Neutral"),
    SummaryField("context", "sentiment_velocity", "context", "sentimentVelocity", "Stable"),
    SummaryField("context", "macro_context", "context", "macroContext", "Stable"),
)

TOTAL_TRACKED_FIELDS = len(SUMMARY_SCHEMA)


def get_field(summary: StructuredSummary, field: SummaryField) -> Any:
    return getattr(getattr(summary, field.group), field.name)


def with_field(summary: StructuredSummary, field: SummaryField, value: Any) -> StructuredSummary:
    """Return a copy of ``summary`` with one tracked field replaced."""
    group = replace(getattr(summary, field.group), **{field.name: value})
    return replace(summary, **{field.group: group})


def summary_to_dict(summary: StructuredSummary) -> dict[str, Any]:
    """Render a summary with the interpreter's camelCase field names."""
    result: dict[str, Any] = {}
    for field in SUMMARY_SCHEMA:
        result.setdefault(field.wire_group, {})[field.wire_name] = get_field(summary, field)
    result["notes"] = list(summary.notes)
    if summary.timeframes is not None:
        result["timeframes"] = summary.timeframes.to_dict()
    return result
