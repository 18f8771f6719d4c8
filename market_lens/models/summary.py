"""Structured summary and validation result models"""

from dataclasses import dataclass
from typing import Any, Optional

from .analysis import TimeframeSummary


@dataclass(frozen=True)
class MarketData:
    overall_trend: str
    trend_duration: str
    volume_behavior: str
    volatility_level: str
    correlation: str
    market_breadth: str


@dataclass(frozen=True)
class IndicatorSignals:
    momentum: str
    trend_strength: str
    support_resistance: str
    risk_mode: str


@dataclass(frozen=True)
class MarketContext:
    sentiment: str
    sentiment_velocity: str
    macro_context: str


@dataclass(frozen=True)
class StructuredSummary:
    """
    Category-grouped market state handed to the interpreter.

    Built once per request and replaced (never mutated) by default-filling.
    """
    market_data: MarketData
    indicator_signals: IndicatorSignals
    context: MarketContext
    notes: tuple[str, ...] = ()
    timeframes: Optional[TimeframeSummary] = None


@dataclass(frozen=True)
class ValidationResult:
    """How many tracked summary fields remain unresolved."""
    is_valid: bool
    unknown_count: int
    unknown_percentage: float
    total_fields: int
    unknown_fields: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        if self.is_valid:
            return "Summary passed validation"
        return "Insufficient data for reliable interpretation"

    def to_dict(self) -> dict[str, Any]:
        return {
            "isValid": self.is_valid,
            "unknownCount": self.unknown_count,
            "unknownPercentage": self.unknown_percentage,
            "message": self.message,
        }
