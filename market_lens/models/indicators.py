"""
Indicator snapshot models.

An IndicatorSet holds the labelled signals derived from one series and
RawValues holds the numeric evidence behind them. Both are recomputed for
every request and never mutated.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

# Label used for every signal whose preconditions are not met.
UNKNOWN = "Unknown"
NOT_AVAILABLE = "N/A"


class Trend(str, Enum):
    """Overall trend from the fast/slow moving average relationship."""
    UPWARD = "Upward"
    DOWNWARD = "Downward"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class TrendReading:
    """Trend direction plus the number of consecutive bars it has held."""
    trend: Trend
    days_in_trend: int = 0

    @property
    def is_known(self) -> bool:
        return self.trend is not Trend.UNKNOWN


@dataclass(frozen=True)
class IndicatorSet:
    """Labelled signals for one series."""
    overall_trend: Trend
    trend_duration_days: int
    trend_duration: str
    momentum: str
    volatility: str
    volume_behavior: str
    trend_strength: str
    support_resistance: str
    risk_mode: str

    def to_dict(self) -> dict[str, Any]:
        """Labels keyed by their interpreter field names."""
        return {
            "overallTrend": self.overall_trend.value,
            "trendDuration": self.trend_duration,
            "volumeBehavior": self.volume_behavior,
            "volatilityLevel": self.volatility,
            "momentum": self.momentum,
            "trendStrength": self.trend_strength,
            "supportResistance": self.support_resistance,
            "riskMode": self.risk_mode,
        }


def _available(value: Optional[float]) -> Optional[float]:
    if value is None or math.isnan(value):
        return None
    return value


def _render(value: Optional[float]) -> Any:
    return NOT_AVAILABLE if value is None else round(value, 2)


@dataclass(frozen=True)
class RawValues:
    """Numeric evidence behind an IndicatorSet.

    ``sma50``, ``sma200`` and ``atr`` are None when the history is too short.
    """
    rsi: float
    days_in_trend: int
    current_price: float
    sma50: Optional[float] = None
    sma200: Optional[float] = None
    atr: Optional[float] = None

    @classmethod
    def create(cls, rsi: float, days_in_trend: int, current_price: float,
               sma50: Optional[float], sma200: Optional[float], atr: Optional[float]) -> "RawValues":
        """Build raw values, mapping NaN to None and rounding RSI to 2 decimals."""
        return cls(
            rsi=round(rsi, 2),
            days_in_trend=days_in_trend,
            current_price=current_price,
            sma50=_available(sma50),
            sma200=_available(sma200),
            atr=_available(atr),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "rsi": self.rsi,
            "daysInTrend": self.days_in_trend,
            "currentPrice": self.current_price,
            "sma50": _render(self.sma50),
            "sma200": _render(self.sma200),
            "atr": _render(self.atr),
        }


@dataclass(frozen=True)
class IndicatorResult:
    """Output of the indicator engine for one series."""
    indicators: IndicatorSet
    raw_values: RawValues
