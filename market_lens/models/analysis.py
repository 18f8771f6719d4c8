"""Timeframe and scenario models"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class DirectionalBias(str, Enum):
    """Expected direction for one timeframe."""
    BULLISH = "Bullish"
    BEARISH = "Bearish"
    NEUTRAL = "Neutral"


class Confidence(str, Enum):
    """Confidence in a timeframe profile, driven by trend maturity."""
    LOW = "Low"
    MEDIUM = "Medium"
    MEDIUM_HIGH = "Medium-High"


@dataclass(frozen=True)
class TimeframeProfile:
    """Directional summary of one granularity (daily or weekly)."""
    directional_bias: DirectionalBias
    confidence: Confidence
    trend_maturity: str
    volatility: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "directionalBias": self.directional_bias.value,
            "confidence": self.confidence.value,
            "trendMaturity": self.trend_maturity,
            "volatility": self.volatility,
        }


@dataclass(frozen=True)
class TimeframeConflict:
    """Relationship between the daily and weekly profiles."""
    exists: bool
    description: str

    def to_dict(self) -> dict[str, Any]:
        return {"exists": self.exists, "description": self.description}


@dataclass(frozen=True)
class TimeframeSummary:
    """Both timeframe profiles and their conflict state."""
    daily: TimeframeProfile
    weekly: TimeframeProfile
    conflict: TimeframeConflict

    def to_dict(self) -> dict[str, Any]:
        return {
            "daily": self.daily.to_dict(),
            "weekly": self.weekly.to_dict(),
            "timeframeConflict": self.conflict.to_dict(),
        }


@dataclass(frozen=True)
class ScenarioBundle:
    """Conditional IF/THEN narratives plus the triggers that would invalidate them."""
    bullish: str
    bearish: str
    neutral: str
    invalidation_triggers: tuple[str, ...]

    def __post_init__(self):
        if not self.invalidation_triggers:
            raise ValueError("invalidation_triggers must not be empty")

    def to_dict(self) -> dict[str, Any]:
        return {
            "bullishScenario": self.bullish,
            "bearishScenario": self.bearish,
            "neutralScenario": self.neutral,
            "invalidationTriggers": list(self.invalidation_triggers),
        }
