"""Per-timeframe directional profiles and timeframe conflict detection"""

from typing import Optional

from ..config.defaults import DefaultConfig
from ..data.models import PriceSeries
from ..metrics.calculator import IndicatorCalculator
from ..metrics.labels import duration_label
from ..models.analysis import Confidence, DirectionalBias, TimeframeConflict, TimeframeProfile
from ..models.indicators import Trend, TrendReading

# Evaluated highest first; the first threshold the trend age reaches wins.
CONFIDENCE_THRESHOLDS = (
    (90, Confidence.MEDIUM_HIGH),
    (60, Confidence.MEDIUM),
)

BIAS_BY_TREND = {
    Trend.UPWARD: DirectionalBias.BULLISH,
    Trend.DOWNWARD: DirectionalBias.BEARISH,
}

ALIGNED_DESCRIPTION = "Daily and weekly timeframes are aligned or neutral."
PULLBACK_DESCRIPTION = (
    "Short-term bearish pullback within a longer-term bullish trend. "
    "This may represent a corrective move or potential trend reversal."
)
BOUNCE_DESCRIPTION = (
    "Short-term bullish bounce within a longer-term bearish trend. "
    "This may represent a relief rally or potential trend reversal."
)


def bias_for_trend(trend: Trend) -> DirectionalBias:
    """Upward is Bullish, Downward is Bearish, anything else Neutral."""
    return BIAS_BY_TREND.get(trend, DirectionalBias.NEUTRAL)


def confidence_for_trend(reading: TrendReading) -> Confidence:
    """Confidence from trend maturity; an unknown trend is always Low."""
    if not reading.is_known:
        return Confidence.LOW
    for min_days, confidence in CONFIDENCE_THRESHOLDS:
        if reading.days_in_trend >= min_days:
            return confidence
    return Confidence.LOW


class TimeframeAnalyzer:
    """Builds a TimeframeProfile for a daily or weekly series."""

    def __init__(self, config: Optional[DefaultConfig] = None,
                 calculator: Optional[IndicatorCalculator] = None):
        self.calculator = calculator or IndicatorCalculator(config)

    def analyze(self, series: PriceSeries) -> TimeframeProfile:
        reading = self.calculator.trend(series)
        return TimeframeProfile(
            directional_bias=bias_for_trend(reading.trend),
            confidence=confidence_for_trend(reading),
            trend_maturity=duration_label(reading.days_in_trend),
            volatility=self.calculator.volatility(series),
        )


def detect_conflict(daily: TimeframeProfile, weekly: TimeframeProfile) -> TimeframeConflict:
    """
    Compare daily and weekly directional bias.

    Equal biases, or a Neutral bias on either side, are not a conflict.
    """
    daily_bias = daily.directional_bias
    weekly_bias = weekly.directional_bias

    if (daily_bias == weekly_bias
            or daily_bias is DirectionalBias.NEUTRAL
            or weekly_bias is DirectionalBias.NEUTRAL):
        return TimeframeConflict(exists=False, description=ALIGNED_DESCRIPTION)

    if daily_bias is DirectionalBias.BEARISH and weekly_bias is DirectionalBias.BULLISH:
        description = PULLBACK_DESCRIPTION
    elif daily_bias is DirectionalBias.BULLISH and weekly_bias is DirectionalBias.BEARISH:
        description = BOUNCE_DESCRIPTION
    else:
        description = (
            f"Daily bias ({daily_bias.value}) conflicts with weekly bias ({weekly_bias.value}). "
            "Exercise caution as timeframes disagree."
        )

    return TimeframeConflict(exists=True, description=description)


def analyze_timeframe(series: PriceSeries, config: Optional[DefaultConfig] = None) -> TimeframeProfile:
    """Profile a single daily or weekly series."""
    return TimeframeAnalyzer(config).analyze(series)
