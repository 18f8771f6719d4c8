"""
Signal labelling functions.

Each function maps numeric evidence to one of a small set of labels. They
are pure and total: whenever a precondition is not met the result is the
"Unknown" label rather than an exception or a guess.
"""

from typing import Sequence

from ..data.models import PriceBar
from ..models.indicators import UNKNOWN, Trend, TrendReading
from .moving_average import calculate_sma, is_defined, last_value

# Momentum
OVERBOUGHT = "Overbought"
POSITIVE = "Positive"
SLOWING = "Slowing"
NEGATIVE = "Negative"
OVERSOLD = "Oversold"

# Volatility
INCREASING = "Increasing"
DECREASING = "Decreasing"
ELEVATED = "Elevated"
STABLE = "Stable"

# Volume behaviour
CONFIRMING = "Confirming"
DISTRIBUTION = "Distribution"
NEUTRAL = "Neutral"

# Trend strength
STRONG = "Strong"
STRONG_BEARISH = "Strong (bearish)"
MODERATE = "Moderate"
MODERATE_BEARISH = "Moderate (bearish)"
WEAK = "Weak"

# Support / resistance
NEAR_RESISTANCE = "Near resistance"
NEAR_SUPPORT = "Near support"
UPPER_RANGE = "Upper range"
LOWER_RANGE = "Lower range"
MID_RANGE = "Mid range"

# Risk mode
RISK_OFF = "Risk-Off"
RISK_ON = "Risk-On"
RISK_NEUTRAL = "Neutral"

# (upper bound in bars, label); the last label has no upper bound
DURATION_LABELS = (
    (14, "Early (< 2 weeks)"),
    (28, "Developing (2-4 weeks)"),
    (60, "Established (1-2 months)"),
    (120, "Mature (2-4 months)"),
)
EXTENDED_DURATION = "Extended (4+ months)"


def trend_from_averages(fast: Sequence[float], slow: Sequence[float]) -> TrendReading:
    """
    Derive trend and its age from aligned fast/slow moving average series.

    The age counts consecutive bars, walking back from the latest, on which
    the fast/slow relationship matches the current one. The walk stops at
    the first mismatch or the first bar where either average is undefined.
    """
    current_fast = last_value(fast)
    current_slow = last_value(slow)
    if not (is_defined(current_fast) and is_defined(current_slow)):
        return TrendReading(Trend.UNKNOWN, 0)

    is_up = current_fast > current_slow
    days = 0
    for f, s in zip(reversed(fast), reversed(slow)):
        if not (is_defined(f) and is_defined(s)):
            break
        if (f > s) != is_up:
            break
        days += 1

    return TrendReading(Trend.UPWARD if is_up else Trend.DOWNWARD, days)


def determine_trend(closes: Sequence[float], fast_period: int = 50, slow_period: int = 200) -> TrendReading:
    """Trend from the fast/slow SMA crossover on the latest bar."""
    return trend_from_averages(calculate_sma(closes, fast_period), calculate_sma(closes, slow_period))


def duration_label(days: int) -> str:
    """Map a trend age in bars to a maturity label."""
    for upper, label in DURATION_LABELS:
        if days < upper:
            return label
    return EXTENDED_DURATION


def momentum_label(rsi: float) -> str:
    """Map RSI to a momentum label."""
    if rsi > 70:
        return OVERBOUGHT
    if rsi > 60:
        return POSITIVE
    if 40 <= rsi <= 60:
        return SLOWING
    if rsi >= 30:
        return NEGATIVE
    return OVERSOLD


def volatility_label(
    atr_series: Sequence[float],
    price: float,
    lookback: int = 30,
    increasing_ratio: float = 1.3,
    decreasing_ratio: float = 0.8,
    elevated_pct: float = 2.0,
) -> str:
    """
    Compare the current ATR with its trailing average.

    Needs ``lookback`` defined ATR values. Expansion or contraction against
    the average wins over the ATR-as-percent-of-price check.
    """
    defined = [value for value in atr_series if is_defined(value)]
    if len(defined) < lookback:
        return UNKNOWN

    current = defined[-1]
    baseline = sum(defined[-lookback:]) / lookback

    if current > baseline * increasing_ratio:
        return INCREASING
    if current < baseline * decreasing_ratio:
        return DECREASING
    if price > 0 and (current / price) * 100 > elevated_pct:
        return ELEVATED
    return STABLE


def volume_behavior_label(bars: Sequence[PriceBar], lookback: int = 20, ratio: float = 1.2) -> str:
    """Compare average volume of up-days against down-days over the trailing window."""
    if len(bars) < lookback:
        return UNKNOWN

    recent = bars[-lookback:]
    up_volumes = [bar.volume for bar in recent if bar.is_up]
    down_volumes = [bar.volume for bar in recent if not bar.is_up]

    avg_up = sum(up_volumes) / len(up_volumes) if up_volumes else 0.0
    avg_down = sum(down_volumes) / len(down_volumes) if down_volumes else 0.0

    if avg_up > avg_down * ratio:
        return CONFIRMING
    if avg_down > avg_up * ratio:
        return DISTRIBUTION
    return NEUTRAL


def trend_strength_label(
    closes: Sequence[float],
    short_period: int = 20,
    fast_period: int = 50,
    slow_period: int = 200,
) -> str:
    """Classify how cleanly price and the three moving averages are stacked."""
    ma_short = last_value(calculate_sma(closes, short_period))
    ma_fast = last_value(calculate_sma(closes, fast_period))
    ma_slow = last_value(calculate_sma(closes, slow_period))

    if not all(is_defined(ma) for ma in (ma_short, ma_fast, ma_slow)):
        return UNKNOWN

    current = closes[-1]

    if current > ma_short > ma_fast > ma_slow:
        return STRONG
    if current < ma_short < ma_fast < ma_slow:
        return STRONG_BEARISH
    if current > ma_fast > ma_slow:
        return MODERATE
    if current < ma_fast < ma_slow:
        return MODERATE_BEARISH
    return WEAK


def support_resistance_label(closes: Sequence[float], lookback: int = 20) -> str:
    """Position of the latest close within the trailing high/low close range."""
    if len(closes) < lookback:
        return UNKNOWN

    window = closes[-lookback:]
    high = max(window)
    low = min(window)
    price_range = high - low

    # flat window
    if price_range == 0:
        return MID_RANGE

    position = (closes[-1] - low) / price_range

    if position > 0.9:
        return NEAR_RESISTANCE
    if position < 0.1:
        return NEAR_SUPPORT
    if position > 0.7:
        return UPPER_RANGE
    if position < 0.3:
        return LOWER_RANGE
    return MID_RANGE


def risk_mode_label(volatility: str, momentum: str, volume_behavior: str) -> str:
    """Count risk flags across volatility, momentum and volume."""
    risk_flags = sum([
        volatility in (INCREASING, ELEVATED),
        momentum in (OVERBOUGHT, OVERSOLD),
        volume_behavior == DISTRIBUTION,
    ])

    if risk_flags >= 2:
        return RISK_OFF
    if risk_flags == 0 and volume_behavior == CONFIRMING:
        return RISK_ON
    return RISK_NEUTRAL
