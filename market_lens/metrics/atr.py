"""ATR (Average True Range) calculations"""

from typing import Sequence

from ..data.models import PriceBar
from .moving_average import calculate_sma


def calculate_true_range(current: PriceBar, previous: PriceBar) -> float:
    """
    Calculate True Range for a bar against the previous close

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))

    Args:
        current: Current bar
        previous: Previous bar

    Returns:
        True Range value
    """
    range_hl = current.high - current.low
    range_hc = abs(current.high - previous.close)
    range_lc = abs(current.low - previous.close)

    return max(range_hl, range_hc, range_lc)


def calculate_true_ranges(bars: Sequence[PriceBar]) -> list[float]:
    """True ranges from the second bar onwards (the first bar has no previous close)."""
    return [calculate_true_range(bars[i], bars[i - 1]) for i in range(1, len(bars))]


def calculate_atr_series(bars: Sequence[PriceBar], period: int = 14) -> list[float]:
    """
    Calculate the ATR series as the SMA of true ranges

    The series is one element shorter than ``bars``; its first
    ``period - 1`` entries are NaN.

    Args:
        bars: Bars in chronological order
        period: ATR period (default 14)

    Returns:
        ATR series
    """
    return calculate_sma(calculate_true_ranges(bars), period)
