"""Pytest configuration and shared fixtures."""

from datetime import date, timedelta
from itertools import cycle, islice
from typing import Callable, Optional, Sequence

import pytest

from market_lens.data.models import DAILY, PriceBar, PriceSeries

# 7-bar change cycles: any 14 consecutive changes hold exactly two cycles,
# so the RSI of the trailing window does not depend on where the series ends.
UPTREND_CYCLE = (1.0, 1.0, 1.0, 1.0, -1.0, -1.0, -0.15)        # RSI ~65.04
OVERBOUGHT_CYCLE = (0.5, 0.5, 0.5, 0.5, 0.5, 0.5, -1.0)        # RSI 75.0
DOWNTREND_CYCLE = tuple(-change for change in UPTREND_CYCLE)     # RSI ~34.96


def build_series(
    closes: Sequence[float],
    volumes: Optional[Sequence[float]] = None,
    start: date = date(2024, 1, 1),
    wick: float = 0.5,
) -> PriceSeries:
    """Daily series on consecutive calendar days; each bar opens at the previous close."""
    volumes = volumes if volumes is not None else [1_000_000.0] * len(closes)
    bars = []
    previous_close = closes[0]
    for i, (close, volume) in enumerate(zip(closes, volumes)):
        open_ = previous_close
        bars.append(PriceBar(
            date=start + timedelta(days=i),
            open=open_,
            high=max(open_, close) + wick,
            low=min(open_, close) - wick,
            close=close,
            volume=volume,
        ))
        previous_close = close
    return PriceSeries.from_bars(bars, granularity=DAILY)


def closes_from_changes(changes: Sequence[float], count: int, start_price: float = 100.0) -> list[float]:
    closes = [start_price]
    for change in islice(cycle(changes), count - 1):
        closes.append(closes[-1] + change)
    return closes


@pytest.fixture
def series_factory() -> Callable[..., PriceSeries]:
    """Build a daily series from closes (and optional volumes)."""
    return build_series


@pytest.fixture
def cycle_series() -> Callable[..., PriceSeries]:
    """Build a daily series by repeating a cycle of close-to-close changes."""
    def _make(changes: Sequence[float], count: int, start_price: float = 100.0, **kwargs) -> PriceSeries:
        return build_series(closes_from_changes(changes, count, start_price), **kwargs)
    return _make


@pytest.fixture
def uptrend_series(cycle_series) -> PriceSeries:
    """250 bars drifting upward with RSI ~65 and constant volume."""
    return cycle_series(UPTREND_CYCLE, 250)


@pytest.fixture
def downtrend_series(cycle_series) -> PriceSeries:
    """250 bars drifting downward with RSI ~35 and constant volume."""
    return cycle_series(DOWNTREND_CYCLE, 250, start_price=200.0)


@pytest.fixture
def overbought_series(cycle_series) -> PriceSeries:
    """120 bars of mostly consecutive gains with RSI exactly 75."""
    return cycle_series(OVERBOUGHT_CYCLE, 120)


@pytest.fixture
def short_series(cycle_series) -> PriceSeries:
    """Exactly 50 bars: too short for the 200-bar moving average."""
    return cycle_series(UPTREND_CYCLE, 50)


@pytest.fixture
def uptrend_of_length(cycle_series) -> Callable[[int], PriceSeries]:
    """Build an uptrend series of a given length."""
    def _make(count: int) -> PriceSeries:
        return cycle_series(UPTREND_CYCLE, count)
    return _make
