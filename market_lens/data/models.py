"""
Canonical data models for OHLCV price history.

Bars and series are immutable once parsed; weekly series are always derived
from a daily series and never supplied directly.
"""

from dataclasses import dataclass
from datetime import date
from typing import Iterator, Union

DAILY = "daily"
WEEKLY = "weekly"


@dataclass(frozen=True)
class PriceBar:
    """One period of open/high/low/close/volume data."""
    date: date
    open: float
    high: float
    low: float
    close: float
    volume: float

    @property
    def is_up(self) -> bool:
        """True when the bar closed above its open."""
        return self.close > self.open


@dataclass(frozen=True)
class PriceSeries:
    """Chronologically ordered bars of a single granularity."""
    bars: tuple[PriceBar, ...]
    granularity: str = DAILY

    def __len__(self) -> int:
        return len(self.bars)

    def __iter__(self) -> Iterator[PriceBar]:
        return iter(self.bars)

    def __getitem__(self, index: Union[int, slice]):
        return self.bars[index]

    @property
    def closes(self) -> list[float]:
        return [bar.close for bar in self.bars]

    @property
    def last(self) -> PriceBar:
        """Most recent bar. Raises IndexError on an empty series."""
        return self.bars[-1]

    @classmethod
    def from_bars(cls, bars, granularity: str = DAILY) -> "PriceSeries":
        """Create a series from any iterable of bars."""
        return cls(bars=tuple(bars), granularity=granularity)
