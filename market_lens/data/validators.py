"""
Data validation for OHLCV price series.

Checks bar-level OHLC invariants, chronological ordering and history length
before any indicator is computed.
"""

import math
from datetime import timedelta
from typing import Optional

from ..errors import InsufficientDataError, MalformedDataError, TemporalDataError
from .models import PriceBar, PriceSeries


class SeriesValidator:
    """Validates price bars and series against data-quality rules."""

    def validate_bar(self, bar: PriceBar) -> None:
        """
        Validate a single bar.

        Raises:
            MalformedDataError: If a price is not finite and positive, the OHLC
                values are inconsistent, or the volume is negative.
        """
        for name in ("open", "high", "low", "close"):
            price = getattr(bar, name)
            if not isinstance(price, (int, float)) or isinstance(price, bool):
                raise MalformedDataError(f"Invalid {name} type on {bar.date}: {type(price).__name__}")
            if math.isnan(price) or math.isinf(price):
                raise MalformedDataError(f"Invalid {name} value on {bar.date}: {price}")
            if price <= 0:
                raise MalformedDataError(f"Non-positive {name} on {bar.date}: {price}")

        if bar.high < max(bar.open, bar.close, bar.low):
            raise MalformedDataError(
                f"High {bar.high} must be >= max(open {bar.open}, close {bar.close}, low {bar.low}) on {bar.date}"
            )

        if bar.low > min(bar.open, bar.close, bar.high):
            raise MalformedDataError(
                f"Low {bar.low} must be <= min(open {bar.open}, close {bar.close}, high {bar.high}) on {bar.date}"
            )

        if not isinstance(bar.volume, (int, float)) or math.isnan(bar.volume) or math.isinf(bar.volume):
            raise MalformedDataError(f"Invalid volume value on {bar.date}: {bar.volume}")
        if bar.volume < 0:
            raise MalformedDataError(f"Negative volume on {bar.date}: {bar.volume}")

    def validate_series(self, series: PriceSeries) -> None:
        """
        Validate every bar and the ordering of the series.

        Raises:
            MalformedDataError: If any bar is malformed
            TemporalDataError: If dates are not strictly ascending
        """
        previous: Optional[PriceBar] = None
        for bar in series:
            self.validate_bar(bar)
            if previous is not None:
                if bar.date == previous.date:
                    raise TemporalDataError(
                        f"Duplicate bar date: {bar.date}",
                        date=str(bar.date),
                        previous_date=str(previous.date),
                    )
                if bar.date < previous.date:
                    raise TemporalDataError(
                        f"Out of order bar: {bar.date} < {previous.date}",
                        date=str(bar.date),
                        previous_date=str(previous.date),
                    )
            previous = bar

    def require_length(self, series: PriceSeries, minimum: int) -> None:
        """
        Enforce a minimum history length.

        Raises:
            InsufficientDataError: If the series has fewer than ``minimum`` bars
        """
        if len(series) < minimum:
            raise InsufficientDataError(
                f"Insufficient OHLCV data: need at least {minimum} data points, got {len(series)}",
                required_count=minimum,
                available_count=len(series),
            )


def find_gaps(series: PriceSeries, max_gap_days: int = 4) -> list[str]:
    """
    Report calendar gaps between consecutive bars.

    Weekends and single holidays stay within ``max_gap_days``; anything longer
    is reported. Gaps are informational and never reject a series.
    """
    gaps = []
    limit = timedelta(days=max_gap_days)
    for previous, current in zip(series.bars, series.bars[1:]):
        if current.date - previous.date > limit:
            gaps.append(f"Gap from {previous.date.isoformat()} to {current.date.isoformat()}")
    return gaps
