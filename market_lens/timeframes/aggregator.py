"""Daily to weekly candle aggregation"""

from ..data.models import WEEKLY, PriceBar, PriceSeries
from ..logging.config import get_logger

logger = get_logger(__name__)


def merge_bars(bars: tuple[PriceBar, ...]) -> PriceBar:
    """
    Merge consecutive bars into one candle.

    Open and date come from the first bar, close from the last; high and low
    are the extremes and volume is the sum.
    """
    return PriceBar(
        date=bars[0].date,
        open=bars[0].open,
        high=max(bar.high for bar in bars),
        low=min(bar.low for bar in bars),
        close=bars[-1].close,
        volume=sum(bar.volume for bar in bars),
    )


def aggregate_to_weekly(series: PriceSeries, chunk_size: int = 5) -> PriceSeries:
    """
    Downsample a daily series into weekly candles.

    Bars are grouped into consecutive chunks of ``chunk_size`` in their
    original order; the last chunk may be shorter. Calendar weeks, holidays
    and gaps are not taken into account.

    Args:
        series: Daily price series
        chunk_size: Bars per weekly candle (default 5 trading days)

    Returns:
        Weekly PriceSeries in chronological order
    """
    if chunk_size <= 0:
        raise ValueError(f"chunk_size must be positive, got {chunk_size}")

    bars = series.bars
    weekly = [merge_bars(bars[i:i + chunk_size]) for i in range(0, len(bars), chunk_size)]

    logger.debug("Aggregated daily candles", daily_bars=len(bars), weekly_bars=len(weekly))
    return PriceSeries.from_bars(weekly, granularity=WEEKLY)
