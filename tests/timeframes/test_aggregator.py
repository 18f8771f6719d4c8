"""Tests for daily to weekly aggregation"""

from datetime import date, timedelta

import pytest

from market_lens.data.models import DAILY, WEEKLY, PriceBar, PriceSeries
from market_lens.timeframes.aggregator import aggregate_to_weekly, merge_bars


def daily_bars(count):
    return PriceSeries.from_bars(
        PriceBar(
            date=date(2024, 1, 1) + timedelta(days=i),
            open=100.0 + i,
            high=110.0 + i,
            low=90.0 + i,
            close=105.0 + i,
            volume=1000.0 * (i + 1),
        )
        for i in range(count)
    )


class TestAggregateToWeekly:
    """Test chunked weekly aggregation"""

    def test_ten_bars_make_two_candles(self):
        """Test 10 daily bars merge into two 5-bar candles"""
        weekly = aggregate_to_weekly(daily_bars(10))

        assert len(weekly) == 2
        assert weekly.granularity == WEEKLY

        first, second = weekly.bars
        assert first.date == date(2024, 1, 1)
        assert first.open == 100.0
        assert first.high == 114.0
        assert first.low == 90.0
        assert first.close == 109.0
        assert first.volume == 15000.0  # 1000 + 2000 + ... + 5000

        assert second.date == date(2024, 1, 6)
        assert second.open == 105.0
        assert second.high == 119.0
        assert second.low == 95.0
        assert second.close == 114.0
        assert second.volume == 40000.0

    def test_partial_last_chunk(self):
        """Test a trailing partial chunk becomes its own candle"""
        weekly = aggregate_to_weekly(daily_bars(12))

        assert len(weekly) == 3
        assert weekly.last.date == date(2024, 1, 11)
        assert weekly.last.close == 116.0
        assert weekly.last.volume == 11000.0 + 12000.0

    def test_candle_count(self):
        """Test ceil(n / chunk) candles for 250 bars"""
        assert len(aggregate_to_weekly(daily_bars(250))) == 50

    def test_empty_series(self):
        assert len(aggregate_to_weekly(PriceSeries.from_bars([]))) == 0

    def test_custom_chunk_size(self):
        assert len(aggregate_to_weekly(daily_bars(10), chunk_size=3)) == 4

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError):
            aggregate_to_weekly(daily_bars(10), chunk_size=0)

    def test_input_unchanged(self):
        """Test the daily series is not modified"""
        series = daily_bars(10)
        aggregate_to_weekly(series)

        assert len(series) == 10
        assert series.granularity == DAILY

    def test_merge_single_bar(self):
        bar = daily_bars(1)[0]
        assert merge_bars((bar,)) == bar
