"""Tests for SMA calculation"""

import math

import pytest

from market_lens.metrics.moving_average import calculate_sma, is_defined, last_value


class TestSMA:
    """Test Simple Moving Average"""

    def test_hand_computed_five_points(self):
        """Test SMA(3) of a 5-point series against hand-computed values"""
        result = calculate_sma([1.0, 2.0, 3.0, 4.0, 5.0], 3)

        assert len(result) == 5
        assert math.isnan(result[0])
        assert math.isnan(result[1])
        assert result[2] == pytest.approx(2.0)   # (1+2+3)/3
        assert result[3] == pytest.approx(3.0)   # (2+3+4)/3
        assert result[4] == pytest.approx(4.0)   # (3+4+5)/3

    def test_output_length_matches_input(self):
        """Test that undefined prefix has period-1 entries"""
        values = [float(v) for v in range(30)]
        result = calculate_sma(values, 10)

        assert len(result) == len(values)
        assert sum(1 for v in result if math.isnan(v)) == 9
        assert all(is_defined(v) for v in result[9:])

    def test_period_longer_than_input(self):
        """Test that a too-short input is entirely undefined"""
        result = calculate_sma([1.0, 2.0], 5)
        assert len(result) == 2
        assert all(math.isnan(v) for v in result)

    def test_period_one_is_identity(self):
        """Test SMA(1) returns the input values"""
        assert calculate_sma([4.0, 5.5, 7.0], 1) == [4.0, 5.5, 7.0]

    def test_invalid_period(self):
        """Test non-positive period is rejected"""
        with pytest.raises(ValueError):
            calculate_sma([1.0, 2.0], 0)

    def test_last_value(self):
        """Test last_value on empty and populated series"""
        assert math.isnan(last_value([]))
        assert last_value([1.0, 2.0]) == 2.0
