"""Indicator engine: moving averages, RSI, ATR and signal labels"""

from .atr import calculate_atr_series, calculate_true_range
from .calculator import IndicatorCalculator
from .moving_average import calculate_sma, last_value
from .rsi import calculate_rsi

__all__ = [
    "IndicatorCalculator",
    "calculate_atr_series",
    "calculate_true_range",
    "calculate_rsi",
    "calculate_sma",
    "last_value",
]
