"""SMA (Simple Moving Average) calculations"""

import math
from typing import Sequence


def calculate_sma(values: Sequence[float], period: int) -> list[float]:
    """
    Calculate a Simple Moving Average series

    The output has the same length as the input. Entries before the first
    full window are NaN; every other entry is the arithmetic mean of the
    trailing ``period`` values including the current one.

    Args:
        values: Input values in chronological order
        period: Window length (must be positive)

    Returns:
        SMA series aligned with the input
    """
    if period <= 0:
        raise ValueError(f"SMA period must be positive, got {period}")

    result = []
    for i in range(len(values)):
        if i < period - 1:
            result.append(math.nan)
        else:
            window = values[i - period + 1:i + 1]
            result.append(sum(window) / period)
    return result


def last_value(series: Sequence[float]) -> float:
    """Latest value of a series, NaN when the series is empty."""
    return series[-1] if series else math.nan


def is_defined(value: float) -> bool:
    """True for a number that is not NaN."""
    return not math.isnan(value)
