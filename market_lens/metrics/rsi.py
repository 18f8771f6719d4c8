"""RSI (Relative Strength Index) calculation"""

from typing import Sequence

NEUTRAL_RSI = 50.0


def calculate_rsi(closes: Sequence[float], period: int = 14) -> float:
    """
    Calculate RSI from the last ``period`` close-to-close changes

    Gains and losses are simple sums over the window divided by ``period``
    (no Wilder smoothing).

    Args:
        closes: Close prices in chronological order
        period: RSI period (default 14)

    Returns:
        RSI in [0, 100]; 50.0 when fewer than period + 1 closes are given,
        100.0 when the window has no losses
    """
    if len(closes) < period + 1:
        return NEUTRAL_RSI

    changes = [closes[i] - closes[i - 1] for i in range(1, len(closes))]
    recent = changes[-period:]

    gains = sum(change for change in recent if change > 0)
    losses = sum(-change for change in recent if change < 0)

    avg_gain = gains / period
    avg_loss = losses / period

    if avg_loss == 0:
        return 100.0

    rs = avg_gain / avg_loss
    return 100.0 - (100.0 / (1.0 + rs))
