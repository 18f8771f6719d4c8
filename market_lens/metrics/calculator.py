"""Indicator calculator coordinating all indicator and label computations"""

from typing import Optional

from ..config.defaults import DefaultConfig, get_default_config
from ..data.models import PriceSeries
from ..data.validators import SeriesValidator
from ..logging.config import get_logger
from ..models.indicators import IndicatorResult, IndicatorSet, RawValues, TrendReading
from .atr import calculate_atr_series
from .labels import (
    duration_label,
    momentum_label,
    risk_mode_label,
    support_resistance_label,
    trend_from_averages,
    trend_strength_label,
    volatility_label,
    volume_behavior_label,
)
from .moving_average import calculate_sma, last_value
from .rsi import calculate_rsi

logger = get_logger(__name__)


class IndicatorCalculator:
    """
    Computes the labelled indicator snapshot for a price series.

    The calculator only holds configuration; every call works on the series
    it is given and returns fresh immutable results.
    """

    def __init__(self, config: Optional[DefaultConfig] = None):
        self.config = config or get_default_config()
        self.validator = SeriesValidator()

    def compute(self, series: PriceSeries, enforce_minimum: bool = True) -> IndicatorResult:
        """
        Compute all indicators for a series.

        Args:
            series: Daily or weekly price series
            enforce_minimum: Require ``pipeline.min_bars`` bars. Weekly series
                derived from valid daily history may legitimately be shorter,
                so the pipeline disables the floor for them.

        Returns:
            IndicatorResult with labels and raw values

        Raises:
            InsufficientDataError: If the series is shorter than required
        """
        self.validator.require_length(series, self.config.pipeline.min_bars if enforce_minimum else 1)

        trend_cfg = self.config.trend
        closes = series.closes

        sma_fast = calculate_sma(closes, trend_cfg.sma_fast)
        sma_slow = calculate_sma(closes, trend_cfg.sma_slow)
        reading = trend_from_averages(sma_fast, sma_slow)

        rsi = calculate_rsi(closes, self.config.momentum.rsi_period)
        atr_series = calculate_atr_series(series.bars, self.config.volatility.atr_period)

        volatility = self._volatility_from_atr(atr_series, closes[-1])
        momentum = momentum_label(rsi)
        volume_behavior = volume_behavior_label(
            series.bars, lookback=self.config.volume.lookback, ratio=self.config.volume.ratio
        )
        trend_strength = trend_strength_label(
            closes,
            short_period=trend_cfg.sma_short,
            fast_period=trend_cfg.sma_fast,
            slow_period=trend_cfg.sma_slow,
        )
        support_resistance = support_resistance_label(closes, lookback=self.config.range.lookback)
        risk_mode = risk_mode_label(volatility, momentum, volume_behavior)

        indicators = IndicatorSet(
            overall_trend=reading.trend,
            trend_duration_days=reading.days_in_trend,
            trend_duration=duration_label(reading.days_in_trend),
            momentum=momentum,
            volatility=volatility,
            volume_behavior=volume_behavior,
            trend_strength=trend_strength,
            support_resistance=support_resistance,
            risk_mode=risk_mode,
        )

        raw_values = RawValues.create(
            rsi=rsi,
            days_in_trend=reading.days_in_trend,
            current_price=closes[-1],
            sma50=last_value(sma_fast),
            sma200=last_value(sma_slow),
            atr=last_value(atr_series),
        )

        logger.debug(
            "Computed indicators",
            granularity=series.granularity,
            bars=len(series),
            indicators=indicators.to_dict(),
            raw_values=raw_values.to_dict(),
        )

        return IndicatorResult(indicators=indicators, raw_values=raw_values)

    def trend(self, series: PriceSeries) -> TrendReading:
        """Trend direction and age from the fast/slow SMA relationship."""
        closes = series.closes
        return trend_from_averages(
            calculate_sma(closes, self.config.trend.sma_fast),
            calculate_sma(closes, self.config.trend.sma_slow),
        )

    def volatility(self, series: PriceSeries) -> str:
        """Volatility label from the ATR series of the given series."""
        if len(series) == 0:
            return volatility_label([], 0.0)
        atr_series = calculate_atr_series(series.bars, self.config.volatility.atr_period)
        return self._volatility_from_atr(atr_series, series.last.close)

    def _volatility_from_atr(self, atr_series: list[float], price: float) -> str:
        cfg = self.config.volatility
        return volatility_label(
            atr_series,
            price,
            lookback=cfg.lookback,
            increasing_ratio=cfg.increasing_ratio,
            decreasing_ratio=cfg.decreasing_ratio,
            elevated_pct=cfg.elevated_pct,
        )
