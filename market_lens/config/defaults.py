"""Default configuration parameters for the market analysis pipeline."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass(frozen=True)
class TrendParams:
    """Moving average periods for trend direction and strength."""
    sma_short: int = 20                 # Short MA used only for strength stacking
    sma_fast: int = 50                  # Fast MA of the crossover
    sma_slow: int = 200                 # Slow MA of the crossover


@dataclass(frozen=True)
class MomentumParams:
    """RSI parameters."""
    rsi_period: int = 14


@dataclass(frozen=True)
class VolatilityParams:
    """ATR-based volatility labelling parameters."""
    atr_period: int = 14
    lookback: int = 30                  # ATR values averaged for the baseline
    increasing_ratio: float = 1.3       # current ATR above baseline * ratio
    decreasing_ratio: float = 0.8       # current ATR below baseline * ratio
    elevated_pct: float = 2.0           # ATR as % of price


@dataclass(frozen=True)
class VolumeParams:
    """Up-day vs down-day volume comparison parameters."""
    lookback: int = 20
    ratio: float = 1.2


@dataclass(frozen=True)
class RangeParams:
    """Support/resistance range position parameters."""
    lookback: int = 20


@dataclass(frozen=True)
class TimeframeParams:
    """Weekly aggregation parameters."""
    weekly_chunk_size: int = 5          # Trading days per weekly candle
    max_gap_days: int = 4               # Calendar gap reported as missing data


# Hard limits: configuration may tighten these but never loosen them.
MIN_DAILY_BARS = 50
MAX_UNKNOWN_RATIO = 0.30


@dataclass(frozen=True)
class PipelineParams:
    """Request-level parameters."""
    min_bars: int = MIN_DAILY_BARS      # Minimum daily history


@dataclass(frozen=True)
class ValidationParams:
    """Validation gate parameters."""
    max_unknown_ratio: float = MAX_UNKNOWN_RATIO


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    trend: TrendParams
    momentum: MomentumParams
    volatility: VolatilityParams
    volume: VolumeParams
    range: RangeParams
    timeframe: TimeframeParams
    pipeline: PipelineParams
    validation: ValidationParams


_SECTIONS = {
    "trend": TrendParams,
    "momentum": MomentumParams,
    "volatility": VolatilityParams,
    "volume": VolumeParams,
    "range": RangeParams,
    "timeframe": TimeframeParams,
    "pipeline": PipelineParams,
    "validation": ValidationParams,
}


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(**{name: section() for name, section in _SECTIONS.items()})


def config_from_dict(data: dict[str, Any]) -> DefaultConfig:
    """
    Build a DefaultConfig from a (possibly partial) nested dictionary.

    Unknown sections and keys are ignored; missing ones keep their defaults.
    """
    sections = {}
    for name, section in _SECTIONS.items():
        values = data.get(name) or {}
        known = {f.name for f in fields(section)}
        sections[name] = section(**{k: v for k, v in values.items() if k in known})
    return DefaultConfig(**sections)
