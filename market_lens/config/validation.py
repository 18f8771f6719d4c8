"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

from .defaults import MAX_UNKNOWN_RATIO, MIN_DAILY_BARS


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _check_periods(section: str, params: dict[str, Any], names: tuple[str, ...]) -> list[ValidationError]:
        errors = []
        for name in names:
            if name not in params:
                continue
            value = params[name]
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                errors.append(ValidationError(
                    field=f"{section}.{name}",
                    message="Must be a positive integer",
                    value=value
                ))
        return errors

    @staticmethod
    def validate_trend_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate moving average periods."""
        errors = ConfigValidator._check_periods("trend", params, ("sma_short", "sma_fast", "sma_slow"))
        if errors:
            return errors

        fast = params.get("sma_fast", 50)
        slow = params.get("sma_slow", 200)
        if fast >= slow:
            errors.append(ValidationError(
                field="trend.sma_fast",
                message="Must be shorter than sma_slow",
                value=fast
            ))
        return errors

    @staticmethod
    def validate_volatility_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate ATR volatility parameters."""
        errors = ConfigValidator._check_periods("volatility", params, ("atr_period", "lookback"))

        if "increasing_ratio" in params:
            value = params["increasing_ratio"]
            if not _is_number(value) or value <= 1:
                errors.append(ValidationError(
                    field="volatility.increasing_ratio",
                    message="Must be a number greater than 1",
                    value=value
                ))

        if "decreasing_ratio" in params:
            value = params["decreasing_ratio"]
            if not _is_number(value) or value <= 0 or value >= 1:
                errors.append(ValidationError(
                    field="volatility.decreasing_ratio",
                    message="Must be a number between 0 and 1",
                    value=value
                ))

        if "elevated_pct" in params:
            value = params["elevated_pct"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="volatility.elevated_pct",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_volume_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate volume behaviour parameters."""
        errors = ConfigValidator._check_periods("volume", params, ("lookback",))

        if "ratio" in params:
            value = params["ratio"]
            if not _is_number(value) or value < 1:
                errors.append(ValidationError(
                    field="volume.ratio",
                    message="Must be a number of at least 1",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_pipeline_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate request-level parameters; the history floor may only be raised."""
        errors = ConfigValidator._check_periods("pipeline", params, ("min_bars",))
        if errors:
            return errors

        if params.get("min_bars", MIN_DAILY_BARS) < MIN_DAILY_BARS:
            errors.append(ValidationError(
                field="pipeline.min_bars",
                message=f"Must be at least {MIN_DAILY_BARS}",
                value=params["min_bars"]
            ))
        return errors

    @staticmethod
    def validate_validation_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate gate parameters; the unknown ratio may only be tightened."""
        errors = []

        if "max_unknown_ratio" in params:
            value = params["max_unknown_ratio"]
            if not _is_number(value) or value < 0 or value > MAX_UNKNOWN_RATIO:
                errors.append(ValidationError(
                    field="validation.max_unknown_ratio",
                    message=f"Must be a number between 0 and {MAX_UNKNOWN_RATIO}",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        if "trend" in config:
            errors.extend(ConfigValidator.validate_trend_params(config["trend"]))

        if "momentum" in config:
            errors.extend(ConfigValidator._check_periods("momentum", config["momentum"], ("rsi_period",)))

        if "volatility" in config:
            errors.extend(ConfigValidator.validate_volatility_params(config["volatility"]))

        if "volume" in config:
            errors.extend(ConfigValidator.validate_volume_params(config["volume"]))

        if "range" in config:
            errors.extend(ConfigValidator._check_periods("range", config["range"], ("lookback",)))

        if "timeframe" in config:
            errors.extend(ConfigValidator._check_periods(
                "timeframe", config["timeframe"], ("weekly_chunk_size", "max_gap_days")))

        if "pipeline" in config:
            errors.extend(ConfigValidator.validate_pipeline_params(config["pipeline"]))

        if "validation" in config:
            errors.extend(ConfigValidator.validate_validation_params(config["validation"]))

        return errors
