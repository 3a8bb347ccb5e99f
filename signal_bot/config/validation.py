"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any

SECTIONS = ("series", "analysis", "signal", "feed", "scheduler")


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def _positive_int(params: dict[str, Any], name: str, errors: list[ValidationError]) -> None:
        if name in params:
            value = params[name]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field=name,
                    message="Must be a positive integer",
                    value=value
                ))

    @staticmethod
    def _non_negative(params: dict[str, Any], name: str, errors: list[ValidationError]) -> None:
        if name in params:
            value = params[name]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field=name,
                    message="Must be a non-negative number",
                    value=value
                ))

    @staticmethod
    def validate_series_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate price series parameters."""
        errors: list[ValidationError] = []
        ConfigValidator._positive_int(params, "window_size", errors)
        ConfigValidator._positive_int(params, "chart_points", errors)
        return errors

    @staticmethod
    def validate_analysis_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate analysis parameters."""
        errors: list[ValidationError] = []
        ConfigValidator._positive_int(params, "recent_window", errors)
        ConfigValidator._positive_int(params, "min_samples", errors)
        ConfigValidator._non_negative(params, "volatility_threshold_pct", errors)
        ConfigValidator._non_negative(params, "momentum_threshold_pct", errors)

        # The recent window must fit in the minimum sample count
        recent = params.get("recent_window")
        minimum = params.get("min_samples")
        if _is_int(recent) and _is_int(minimum) and recent > minimum:
            errors.append(ValidationError(
                field="recent_window",
                message="Must not exceed min_samples",
                value=recent
            ))

        return errors

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate signal generation parameters."""
        errors: list[ValidationError] = []
        ConfigValidator._non_negative(params, "momentum_trigger_pct", errors)

        for name in ("confidence_min", "confidence_max"):
            if name in params:
                value = params[name]
                if not _is_int(value) or value < 0 or value > 100:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be an integer between 0 and 100",
                        value=value
                    ))

        low = params.get("confidence_min")
        high = params.get("confidence_max")
        if _is_int(low) and _is_int(high) and low > high:
            errors.append(ValidationError(
                field="confidence_min",
                message="Must not exceed confidence_max",
                value=low
            ))

        return errors

    @staticmethod
    def validate_feed_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate synthetic feed parameters."""
        errors: list[ValidationError] = []

        if "base_price" in params:
            value = params["base_price"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="base_price",
                    message="Must be a positive number",
                    value=value
                ))

        ConfigValidator._positive_int(params, "seed_samples", errors)
        ConfigValidator._non_negative(params, "seed_spread", errors)
        ConfigValidator._non_negative(params, "volatility_factor", errors)

        if "time_format" in params and not isinstance(params["time_format"], str):
            errors.append(ValidationError(
                field="time_format",
                message="Must be a strftime format string",
                value=params["time_format"]
            ))

        return errors

    @staticmethod
    def validate_scheduler_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate scheduler parameters."""
        errors: list[ValidationError] = []

        if "tick_interval_seconds" in params:
            value = params["tick_interval_seconds"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="tick_interval_seconds",
                    message="Must be a positive number",
                    value=value
                ))

        ConfigValidator._positive_int(params, "signal_every_n_ticks", errors)
        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors: list[ValidationError] = []

        for section in SECTIONS:
            if section in config and not isinstance(config[section], dict):
                errors.append(ValidationError(
                    field=section,
                    message="Must be a mapping",
                    value=config[section]
                ))

        validators = {
            "series": ConfigValidator.validate_series_params,
            "analysis": ConfigValidator.validate_analysis_params,
            "signal": ConfigValidator.validate_signal_params,
            "feed": ConfigValidator.validate_feed_params,
            "scheduler": ConfigValidator.validate_scheduler_params,
        }
        for section, validator in validators.items():
            if isinstance(config.get(section), dict):
                errors.extend(validator(config[section]))

        # The analysed windows must fit inside the bounded series
        series = config.get("series")
        analysis = config.get("analysis")
        if isinstance(series, dict) and isinstance(analysis, dict):
            window = series.get("window_size")
            minimum = analysis.get("min_samples")
            if _is_int(window) and _is_int(minimum) and minimum > window:
                errors.append(ValidationError(
                    field="min_samples",
                    message="Must not exceed series window_size",
                    value=minimum
                ))

        return errors
