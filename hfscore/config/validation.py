"""Configuration validation utilities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


# Fields that must be positive integers, per section
PERIOD_FIELDS = {
    "rsi": ("period",),
    "stoch_rsi": ("rsi_period", "stoch_period", "k_smooth", "d_smooth"),
    "macd": ("fast", "slow", "signal"),
    "ema": ("fast", "slow"),
    "mfi": ("period",),
    "levels": ("atr_period",),
}

MULTIPLIER_FIELDS = ("tp1_mult", "tp2_mult", "tp3_mult", "sl_mult")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_periods(section: str, params: dict[str, Any]) -> list[ValidationError]:
        """Validate lookback periods of an indicator section."""
        errors = []

        for name in PERIOD_FIELDS.get(section, ()):
            if name not in params:
                continue
            value = params[name]
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                errors.append(ValidationError(
                    field=f"{section}.{name}",
                    message="Must be a positive integer",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_level_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate TP/SL parameters."""
        errors = ConfigValidator.validate_periods("levels", params)

        for name in MULTIPLIER_FIELDS:
            if name not in params:
                continue
            value = params[name]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field=f"levels.{name}",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_signal_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate advisory threshold."""
        errors = []

        if "threshold_pct" in params:
            value = params["threshold_pct"]
            if not _is_number(value) or value < 0 or value > 100:
                errors.append(ValidationError(
                    field="signal.threshold_pct",
                    message="Must be a number between 0 and 100",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_pip_size_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate pip size mode and override."""
        errors = []

        if "use_custom" in params and not isinstance(params["use_custom"], bool):
            errors.append(ValidationError(
                field="pip_size.use_custom",
                message="Must be a boolean",
                value=params["use_custom"]
            ))

        if "override" in params:
            value = params["override"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="pip_size.override",
                    message="Must be a positive number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_telemetry_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate telemetry switches."""
        errors = []

        if "enabled" in params and not isinstance(params["enabled"], bool):
            errors.append(ValidationError(
                field="telemetry.enabled",
                message="Must be a boolean",
                value=params["enabled"]
            ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in ("rsi", "stoch_rsi", "macd", "ema", "mfi"):
            if section in config:
                errors.extend(ConfigValidator.validate_periods(section, config[section]))

        if "levels" in config:
            errors.extend(ConfigValidator.validate_level_params(config["levels"]))

        if "signal" in config:
            errors.extend(ConfigValidator.validate_signal_params(config["signal"]))

        if "pip_size" in config:
            errors.extend(ConfigValidator.validate_pip_size_params(config["pip_size"]))

        if "telemetry" in config:
            errors.extend(ConfigValidator.validate_telemetry_params(config["telemetry"]))

        return errors
