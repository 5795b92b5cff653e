"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import SECTION_TYPES, ScoringConfig, get_default_config
from .validation import ConfigValidator, ValidationError


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: ScoringConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_instrument_config(self, instrument_id: str) -> dict[str, Any]:
        """Load instrument-specific configuration overrides."""
        instruments_file = self.config_dir / "instruments.yaml"

        if not instruments_file.exists():
            return {}

        with open(instruments_file) as f:
            instruments_config = yaml.safe_load(f) or {}

        return instruments_config.get("instruments", {}).get(instrument_id, {}) or {}  # type: ignore[no-any-return]

    def merge_config(
        self,
        instrument_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-site overrides (highest priority)
        2. Instrument-specific overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        instrument_config = self.load_instrument_config(instrument_id)
        config = self._deep_merge(config, instrument_config)

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load_config(
        self,
        instrument_id: str,
        overrides: Optional[dict[str, Any]] = None
    ) -> ScoringConfig:
        """Merge, validate and build a ScoringConfig for an instrument."""
        return build_config(self.merge_config(instrument_id, overrides))

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name, _field in obj.__dataclass_fields__.items():
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(config: dict[str, Any]) -> ScoringConfig:
    """
    Build a validated ScoringConfig from a nested configuration dict.

    Sections missing from the dict keep their defaults.

    Raises:
        ConfigurationError: On unknown sections/keys or invalid values
    """
    errors: list[ValidationError] = []
    for section, params in config.items():
        params_type = SECTION_TYPES.get(section)
        if params_type is None:
            errors.append(ValidationError(field=section, message="Unknown configuration section", value=params))
            continue
        if not isinstance(params, dict):
            errors.append(ValidationError(field=section, message="Section must be a mapping", value=params))
            continue
        for key in params:
            if key not in params_type.__dataclass_fields__:
                errors.append(ValidationError(
                    field=f"{section}.{key}",
                    message="Unknown configuration key",
                    value=params[key]
                ))

    if not errors:
        errors.extend(ConfigValidator.validate_config(config))

    if errors:
        error_msgs = [f"{err.field}: {err.message} (got: {err.value})" for err in errors]
        raise ConfigurationError(
            f"Invalid scoring configuration: {'; '.join(error_msgs)}",
            errors=errors
        )

    sections = {
        section: SECTION_TYPES[section](**params)
        for section, params in config.items()
    }
    return ScoringConfig(**sections)
