"""Configuration defaults, loading and validation."""

from .defaults import ScoringConfig, get_default_config
from .loader import ConfigLoader, build_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "ScoringConfig",
    "get_default_config",
    "ConfigLoader",
    "build_config",
    "ConfigValidator",
    "ValidationError",
]
