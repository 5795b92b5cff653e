"""
System failure error classifications for unrecoverable errors.

These exceptions represent failures that require the caller to rebuild
the engine or fix its configuration.
"""

from typing import Optional, Dict, Any


class SystemFailureError(Exception):
    """Base class for unrecoverable system failures."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class ConfigurationError(SystemFailureError):
    """Engine configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []


class IndicatorStateError(SystemFailureError):
    """Indicator state is inconsistent with the bars presented."""

    def __init__(self, message: str, indicator: Optional[str] = None,
                 bar_index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.indicator = indicator
        self.bar_index = bar_index


class DeliveryError(SystemFailureError):
    """Output sink delivery failures."""

    def __init__(self, message: str, sink_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.sink_name = sink_name
