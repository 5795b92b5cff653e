"""
Error classification system for the scoring engine.

Data quality errors describe bad or badly sequenced input bars; system
failures describe conditions the engine cannot continue from.
"""

from .data_quality import (
    DataQualityError,
    TemporalDataError,
    MissingDataError,
    MalformedDataError,
)
from .system_failures import (
    SystemFailureError,
    ConfigurationError,
    IndicatorStateError,
    DeliveryError,
)

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "TemporalDataError",
    "MissingDataError",
    "MalformedDataError",
    # System Failures
    "SystemFailureError",
    "ConfigurationError",
    "IndicatorStateError",
    "DeliveryError",
]
