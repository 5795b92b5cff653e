"""
Logging configuration and utilities for the HF scoring engine.
"""
from .config import configure_logging, get_logger, get_telemetry_logger

__all__ = ["configure_logging", "get_logger", "get_telemetry_logger"]
