"""
Centralized logging configuration for the HF scoring engine.

This module provides standardized logging configuration using structlog
for all components. Telemetry for scored bars and advisories goes through
the helpers at the bottom of this module so every sink emits the same
event shape.
"""
import logging
import sys
from typing import TYPE_CHECKING, Optional

import structlog
from structlog.types import FilteringBoundLogger

if TYPE_CHECKING:
    from ..models.scores import Advisory, ScoreFrame


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    log_level = getattr(logging, level.upper())

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s"  # structlog will handle formatting
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    if extra_processors:
        processors.extend(extra_processors)

    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_telemetry_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger for per-bar score telemetry.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Logger bound with the telemetry subsystem tag
    """
    return get_logger(name).bind(subsystem="telemetry")


def log_score_frame(
    logger: FilteringBoundLogger,
    instrument_id: str,
    frame: "ScoreFrame"
) -> None:
    """
    Log a scored bar with standardized format.

    Args:
        logger: Structlog logger instance
        instrument_id: Instrument the frame belongs to
        frame: Scored bar to log
    """
    bound_logger = logger.bind(
        instrument_id=instrument_id,
        bar_index=frame.index,
        open_time=frame.open_time.isoformat() if frame.open_time else None,
        direction="BUY" if frame.is_bullish else "SELL",
        combined=round(frame.combined_score, 3),
        confidence_pct=round(frame.confidence * 100.0, 1),
        scores={
            "rsi": round(frame.rsi_score, 3),
            "stoch_rsi": round(frame.stoch_rsi_score, 3),
            "macd": round(frame.macd_score, 3),
            "ema": round(frame.ema_score, 3),
            "mfi": round(frame.mfi_score, 3),
        },
        is_final=frame.is_final,
    )

    levels = frame.levels
    if levels is not None:
        bound_logger = bound_logger.bind(
            atr_pips=round(levels.atr_pips, 1),
            sl_pips=round(levels.sl_pips, 1),
            tp1_pips=round(levels.tp1_pips, 1),
            tp2_pips=round(levels.tp2_pips, 1),
            tp3_pips=round(levels.tp3_pips, 1),
        )

    bound_logger.info("Score frame")


def log_advisory(
    logger: FilteringBoundLogger,
    instrument_id: str,
    advisory: "Advisory"
) -> None:
    """
    Log a directional advisory.

    Args:
        logger: Structlog logger instance
        instrument_id: Instrument the advisory belongs to
        advisory: Advisory raised for the bar
    """
    logger.bind(
        instrument_id=instrument_id,
        bar_index=advisory.index,
        direction=advisory.direction.value,
        confidence_pct=round(advisory.confidence_pct, 1),
        threshold_pct=advisory.threshold_pct,
    ).warning("Advisory signal")
