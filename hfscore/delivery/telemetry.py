"""Telemetry sink logging scored bars and advisories through structlog."""

from typing import Optional

from ..logging.config import get_telemetry_logger, log_advisory, log_score_frame
from ..models.scores import Advisory, ScoreFrame
from .base import BaseOutputSink


class TelemetrySink(BaseOutputSink):
    """
    Logs one structured event per scored bar past warmup, plus a warning-level
    event for each advisory.
    """

    def __init__(self, name: str = "telemetry", enabled: bool = True,
                 include_transient: bool = False):
        super().__init__(name, include_transient)
        self.enabled = enabled
        self.telemetry_logger = get_telemetry_logger(f"hfscore.delivery.{name}")

    def emit(self, frame: ScoreFrame, advisory: Optional[Advisory], instrument: str) -> None:
        if not self.enabled or not frame.warmed_up:
            return

        log_score_frame(self.telemetry_logger, instrument, frame)
        if advisory is not None:
            log_advisory(self.telemetry_logger, instrument, advisory)
        self.record_delivery()

    def health_check(self) -> bool:
        return True
