"""Base class for output sinks."""

from abc import ABC, abstractmethod
from typing import Optional

import structlog

from ..models.scores import Advisory, ScoreFrame


class BaseOutputSink(ABC):
    """
    Base class for score frame consumers.

    Sinks receive committed frames; transient frames computed for a bar that
    is still open are only delivered when include_transient is set.
    """

    def __init__(self, name: str, include_transient: bool = False):
        self.name = name
        self.include_transient = include_transient
        self.logger = structlog.get_logger(f"hfscore.delivery.{name}")
        self._delivery_count = 0
        self._error_count = 0

    @abstractmethod
    def emit(self, frame: ScoreFrame, advisory: Optional[Advisory], instrument: str) -> None:
        """
        Deliver a scored bar.

        Args:
            frame: Score frame for the bar
            advisory: Advisory raised for the bar, if any
            instrument: Instrument symbol
        """
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the sink can accept output."""
        pass

    def accepts(self, frame: ScoreFrame) -> bool:
        return frame.is_final or self.include_transient

    def record_delivery(self) -> None:
        self._delivery_count += 1

    def record_error(self) -> None:
        self._error_count += 1

    def get_stats(self) -> dict:
        """Get delivery statistics."""
        return {
            "name": self.name,
            "delivery_count": self._delivery_count,
            "error_count": self._error_count,
            "healthy": self.health_check(),
        }
