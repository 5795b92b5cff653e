"""In-memory sink collecting frames and advisories."""

from typing import Optional

from ..models.scores import Advisory, ScoreFrame
from .base import BaseOutputSink


class MemorySink(BaseOutputSink):
    """Keeps every delivered frame and advisory in lists."""

    def __init__(self, name: str = "memory", include_transient: bool = False):
        super().__init__(name, include_transient)
        self.frames: list[ScoreFrame] = []
        self.advisories: list[Advisory] = []

    def emit(self, frame: ScoreFrame, advisory: Optional[Advisory], instrument: str) -> None:
        self.frames.append(frame)
        if advisory is not None:
            self.advisories.append(advisory)
        self.record_delivery()

    def health_check(self) -> bool:
        return True

    def clear(self) -> None:
        self.frames.clear()
        self.advisories.clear()
