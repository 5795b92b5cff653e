"""Standard output advisory delivery."""

import json
import sys
from typing import Optional, TextIO

from ..errors import DeliveryError
from ..models.scores import Advisory, ScoreFrame
from .base import BaseOutputSink


class StdoutAdvisorySink(BaseOutputSink):
    """Prints advisories to a stream as JSON lines or a pretty one-liner."""

    def __init__(self, name: str = "stdout", format: str = "json",
                 stream: Optional[TextIO] = None):
        super().__init__(name)
        self.format = format
        self.stream = stream

    def emit(self, frame: ScoreFrame, advisory: Optional[Advisory], instrument: str) -> None:
        if advisory is None:
            return

        stream = self.stream or sys.stdout
        try:
            print(self._format_advisory(advisory, instrument), file=stream, flush=True)
        except (OSError, ValueError) as e:
            self.record_error()
            raise DeliveryError(f"Stdout error: {str(e)}", sink_name=self.name)

        self.logger.debug(
            "Advisory printed to stdout",
            delivery_name=self.name,
            instrument=instrument,
            bar_index=advisory.index
        )
        self.record_delivery()

    def _format_advisory(self, advisory: Advisory, instrument: str) -> str:
        """Format advisory for stdout output."""
        if self.format == "pretty":
            arrow = "▲" if advisory.direction.value == "BUY" else "▼"
            output = (
                f"[{instrument} #{advisory.index}] {arrow} {advisory.direction.value}  "
                f"confidence {advisory.confidence_pct:.1f}%"
            )
            if advisory.levels is not None:
                output += (
                    f"  SL={advisory.levels.sl_pips:+.1f}p"
                    f"  TP1={advisory.levels.tp1_pips:+.1f}p"
                    f"  TP2={advisory.levels.tp2_pips:+.1f}p"
                    f"  TP3={advisory.levels.tp3_pips:+.1f}p"
                )
            return output

        payload = advisory.to_dict()
        payload["instrument"] = instrument
        return json.dumps(payload)

    def health_check(self) -> bool:
        """Check if the stream is available."""
        try:
            return (self.stream or sys.stdout).writable()
        except (OSError, ValueError):
            return False
