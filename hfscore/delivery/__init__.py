"""Output sinks receiving score frames and advisories"""

from .base import BaseOutputSink
from .memory import MemorySink
from .stdout_delivery import StdoutAdvisorySink
from .telemetry import TelemetrySink

__all__ = ["BaseOutputSink", "MemorySink", "StdoutAdvisorySink", "TelemetrySink"]
