"""
Canonical data models for normalized bar data.

This module defines immutable bars and instrument metadata plus the
append-only bar history every indicator reads from.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, Optional

from ..errors import TemporalDataError


@dataclass(frozen=True)
class Bar:
    """Normalized OHLC bar with UTC open time."""
    open_time: datetime  # UTC bar open timestamp
    open: float          # Opening price
    high: float          # High price
    low: float           # Low price
    close: float         # Closing price
    volume_proxy: float  # Tick count standing in for traded volume

    @property
    def typical_price(self) -> float:
        """HLC3 typical price."""
        return (self.high + self.low + self.close) / 3.0

    @property
    def range(self) -> float:
        """High-low range."""
        return self.high - self.low


@dataclass(frozen=True)
class InstrumentSpec:
    """Instrument metadata needed for pip conversions."""
    symbol: str = "UNKNOWN"
    pip_size: float = 0.0      # Broker-standard pip, 0 if unknown
    tick_size: float = 0.0     # Minimum price increment, 0 if unknown


class BarSeries:
    """
    Append-only bar history indexed 0..N-1.

    Open times must be strictly increasing; appending a bar at or before the
    last open time raises TemporalDataError and leaves the series untouched.
    """

    def __init__(self) -> None:
        self._bars: list[Bar] = []

    def append(self, bar: Bar) -> int:
        """Append a bar and return its index."""
        self.check_next(bar)
        self._bars.append(bar)
        return len(self._bars) - 1

    def check_next(self, bar: Bar) -> None:
        """Raise if the bar cannot be the next bar of this series."""
        last = self.last
        if last is not None and bar.open_time <= last.open_time:
            raise TemporalDataError(
                f"Bar open time {bar.open_time.isoformat()} is not after "
                f"last bar open time {last.open_time.isoformat()}",
                timestamp=bar.open_time,
                expected_after=last.open_time,
                context={"bar_count": len(self._bars)}
            )

    @property
    def last(self) -> Optional[Bar]:
        """Most recent bar, None if empty."""
        return self._bars[-1] if self._bars else None

    def clear(self) -> None:
        self._bars.clear()

    def __len__(self) -> int:
        return len(self._bars)

    def __getitem__(self, index: int) -> Bar:
        return self._bars[index]

    def __iter__(self) -> Iterator[Bar]:
        return iter(self._bars)
