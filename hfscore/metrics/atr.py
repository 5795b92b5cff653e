"""ATR (Average True Range) with Wilder smoothing"""

from typing import Optional

from ..data.models import Bar


def calculate_true_range(current: Bar, previous: Optional[Bar] = None) -> float:
    """
    Calculate True Range for a single bar

    TR = max(high - low, abs(high - prev_close), abs(low - prev_close))

    Args:
        current: Current bar
        previous: Previous bar (None for first bar)

    Returns:
        True Range value
    """
    if previous is None:
        # First bar case - use high-low range
        return current.high - current.low

    range_hl = current.high - current.low
    range_hc = abs(current.high - previous.close)
    range_lc = abs(current.low - previous.close)

    return max(range_hl, range_hc, range_lc)


class ATRState:
    """
    Incremental Wilder ATR.

    Seeded with the simple average of the first `period` true ranges, then
    ATR = (prev_atr * (period - 1) + TR) / period.
    """

    def __init__(self, period: int = 14):
        self.period = period
        self.previous: Optional[Bar] = None
        self.count = 0
        self.tr_sum = 0.0
        self.value: Optional[float] = None

    def update(self, bar: Bar) -> Optional[float]:
        """Advance by one bar and return ATR, None until seeded"""
        tr = calculate_true_range(bar, self.previous)
        self.previous = bar
        self.count += 1

        if self.value is None:
            self.tr_sum += tr
            if self.count == self.period:
                self.value = self.tr_sum / self.period
        else:
            self.value = (self.value * (self.period - 1) + tr) / self.period

        return self.value
