"""MFI (Money Flow Index) over typical price and the volume proxy"""

from collections import deque
from typing import Optional

from ..data.models import Bar


def calculate_mfi(positive_flow: float, negative_flow: float) -> Optional[float]:
    """
    Calculate MFI = 100 * positive / (positive + negative)

    Returns:
        MFI value or None when total flow is zero
    """
    total = positive_flow + negative_flow
    if total == 0.0:
        return None

    return 100.0 * positive_flow / total


class MFIState:
    """
    Windowed money flow accumulator.

    Each bar-to-bar transition contributes typical_price * volume_proxy of
    the later bar to the positive side when typical price rose, to the
    negative side when it fell, and to neither side on a tie. MFI is defined
    once `period` transitions have been seen.
    """

    def __init__(self, period: int = 14):
        self.period = period
        self.prev_typical: Optional[float] = None
        self.transitions = 0
        self.flows: deque = deque(maxlen=period)  # (positive, negative) per transition
        self.value: Optional[float] = None

    def update(self, bar: Bar) -> Optional[float]:
        """Advance by one bar and return MFI, None while undefined"""
        typical = bar.typical_price

        if self.prev_typical is not None:
            flow = typical * bar.volume_proxy
            if typical > self.prev_typical:
                self.flows.append((flow, 0.0))
            elif typical < self.prev_typical:
                self.flows.append((0.0, flow))
            else:
                self.flows.append((0.0, 0.0))
            self.transitions += 1

        self.prev_typical = typical

        if self.transitions < self.period:
            self.value = None
        else:
            # Re-summed each bar: a window of ties must total exactly zero
            positive = sum(p for p, _ in self.flows)
            negative = sum(n for _, n in self.flows)
            self.value = calculate_mfi(positive, negative)

        return self.value
