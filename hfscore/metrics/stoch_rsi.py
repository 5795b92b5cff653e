"""Stochastic oscillator applied to the RSI series, with %K/%D smoothing"""

from collections import deque
from typing import Iterable, Optional

from .rsi import RSIState

NEUTRAL_K = 50.0


def raw_stoch_k(current: Optional[float], window: Iterable[Optional[float]]) -> float:
    """
    Raw stochastic %K of the current RSI against its window

    %K = (RSI - lowest) / (highest - lowest) * 100

    Undefined RSI values are skipped from the min/max scan. Returns neutral
    50 when the current RSI is undefined, no defined value remains in the
    window, or the range is empty.
    """
    if current is None:
        return NEUTRAL_K

    defined = [v for v in window if v is not None]
    if not defined:
        return NEUTRAL_K

    high = max(defined)
    low = min(defined)
    if high <= low:
        return NEUTRAL_K

    return (current - low) / (high - low) * 100.0


def stoch_rsi_score(k: float, d: float) -> float:
    """Blend %K level and %K-%D spread into a score in [-1, 1]"""
    score = (k - 50.0) / 50.0 * 0.6 + (k - d) / 20.0 * 0.4
    return min(max(score, -1.0), 1.0)


class StochRSIState:
    """
    Incremental StochRSI.

    Keeps the last `stoch_period` RSI values for the min/max scan and the
    last `k_smooth + d_smooth - 1` raw %K values; raw %K before the first bar
    counts as neutral 50.
    """

    def __init__(self, rsi_period: int = 14, stoch_period: int = 14,
                 k_smooth: int = 3, d_smooth: int = 3):
        self.rsi = RSIState(rsi_period)
        self.k_smooth = k_smooth
        self.d_smooth = d_smooth
        self.rsi_window: deque = deque(maxlen=stoch_period)
        history = k_smooth + d_smooth - 1
        self.raw_k: deque = deque([NEUTRAL_K] * history, maxlen=history)
        self.k = NEUTRAL_K
        self.d = NEUTRAL_K

    def update(self, close: float) -> float:
        """Advance by one close and return the StochRSI score"""
        rsi = self.rsi.update(close)
        self.rsi_window.append(rsi)
        self.raw_k.append(raw_stoch_k(rsi, self.rsi_window))

        raw = list(self.raw_k)
        end = len(raw)
        smoothed_k = [
            sum(raw[end - d - self.k_smooth:end - d]) / self.k_smooth
            for d in range(self.d_smooth)
        ]

        self.k = smoothed_k[0]
        self.d = sum(smoothed_k) / self.d_smooth
        return self.score

    @property
    def score(self) -> float:
        return stoch_rsi_score(self.k, self.d)
