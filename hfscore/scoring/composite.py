"""Composite score combining the five component scores"""

from dataclasses import dataclass
from typing import Optional

from ..metrics.calculator import IndicatorValues

# Component weights, summing to 6.0
WEIGHTS = {
    "rsi": 1.0,
    "stoch_rsi": 1.2,
    "macd": 1.5,
    "ema": 1.5,
    "mfi": 0.8,
}
TOTAL_WEIGHT = sum(WEIGHTS.values())

# EMA spread (as a fraction of the slow EMA) is scaled by this before clamping
EMA_SPREAD_SCALE = 300.0


def clamp(value: float, low: float = -1.0, high: float = 1.0) -> float:
    return min(max(value, low), high)


def rsi_score(rsi: Optional[float]) -> float:
    """Undefined RSI reads as neutral 50"""
    if rsi is None:
        return 0.0
    return clamp((rsi - 50.0) / 50.0)


def macd_score(histogram: float, prev_histogram: float) -> float:
    """
    Score MACD histogram direction

    +1 positive and non-decreasing, +0.3 positive but falling,
    -1 negative and non-increasing, -0.3 negative but rising, 0 at zero.
    """
    if histogram > 0.0 and histogram >= prev_histogram:
        return 1.0
    if histogram < 0.0 and histogram <= prev_histogram:
        return -1.0
    if histogram > 0.0:
        return 0.3
    if histogram < 0.0:
        return -0.3
    return 0.0


def ema_score(ema_fast: float, ema_slow: float) -> float:
    if ema_slow <= 0.0:
        return 0.0
    return clamp((ema_fast - ema_slow) / ema_slow * EMA_SPREAD_SCALE)


def mfi_score(mfi: Optional[float]) -> float:
    """Undefined MFI (short history or no flow) scores 0"""
    if mfi is None:
        return 0.0
    return clamp((mfi - 50.0) / 50.0)


@dataclass(frozen=True)
class CompositeScore:
    """Component scores and their weighted combination"""
    rsi: float = 0.0
    stoch_rsi: float = 0.0
    macd: float = 0.0
    ema: float = 0.0
    mfi: float = 0.0
    combined: float = 0.0

    @property
    def confidence(self) -> float:
        return abs(self.combined)


NEUTRAL_SCORE = CompositeScore()


class CompositeScorer:
    """Turns raw indicator readings into the bounded composite score"""

    def __init__(self, warmup: int):
        self.warmup = warmup

    def score(self, values: IndicatorValues) -> CompositeScore:
        """
        Score one bar

        Bars below the warmup index score exactly zero on every component.
        """
        if values.index < self.warmup:
            return NEUTRAL_SCORE

        components = {
            "rsi": rsi_score(values.rsi),
            "stoch_rsi": clamp(values.stoch_rsi_score),
            "macd": macd_score(values.histogram, values.prev_histogram),
            "ema": ema_score(values.ema_fast, values.ema_slow),
            "mfi": mfi_score(values.mfi),
        }
        raw = sum(components[name] * weight for name, weight in WEIGHTS.items())

        return CompositeScore(combined=clamp(raw / TOTAL_WEIGHT), **components)
