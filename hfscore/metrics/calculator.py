"""Indicator calculator coordinating all rolling indicator state"""

from dataclasses import dataclass
from typing import Optional

from ..config.defaults import ScoringConfig, get_default_config
from ..data.models import Bar
from ..errors import IndicatorStateError
from .atr import ATRState
from .ema import EMAState, MACDState
from .mfi import MFIState
from .rsi import RSIState
from .stoch_rsi import StochRSIState


@dataclass(frozen=True)
class IndicatorValues:
    """Raw indicator readings for one bar index"""
    index: int
    rsi: Optional[float]
    stoch_k: float
    stoch_d: float
    stoch_rsi_score: float
    ema_fast: float
    ema_slow: float
    macd: float
    macd_signal: float
    histogram: float
    prev_histogram: float
    mfi: Optional[float]
    atr: Optional[float]


def compute_warmup(config: ScoringConfig) -> int:
    """
    Minimum bar index before every component has a full lookback

    StochRSI needs its RSI defined across a whole stochastic window.
    """
    return max(
        config.rsi.period,
        config.stoch_rsi.rsi_period + config.stoch_rsi.stoch_period - 1,
        config.macd.slow,
        config.ema.slow,
        config.mfi.period,
        config.levels.atr_period,
    )


class IndicatorCalculator:
    """
    Owns the recursive state of every indicator for one instrument.

    Each call to update() advances all indicators by exactly one bar. Bars
    must be presented in index order with no gaps.
    """

    def __init__(self, config: Optional[ScoringConfig] = None):
        self.config = config or get_default_config()
        self.warmup = compute_warmup(self.config)
        self.bar_count = 0

        self.rsi = RSIState(self.config.rsi.period)
        self.stoch_rsi = StochRSIState(
            rsi_period=self.config.stoch_rsi.rsi_period,
            stoch_period=self.config.stoch_rsi.stoch_period,
            k_smooth=self.config.stoch_rsi.k_smooth,
            d_smooth=self.config.stoch_rsi.d_smooth
        )
        self.macd = MACDState(
            fast=self.config.macd.fast,
            slow=self.config.macd.slow,
            signal=self.config.macd.signal
        )
        self.ema_fast = EMAState(self.config.ema.fast)
        self.ema_slow = EMAState(self.config.ema.slow)
        self.mfi = MFIState(self.config.mfi.period)
        self.atr = ATRState(self.config.levels.atr_period)

    def update(self, bar: Bar, index: int) -> IndicatorValues:
        """
        Advance every indicator by one bar

        Args:
            bar: Bar at `index`
            index: Bar index, must equal the number of bars already seen

        Returns:
            IndicatorValues for the bar

        Raises:
            IndicatorStateError: If the index skips or repeats a bar
        """
        if index != self.bar_count:
            raise IndicatorStateError(
                f"Expected bar index {self.bar_count}, got {index}",
                indicator="calculator",
                bar_index=index
            )

        close = bar.close
        rsi = self.rsi.update(close)
        stoch_score = self.stoch_rsi.update(close)
        histogram = self.macd.update(close)
        ema_fast = self.ema_fast.update(close)
        ema_slow = self.ema_slow.update(close)
        mfi = self.mfi.update(bar)
        atr = self.atr.update(bar)
        self.bar_count += 1

        return IndicatorValues(
            index=index,
            rsi=rsi,
            stoch_k=self.stoch_rsi.k,
            stoch_d=self.stoch_rsi.d,
            stoch_rsi_score=stoch_score,
            ema_fast=ema_fast,
            ema_slow=ema_slow,
            macd=self.macd.macd,
            macd_signal=self.macd.signal,
            histogram=histogram,
            prev_histogram=self.macd.prev_histogram,
            mfi=mfi,
            atr=atr
        )

    def is_warmed_up(self, index: int) -> bool:
        """Check if a bar index is past the warmup"""
        return index >= self.warmup
