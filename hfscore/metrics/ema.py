"""EMA and MACD calculations"""

from typing import Optional


class EMAState:
    """Exponential moving average with factor 2/(period+1), seeded by the first value"""

    def __init__(self, period: int):
        self.period = period
        self.alpha = 2.0 / (period + 1)
        self.value: Optional[float] = None

    def update(self, price: float) -> float:
        if self.value is None:
            self.value = price
        else:
            self.value = self.alpha * price + (1.0 - self.alpha) * self.value
        return self.value


class MACDState:
    """
    MACD line, signal and histogram over closes.

    MACD = EMA(fast) - EMA(slow); signal = EMA(MACD, signal period);
    histogram = MACD - signal. The previous histogram is kept for the
    direction score and is 0.0 before the first bar.
    """

    def __init__(self, fast: int = 12, slow: int = 26, signal: int = 9):
        self.fast_ema = EMAState(fast)
        self.slow_ema = EMAState(slow)
        self.signal_ema = EMAState(signal)
        self.macd = 0.0
        self.signal = 0.0
        self.histogram = 0.0
        self.prev_histogram = 0.0

    def update(self, close: float) -> float:
        """Advance by one close and return the histogram"""
        self.prev_histogram = self.histogram
        self.macd = self.fast_ema.update(close) - self.slow_ema.update(close)
        self.signal = self.signal_ema.update(self.macd)
        self.histogram = self.macd - self.signal
        return self.histogram
