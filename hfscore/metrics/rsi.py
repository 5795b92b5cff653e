"""RSI (Relative Strength Index) with Wilder smoothing"""

from typing import Optional


def rsi_from_averages(avg_gain: float, avg_loss: float) -> float:
    """
    Convert average gain/loss into RSI in [0, 100]

    A flat history (no gains and no losses) is neutral 50.
    """
    if avg_loss == 0.0:
        return 50.0 if avg_gain == 0.0 else 100.0

    rs = avg_gain / avg_loss
    return 100.0 - 100.0 / (1.0 + rs)


class RSIState:
    """
    Incremental Wilder RSI over closes.

    The first average is the simple mean of the first `period` close-to-close
    changes, so RSI is defined from bar index `period` onwards.
    """

    def __init__(self, period: int = 14):
        self.period = period
        self.prev_close: Optional[float] = None
        self.count = 0
        self.gain_sum = 0.0
        self.loss_sum = 0.0
        self.avg_gain: Optional[float] = None
        self.avg_loss: Optional[float] = None
        self.value: Optional[float] = None

    def update(self, close: float) -> Optional[float]:
        """Advance by one close and return RSI, None while undefined"""
        if self.prev_close is None:
            self.prev_close = close
            return None

        change = close - self.prev_close
        self.prev_close = close
        gain = change if change > 0 else 0.0
        loss = -change if change < 0 else 0.0
        self.count += 1

        if self.avg_gain is None:
            self.gain_sum += gain
            self.loss_sum += loss
            if self.count < self.period:
                return None
            self.avg_gain = self.gain_sum / self.period
            self.avg_loss = self.loss_sum / self.period
        else:
            self.avg_gain = (self.avg_gain * (self.period - 1) + gain) / self.period
            self.avg_loss = (self.avg_loss * (self.period - 1) + loss) / self.period

        self.value = rsi_from_averages(self.avg_gain, self.avg_loss)
        return self.value
