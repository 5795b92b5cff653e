"""Rolling indicator calculations for the composite score"""

from .atr import ATRState, calculate_true_range
from .calculator import IndicatorCalculator, IndicatorValues, compute_warmup
from .ema import EMAState, MACDState
from .mfi import MFIState, calculate_mfi
from .rsi import RSIState, rsi_from_averages
from .stoch_rsi import StochRSIState, raw_stoch_k, stoch_rsi_score

__all__ = [
    "IndicatorCalculator",
    "IndicatorValues",
    "compute_warmup",
    "ATRState",
    "calculate_true_range",
    "EMAState",
    "MACDState",
    "MFIState",
    "calculate_mfi",
    "RSIState",
    "rsi_from_averages",
    "StochRSIState",
    "raw_stoch_k",
    "stoch_rsi_score",
]
