"""
HF Score - Streaming composite technical-analysis scoring engine

Computes, for each closed price bar, a bounded composite score in [-1, +1]
from five classical sub-indicators (RSI, StochRSI, MACD histogram direction,
EMA cross spread, MFI), a confidence value and advisory ATR-based
take-profit/stop-loss levels.
"""

__version__ = "0.1.0"
__author__ = "HF Score Team"
