"""Data models for per-bar scoring output"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class Direction(Enum):
    """Advisory direction"""
    BUY = "BUY"
    SELL = "SELL"

    @classmethod
    def from_score(cls, combined_score: float) -> "Direction":
        """Zero and positive scores count as bullish"""
        return cls.BUY if combined_score >= 0.0 else cls.SELL


@dataclass(frozen=True)
class LevelSet:
    """ATR-derived stop-loss and take-profit levels relative to the bar close"""
    direction: Direction
    reference_price: float
    atr: float
    pip_size: Optional[float]
    atr_pips: float
    sl_pips: float
    tp1_pips: float
    tp2_pips: float
    tp3_pips: float
    sl_price: float
    tp1_price: float
    tp2_price: float
    tp3_price: float


@dataclass(frozen=True)
class ScoreFrame:
    """Scores for one bar index; never mutated once produced"""
    index: int
    open_time: Optional[datetime]
    close: float
    rsi_score: float = 0.0
    stoch_rsi_score: float = 0.0
    macd_score: float = 0.0
    ema_score: float = 0.0
    mfi_score: float = 0.0
    combined_score: float = 0.0
    confidence: float = 0.0
    threshold_pos: float = 0.0
    threshold_neg: float = 0.0
    rsi: Optional[float] = None
    atr: Optional[float] = None
    warmed_up: bool = False
    is_final: bool = True
    levels: Optional[LevelSet] = None

    @property
    def is_bullish(self) -> bool:
        return self.combined_score >= 0.0

    @property
    def confidence_pct(self) -> float:
        return self.confidence * 100.0

    def to_dict(self) -> dict[str, Any]:
        """Flat dict representation for sinks"""
        result = {
            "index": self.index,
            "open_time": self.open_time.isoformat() if self.open_time else None,
            "close": self.close,
            "rsi_score": self.rsi_score,
            "stoch_rsi_score": self.stoch_rsi_score,
            "macd_score": self.macd_score,
            "ema_score": self.ema_score,
            "mfi_score": self.mfi_score,
            "combined_score": self.combined_score,
            "confidence": self.confidence,
            "threshold_pos": self.threshold_pos,
            "threshold_neg": self.threshold_neg,
            "is_final": self.is_final,
        }
        if self.levels is not None:
            result["levels"] = {
                "direction": self.levels.direction.value,
                "pip_size": self.levels.pip_size,
                "sl_pips": self.levels.sl_pips,
                "tp1_pips": self.levels.tp1_pips,
                "tp2_pips": self.levels.tp2_pips,
                "tp3_pips": self.levels.tp3_pips,
                "sl_price": self.levels.sl_price,
                "tp1_price": self.levels.tp1_price,
                "tp2_price": self.levels.tp2_price,
                "tp3_price": self.levels.tp3_price,
            }
        return result


@dataclass(frozen=True)
class Advisory:
    """Directional advisory raised when confidence reaches the threshold"""
    index: int
    open_time: Optional[datetime]
    direction: Direction
    combined_score: float
    confidence_pct: float
    threshold_pct: float
    levels: Optional[LevelSet] = None

    def to_dict(self) -> dict[str, Any]:
        result = {
            "index": self.index,
            "open_time": self.open_time.isoformat() if self.open_time else None,
            "direction": self.direction.value,
            "combined_score": self.combined_score,
            "confidence_pct": self.confidence_pct,
            "threshold_pct": self.threshold_pct,
        }
        if self.levels is not None:
            result.update({
                "sl_price": self.levels.sl_price,
                "tp1_price": self.levels.tp1_price,
                "tp2_price": self.levels.tp2_price,
                "tp3_price": self.levels.tp3_price,
            })
        return result
