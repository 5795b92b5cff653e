"""ATR-based stop-loss / take-profit levels"""

from typing import Optional

from ..config.defaults import LevelParams, PipSizeParams
from ..data.models import InstrumentSpec
from ..models.scores import Direction, LevelSet


def resolve_pip_size(params: PipSizeParams, instrument: InstrumentSpec) -> Optional[float]:
    """
    Resolve the pip size used for pip conversions

    Order: enabled override, instrument pip size, instrument tick size.
    Returns None when none of them is positive.
    """
    if params.use_custom and params.override > 0.0:
        return params.override
    if instrument.pip_size > 0.0:
        return instrument.pip_size
    if instrument.tick_size > 0.0:
        return instrument.tick_size
    return None


class LevelCalculator:
    """
    Converts ATR and score direction into advisory SL/TP levels.

    Take-profits sit on the favorable side of the reference price and the
    stop-loss on the opposite side. Levels are advisory only.
    """

    def __init__(self, params: LevelParams, pip_params: PipSizeParams,
                 instrument: Optional[InstrumentSpec] = None):
        self.params = params
        self.instrument = instrument or InstrumentSpec()
        self.pip_size = resolve_pip_size(pip_params, self.instrument)

    def price_to_pips(self, distance: float) -> float:
        """Price distance in pips, 0.0 when pip size is unknown"""
        if self.pip_size is None:
            return 0.0
        return distance / self.pip_size

    def pips_to_price(self, pips: float) -> float:
        if self.pip_size is None:
            return 0.0
        return pips * self.pip_size

    def calculate(self, reference_price: float, atr: Optional[float],
                  combined_score: float) -> Optional[LevelSet]:
        """
        Calculate levels for the current bar

        Args:
            reference_price: Bar close the distances are measured from
            atr: Current ATR, None while undefined
            combined_score: Composite score, its sign picks the direction

        Returns:
            LevelSet, or None when ATR is undefined
        """
        if atr is None:
            return None

        direction = Direction.from_score(combined_score)
        side = 1.0 if direction is Direction.BUY else -1.0

        sl_distance = -side * self.params.sl_mult * atr
        tp1_distance = side * self.params.tp1_mult * atr
        tp2_distance = side * self.params.tp2_mult * atr
        tp3_distance = side * self.params.tp3_mult * atr

        return LevelSet(
            direction=direction,
            reference_price=reference_price,
            atr=atr,
            pip_size=self.pip_size,
            atr_pips=self.price_to_pips(atr),
            sl_pips=self.price_to_pips(sl_distance),
            tp1_pips=self.price_to_pips(tp1_distance),
            tp2_pips=self.price_to_pips(tp2_distance),
            tp3_pips=self.price_to_pips(tp3_distance),
            sl_price=reference_price + sl_distance,
            tp1_price=reference_price + tp1_distance,
            tp2_price=reference_price + tp2_distance,
            tp3_price=reference_price + tp3_distance,
        )
