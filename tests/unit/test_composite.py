"""Unit tests for component scores and the weighted composite."""

import pytest

from hfscore.metrics.calculator import IndicatorValues
from hfscore.scoring.composite import (
    NEUTRAL_SCORE,
    TOTAL_WEIGHT,
    CompositeScorer,
    ema_score,
    macd_score,
    mfi_score,
    rsi_score,
)


def values(index=30, rsi=50.0, stoch=0.0, hist=0.0, prev_hist=0.0,
           ema_fast=1.0, ema_slow=1.0, mfi=50.0, atr=0.001) -> IndicatorValues:
    return IndicatorValues(
        index=index, rsi=rsi, stoch_k=50.0, stoch_d=50.0, stoch_rsi_score=stoch,
        ema_fast=ema_fast, ema_slow=ema_slow, macd=hist, macd_signal=0.0,
        histogram=hist, prev_histogram=prev_hist, mfi=mfi, atr=atr
    )


class TestComponentScores:
    """Test individual component normalizations."""

    def test_rsi_score(self) -> None:
        assert rsi_score(50.0) == 0.0
        assert rsi_score(75.0) == pytest.approx(0.5)
        assert rsi_score(100.0) == 1.0
        assert rsi_score(0.0) == -1.0

    def test_rsi_score_undefined_is_neutral(self) -> None:
        assert rsi_score(None) == 0.0

    @pytest.mark.parametrize("hist,prev,expected", [
        (0.5, 0.2, 1.0),      # positive, rising
        (0.5, 0.5, 1.0),      # positive, flat
        (0.2, 0.5, 0.3),      # positive, falling
        (-0.5, -0.2, -1.0),   # negative, falling
        (-0.5, -0.5, -1.0),   # negative, flat
        (-0.2, -0.5, -0.3),   # negative, rising
        (0.0, 0.4, 0.0),
        (0.0, -0.4, 0.0),
    ])
    def test_macd_score(self, hist, prev, expected) -> None:
        assert macd_score(hist, prev) == expected

    def test_ema_score(self) -> None:
        assert ema_score(1.001, 1.0) == pytest.approx(0.3)
        assert ema_score(0.999, 1.0) == pytest.approx(-0.3)
        assert ema_score(1.1, 1.0) == 1.0
        assert ema_score(0.9, 1.0) == -1.0

    def test_ema_score_non_positive_slow(self) -> None:
        assert ema_score(1.0, 0.0) == 0.0
        assert ema_score(1.0, -2.0) == 0.0

    def test_mfi_score(self) -> None:
        assert mfi_score(None) == 0.0
        assert mfi_score(50.0) == 0.0
        assert mfi_score(25.0) == pytest.approx(-0.5)
        assert mfi_score(100.0) == 1.0


class TestCompositeScorer:
    """Test weighted combination."""

    def test_weights_sum_to_six(self) -> None:
        assert TOTAL_WEIGHT == pytest.approx(6.0)

    def test_below_warmup_is_neutral(self) -> None:
        scorer = CompositeScorer(warmup=27)
        score = scorer.score(values(index=26, rsi=100.0, stoch=1.0, hist=1.0, mfi=100.0, ema_fast=2.0))

        assert score == NEUTRAL_SCORE
        assert score.combined == 0.0
        assert score.confidence == 0.0

    def test_all_bullish(self) -> None:
        scorer = CompositeScorer(warmup=27)
        score = scorer.score(values(rsi=100.0, stoch=1.0, hist=1.0, prev_hist=0.0, ema_fast=2.0, mfi=100.0))

        assert score.combined == pytest.approx(1.0)
        assert score.confidence == pytest.approx(1.0)

    def test_all_bearish(self) -> None:
        scorer = CompositeScorer(warmup=27)
        score = scorer.score(values(rsi=0.0, stoch=-1.0, hist=-1.0, prev_hist=0.0, ema_fast=0.5, mfi=0.0))

        assert score.combined == pytest.approx(-1.0)
        assert score.confidence == pytest.approx(1.0)

    def test_mixed_components(self) -> None:
        """0.5*1.0 + 0*1.2 - 0.3*1.5 + 0*1.5 - 0.5*0.8 = -0.35"""
        scorer = CompositeScorer(warmup=27)
        score = scorer.score(values(rsi=75.0, stoch=0.0, hist=-1.0, prev_hist=-2.0, mfi=25.0))

        assert score.rsi == pytest.approx(0.5)
        assert score.macd == -0.3
        assert score.ema == 0.0
        assert score.mfi == pytest.approx(-0.5)
        assert score.combined == pytest.approx(-0.35 / 6.0)
        assert score.confidence == pytest.approx(0.35 / 6.0)
