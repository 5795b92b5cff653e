"""Tests for the stochastic oscillator applied to RSI"""

import pytest

from hfscore.metrics.stoch_rsi import StochRSIState, raw_stoch_k, stoch_rsi_score


class TestRawStochK:
    """Test raw %K over an RSI window"""

    def test_position_within_range(self):
        assert raw_stoch_k(60.0, [40.0, 60.0, 80.0]) == pytest.approx(50.0)
        assert raw_stoch_k(80.0, [40.0, 80.0]) == pytest.approx(100.0)
        assert raw_stoch_k(40.0, [40.0, 80.0]) == pytest.approx(0.0)

    def test_undefined_values_are_skipped(self):
        """Missing RSI does not poison the rest of the window"""
        assert raw_stoch_k(70.0, [None, None, 30.0, 70.0]) == pytest.approx(100.0)

    def test_undefined_current_is_neutral(self):
        assert raw_stoch_k(None, [20.0, 80.0, None]) == 50.0

    def test_empty_window_is_neutral(self):
        assert raw_stoch_k(55.0, [None, None]) == 50.0

    def test_zero_range_is_neutral(self):
        assert raw_stoch_k(100.0, [100.0, 100.0, 100.0]) == 50.0


class TestStochRSIScore:
    """Test %K / %D blend"""

    def test_neutral(self):
        assert stoch_rsi_score(50.0, 50.0) == 0.0

    def test_level_component(self):
        assert stoch_rsi_score(100.0, 100.0) == pytest.approx(0.6)

    def test_spread_component(self):
        assert stoch_rsi_score(100.0, 80.0) == pytest.approx(1.0)
        assert stoch_rsi_score(0.0, 20.0) == pytest.approx(-1.0)

    def test_clamped(self):
        assert stoch_rsi_score(100.0, 50.0) == 1.0
        assert stoch_rsi_score(0.0, 50.0) == -1.0


class TestStochRSIState:
    """Test incremental StochRSI"""

    def test_constant_price_is_neutral(self):
        stoch = StochRSIState()
        for _ in range(60):
            score = stoch.update(1.3000)

        assert stoch.k == 50.0
        assert stoch.d == 50.0
        assert score == 0.0

    def test_unsmoothed_k_follows_raw(self):
        """RSI(1) of 1, 2, 1, 2 is None, 100, 0, 100"""
        stoch = StochRSIState(rsi_period=1, stoch_period=2, k_smooth=1, d_smooth=1)
        stoch.update(1.0)
        stoch.update(2.0)
        assert stoch.update(1.0) == pytest.approx(-0.6)
        assert stoch.k == 0.0

        assert stoch.update(2.0) == pytest.approx(0.6)
        assert stoch.k == 100.0
        assert stoch.d == 100.0

    def test_double_smoothing(self):
        """
        Raw %K: 50, 50, 0, 100 (pre-history counts as 50)
        %K = mean(0, 100) = 50, %D = mean(50, mean(50, 0)) = 37.5
        """
        stoch = StochRSIState(rsi_period=1, stoch_period=2, k_smooth=2, d_smooth=2)
        for close in (1.0, 2.0, 1.0):
            stoch.update(close)
        score = stoch.update(2.0)

        assert stoch.k == pytest.approx(50.0)
        assert stoch.d == pytest.approx(37.5)
        assert score == pytest.approx(0.25)

    def test_score_bounded_on_noisy_series(self):
        stoch = StochRSIState(rsi_period=3, stoch_period=4)
        closes = [1.0, 1.3, 0.8, 1.9, 1.1, 1.1, 2.5, 0.2, 0.9, 1.4, 1.2, 3.0]
        for close in closes:
            assert -1.0 <= stoch.update(close) <= 1.0
