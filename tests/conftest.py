"""Pytest configuration and shared fixtures."""

import random
import pytest
from datetime import datetime, timezone
from typing import Callable, Dict, Any, List

from hfscore.data.models import Bar, InstrumentSpec

from tests.factories import make_bar, make_flat_bar


@pytest.fixture
def bar_factory() -> Callable[..., Bar]:
    return make_bar


@pytest.fixture
def uptrend_bars() -> Callable[[int], List[Bar]]:
    """Bars whose close rises by a fixed 10-pip increment each bar."""
    def _build(count: int, start: float = 1.1000, step: float = 0.0010) -> List[Bar]:
        return [make_bar(i, start + step * i) for i in range(count)]
    return _build


@pytest.fixture
def flat_bars() -> Callable[[int], List[Bar]]:
    """Bars with a constant price."""
    def _build(count: int, price: float = 1.2500, volume: float = 100.0) -> List[Bar]:
        return [make_flat_bar(i, price, volume) for i in range(count)]
    return _build


@pytest.fixture
def random_walk_bars() -> Callable[[int], List[Bar]]:
    """Deterministic random-walk bars with varying volume."""
    def _build(count: int, seed: int = 42) -> List[Bar]:
        rng = random.Random(seed)
        bars = []
        close = 1.1000
        for i in range(count):
            open_price = close
            close = max(0.5, close + rng.uniform(-0.0020, 0.0020))
            bars.append(make_bar(
                i, close,
                volume=float(rng.randint(0, 400)),
                half_range=rng.uniform(0.0, 0.0010),
                open_price=open_price
            ))
        return bars
    return _build


@pytest.fixture
def eurusd() -> InstrumentSpec:
    return InstrumentSpec(symbol="EURUSD", pip_size=0.0001, tick_size=0.00001)


@pytest.fixture
def sample_bar_payload() -> Dict[str, Any]:
    """Sample bar payload for testing."""
    return {
        "timestamp": int(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc).timestamp() * 1000),
        "open": 1.1000,
        "high": 1.1012,
        "low": 1.0995,
        "close": 1.1008,
        "tick_volume": 245,
    }
