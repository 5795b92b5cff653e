"""Composite scoring and ATR level calculation"""

from .composite import CompositeScore, CompositeScorer
from .levels import LevelCalculator, resolve_pip_size

__all__ = ["CompositeScore", "CompositeScorer", "LevelCalculator", "resolve_pip_size"]
