"""
Output records of the scoring engine.

Immutable per-bar score frames, ATR level sets and advisories.
"""

from .scores import Advisory, Direction, LevelSet, ScoreFrame

__all__ = ["Advisory", "Direction", "LevelSet", "ScoreFrame"]
