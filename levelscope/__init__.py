"""LevelScope - volume profile and breakout analytics for candle data."""

__version__ = "0.1.0"
