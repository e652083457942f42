"""Candle file loading."""

from levelscope.data.loader import load_candles

__all__ = ["load_candles"]
