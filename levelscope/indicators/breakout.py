"""Breakout detection against a recent support/resistance band."""

import logging
from typing import Optional, Sequence

from levelscope.models import (
    BreakoutDirection,
    BreakoutOptions,
    BreakoutResult,
    BreakoutStrength,
    Candle,
)

logger = logging.getLogger(__name__)


def analyze_breakout(
    candles: Sequence[Candle],
    options: Optional[BreakoutOptions] = None,
) -> BreakoutResult:
    """Check whether the latest candle closed beyond the recent range.

    The last ``lookback_period`` candles are used. The final one is the
    current candle; support and resistance are the lowest low and highest
    high of the candles before it, and its volume is compared to their
    average.

    Args:
        candles: Candles in ascending time order.
        options: Lookback window and thresholds (defaults: 20, 1.5, 0.002).

    Returns:
        BreakoutResult. Too few candles gives ``has_breakout=False`` with an
        explanatory message.
    """
    options = options or BreakoutOptions()

    if len(candles) < options.lookback_period:
        return BreakoutResult(message="Insufficient data for analysis")

    recent = candles[-options.lookback_period:]
    current = recent[-1]
    previous = recent[:-1]

    support_level = min(c.low for c in previous)
    resistance_level = max(c.high for c in previous)
    avg_volume = sum(c.volume for c in previous) / len(previous)

    breakout_up = current.close > resistance_level * (1 + options.price_threshold)
    breakout_down = current.close < support_level * (1 - options.price_threshold)

    # Without reference volume there is nothing to confirm against
    if avg_volume > 0:
        volume_ratio: Optional[float] = current.volume / avg_volume
        volume_confirmed = current.volume > avg_volume * options.volume_threshold
    else:
        volume_ratio = None
        volume_confirmed = False

    direction: BreakoutDirection = "none"
    strength: BreakoutStrength = "weak"
    message = "No breakout detected"

    if breakout_up and volume_confirmed:
        direction = "up"
        strength = "strong"
        message = f"Resistance breakout! Price: {current.close:.4f}, Level: {resistance_level:.4f}"
    elif breakout_up:
        direction = "up"
        message = "Weak resistance breakout (low volume)"
    elif breakout_down and volume_confirmed:
        direction = "down"
        strength = "strong"
        message = f"Support breakdown! Price: {current.close:.4f}, Level: {support_level:.4f}"
    elif breakout_down:
        direction = "down"
        message = "Weak support breakdown (low volume)"

    logger.debug(
        "Breakout check: close=%.4f support=%.4f resistance=%.4f ratio=%s -> %s/%s",
        current.close, support_level, resistance_level, volume_ratio,
        direction, strength,
    )

    return BreakoutResult(
        has_breakout=direction != "none",
        direction=direction,
        strength=strength,
        support_level=support_level,
        resistance_level=resistance_level,
        current_price=current.close,
        volume_ratio=volume_ratio,
        message=message,
    )
