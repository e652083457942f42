"""Automatic price bucket sizing for volume profiles."""

import logging
import math
from typing import Sequence

from levelscope.models import Candle

logger = logging.getLogger(__name__)

DEFAULT_TARGET_BINS = 75

# Smallest step handed out, also used when the candles have no price range
MIN_PRICE_STEP = 0.001


def snap_price_step(raw_step: float) -> float:
    """Round a raw bucket width up to a human-legible magnitude.

    Args:
        raw_step: Unrounded step (price range divided by bucket count).

    Returns:
        The step rounded up to tens, units, tenths, hundredths or
        thousandths depending on its size.
    """
    if raw_step > 100:
        return math.ceil(raw_step / 10) * 10
    if raw_step > 10:
        return float(math.ceil(raw_step))
    if raw_step > 1:
        return math.ceil(raw_step * 10) / 10
    if raw_step > 0.1:
        return math.ceil(raw_step * 100) / 100
    return math.ceil(raw_step * 1000) / 1000


def choose_price_step(
    candles: Sequence[Candle],
    target_bins: int = DEFAULT_TARGET_BINS,
) -> float:
    """Pick a bucket width giving roughly ``target_bins`` buckets.

    Args:
        candles: Candles whose high/low range is measured.
        target_bins: Desired number of buckets (default 75).

    Returns:
        A positive price step.

    Raises:
        ValueError: If no candles are given or ``target_bins`` is not positive.
    """
    if not candles:
        raise ValueError("Cannot choose a price step without candles")
    if target_bins < 1:
        raise ValueError(f"target_bins must be positive, got {target_bins}")

    lowest = min(c.low for c in candles)
    highest = max(c.high for c in candles)
    price_range = highest - lowest
    raw_step = price_range / target_bins

    step = snap_price_step(raw_step)
    if step <= 0:
        step = MIN_PRICE_STEP

    logger.debug(
        "Price step: range=%.4f target_bins=%d raw=%.6f adapted=%.6f candles=%d",
        price_range, target_bins, raw_step, step, len(candles),
    )
    return step
