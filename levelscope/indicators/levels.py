"""Support and resistance extremes over a window of candles."""

import math
from typing import Optional, Sequence

from levelscope.models import Candle, RangeLevels

DEFAULT_FALLBACK_SIZE = 100

# Window length used when the visible range collapses to nothing
MIN_WINDOW_SIZE = 50


def resolve_window(
    total: int,
    visible_from: Optional[float] = None,
    visible_to: Optional[float] = None,
    fallback_size: int = DEFAULT_FALLBACK_SIZE,
) -> tuple[int, int, str]:
    """Turn a (possibly fractional) visible index range into slice bounds.

    Args:
        total: Number of candles available.
        visible_from: First visible index, may be fractional.
        visible_to: Last visible index, may be fractional.
        fallback_size: Candles taken from the end when no range is given
            (also used when a bound is missing or not finite).

    Returns:
        Tuple of (start, end, analysis_type) with ``end`` exclusive.
    """
    if (
        visible_from is None
        or visible_to is None
        or not (math.isfinite(visible_from) and math.isfinite(visible_to))
    ):
        return max(0, total - fallback_size), total, "fallback"

    start = max(0, math.floor(visible_from))
    end = min(total, math.ceil(visible_to))

    if start >= total:
        start = max(0, total - fallback_size)
    if end <= start:
        end = start + MIN_WINDOW_SIZE
    if end > total:
        end = total

    return start, end, "visible_range"


def find_range_levels(
    candles: Sequence[Candle],
    visible_from: Optional[float] = None,
    visible_to: Optional[float] = None,
    fallback_size: int = DEFAULT_FALLBACK_SIZE,
) -> Optional[RangeLevels]:
    """Find the lowest low and highest high of the visible candles.

    Args:
        candles: Candles in ascending time order.
        visible_from: First visible index (None to use the fallback window).
        visible_to: Last visible index (None to use the fallback window).
        fallback_size: Size of the trailing window used without a visible range.

    Returns:
        RangeLevels, or None if there are no candles to analyse.
    """
    if not candles:
        return None

    start, end, analysis_type = resolve_window(len(candles), visible_from, visible_to, fallback_size)
    window = candles[start:end]
    if not window:
        return None

    support_level = min(c.low for c in window)
    resistance_level = max(c.high for c in window)

    return RangeLevels(
        support_level=support_level,
        resistance_level=resistance_level,
        candles_analyzed=len(window),
        start_index=start,
        end_index=end,
        analysis_type=analysis_type,
        message=(
            f"Extremes over {len(window)} candles ({start}-{end}): "
            f"Support {support_level:.4f}, Resistance {resistance_level:.4f}"
        ),
    )
