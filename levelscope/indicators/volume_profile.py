"""Volume profile calculation.

Builds a fixed-width price histogram of traded volume from a candle
sequence, then derives the Point of Control (the bucket holding the most
volume) and the Value Area (the contiguous band around the POC holding a
target share of total volume).

Each candle's volume is split between its body (open/close range) and its
wicks, and every part is spread uniformly per unit of price across the
buckets it overlaps rather than dumped into a single bucket.
"""

import logging
import math
from datetime import datetime
from typing import Optional, Sequence

from levelscope.errors import InvalidConfiguration
from levelscope.indicators.price_step import DEFAULT_TARGET_BINS, choose_price_step
from levelscope.models import (
    Candle,
    PointOfControl,
    PriceBin,
    ProfileAnalysis,
    ProfileMeta,
    ProfileOptions,
    SessionWindow,
    ValueArea,
    VolumeProfile,
)

logger = logging.getLogger(__name__)

# Pulled off the upper end of a range so a range ending exactly on a bucket
# edge does not reach into the next (empty) bucket.
BIN_EDGE_EPSILON = 1e-12

# Decimal places kept for bucket prices
PRICE_PRECISION = 10


def _to_epoch_ms(value: datetime | int) -> float:
    """Convert a timestamp to a comparable number (epoch ms for datetimes)."""
    if isinstance(value, datetime):
        return value.timestamp() * 1000
    return float(value)


def filter_session(candles: Sequence[Candle], session: SessionWindow) -> list[Candle]:
    """Keep the candles whose timestamp falls inside the session (inclusive).

    Args:
        candles: Candles to filter.
        session: Inclusive time bounds.

    Returns:
        Candles within the session, in their original order.
    """
    start = _to_epoch_ms(session.from_time)
    end = _to_epoch_ms(session.to_time)
    return [c for c in candles if start <= _to_epoch_ms(c.timestamp) <= end]


def _spread_volume(
    bins: list[float],
    min_price: float,
    price_step: float,
    range_low: float,
    range_high: float,
    volume: float,
) -> None:
    """Add volume to every bucket overlapping [range_low, range_high].

    Each bucket receives the share of ``volume`` equal to its overlap with
    the range divided by the range length.
    """
    if volume <= 0 or range_high <= range_low:
        return

    total_range = range_high - range_low
    start_idx = max(0, math.floor((range_low - min_price) / price_step))
    end_idx = min(
        len(bins) - 1,
        math.floor((range_high - min_price - BIN_EDGE_EPSILON) / price_step),
    )

    for idx in range(start_idx, end_idx + 1):
        bin_low = min_price + idx * price_step
        bin_high = bin_low + price_step
        overlap = min(range_high, bin_high) - max(range_low, bin_low)
        if overlap > 0:
            bins[idx] += (overlap / total_range) * volume


def _allocate_candle(
    bins: list[float],
    candle: Candle,
    min_price: float,
    price_step: float,
    body_weight: float,
) -> None:
    """Distribute one candle's volume over its wicks and body."""
    low, high = candle.low, candle.high
    if high == low or candle.volume <= 0:
        return

    # Body clamped inside the wicks
    body_low = min(high, max(low, min(candle.open, candle.close)))
    body_high = max(low, min(high, max(candle.open, candle.close)))

    body_range = max(0.0, body_high - body_low)
    tail_range = max(0.0, (high - low) - body_range)

    if body_range <= 0:
        body_volume = 0.0
    elif tail_range <= 0:
        # No wicks to take the remainder
        body_volume = candle.volume
    else:
        body_volume = candle.volume * body_weight
    tail_volume = candle.volume - body_volume

    # Wicks share the tail volume by length
    if tail_range > 0:
        if body_low > low:
            lower_share = tail_volume * ((body_low - low) / tail_range)
            _spread_volume(bins, min_price, price_step, low, body_low, lower_share)
        if high > body_high:
            upper_share = tail_volume * ((high - body_high) / tail_range)
            _spread_volume(bins, min_price, price_step, body_high, high, upper_share)

    if body_range > 0:
        _spread_volume(bins, min_price, price_step, body_low, body_high, body_volume)


def find_poc_index(volumes: Sequence[float]) -> int:
    """Index of the largest bucket; ties keep the lowest index."""
    poc_idx = 0
    for i in range(1, len(volumes)):
        if volumes[i] > volumes[poc_idx]:
            poc_idx = i
    return poc_idx


def expand_value_area(
    volumes: Sequence[float],
    poc_idx: int,
    target_volume: float,
) -> tuple[int, int, float]:
    """Grow a band outward from the POC until it holds ``target_volume``.

    At each step the neighbour with strictly more volume is added; on a
    tie the lower neighbour is taken. An exhausted side counts as -1 so it
    is never chosen while the other side still has buckets.

    Args:
        volumes: Bucket volumes in ascending price order.
        poc_idx: Index of the Point of Control.
        target_volume: Volume the band should reach.

    Returns:
        Tuple of (low_index, high_index, covered_volume), indices inclusive.
    """
    n = len(volumes)
    covered = volumes[poc_idx]
    left = poc_idx - 1
    right = poc_idx + 1

    while covered < target_volume and (left >= 0 or right < n):
        left_vol = volumes[left] if left >= 0 else -1.0
        right_vol = volumes[right] if right < n else -1.0

        if right_vol > left_vol:
            covered += max(0.0, right_vol)
            right += 1
        else:
            covered += max(0.0, left_vol)
            left -= 1

    return max(0, left + 1), min(n - 1, right - 1), covered


def build_volume_profile(
    candles: Sequence[Candle],
    options: ProfileOptions,
) -> Optional[VolumeProfile]:
    """Build a volume profile with a fixed bucket width.

    Args:
        candles: Candles in ascending time order.
        options: Bucket width, session filter, body weight and value area share.

    Returns:
        The volume profile, or None when there are no candles to analyse
        (empty input, or the session filter excluded every candle).

    Raises:
        InvalidConfiguration: If ``price_step`` is not a positive number.
    """
    price_step = options.price_step
    if not math.isfinite(price_step) or price_step <= 0:
        raise InvalidConfiguration(f"price_step must be > 0, got {price_step}")

    if not candles:
        return None

    data = filter_session(candles, options.session) if options.session else list(candles)
    if not data:
        return None

    # Snap the price range outward to whole buckets
    min_price = math.floor(min(c.low for c in data) / price_step) * price_step
    max_price = math.ceil(max(c.high for c in data) / price_step) * price_step

    bin_count = max(1, round((max_price - min_price) / price_step))
    bins = [0.0] * bin_count

    for candle in data:
        _allocate_candle(bins, candle, min_price, price_step, options.body_weight)

    histogram = tuple(
        PriceBin(price=round(min_price + i * price_step, PRICE_PRECISION), volume=volume)
        for i, volume in enumerate(bins)
    )
    total_volume = sum(bins)

    poc_idx = find_poc_index(bins)
    low_idx, high_idx, covered = expand_value_area(
        bins, poc_idx, total_volume * options.value_area_pct
    )

    profile = VolumeProfile(
        histogram=histogram,
        poc=PointOfControl(
            price=histogram[poc_idx].price,
            volume=histogram[poc_idx].volume,
            index=poc_idx,
        ),
        value_area=ValueArea(
            from_price=histogram[low_idx].price,
            to_price=histogram[high_idx].price,
            coverage=options.value_area_pct,
            volume=covered,
        ),
        total_volume=total_volume,
        meta=ProfileMeta(
            price_step=price_step,
            body_weight=options.body_weight,
            value_area_pct=options.value_area_pct,
            min_price=round(min_price, PRICE_PRECISION),
            max_price=round(max_price, PRICE_PRECISION),
        ),
    )

    logger.debug(
        "Volume profile: %d candles, %d bins, POC %.4f, VA %.4f-%.4f",
        len(data), bin_count, profile.poc.price,
        profile.value_area.from_price, profile.value_area.to_price,
    )
    return profile


def describe_profile(profile: VolumeProfile) -> str:
    """One-line summary of a profile's POC and value area."""
    return (
        f"Volume Profile: POC {profile.poc.price:.4f}, "
        f"VA {profile.value_area.from_price:.4f}-{profile.value_area.to_price:.4f}"
    )


def calculate_volume_profile(
    candles: Sequence[Candle],
    body_weight: float = 0.7,
    value_area_pct: float = 0.7,
    session: Optional[SessionWindow] = None,
    target_bins: int = DEFAULT_TARGET_BINS,
) -> ProfileAnalysis:
    """Build a volume profile with an automatically chosen bucket width.

    Args:
        candles: Candles in ascending time order.
        body_weight: Share of each candle's volume given to its body (default 0.7).
        value_area_pct: Target value area coverage (default 0.7).
        session: Optional session filter applied before the step is chosen.
        target_bins: Approximate number of buckets (default 75).

    Returns:
        ProfileAnalysis with the profile on success, or a message explaining
        why no profile could be built.
    """
    if not candles:
        return ProfileAnalysis(success=False, message="No data for volume profile analysis")

    data = filter_session(candles, session) if session else list(candles)
    if not data:
        return ProfileAnalysis(success=False, message="No candles inside the session window")

    price_step = choose_price_step(data, target_bins)
    options = ProfileOptions(
        price_step=price_step,
        body_weight=body_weight,
        value_area_pct=value_area_pct,
    )
    profile = build_volume_profile(data, options)

    if profile is None:
        return ProfileAnalysis(success=False, message="Could not build volume profile")

    return ProfileAnalysis(
        success=True,
        profile=profile,
        message=describe_profile(profile),
    )
