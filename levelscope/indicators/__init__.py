"""Volume profile and breakout indicators."""

from levelscope.indicators.breakout import analyze_breakout
from levelscope.indicators.levels import find_range_levels
from levelscope.indicators.price_step import choose_price_step, snap_price_step
from levelscope.indicators.volume_profile import (
    build_volume_profile,
    calculate_volume_profile,
    describe_profile,
    filter_session,
)

__all__ = [
    "analyze_breakout",
    "build_volume_profile",
    "calculate_volume_profile",
    "choose_price_step",
    "describe_profile",
    "filter_session",
    "find_range_levels",
    "snap_price_step",
]
