"""Data models for LevelScope."""

from levelscope.models.candle import Candle
from levelscope.models.profile import (
    PointOfControl,
    PriceBin,
    ProfileAnalysis,
    ProfileMeta,
    ProfileOptions,
    SessionWindow,
    ValueArea,
    VolumeProfile,
)
from levelscope.models.breakout import (
    BreakoutDirection,
    BreakoutOptions,
    BreakoutResult,
    BreakoutStrength,
)
from levelscope.models.levels import RangeLevels

__all__ = [
    "Candle",
    "SessionWindow",
    "ProfileOptions",
    "PriceBin",
    "PointOfControl",
    "ValueArea",
    "ProfileMeta",
    "VolumeProfile",
    "ProfileAnalysis",
    "BreakoutDirection",
    "BreakoutStrength",
    "BreakoutOptions",
    "BreakoutResult",
    "RangeLevels",
]
