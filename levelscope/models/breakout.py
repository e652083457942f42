"""Breakout detection options and result models."""

from typing import Literal, Optional

from pydantic import BaseModel, Field


BreakoutDirection = Literal["up", "down", "none"]
BreakoutStrength = Literal["weak", "strong"]


class BreakoutOptions(BaseModel):
    """Settings for breakout detection."""

    lookback_period: int = Field(20, ge=2, description="Window size including the current candle")
    volume_threshold: float = Field(1.5, description="Multiple of average volume needed for confirmation")
    price_threshold: float = Field(0.002, description="Fractional distance beyond a level that counts as a break")

    model_config = {"frozen": True}


class BreakoutResult(BaseModel):
    """Classification of the latest candle against the recent range."""

    has_breakout: bool = Field(False, description="Whether a level was broken")
    direction: BreakoutDirection = Field("none", description="Break direction")
    strength: BreakoutStrength = Field("weak", description="Volume-confirmed or not")
    support_level: Optional[float] = Field(None, description="Lowest low of the reference window")
    resistance_level: Optional[float] = Field(None, description="Highest high of the reference window")
    current_price: Optional[float] = Field(None, description="Close of the latest candle")
    volume_ratio: Optional[float] = Field(None, description="Latest volume over reference average")
    message: str = Field("", description="Human-readable summary")

    model_config = {"frozen": True}
