"""Support/resistance range model."""

from pydantic import BaseModel, Field


class RangeLevels(BaseModel):
    """Extremes of a window of candles."""

    support_level: float = Field(..., description="Lowest low in the window")
    resistance_level: float = Field(..., description="Highest high in the window")
    candles_analyzed: int = Field(..., ge=1, description="Number of candles in the window")
    start_index: int = Field(..., ge=0, description="First index of the window")
    end_index: int = Field(..., ge=1, description="Index one past the last candle of the window")
    analysis_type: str = Field(..., description="'visible_range' or 'fallback'")
    message: str = Field("", description="Human-readable summary")

    model_config = {"frozen": True}
