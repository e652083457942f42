"""Candle (OHLCV) data model."""

from datetime import datetime

from pydantic import BaseModel, Field, model_validator


class Candle(BaseModel):
    """Represents a single OHLCV candle."""

    timestamp: datetime | int = Field(..., description="Candle timestamp (datetime or epoch value)")
    open: float = Field(..., allow_inf_nan=False, description="Opening price")
    high: float = Field(..., allow_inf_nan=False, description="High price")
    low: float = Field(..., allow_inf_nan=False, description="Low price")
    close: float = Field(..., allow_inf_nan=False, description="Closing price")
    volume: float = Field(..., allow_inf_nan=False, description="Traded volume")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_range(self) -> "Candle":
        if self.low > self.high:
            raise ValueError(f"low ({self.low}) must not exceed high ({self.high})")
        return self
