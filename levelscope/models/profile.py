"""Volume profile options and result models."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field


class SessionWindow(BaseModel):
    """Inclusive time bounds for the candles that take part in a profile."""

    from_time: datetime | int = Field(..., alias="from", description="First timestamp included")
    to_time: datetime | int = Field(..., alias="to", description="Last timestamp included")

    model_config = {"frozen": True, "populate_by_name": True}


class ProfileOptions(BaseModel):
    """Settings for building a volume profile.

    ``price_step`` is checked when the build starts so that a bad step is
    reported as ``InvalidConfiguration`` rather than a validation error.
    """

    price_step: float = Field(..., description="Width of each price bucket")
    session: Optional[SessionWindow] = Field(None, description="Optional session filter")
    body_weight: float = Field(0.7, ge=0, le=1, description="Share of volume given to the candle body")
    value_area_pct: float = Field(0.7, gt=0, le=1, description="Target value area coverage")

    model_config = {"frozen": True}


class PriceBin(BaseModel):
    """A single price bucket of the histogram."""

    price: float = Field(..., description="Lower edge of the bucket")
    volume: float = Field(..., description="Volume accumulated in the bucket")

    model_config = {"frozen": True}


class PointOfControl(BaseModel):
    """The bucket that absorbed the most volume."""

    price: float
    volume: float
    index: int = Field(..., ge=0)

    model_config = {"frozen": True}


class ValueArea(BaseModel):
    """Contiguous band around the POC holding the target share of volume."""

    from_price: float = Field(..., alias="from", description="Lower edge of the lowest bucket in the band")
    to_price: float = Field(..., alias="to", description="Lower edge of the highest bucket in the band")
    coverage: float = Field(..., description="Target share of total volume")
    volume: float = Field(..., description="Volume actually covered by the band")

    model_config = {"frozen": True, "populate_by_name": True}


class ProfileMeta(BaseModel):
    """Parameters the profile was built with."""

    price_step: float
    body_weight: float
    value_area_pct: float
    min_price: float
    max_price: float

    model_config = {"frozen": True}


class VolumeProfile(BaseModel):
    """Volume-by-price distribution with its POC and value area."""

    histogram: tuple[PriceBin, ...]
    poc: PointOfControl
    value_area: ValueArea
    total_volume: float
    meta: ProfileMeta

    model_config = {"frozen": True}


class ProfileAnalysis(BaseModel):
    """Outcome of the automatic profile entry point."""

    success: bool
    profile: Optional[VolumeProfile] = None
    message: str

    model_config = {"frozen": True}
