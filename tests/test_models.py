"""Tests for data model validation."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from levelscope.models import (
    BreakoutOptions,
    BreakoutResult,
    Candle,
    ProfileOptions,
    ValueArea,
)


class TestCandle:
    """Candle validation."""

    def test_accepts_datetime_and_integer_timestamps(self):
        when = datetime(2024, 3, 1, 12, 30)
        assert Candle(timestamp=when, open=1, high=2, low=0.5, close=1.5, volume=10).timestamp == when

        ms = 1_709_296_200_000
        candle = Candle(timestamp=ms, open=1, high=2, low=0.5, close=1.5, volume=10)
        assert candle.timestamp == ms
        assert isinstance(candle.timestamp, int)

    def test_rejects_low_above_high(self):
        with pytest.raises(ValidationError):
            Candle(timestamp=0, open=1, high=1, low=2, close=1, volume=10)

    @pytest.mark.parametrize("field", ["open", "high", "low", "close", "volume"])
    def test_rejects_non_finite_values(self, field: str):
        values = {"timestamp": 0, "open": 1.0, "high": 2.0, "low": 0.5, "close": 1.5, "volume": 10.0}
        values[field] = float("nan")
        with pytest.raises(ValidationError):
            Candle(**values)

    def test_is_immutable(self):
        candle = Candle(timestamp=0, open=1, high=2, low=0.5, close=1.5, volume=10)
        with pytest.raises(ValidationError):
            candle.close = 3


class TestOptions:
    """Option defaults and bounds."""

    def test_profile_defaults(self):
        options = ProfileOptions(price_step=0.5)

        assert options.body_weight == 0.7
        assert options.value_area_pct == 0.7
        assert options.session is None

    def test_price_step_is_required(self):
        with pytest.raises(ValidationError):
            ProfileOptions()

    @pytest.mark.parametrize(
        "field, value",
        [("body_weight", -0.1), ("body_weight", 1.1), ("value_area_pct", 0), ("value_area_pct", 1.5)],
    )
    def test_profile_bounds(self, field: str, value: float):
        with pytest.raises(ValidationError):
            ProfileOptions(price_step=1, **{field: value})

    def test_breakout_defaults(self):
        options = BreakoutOptions()

        assert options.lookback_period == 20
        assert options.volume_threshold == 1.5
        assert options.price_threshold == 0.002


class TestResultSerialization:
    """Results dump to plain data."""

    def test_value_area_aliases(self):
        area = ValueArea(from_price=10, to_price=12, coverage=0.7, volume=100)

        assert area.model_dump(by_alias=True) == {"from": 10, "to": 12, "coverage": 0.7, "volume": 100}
        assert ValueArea.model_validate({"from": 1, "to": 2, "coverage": 0.7, "volume": 5}).to_price == 2

    def test_breakout_labels_dump_as_strings(self):
        data = BreakoutResult(message="x").model_dump(mode="json")

        assert data["direction"] == "none"
        assert data["strength"] == "weak"
        assert data["has_breakout"] is False
