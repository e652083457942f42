"""Tests for loading candles from files."""

import json
import tempfile
from datetime import datetime
from pathlib import Path

import pandas as pd
import pytest

from levelscope.data import load_candles


class TestLoadCandles:
    """CSV and JSON candle files."""

    def test_csv_with_epoch_timestamps_is_sorted(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "candles.csv"
            pd.DataFrame({
                "timestamp": [1_700_000_120_000, 1_700_000_000_000, 1_700_000_060_000],
                "open": [3.0, 1.0, 2.0],
                "high": [3.5, 1.5, 2.5],
                "low": [2.5, 0.5, 1.5],
                "close": [3.2, 1.2, 2.2],
                "volume": [30, 10, 20],
            }).to_csv(path, index=False)

            candles = load_candles(path)

        assert [c.timestamp for c in candles] == [1_700_000_000_000, 1_700_000_060_000, 1_700_000_120_000]
        assert all(isinstance(c.timestamp, int) for c in candles)
        assert [c.volume for c in candles] == [10.0, 20.0, 30.0]
        assert candles[0].open == 1.0

    def test_csv_with_iso_dates(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "candles.csv"
            path.write_text(
                "Timestamp,Open,High,Low,Close,Volume\n"
                "2024-01-02 09:15:00,100,102,99,101,5000\n"
                "2024-01-02 09:16:00,101,103,100,102,6000\n"
            )
            candles = load_candles(path)

        assert candles[0].timestamp == datetime(2024, 1, 2, 9, 15)
        assert candles[1].close == 102.0

    def test_json_records_with_time_key(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "candles.json"
            path.write_text(json.dumps([
                {"time": 2, "open": 5, "high": 6, "low": 4, "close": 5.5, "volume": 100},
                {"time": 1, "open": 4, "high": 5, "low": 3, "close": 4.5, "volume": 50},
            ]))
            candles = load_candles(path)

        assert [c.timestamp for c in candles] == [1, 2]
        assert candles[1].high == 6.0

    def test_missing_columns_raise(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "candles.csv"
            path.write_text("timestamp,open,high,low,close\n1,1,2,0.5,1.5\n")

            with pytest.raises(ValueError, match="volume"):
                load_candles(path)

    def test_unsupported_extension_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "candles.txt"
            path.write_text("anything")

            with pytest.raises(ValueError, match="Unsupported"):
                load_candles(path)
