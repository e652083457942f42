"""Load candles from local CSV or JSON files."""

from pathlib import Path

import pandas as pd

from levelscope.models import Candle

REQUIRED_COLUMNS = ["open", "high", "low", "close", "volume"]


def _read_frame(path: Path) -> pd.DataFrame:
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return pd.read_csv(path)
    if suffix == ".json":
        return pd.read_json(path, convert_dates=False)
    raise ValueError(f"Unsupported candle file type: {path.suffix or '(none)'}. Use .csv or .json")


def load_candles(path: Path) -> list[Candle]:
    """Read candles from a CSV or JSON file.

    The file needs ``open``, ``high``, ``low``, ``close`` and ``volume``
    columns plus a ``timestamp`` (or ``time``) column. Numeric timestamps
    are kept as integers (e.g. exchange epoch milliseconds); anything else
    is parsed as a date/time.

    Args:
        path: Path to a .csv or .json file.

    Returns:
        Candles sorted by timestamp.

    Raises:
        ValueError: If the file type is unsupported or columns are missing.
    """
    df = _read_frame(Path(path))
    df.columns = [str(c).strip().lower() for c in df.columns]

    if "timestamp" not in df.columns and "time" in df.columns:
        df = df.rename(columns={"time": "timestamp"})

    missing = [c for c in ["timestamp"] + REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns in {path}: {', '.join(missing)}")

    numeric_time = pd.api.types.is_numeric_dtype(df["timestamp"])
    if not numeric_time:
        df["timestamp"] = pd.to_datetime(df["timestamp"])

    df = df.sort_values("timestamp", kind="stable")

    candles = []
    for row in df.to_dict("records"):
        ts = row["timestamp"]
        candles.append(Candle(
            timestamp=int(ts) if numeric_time else ts.to_pydatetime(),
            open=float(row["open"]),
            high=float(row["high"]),
            low=float(row["low"]),
            close=float(row["close"]),
            volume=float(row["volume"]),
        ))

    return candles
