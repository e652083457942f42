"""Configuration for LevelScope.

Defaults for the analysis options are read from
``~/.config/levelscope/config.toml``. Every key is optional:

    [profile]
    body_weight = 0.7
    value_area_pct = 0.7
    target_bins = 75

    [breakout]
    lookback_period = 20
    volume_threshold = 1.5
    price_threshold = 0.002
"""

import logging
from pathlib import Path
from typing import Optional

import toml
from pydantic import BaseModel, Field

from levelscope.indicators.price_step import DEFAULT_TARGET_BINS
from levelscope.models import BreakoutOptions

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "levelscope" / "config.toml"


class ProfileDefaults(BaseModel):
    """Default volume profile settings (the step is chosen per data set)."""

    body_weight: float = Field(0.7, ge=0, le=1)
    value_area_pct: float = Field(0.7, gt=0, le=1)
    target_bins: int = Field(DEFAULT_TARGET_BINS, ge=1)

    model_config = {"frozen": True}


class Settings(BaseModel):
    """All configurable defaults."""

    profile: ProfileDefaults = Field(default_factory=ProfileDefaults)
    breakout: BreakoutOptions = Field(default_factory=BreakoutOptions)

    model_config = {"frozen": True}


def load_config(config_path: Optional[Path] = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        config_path: Path to the config file (default ~/.config/levelscope/config.toml).

    Returns:
        Settings with file values applied over the defaults. A missing or
        unparsable file gives the defaults.

    Raises:
        pydantic.ValidationError: If the file holds out-of-range values or a
            section that is not a table.
    """
    path = config_path or DEFAULT_CONFIG_PATH

    if not path.exists():
        return Settings()

    try:
        raw = toml.load(path)
    except toml.TomlDecodeError as e:
        logger.warning("Ignoring malformed config file %s: %s", path, e)
        return Settings()

    # Non-table sections fail validation like any other bad value
    return Settings.model_validate({
        "profile": raw.get("profile", {}),
        "breakout": raw.get("breakout", {}),
    })
