"""Tests for configuration loading."""

import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from levelscope.config import load_config


class TestLoadConfig:
    """TOML defaults over built-in values."""

    def test_missing_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            settings = load_config(Path(tmpdir) / "config.toml")

        assert settings.profile.body_weight == 0.7
        assert settings.profile.value_area_pct == 0.7
        assert settings.profile.target_bins == 75
        assert settings.breakout.lookback_period == 20
        assert settings.breakout.volume_threshold == 1.5
        assert settings.breakout.price_threshold == 0.002

    def test_values_override_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text(
                "[profile]\n"
                "body_weight = 0.6\n"
                "target_bins = 50\n"
                "\n"
                "[breakout]\n"
                "lookback_period = 30\n"
            )
            settings = load_config(path)

        assert settings.profile.body_weight == 0.6
        assert settings.profile.value_area_pct == 0.7
        assert settings.profile.target_bins == 50
        assert settings.breakout.lookback_period == 30
        assert settings.breakout.volume_threshold == 1.5

    def test_malformed_file_gives_defaults(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text("[profile\nbody_weight = ")
            settings = load_config(path)

        assert settings.profile.body_weight == 0.7

    def test_out_of_range_value_raises(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text("[profile]\nbody_weight = 2.0\n")

            with pytest.raises(ValidationError):
                load_config(path)

    @pytest.mark.parametrize("content", ["profile = 3\n", "breakout = \"fast\"\n"])
    def test_section_that_is_not_a_table_raises(self, content: str):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "config.toml"
            path.write_text(content)

            with pytest.raises(ValidationError):
                load_config(path)
