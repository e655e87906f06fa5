"""
Test suite for package-wide configuration.
"""

import pytest

import orrery
from orrery import config, temp_config


class TestConfig:
    """Global config values, reset and temporary overrides."""

    def test_defaults(self):
        assert config.KEPLER_TOLERANCE == 1e-10
        assert config.KEPLER_MAX_ITER == 100
        assert config.VELOCITY_DELTA_DAYS == 0.001
        assert config.DISPLAY_DISTANCE_CAP == 50.0
        assert config.STRICT_VALIDATION is True

    def test_hash_decimals_from_tolerance(self):
        assert config.HASH_DECIMALS == 10

    def test_reset(self):
        config.KEPLER_MAX_ITER = 5
        config.COMET_PATH_SEGMENTS = 12
        config.reset()
        assert config.KEPLER_MAX_ITER == 100
        assert config.COMET_PATH_SEGMENTS == 500

    def test_temp_config_restores(self):
        with temp_config(DEFAULT_PATH_SEGMENTS=720) as cfg:
            assert cfg.DEFAULT_PATH_SEGMENTS == 720
            assert orrery.config.DEFAULT_PATH_SEGMENTS == 720
        assert config.DEFAULT_PATH_SEGMENTS == 360

    def test_temp_config_restores_after_exception(self):
        with pytest.raises(RuntimeError):
            with temp_config(STRICT_VALIDATION=False):
                raise RuntimeError("boom")
        assert config.STRICT_VALIDATION is True

    def test_temp_config_unknown_key(self):
        with pytest.raises(AttributeError):
            with temp_config(NOT_A_SETTING=1):
                pass

    def test_repr(self):
        text = repr(config)
        assert text.startswith("OrreryConfig:")
        assert "KEPLER_TOLERANCE" in text
