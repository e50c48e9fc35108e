"""
Tests for configuration defaults, validation and environment overrides.
"""

import logging

import pytest

from flappy_arcade import constants
from flappy_arcade.config import GameConfig, load_config
from flappy_arcade.errors import ConfigError


class TestGameConfig:
    def test_defaults_follow_constants(self):
        cfg = GameConfig()
        assert cfg.gravity == constants.GRAVITY
        assert cfg.jump_strength == constants.JUMP_STRENGTH
        assert cfg.pipe_width == constants.PIPE_WIDTH
        assert cfg.gap_height == constants.PIPE_GAP
        assert cfg.ground_y == 550
        assert (cfg.gap_top_min, cfg.gap_top_max) == (80, 290)

    def test_gap_that_cannot_fit(self):
        with pytest.raises(ConfigError):
            GameConfig(gap_height=450)

    @pytest.mark.parametrize("field", ["playfield_width", "pipe_width", "pipe_speed", "bird_radius"])
    def test_non_positive_dimensions(self, field):
        with pytest.raises(ConfigError):
            GameConfig(**{field: 0})

    def test_retire_threshold_must_be_negative(self):
        with pytest.raises(ConfigError):
            GameConfig(retire_threshold=0)

    def test_jump_must_point_up(self):
        with pytest.raises(ConfigError):
            GameConfig(jump_strength=5)

    def test_config_error_is_value_error(self):
        with pytest.raises(ValueError):
            GameConfig(max_fall_speed=-1)


class TestLoadConfig:
    def test_empty_environment_gives_defaults(self):
        assert load_config({}) == GameConfig()

    def test_overrides(self):
        cfg = load_config({"FLAPPY_GRAVITY": "0.4", "FLAPPY_SPAWN_INTERVAL": "90",
                           "FLAPPY_SEED": "7", "UNRELATED": "x"})
        assert cfg.gravity == 0.4
        assert cfg.spawn_interval == 90
        assert cfg.seed == 7

    def test_blank_values_are_ignored(self):
        assert load_config({"FLAPPY_GRAVITY": ""}).gravity == constants.GRAVITY

    def test_malformed_value(self):
        with pytest.raises(ConfigError, match="FLAPPY_PIPE_SPEED"):
            load_config({"FLAPPY_PIPE_SPEED": "fast"})

    def test_invalid_combination_from_env(self):
        with pytest.raises(ConfigError):
            load_config({"FLAPPY_GAP_HEIGHT": "500"})

    def test_unknown_setting_is_reported(self, caplog):
        with caplog.at_level(logging.WARNING, logger="flappy_arcade.config"):
            cfg = load_config({"FLAPPY_PIPE_GAP": "100", "FLAPPY_GRAVITY": "0.5"})
        assert cfg == GameConfig(gravity=0.5)
        assert "FLAPPY_PIPE_GAP" in caplog.text
        assert "FLAPPY_GRAVITY" not in caplog.text
