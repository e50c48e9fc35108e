"""
config.py: Validated game configuration, with environment overrides.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields
from typing import Mapping, Optional

from . import constants
from .errors import ConfigError
from .logger import get_logger

logger = get_logger("config")

ENV_PREFIX = "FLAPPY_"


@dataclass(frozen=True)
class GameConfig:
    """
    Every constant the simulation reads. Fixed for the lifetime of a game.
    The presentation layer reads the playfield and pipe dimensions from here.
    """
    playfield_width: float = constants.SCREEN_WIDTH
    playfield_height: float = constants.SCREEN_HEIGHT
    ground_height: float = constants.GROUND_HEIGHT

    bird_x: float = constants.BIRD_X
    bird_radius: float = constants.BIRD_RADIUS

    gravity: float = constants.GRAVITY
    jump_strength: float = constants.JUMP_STRENGTH
    max_fall_speed: float = constants.MAX_FALL_SPEED

    pipe_width: float = constants.PIPE_WIDTH
    gap_height: float = constants.PIPE_GAP
    pipe_speed: float = constants.PIPE_SPEED
    spawn_interval: int = constants.PIPE_SPAWN_INTERVAL_TICKS
    min_spacing: float = constants.PIPE_MIN_SPACING
    gap_margin: float = constants.PIPE_GAP_MARGIN
    retire_threshold: float = constants.PIPE_RETIRE_THRESHOLD

    fps: int = constants.FPS
    seed: Optional[int] = None

    def __post_init__(self):
        for name in ("playfield_width", "playfield_height", "bird_radius",
                     "pipe_width", "gap_height", "pipe_speed", "max_fall_speed", "fps"):
            if getattr(self, name) <= 0:
                raise ConfigError(f"{name} must be positive, got {getattr(self, name)}")
        if self.ground_height < 0 or self.gap_margin < 0 or self.spawn_interval < 0:
            raise ConfigError("ground_height, gap_margin and spawn_interval must not be negative")
        if self.retire_threshold >= 0:
            raise ConfigError(f"retire_threshold must be negative, got {self.retire_threshold}")
        if self.jump_strength >= 0:
            raise ConfigError(f"jump_strength must point upward (< 0), got {self.jump_strength}")
        if self.gap_top_max < self.gap_top_min:
            raise ConfigError(
                f"gap of {self.gap_height} with margin {self.gap_margin} does not fit "
                f"above the ground at {self.ground_y}")

    # -------- Derived values --------
    @property
    def ground_y(self) -> float:
        """Y coordinate of the top of the ground."""
        return self.playfield_height - self.ground_height

    @property
    def bird_start_y(self) -> float:
        return self.playfield_height / 2

    @property
    def gap_top_min(self) -> float:
        return self.gap_margin

    @property
    def gap_top_max(self) -> float:
        return self.ground_y - self.gap_height - self.gap_margin


def _coerce(raw: str, kind: type, name: str):
    try:
        return kind(raw)
    except ValueError as e:
        raise ConfigError(f"{ENV_PREFIX}{name.upper()}={raw!r} is not a valid {kind.__name__}") from e


def load_config(environ: Optional[Mapping[str, str]] = None) -> GameConfig:
    """
    Build a GameConfig from the defaults, overridden by FLAPPY_<FIELD> variables.
    e.g. FLAPPY_GRAVITY=0.4 FLAPPY_SEED=7
    """
    environ = os.environ if environ is None else environ
    names = {f.name for f in fields(GameConfig)}
    for key in sorted(environ):
        if key.startswith(ENV_PREFIX) and key[len(ENV_PREFIX):].lower() not in names:
            logger.warning("Ignoring unknown setting %s", key)

    overrides = {}
    for f in fields(GameConfig):
        raw = environ.get(f"{ENV_PREFIX}{f.name.upper()}")
        if raw is None or raw == "":
            continue
        kind = int if f.name in ("spawn_interval", "fps", "seed") else float
        overrides[f.name] = _coerce(raw, kind, f.name)
    return GameConfig(**overrides)
