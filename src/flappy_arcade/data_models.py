"""
data_models.py: Data structures for the simulation state and its read-only snapshot.
"""

import random
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple

from .config import GameConfig


class GameState(str, Enum):
    MENU = "menu"
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class Bird:
    """The bird. x never changes once created; y and velocity change every Playing tick."""
    x: float
    y: float
    radius: float
    velocity: float = 0.0

    @classmethod
    def at_start(cls, config: GameConfig) -> "Bird":
        return cls(x=config.bird_x, y=config.bird_start_y, radius=config.bird_radius)


@dataclass
class Pipe:
    """A pipe pair. gap_top is the bottom edge of the upper pipe."""
    x: float
    gap_top: float
    passed: bool = False


@dataclass
class SimulationContext:
    """
    Everything one game mutates, passed by reference to each step function.
    """
    config: GameConfig
    rng: random.Random
    bird: Bird
    pipes: List[Pipe] = field(default_factory=list)
    score: int = 0
    state: GameState = GameState.MENU
    spawn_timer: int = 0
    tick_count: int = 0

    @classmethod
    def fresh(cls, config: GameConfig, rng: Optional[random.Random] = None) -> "SimulationContext":
        if rng is None:
            rng = random.Random(config.seed)
        return cls(config=config, rng=rng, bird=Bird.at_start(config))

    def reset(self):
        """Back to the initial pose: Menu, bird at start, no pipes, zero score and timers."""
        self.bird = Bird.at_start(self.config)
        self.pipes = []
        self.score = 0
        self.spawn_timer = 0
        self.tick_count = 0
        self.state = GameState.MENU

    def snapshot(self) -> "GameSnapshot":
        return GameSnapshot(
            state=self.state,
            bird=BirdView(x=self.bird.x, y=self.bird.y, radius=self.bird.radius),
            pipes=tuple(PipeView(x=p.x, gap_top=p.gap_top) for p in self.pipes),
            score=self.score,
        )


# -------- Read-only views for the presentation layer --------

@dataclass(frozen=True)
class BirdView:
    x: float
    y: float
    radius: float


@dataclass(frozen=True)
class PipeView:
    x: float
    gap_top: float


@dataclass(frozen=True)
class GameSnapshot:
    """Per-frame state handed to the renderer."""
    state: GameState
    bird: BirdView
    pipes: Tuple[PipeView, ...]
    score: int

    def to_log_dict(self) -> dict:
        """Minimal dictionary form, used for structured log records."""
        return {
            "state": self.state.value,
            "bird": {"x": self.bird.x, "y": round(self.bird.y, 2), "r": self.bird.radius},
            "pipes": [{"x": round(p.x, 2), "gap_top": round(p.gap_top, 2)} for p in self.pipes],
            "score": self.score,
        }
