"""
Shared fixtures for the simulation tests.
"""

import random

import pytest

from flappy_arcade.config import GameConfig
from flappy_arcade.data_models import SimulationContext
from flappy_arcade.game import FlappyGame, GameObserver


class MidpointRng:
    """Stands in for random.Random: every gap sits in the middle of its range."""

    def uniform(self, a, b):
        return (a + b) / 2


class RecordingObserver(GameObserver):
    def __init__(self):
        self.transitions = []
        self.scores = []

    def on_state_changed(self, previous, current, snapshot):
        self.transitions.append((previous, current))

    def on_score_changed(self, score):
        self.scores.append(score)


@pytest.fixture
def config():
    return GameConfig()


@pytest.fixture
def ctx(config):
    return SimulationContext.fresh(config, random.Random(1234))


@pytest.fixture
def observer():
    return RecordingObserver()


@pytest.fixture
def game(config, observer):
    g = FlappyGame(config, rng=random.Random(1234), observers=[observer])
    g.start()
    return g


@pytest.fixture
def hovering_game(observer):
    """
    No gravity and a negligible jump, so after the starting flap the bird
    stays at mid-height and flies through every midpoint gap.
    """
    cfg = GameConfig(gravity=0.0, jump_strength=-1e-4)
    g = FlappyGame(cfg, rng=MidpointRng(), observers=[observer])
    g.start()
    return g


def run_ticks(game, n):
    for _ in range(n):
        game.scheduler.tick()
