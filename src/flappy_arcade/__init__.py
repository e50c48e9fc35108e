"""
flappy_arcade: a frame-driven Flappy Bird simulation core with a pygame front end.
"""

from .config import GameConfig, load_config
from .data_models import Bird, GameSnapshot, GameState, Pipe, SimulationContext
from .errors import ConfigError, FlappyError, SchedulerError
from .game import FlappyGame, GameObserver
from .scheduler import TickScheduler

__all__ = [
    "Bird", "ConfigError", "FlappyError", "FlappyGame", "GameConfig", "GameObserver",
    "GameSnapshot", "GameState", "Pipe", "SchedulerError", "SimulationContext",
    "TickScheduler", "load_config",
]
