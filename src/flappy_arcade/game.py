"""
game.py: The game state machine. Owns the simulation context and gates
which steps run on each tick.
"""

import random
from typing import Iterable, List, Optional

from .collision import check_collision
from .config import GameConfig
from .data_models import GameSnapshot, GameState, SimulationContext
from .logger import get_logger
from .obstacles import advance_pipes, tick_spawner
from .physics_core import apply_gravity_and_movement, flap
from .scheduler import TickScheduler
from .scoring import award_passed_pipes

logger = get_logger("game")


class GameObserver:
    """
    Callbacks for the presentation layer. Override what you need; the core
    never touches the display itself.
    """

    def on_state_changed(self, previous: GameState, current: GameState, snapshot: GameSnapshot):
        pass

    def on_score_changed(self, score: int):
        pass


class FlappyGame:
    """
    Menu -> Playing on the first input (which also flaps).
    Playing -> GameOver on collision.
    GameOver -> Menu on the next input (full reset).
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 scheduler: Optional[TickScheduler] = None,
                 rng: Optional[random.Random] = None,
                 observers: Iterable[GameObserver] = ()):
        self.config = config or GameConfig()
        self.scheduler = scheduler or TickScheduler()
        self.ctx = SimulationContext.fresh(self.config, rng)
        self.observers: List[GameObserver] = list(observers)

    # -------- Read access --------
    @property
    def state(self) -> GameState:
        return self.ctx.state

    @property
    def score(self) -> int:
        return self.ctx.score

    def snapshot(self) -> GameSnapshot:
        return self.ctx.snapshot()

    def add_observer(self, observer: GameObserver):
        self.observers.append(observer)

    # -------- Lifecycle --------
    def start(self) -> int:
        """Begin ticking under a fresh scheduler handle."""
        handle = self.scheduler.start(self.step)
        logger.info("Game loop started in %s", self.ctx.state.value)
        return handle

    def stop(self):
        self.scheduler.stop()

    def reset(self):
        """Stop the loop, restore the initial pose in Menu, and restart the loop."""
        self.scheduler.stop()
        previous = self.ctx.state
        final_score = self.ctx.score
        self.ctx.reset()
        logger.info("Reset from %s (final score %d)", previous.value, final_score)
        try:
            self._notify_score()
            self._notify_state(previous)
        finally:
            self.start()

    # -------- Input --------
    def on_flap_input(self):
        """The one input the game understands; what it does depends on the state."""
        state = self.ctx.state
        if state is GameState.MENU:
            self._transition(GameState.PLAYING)
            flap(self.ctx.bird, self.config)
        elif state is GameState.PLAYING:
            flap(self.ctx.bird, self.config)
        elif state is GameState.GAME_OVER:
            self.reset()

    # -------- Tick --------
    def step(self):
        """One simulation tick. A no-op outside Playing."""
        ctx = self.ctx
        if ctx.state is not GameState.PLAYING:
            return
        ctx.tick_count += 1

        # 1. Bird physics
        apply_gravity_and_movement(ctx.bird, self.config)

        # 2. Move and retire pipes, then score against the moved positions
        advance_pipes(ctx)
        if award_passed_pipes(ctx):
            logger.debug("Score %d at tick %d", ctx.score, ctx.tick_count)
            self._notify_score()

        # 3. Spawn
        tick_spawner(ctx)

        # 4. Collisions
        if check_collision(ctx.bird, ctx.pipes, self.config):
            self._transition(GameState.GAME_OVER)

    # -------- Internals --------
    def _transition(self, new_state: GameState):
        previous = self.ctx.state
        self.ctx.state = new_state
        if new_state is GameState.GAME_OVER:
            logger.info("Game over at tick %d, score %d", self.ctx.tick_count, self.ctx.score,
                        extra={"data": self.snapshot().to_log_dict()})
        else:
            logger.info("%s -> %s", previous.value, new_state.value)
        self._notify_state(previous)

    def _notify_state(self, previous: GameState):
        snapshot = self.snapshot()
        for observer in self.observers:
            observer.on_state_changed(previous, self.ctx.state, snapshot)

    def _notify_score(self):
        for observer in self.observers:
            observer.on_score_changed(self.ctx.score)
