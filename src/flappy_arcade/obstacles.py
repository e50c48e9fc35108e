"""
obstacles.py: Pipe spawning, movement and retirement.
"""

from typing import List, Optional, Tuple

from .config import GameConfig
from .data_models import Pipe, SimulationContext
from .logger import get_logger

logger = get_logger("obstacles")


def random_gap_top(ctx: SimulationContext) -> float:
    """Uniform draw from the clamped range, so the gap always fits between the margins."""
    return ctx.rng.uniform(ctx.config.gap_top_min, ctx.config.gap_top_max)


def move_pipes(pipes: List[Pipe], config: GameConfig):
    for pipe in pipes:
        pipe.x -= config.pipe_speed


def partition_pipes(pipes: List[Pipe], config: GameConfig) -> Tuple[List[Pipe], List[Pipe]]:
    """
    Split pipes into (retained, discarded), preserving order in both.
    A pipe is discarded once its right edge reaches the retirement threshold.
    """
    retained, discarded = [], []
    for pipe in pipes:
        if pipe.x + config.pipe_width > config.retire_threshold:
            retained.append(pipe)
        else:
            discarded.append(pipe)
    return retained, discarded


def advance_pipes(ctx: SimulationContext) -> List[Pipe]:
    """Move every pipe left by one tick and drop the ones that are off-screen. Returns the dropped pipes."""
    move_pipes(ctx.pipes, ctx.config)
    ctx.pipes, discarded = partition_pipes(ctx.pipes, ctx.config)
    if discarded:
        logger.debug("Retired %d pipe(s), %d in play", len(discarded), len(ctx.pipes))
    return discarded


def spawn_allowed(ctx: SimulationContext) -> bool:
    """Time gate AND space gate."""
    if ctx.spawn_timer <= ctx.config.spawn_interval:
        return False
    if not ctx.pipes:
        return True
    return ctx.pipes[-1].x < ctx.config.playfield_width - ctx.config.min_spacing


def tick_spawner(ctx: SimulationContext) -> Optional[Pipe]:
    """
    Count one tick and create a pipe at the right edge if both gates are open.
    Returns the new pipe, if any.
    """
    ctx.spawn_timer += 1
    if not spawn_allowed(ctx):
        return None

    pipe = Pipe(x=float(ctx.config.playfield_width), gap_top=random_gap_top(ctx))
    ctx.pipes.append(pipe)
    ctx.spawn_timer = 0
    logger.debug("Spawned pipe at x=%.1f gap_top=%.1f", pipe.x, pipe.gap_top)
    return pipe
