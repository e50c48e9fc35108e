"""
scoring.py: One point for each pipe the bird clears.
"""

from .data_models import SimulationContext


def award_passed_pipes(ctx: SimulationContext) -> int:
    """
    Mark every pipe whose right edge is now left of the bird's left edge, and
    add one point per newly marked pipe. Returns the points awarded this tick.
    """
    bird_left = ctx.bird.x - ctx.bird.radius
    points = 0
    for pipe in ctx.pipes:
        if not pipe.passed and pipe.x + ctx.config.pipe_width < bird_left:
            pipe.passed = True
            points += 1
    ctx.score += points
    return points
