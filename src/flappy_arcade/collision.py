"""
collision.py: Bird versus ground, ceiling and pipes.

The bird is a circle, but it is tested as its bounding box against each pipe
rectangle. Corners of the box can register a hit the circle would miss.
"""

from typing import Iterable, Union

from .config import GameConfig
from .data_models import Bird, BirdView, Pipe, PipeView


def hits_ground(bird: Union[Bird, BirdView], config: GameConfig) -> bool:
    return bird.y + bird.radius >= config.ground_y


def hits_ceiling(bird: Union[Bird, BirdView]) -> bool:
    return bird.y - bird.radius <= 0


def hits_pipe(bird: Union[Bird, BirdView], pipe: Union[Pipe, PipeView], config: GameConfig) -> bool:
    overlaps_x = (bird.x + bird.radius > pipe.x
                  and bird.x - bird.radius < pipe.x + config.pipe_width)
    if not overlaps_x:
        return False
    # Upper pipe, then lower pipe
    return (bird.y - bird.radius < pipe.gap_top
            or bird.y + bird.radius > pipe.gap_top + config.gap_height)


def check_collision(bird: Union[Bird, BirdView],
                    pipes: Iterable[Union[Pipe, PipeView]],
                    config: GameConfig) -> bool:
    """Pure predicate; safe to call in any game state."""
    if hits_ground(bird, config) or hits_ceiling(bird):
        return True
    return any(hits_pipe(bird, pipe, config) for pipe in pipes)
