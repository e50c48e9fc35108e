"""
physics_core.py: Bird kinematics for one fixed tick, and the flap impulse.
"""

from .config import GameConfig
from .data_models import Bird


def apply_gravity_and_movement(bird: Bird, config: GameConfig):
    """
    Advance the bird by one tick. Mutates bird.velocity and bird.y only.
    """
    bird.velocity = min(bird.velocity + config.gravity, config.max_fall_speed)
    bird.y += bird.velocity


def flap(bird: Bird, config: GameConfig):
    """Set (not add to) the vertical velocity to the jump strength."""
    bird.velocity = config.jump_strength
