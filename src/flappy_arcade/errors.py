"""
errors.py: Exception types raised by the simulation core.
"""


class FlappyError(Exception):
    """Base class for all flappy_arcade errors."""


class ConfigError(FlappyError, ValueError):
    """Raised when a GameConfig cannot describe a playable field."""


class SchedulerError(FlappyError, RuntimeError):
    """Raised when a tick is requested through a handle that is no longer active."""
