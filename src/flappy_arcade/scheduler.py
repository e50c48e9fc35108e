"""
scheduler.py: The frame clock abstraction that drives simulation ticks.

The host (the pygame loop, or a test) calls tick() once per frame. Only the
callback registered under the current handle ever runs.
"""

from typing import Callable, Optional

from .errors import SchedulerError
from .logger import get_logger

logger = get_logger("scheduler")


class TickScheduler:
    """Holds at most one active tick callback at a time."""

    def __init__(self):
        self._callback: Optional[Callable[[], None]] = None
        self._handle: Optional[int] = None
        self._next_handle = 1
        self.frames_fired = 0

    @property
    def handle(self) -> Optional[int]:
        return self._handle

    @property
    def is_running(self) -> bool:
        return self._handle is not None

    def start(self, callback: Callable[[], None]) -> int:
        """Register callback under a fresh handle, cancelling any previous one."""
        if self._handle is not None:
            self.stop()
        self._handle = self._next_handle
        self._next_handle += 1
        self._callback = callback
        logger.debug("Started tick loop (handle %d)", self._handle)
        return self._handle

    def stop(self):
        if self._handle is None:
            return
        logger.debug("Stopped tick loop (handle %d)", self._handle)
        self._handle = None
        self._callback = None

    def tick(self, handle: Optional[int] = None) -> bool:
        """
        Fire the active callback once. Returns False if nothing is running.
        Passing a handle asserts it is still the active one.
        """
        if handle is not None and handle != self._handle:
            raise SchedulerError(f"Tick requested for stale handle {handle} (active: {self._handle})")
        callback = self._callback
        if callback is None:
            return False
        self.frames_fired += 1
        callback()
        return True
