"""
Tick Scheduling

A deterministic scheduler pumped by the host, and the self-rescheduling
sampling loop that drives visualization updates.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from soundgraph.core.ports.scheduler import ITickHandle, ITickScheduler

logger = logging.getLogger(__name__)


class ManualTickHandle:
    """Handle returned by ManualTickScheduler"""

    def __init__(self, callback: Callable[[], None]):
        self.callback = callback
        self.cancelled = False
        self.done = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualTickScheduler:
    """
    Scheduler whose ticks run when the host calls run_pending().

    Usage example:
        scheduler = ManualTickScheduler()
        scheduler.schedule(callback)
        scheduler.run_pending()  # runs callback once
    """

    def __init__(self):
        self._pending: List[ManualTickHandle] = []

    def schedule(self, callback: Callable[[], None]) -> ManualTickHandle:
        handle = ManualTickHandle(callback)
        self._pending.append(handle)
        return handle

    @property
    def pending_count(self) -> int:
        return sum(1 for handle in self._pending if not handle.cancelled)

    def run_pending(self) -> int:
        """
        Run the ticks scheduled before this call.

        Ticks scheduled by the callbacks wait for the next call.

        Returns:
            int: Number of callbacks run
        """
        due, self._pending = self._pending, []
        ran = 0
        for handle in due:
            if handle.cancelled:
                continue
            handle.done = True
            handle.callback()
            ran += 1
        return ran


class SamplingLoop:
    """
    Self-rescheduling tick loop

    Each tick schedules the next one before running the step, so a step may
    cancel the loop. start() is a no-op while running and cancel() is
    idempotent. A tick belonging to a cancelled run is ignored.
    """

    def __init__(self, scheduler: ITickScheduler, step: Callable[[], None]):
        self._scheduler = scheduler
        self._step = step
        self._handle: Optional[ITickHandle] = None
        self._generation = 0
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self, immediate: bool = True) -> bool:
        """
        Start the loop.

        Args:
            immediate: Run the first step now instead of on the next tick

        Returns:
            bool: False if the loop was already running
        """
        if self._running:
            return False

        self._running = True
        self._generation += 1
        logger.debug("Sampling loop started (run %d)", self._generation)
        if immediate:
            self._tick(self._generation)
        else:
            self._schedule_next(self._generation)
        return True

    def cancel(self) -> bool:
        """
        Stop the loop.

        Returns:
            bool: False if the loop was not running
        """
        if not self._running:
            return False

        self._running = False
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        logger.debug("Sampling loop cancelled")
        return True

    def _schedule_next(self, generation: int) -> None:
        self._handle = self._scheduler.schedule(lambda: self._tick(generation))

    def _tick(self, generation: int) -> None:
        if generation != self._generation or not self._running:
            return
        self._schedule_next(generation)
        self._step()
