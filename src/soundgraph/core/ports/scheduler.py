# -*- coding: utf-8 -*-
"""
Tick Scheduler Port Interface

One-shot deferred callbacks used by the self-rescheduling sampling loop.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable


@runtime_checkable
class ITickHandle(Protocol):
    """Handle of a scheduled tick"""

    def cancel(self) -> None:
        """Cancel the tick. Cancelling twice, or after it ran, is a no-op"""
        ...


@runtime_checkable
class ITickScheduler(Protocol):
    """Tick Scheduler Interface

    Runs a callback once, on the owning thread, after the scheduler's tick
    interval.
    """

    def schedule(self, callback: Callable[[], None]) -> ITickHandle:
        """Schedule callback for the next tick

        Returns:
            A cancellable handle
        """
        ...
