# -*- coding: utf-8 -*-
"""
Qt Tick Scheduler

Runs sampling ticks on the Qt event loop with single-shot QTimers.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, Set

from PyQt6.QtCore import QObject, QTimer

logger = logging.getLogger(__name__)


class QtTickHandle:
    """Handle wrapping one pending single-shot timer"""

    def __init__(self, timer: QTimer, owner: "QtTickScheduler"):
        self._timer = timer
        self._owner = owner

    @property
    def active(self) -> bool:
        return self._timer is not None and self._timer.isActive()

    def cancel(self) -> None:
        if self._timer is None:
            return
        self._timer.stop()
        self._owner._release(self._timer)
        self._timer = None


class QtTickScheduler(QObject):
    """Qt Tick Scheduler

    Must be created and used on the Qt main thread.

    Usage Example:
        scheduler = QtTickScheduler(interval_ms=16)
        handle = scheduler.schedule(callback)
        handle.cancel()
    """

    def __init__(self, interval_ms: int = 16, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._interval_ms = interval_ms
        # Pending timers are kept alive until they fire or are cancelled
        self._timers: Set[QTimer] = set()

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    @property
    def pending_count(self) -> int:
        return len(self._timers)

    def schedule(self, callback: Callable[[], None]) -> QtTickHandle:
        timer = QTimer(self)
        timer.setSingleShot(True)
        handle = QtTickHandle(timer, self)

        def fire() -> None:
            self._release(timer)
            handle._timer = None
            try:
                callback()
            except Exception as e:
                logger.error("Tick callback failed: %s", e)

        timer.timeout.connect(fire)
        self._timers.add(timer)
        timer.start(self._interval_ms)
        return handle

    def _release(self, timer: QTimer) -> None:
        if timer in self._timers:
            self._timers.discard(timer)
            timer.deleteLater()
