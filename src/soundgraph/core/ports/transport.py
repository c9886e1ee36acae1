# -*- coding: utf-8 -*-
"""
Playback Transport Port Interface

Decodes a URL and exposes transport controls. The reconciler only issues
commands and listens for lifecycle events.
"""

from __future__ import annotations

from concurrent.futures import Future
from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable


class TransportEvent(Enum):
    """Transport lifecycle events"""
    TIME_UPDATE = "timeupdate"
    ENDED = "ended"
    LOAD_START = "loadstart"
    CAN_PLAY_THROUGH = "canplaythrough"


@runtime_checkable
class ITransport(Protocol):
    """Playback Transport Interface

    Times are in seconds.
    """

    src: str

    current_time: float

    @property
    def duration(self) -> float:
        """Media duration in seconds (0 while unknown)"""
        ...

    def play(self) -> "Future[None]":
        """Start or resume playback

        Returns:
            A future resolved once playback runs, or failed with the
            reason it could not start
        """
        ...

    def pause(self) -> None:
        """Pause playback"""
        ...

    def add_listener(self, event: TransportEvent, callback: Callable[[Any], None]) -> str:
        """Subscribe to a lifecycle event

        Returns:
            Listener ID, used to remove the listener
        """
        ...

    def remove_listener(self, listener_id: str) -> bool:
        """Remove a listener

        Returns:
            True if the listener existed
        """
        ...
