# -*- coding: utf-8 -*-
"""
Qt Media Transport

Playback transport backed by QMediaPlayer. Decoding and output stay inside
Qt Multimedia; this class only maps its API and signals onto ITransport.
"""

from __future__ import annotations

import logging
import uuid
from concurrent.futures import Future
from typing import Any, Callable, Dict, Optional, Tuple

from PyQt6.QtCore import QObject, QUrl
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer

from soundgraph.core.ports.transport import TransportEvent

logger = logging.getLogger(__name__)


class QtMediaTransport(QObject):
    """Qt Media Transport

    Times are exposed in seconds; QMediaPlayer works in milliseconds.

    Usage Example:
        transport = QtMediaTransport()
        transport.src = "https://example.com/song.mp3"
        transport.play().add_done_callback(on_started)
    """

    _STATUS_EVENTS = {
        QMediaPlayer.MediaStatus.LoadingMedia: TransportEvent.LOAD_START,
        QMediaPlayer.MediaStatus.LoadedMedia: TransportEvent.CAN_PLAY_THROUGH,
        QMediaPlayer.MediaStatus.EndOfMedia: TransportEvent.ENDED,
    }

    def __init__(self, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._player = QMediaPlayer(self)
        self._output = QAudioOutput(self)
        self._player.setAudioOutput(self._output)
        self._src = ""
        self._listeners: Dict[str, Tuple[TransportEvent, Callable[[Any], None]]] = {}

        self._player.positionChanged.connect(self._on_position_changed)
        self._player.mediaStatusChanged.connect(self._on_media_status_changed)

    @property
    def player(self) -> QMediaPlayer:
        return self._player

    @property
    def src(self) -> str:
        return self._src

    @src.setter
    def src(self, url: str) -> None:
        self._src = url or ""
        self._player.setSource(QUrl.fromUserInput(self._src) if self._src else QUrl())

    @property
    def current_time(self) -> float:
        return self._player.position() / 1000.0

    @current_time.setter
    def current_time(self, seconds: float) -> None:
        self._player.setPosition(int(seconds * 1000))

    @property
    def duration(self) -> float:
        return self._player.duration() / 1000.0

    def play(self) -> "Future[None]":
        future: "Future[None]" = Future()
        future.set_running_or_notify_cancel()

        if not self._src:
            future.set_exception(RuntimeError("No media source set"))
            return future

        self._player.play()
        if self._player.error() != QMediaPlayer.Error.NoError:
            future.set_exception(RuntimeError(self._player.errorString()))
        else:
            future.set_result(None)
        return future

    def pause(self) -> None:
        self._player.pause()

    def add_listener(self, event: TransportEvent, callback: Callable[[Any], None]) -> str:
        listener_id = str(uuid.uuid4())
        self._listeners[listener_id] = (event, callback)
        return listener_id

    def remove_listener(self, listener_id: str) -> bool:
        return self._listeners.pop(listener_id, None) is not None

    def _dispatch(self, event: TransportEvent, data: Any = None) -> None:
        for listened, callback in list(self._listeners.values()):
            if listened is event:
                callback(data)

    def _on_position_changed(self, _position_ms: int) -> None:
        self._dispatch(TransportEvent.TIME_UPDATE, self)

    def _on_media_status_changed(self, status: QMediaPlayer.MediaStatus) -> None:
        event = self._STATUS_EVENTS.get(status)
        if event is not None:
            logger.debug("Media status %s -> %s", status, event.value)
            self._dispatch(event, self)
