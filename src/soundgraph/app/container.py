# -*- coding: utf-8 -*-
"""
Application Container Module

Holds the shared services used to create sounds.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from soundgraph.core.event_bus import EventBus
    from soundgraph.core.ports.audio import IAudioGraph
    from soundgraph.core.ports.scheduler import ITickScheduler
    from soundgraph.core.ports.transport import ITransport
    from soundgraph.models.sound_props import SoundProps
    from soundgraph.services.config_service import ConfigService
    from soundgraph.services.playback_reconciler import PlaybackReconciler


@dataclass
class AppContainer:
    """Application Dependency Container

    Composition root for sounds: every reconciler it creates shares the
    configuration, event bus and tick scheduler.

    Usage Example:
        container = AppContainerFactory.create(use_qt=False)
        sound = container.create_sound(transport, graph, SoundProps(url="song.mp3"))
        sound.mount()
        ...
        container.cleanup()
    """

    config: "ConfigService"
    event_bus: "EventBus"
    scheduler: "ITickScheduler"

    _sounds: List["PlaybackReconciler"] = field(default_factory=list, repr=False)

    def create_sound(
        self,
        transport: "ITransport",
        graph: "IAudioGraph",
        props: Optional["SoundProps"] = None,
    ) -> "PlaybackReconciler":
        """Create an unmounted reconciler tuned by the configuration."""
        from soundgraph.models.sound_props import SoundProps
        from soundgraph.services.playback_reconciler import PlaybackReconciler

        if props is None:
            props = SoundProps(volume=self.config.get("playback.default_volume", 100))

        sound = PlaybackReconciler(
            transport,
            graph,
            self.scheduler,
            props=props,
            event_bus=self.event_bus,
            seek_threshold=float(self.config.get("playback.seek_threshold", 1.0)),
            fft_size=int(self.config.get("audio.fft_size", 32768)),
            hertz_step=float(self.config.get("audio.hertz_step", 23.4)),
        )
        self._sounds = [s for s in self._sounds if not s.is_torn_down]
        self._sounds.append(sound)
        return sound

    def cleanup(self) -> None:
        """Tear down every sound created by this container

        Should be called when the application exits.
        """
        for sound in self._sounds:
            sound.teardown()
        self._sounds.clear()
        self.event_bus.clear()
