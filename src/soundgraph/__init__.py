"""
soundgraph - declarative playback, equalizer and visualization graph.
"""

from soundgraph.models.sound_props import SoundProps, SoundStatus, OnPlayingArgs
from soundgraph.services.playback_reconciler import PlaybackReconciler, TransportState

__version__ = "1.0.0"

__all__ = [
    "SoundProps",
    "SoundStatus",
    "OnPlayingArgs",
    "PlaybackReconciler",
    "TransportState",
]
