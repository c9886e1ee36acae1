"""
Sound Props Module

Declarative inputs driving one sound: transport values, equalizer and callbacks.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace as dc_replace
from enum import Enum
from typing import Any, Callable, Dict, List, Mapping, Optional


class SoundStatus(Enum):
    """Requested playback status"""
    PLAYING = "PLAYING"
    PAUSED = "PAUSED"
    STOPPED = "STOPPED"

    @classmethod
    def parse(cls, value: Any) -> "SoundStatus":
        """Parse a status value, falling back to PLAYING for anything unknown."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.upper())
            except ValueError:
                pass
        return cls.PLAYING


@dataclass(frozen=True)
class OnPlayingArgs:
    """Payload of the on_playing callback (seconds)."""
    position: float
    duration: float


def normalize_equalizer(equalizer: Optional[Mapping[Any, Any]]) -> Dict[float, float]:
    """
    Normalize an equalizer mapping to ordered float keys and values.

    Keys may be numbers or numeric strings ("60", "310"). Order is kept.
    Non-numeric keys raise ValueError; validating ranges is up to the caller.
    """
    if not equalizer:
        return {}
    return {float(freq): float(gain) for freq, gain in equalizer.items()}


@dataclass(frozen=True)
class SoundProps:
    """
    Sound Properties

    Attributes:
        url: Media URL handed to the transport
        play_status: PLAYING, PAUSED or STOPPED (anything else means PLAYING)
        position: Requested position in seconds
        volume: Value between 0 and 100
        equalizer: Ordered {frequency: gain_db} mapping
        pre_amp: Gain added to every equalizer stage (dB)
        stereo_pan: Value between -1 and 1
    """
    url: str = ""
    play_status: Any = SoundStatus.PLAYING
    position: Optional[float] = None
    volume: float = 100.0
    equalizer: Optional[Mapping[Any, float]] = None
    pre_amp: float = 0.0
    stereo_pan: float = 0.0

    # Callbacks are compared by identity during reconciliation
    on_playing: Optional[Callable[[OnPlayingArgs], None]] = field(default=None, compare=False)
    on_finished_playing: Optional[Callable[[Any], None]] = field(default=None, compare=False)
    on_loading: Optional[Callable[[Any], None]] = field(default=None, compare=False)
    on_load: Optional[Callable[[Any], None]] = field(default=None, compare=False)
    on_visualization_change: Optional[Callable[[List[int]], None]] = field(
        default=None, compare=False
    )

    @property
    def status(self) -> SoundStatus:
        return SoundStatus.parse(self.play_status)

    @property
    def bands(self) -> Dict[float, float]:
        """Equalizer normalized to float keys, in configured order."""
        return normalize_equalizer(self.equalizer)

    @property
    def has_equalizer(self) -> bool:
        return bool(self.equalizer)

    def replace(self, **changes: Any) -> "SoundProps":
        """Return a copy with the given fields changed (partial update)."""
        return dc_replace(self, **changes)
