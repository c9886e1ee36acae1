"""
EQ Preset Module

Ready-made equalizer mappings over ten octave-spaced bands.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple
from enum import Enum


# Band center frequencies (Hz), ascending
EQ_FREQUENCIES: Tuple[float, ...] = (
    31.0, 62.0, 125.0, 250.0, 500.0, 1000.0, 2000.0, 4000.0, 8000.0, 16000.0
)

EQ_BAND_LABELS: Tuple[str, ...] = (
    "31Hz", "62Hz", "125Hz", "250Hz", "500Hz",
    "1kHz", "2kHz", "4kHz", "8kHz", "16kHz"
)


class EQPreset(Enum):
    """EQ Preset Type"""
    FLAT = "flat"
    ROCK = "rock"
    POP = "pop"
    JAZZ = "jazz"
    CLASSICAL = "classical"
    ELECTRONIC = "electronic"
    HIP_HOP = "hip_hop"
    ACOUSTIC = "acoustic"
    VOCAL = "vocal"
    BASS_BOOST = "bass_boost"


@dataclass(frozen=True)
class EQCurve:
    """
    Gains for the ten EQ_FREQUENCIES bands, in dB.

    Attributes:
        gains: One gain per band, lowest frequency first.
    """
    gains: Tuple[float, ...]

    def to_equalizer(self) -> Dict[float, float]:
        """Ordered {frequency: gain} mapping usable as an equalizer."""
        return dict(zip(EQ_FREQUENCIES, self.gains))


EQ_PRESETS: Dict[EQPreset, EQCurve] = {
    EQPreset.FLAT: EQCurve((0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)),

    # Lows and highs lifted
    EQPreset.ROCK: EQCurve((5.0, 4.0, 3.0, 1.0, -1.0, 0.0, 2.0, 4.0, 5.0, 5.0)),

    # Vocal range forward
    EQPreset.POP: EQCurve((-2.0, -1.0, 0.0, 2.0, 4.0, 4.0, 3.0, 1.0, 0.0, -1.0)),

    EQPreset.JAZZ: EQCurve((3.0, 2.0, 1.0, 2.0, -1.0, 0.0, 1.0, 2.0, 3.0, 4.0)),

    EQPreset.CLASSICAL: EQCurve((0.0, 0.0, 0.0, 0.0, 0.0, 0.0, -1.0, 2.0, 3.0, 4.0)),

    EQPreset.ELECTRONIC: EQCurve((6.0, 5.0, 2.0, 0.0, -2.0, 0.0, 1.0, 3.0, 5.0, 6.0)),

    EQPreset.HIP_HOP: EQCurve((7.0, 6.0, 4.0, 2.0, 1.0, 0.0, 1.0, 2.0, 2.0, 3.0)),

    EQPreset.ACOUSTIC: EQCurve((3.0, 2.0, 1.0, 1.0, 2.0, 1.0, 2.0, 3.0, 2.0, 2.0)),

    EQPreset.VOCAL: EQCurve((-3.0, -2.0, 0.0, 3.0, 5.0, 5.0, 4.0, 2.0, 0.0, -2.0)),

    EQPreset.BASS_BOOST: EQCurve((8.0, 7.0, 5.0, 2.0, 0.0, 0.0, 0.0, 0.0, 0.0, 0.0)),
}


def get_preset_gains(preset: EQPreset) -> List[float]:
    """Gains (dB) of a preset, lowest band first."""
    return list(EQ_PRESETS.get(preset, EQ_PRESETS[EQPreset.FLAT]).gains)


def preset_equalizer(preset: EQPreset) -> Dict[float, float]:
    """
    Equalizer mapping for a preset.

    Args:
        preset: EQ preset type.

    Returns:
        Ordered {frequency: gain} mapping over EQ_FREQUENCIES.
    """
    return EQ_PRESETS.get(preset, EQ_PRESETS[EQPreset.FLAT]).to_equalizer()


def get_preset_by_name(name: str) -> EQPreset:
    """
    Get preset type by name.

    Args:
        name: Preset name (e.g., "rock", "pop").

    Returns:
        EQPreset type, returns FLAT for invalid names.
    """
    try:
        return EQPreset(name.lower())
    except ValueError:
        return EQPreset.FLAT
