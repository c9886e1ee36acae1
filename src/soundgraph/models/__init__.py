"""
Data Models Module
"""

from .sound_props import SoundProps, SoundStatus, OnPlayingArgs, normalize_equalizer
from .filter_stage import FilterStage, FilterType
from .eq_preset import EQPreset, EQ_FREQUENCIES, preset_equalizer

__all__ = [
    'SoundProps',
    'SoundStatus',
    'OnPlayingArgs',
    'normalize_equalizer',
    'FilterStage',
    'FilterType',
    'EQPreset',
    'EQ_FREQUENCIES',
    'preset_equalizer',
]
