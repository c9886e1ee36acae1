"""
Filter Stage Module

Descriptor for one biquad stage of the equalizer chain.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FilterType(Enum):
    """Biquad filter type (values match the node type names)"""
    LOWSHELF = "lowshelf"
    HIGHSHELF = "highshelf"
    PEAKING = "peaking"


@dataclass
class FilterStage:
    """
    Equalizer stage descriptor

    filter_type, frequency and q are fixed when the chain is built.
    Only gain changes afterwards.

    Attributes:
        filter_type: Shelf for the outer bands, peaking for the others
        frequency: Center frequency (Hz)
        gain: Band gain plus pre-amp (dB)
        q: Quality factor, None for shelf stages
    """
    filter_type: FilterType
    frequency: float
    gain: float
    q: Optional[float] = None

    @property
    def is_shelf(self) -> bool:
        return self.filter_type is not FilterType.PEAKING
