"""
DSP Module

Decides equalizer and analyser parameters for the signal graph:
- FilterChainBuilder: biquad stage chain from an equalizer mapping
- SpectrumAggregator: analyser bins folded onto equalizer bands
"""

from soundgraph.core.dsp.filter_chain import (
    FilterChain,
    FilterChainBuilder,
    compute_q_values,
    describe_stages,
)
from soundgraph.core.dsp.spectrum import (
    FFT_SIZE,
    FREQUENCY_BIN_COUNT,
    HERTZ_STEP,
    SpectrumAggregator,
    aggregate_spectrum,
)

__all__ = [
    "FilterChain",
    "FilterChainBuilder",
    "compute_q_values",
    "describe_stages",
    "FFT_SIZE",
    "FREQUENCY_BIN_COUNT",
    "HERTZ_STEP",
    "SpectrumAggregator",
    "aggregate_spectrum",
]
