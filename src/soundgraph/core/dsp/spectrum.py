"""
Spectrum Aggregation

Maps the analyser's linear frequency bins onto the configured equalizer bands
for visualization.
"""

from __future__ import annotations

import math
from typing import List, Sequence

# Analyser transform size and resulting bin count
FFT_SIZE = 32768
FREQUENCY_BIN_COUNT = FFT_SIZE // 2

# Hz covered by one analyser bin at the reference sample rate
HERTZ_STEP = 23.4


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def aggregate_spectrum(
    data: Sequence[int],
    frequencies: Sequence[float],
    step: float = HERTZ_STEP,
) -> List[int]:
    """
    Pick one analyser value per configured band.

    Scans checkpoints 0, step, 2*step, ... up to the last frequency plus one
    step. The first checkpoint strictly inside (band, band + step) emits the
    bin at round(checkpoint / step) and moves to the next band.

    Bands must be ascending. A band whose window holds no unused checkpoint
    blocks the bands after it, so the result can be shorter than frequencies.

    Args:
        data: Byte magnitudes, one per linear bin.
        frequencies: Configured band frequencies (Hz), ascending.
        step: Hz between checkpoints.

    Returns:
        Aggregated values in band order.
    """
    values: List[int] = []
    if not frequencies:
        return values

    limit = frequencies[-1] + step
    cursor = 0
    checkpoint = 0.0
    while checkpoint <= limit and cursor < len(frequencies):
        freq = frequencies[cursor]
        if freq < checkpoint < freq + step:
            cursor += 1
            index = _round_half_up(checkpoint / step)
            if index < len(data):
                values.append(data[index])
        checkpoint += step

    return values


class SpectrumAggregator:
    """
    Per-tick spectrum aggregation for a fixed band layout.

    Example:
        aggregator = SpectrumAggregator([60, 310, 3000, 14000])
        values = aggregator.aggregate(frame)
    """

    def __init__(self, frequencies: Sequence[float], step: float = HERTZ_STEP):
        self.frequencies = [float(freq) for freq in frequencies]
        self.step = step

    def aggregate(self, data: Sequence[int]) -> List[int]:
        return aggregate_spectrum(data, self.frequencies, self.step)
