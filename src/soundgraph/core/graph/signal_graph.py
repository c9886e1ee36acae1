"""
Signal Graph

Record of the nodes one reconciler owns, wired as

    source -> gain -> [equalizer stages] -> analyser -> panner -> destination
"""

from __future__ import annotations

import array
import logging
from dataclasses import dataclass
from typing import List, Mapping, Optional

from soundgraph.core.dsp.filter_chain import FilterChain, FilterChainBuilder
from soundgraph.core.dsp.spectrum import FFT_SIZE
from soundgraph.core.ports.audio import (
    IAnalyserNode,
    IAudioGraph,
    IAudioNode,
    IGainNode,
    IStereoPannerNode,
)
from soundgraph.core.ports.transport import ITransport

logger = logging.getLogger(__name__)


@dataclass
class SignalGraph:
    """Nodes of one sound and the analyser read buffer"""
    graph: IAudioGraph
    source: IAudioNode
    gain: IGainNode
    filters: FilterChain
    analyser: IAnalyserNode
    panner: IStereoPannerNode
    frequency_data: array.array

    def read_spectrum(self) -> array.array:
        """Fill and return the frequency buffer from the analyser."""
        self.analyser.get_byte_frequency_data(self.frequency_data)
        return self.frequency_data

    def rebuild_filters(
        self,
        equalizer: Optional[Mapping],
        pre_amp: float = 0.0,
        builder: Optional[FilterChainBuilder] = None,
    ) -> FilterChain:
        """
        Replace the equalizer stages with a chain built for equalizer.

        The gain node and analyser stay in place; only the section between
        them is rewired.
        """
        self.filters.disconnect()
        self.gain.disconnect()
        builder = builder or FilterChainBuilder()
        self.filters = builder.build(self.graph, self.gain, equalizer, pre_amp)
        self.filters.tail.connect(self.analyser)
        logger.debug("Rebuilt equalizer section with %d stages", len(self.filters))
        return self.filters

    def nodes(self) -> List[IAudioNode]:
        return [self.source, self.gain, *self.filters.nodes, self.analyser, self.panner]

    def disconnect(self) -> None:
        for node in self.nodes():
            node.disconnect()


def build_signal_graph(
    graph: IAudioGraph,
    transport: ITransport,
    equalizer: Optional[Mapping] = None,
    pre_amp: float = 0.0,
    stereo_pan: float = 0.0,
    fft_size: int = FFT_SIZE,
    builder: Optional[FilterChainBuilder] = None,
) -> SignalGraph:
    """
    Create and connect every node for one sound.

    Args:
        graph: Node factory
        transport: Playback transport feeding the source node
        equalizer: Ordered {frequency: gain_db} mapping
        pre_amp: Gain added to every equalizer stage (dB)
        stereo_pan: Initial pan (-1..1)
        fft_size: Analyser transform size

    Returns:
        The connected SignalGraph
    """
    builder = builder or FilterChainBuilder()

    gain = graph.create_gain()
    panner = graph.create_stereo_panner(stereo_pan)
    source = graph.create_media_source(transport)
    analyser = graph.create_analyser(fft_size)
    analyser.fft_size = fft_size
    frequency_data = array.array('B', bytes(analyser.frequency_bin_count))

    source.connect(gain)
    filters = builder.build(graph, gain, equalizer, pre_amp)
    filters.tail.connect(analyser).connect(panner).connect(graph.destination)

    logger.debug(
        "Signal graph ready: %d equalizer stages, fft size %d", len(filters), fft_size
    )
    return SignalGraph(
        graph=graph,
        source=source,
        gain=gain,
        filters=filters,
        analyser=analyser,
        panner=panner,
        frequency_data=frequency_data,
    )
