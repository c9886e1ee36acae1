"""
In-Memory Audio Graph

Parameter-holding node implementation of the audio graph ports. Nodes track
their connections and values but process no audio, which makes the graph
usable headless and for inspecting what the reconciler built.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Sequence

from soundgraph.core.ports.transport import ITransport

logger = logging.getLogger(__name__)


class AudioParam:
    """Plain parameter value"""

    def __init__(self, value: float = 0.0):
        self.value = value

    def __repr__(self) -> str:
        return f"AudioParam({self.value!r})"


class AudioNode:
    """Base node with connection bookkeeping"""

    kind = "node"

    def __init__(self):
        self.outputs: List["AudioNode"] = []
        self.inputs: List["AudioNode"] = []

    def connect(self, destination: "AudioNode") -> "AudioNode":
        if destination not in self.outputs:
            self.outputs.append(destination)
            destination.inputs.append(self)
        return destination

    def disconnect(self) -> None:
        for destination in self.outputs:
            if self in destination.inputs:
                destination.inputs.remove(self)
        self.outputs.clear()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} outputs={len(self.outputs)}>"


class MediaSourceNode(AudioNode):
    kind = "source"

    def __init__(self, transport: ITransport):
        super().__init__()
        self.transport = transport


class GainNode(AudioNode):
    kind = "gain"

    def __init__(self):
        super().__init__()
        self.gain = AudioParam(1.0)


class StereoPannerNode(AudioNode):
    kind = "panner"

    def __init__(self, pan: float = 0.0):
        super().__init__()
        self.pan = AudioParam(pan)


class BiquadFilterNode(AudioNode):
    kind = "biquad"

    def __init__(self):
        super().__init__()
        self.type = "lowpass"
        self.frequency = AudioParam(350.0)
        self.gain = AudioParam(0.0)
        self.q = AudioParam(1.0)


class AnalyserNode(AudioNode):
    """
    Analyser node

    Reports whatever the spectrum source returns, clamped to bytes and
    truncated or zero-padded to frequency_bin_count.
    """

    kind = "analyser"

    def __init__(self, fft_size: int, spectrum_source: Optional[Callable[[], Sequence[int]]] = None):
        super().__init__()
        self.fft_size = fft_size
        self.spectrum_source = spectrum_source

    @property
    def frequency_bin_count(self) -> int:
        return self.fft_size // 2

    def get_byte_frequency_data(self, buffer) -> None:
        samples = self.spectrum_source() if self.spectrum_source else ()
        count = min(len(buffer), len(samples))
        for i in range(count):
            buffer[i] = max(0, min(255, int(samples[i])))
        for i in range(count, len(buffer)):
            buffer[i] = 0


class DestinationNode(AudioNode):
    kind = "destination"


class InMemoryAudioGraph:
    """
    Audio graph factory producing in-memory nodes.

    Usage example:
        graph = InMemoryAudioGraph(spectrum_source=lambda: frame)
        gain = graph.create_gain()
        gain.connect(graph.destination)
    """

    def __init__(self, spectrum_source: Optional[Callable[[], Sequence[int]]] = None):
        self._spectrum_source = spectrum_source
        self._destination = DestinationNode()
        self.created: List[AudioNode] = []

    @property
    def destination(self) -> DestinationNode:
        return self._destination

    def set_spectrum_source(self, source: Optional[Callable[[], Sequence[int]]]) -> None:
        """Change the spectrum feed of this graph's analysers."""
        self._spectrum_source = source
        for node in self.created:
            if isinstance(node, AnalyserNode):
                node.spectrum_source = source

    def _track(self, node: AudioNode) -> AudioNode:
        self.created.append(node)
        logger.debug("Created %s node", node.kind)
        return node

    def create_media_source(self, transport: ITransport) -> MediaSourceNode:
        return self._track(MediaSourceNode(transport))

    def create_gain(self) -> GainNode:
        return self._track(GainNode())

    def create_stereo_panner(self, pan: float = 0.0) -> StereoPannerNode:
        return self._track(StereoPannerNode(pan))

    def create_biquad_filter(self) -> BiquadFilterNode:
        return self._track(BiquadFilterNode())

    def create_analyser(self, fft_size: int) -> AnalyserNode:
        return self._track(AnalyserNode(fft_size, self._spectrum_source))

    def path_from(self, node: AudioNode) -> List[AudioNode]:
        """Follow first outputs from node until a node has none."""
        path = [node]
        while node.outputs:
            node = node.outputs[0]
            if node in path:
                break
            path.append(node)
        return path
