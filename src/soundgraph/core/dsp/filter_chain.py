"""
Equalizer Filter Chain

Builds cascaded biquad stages from an ordered {frequency: gain} mapping and
patches their gains in place on later updates.
"""

from __future__ import annotations

import logging
from typing import List, Mapping, Optional, Sequence, Tuple

from soundgraph.core.errors import FilterChainMismatchError
from soundgraph.core.ports.audio import IAudioGraph, IAudioNode, IBiquadFilterNode
from soundgraph.models.filter_stage import FilterStage, FilterType
from soundgraph.models.sound_props import normalize_equalizer

logger = logging.getLogger(__name__)


def compute_q_values(frequencies: Sequence[float]) -> List[Optional[float]]:
    """
    Q factor of every band.

    Shelf bands (first and last) get None. Interior bands get
    2 * f[i] / |f[i+1] - f[i-1]| so the bandwidth follows neighbour spacing.
    """
    last = len(frequencies) - 1
    q_values: List[Optional[float]] = []
    for i, freq in enumerate(frequencies):
        if i == 0 or i == last:
            q_values.append(None)
        else:
            q_values.append((2 * freq) / abs(frequencies[i + 1] - frequencies[i - 1]))
    return q_values


def describe_stages(equalizer: Mapping, pre_amp: float = 0.0) -> List[FilterStage]:
    """
    Stage descriptors for an equalizer mapping.

    Args:
        equalizer: Ordered {frequency: gain_db} mapping.
        pre_amp: Gain added to every stage (dB).

    Returns:
        One FilterStage per entry, in mapping order.
    """
    bands = normalize_equalizer(equalizer)
    frequencies = list(bands)
    q_values = compute_q_values(frequencies)
    last = len(frequencies) - 1

    stages = []
    for i, freq in enumerate(frequencies):
        # First index wins for a single band
        if i == 0:
            filter_type = FilterType.LOWSHELF
        elif i == last:
            filter_type = FilterType.HIGHSHELF
        else:
            filter_type = FilterType.PEAKING
        stages.append(FilterStage(filter_type, freq, bands[freq] + pre_amp, q_values[i]))
    return stages


class FilterChain:
    """
    Connected equalizer stages

    Holds the descriptors and their nodes. The node list and stage layout
    never change after construction; only gains are patched.
    """

    def __init__(
        self,
        head: IAudioNode,
        stages: List[FilterStage],
        nodes: List[IBiquadFilterNode],
    ):
        self.head = head
        self.stages = stages
        self.nodes = nodes

    @property
    def tail(self) -> IAudioNode:
        """Last node of the chain, or the head when there are no stages."""
        return self.nodes[-1] if self.nodes else self.head

    @property
    def frequencies(self) -> Tuple[float, ...]:
        return tuple(stage.frequency for stage in self.stages)

    def __len__(self) -> int:
        return len(self.stages)

    def matches(self, equalizer: Optional[Mapping]) -> bool:
        """Whether equalizer has the same frequency ordering as this chain."""
        return tuple(normalize_equalizer(equalizer)) == self.frequencies

    def patch_gains(self, equalizer: Mapping, pre_amp: float = 0.0) -> None:
        """
        Set each stage gain to (band gain + pre_amp), by index.

        Type, frequency, Q and connections are left untouched.

        Raises:
            FilterChainMismatchError: The band count differs from the chain.
        """
        gains = list(normalize_equalizer(equalizer).values())
        if len(gains) != len(self.stages):
            raise FilterChainMismatchError(
                f"Cannot patch {len(self.stages)} stages with {len(gains)} gains"
            )

        for stage, node, gain in zip(self.stages, self.nodes, gains):
            stage.gain = gain + pre_amp
            node.gain.value = stage.gain
        logger.debug("Patched %d equalizer gains (pre-amp %.1f dB)", len(gains), pre_amp)

    def disconnect(self) -> None:
        """Detach every stage, including the head's link into the chain."""
        if self.nodes:
            self.head.disconnect()
        for node in self.nodes:
            node.disconnect()


class FilterChainBuilder:
    """
    Equalizer chain builder

    Creates one biquad node per band and connects them in mapping order
    after a head node.

    Example:
        chain = FilterChainBuilder().build(graph, gain_node, {60: 2, 1000: 0, 14000: -1})
        chain.tail.connect(analyser)
    """

    def build(
        self,
        graph: IAudioGraph,
        head: IAudioNode,
        equalizer: Optional[Mapping],
        pre_amp: float = 0.0,
    ) -> FilterChain:
        """
        Build and connect the stages.

        Args:
            graph: Node factory
            head: Node feeding the first stage
            equalizer: Ordered {frequency: gain_db} mapping, may be empty
            pre_amp: Gain added to every stage (dB)

        Returns:
            The connected chain. Its tail is head when equalizer is empty.
        """
        stages = describe_stages(equalizer or {}, pre_amp)
        nodes: List[IBiquadFilterNode] = []

        last_in_chain = head
        for stage in stages:
            node = graph.create_biquad_filter()
            node.type = stage.filter_type.value
            node.frequency.value = stage.frequency
            node.gain.value = stage.gain
            if stage.q is not None:
                node.q.value = stage.q

            last_in_chain.connect(node)
            last_in_chain = node
            nodes.append(node)

        logger.debug("Built equalizer chain with %d stages", len(stages))
        return FilterChain(head, stages, nodes)
