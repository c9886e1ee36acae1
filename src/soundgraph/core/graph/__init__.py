"""
Signal graph construction and the in-memory node implementation.
"""

from soundgraph.core.graph.signal_graph import SignalGraph, build_signal_graph
from soundgraph.core.graph.memory_graph import InMemoryAudioGraph

__all__ = ["SignalGraph", "build_signal_graph", "InMemoryAudioGraph"]
