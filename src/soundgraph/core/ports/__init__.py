# -*- coding: utf-8 -*-
"""
Ports Interfaces Package

Defines the interfaces between the reconciler and its collaborators (audio
graph primitives, playback transport, tick scheduler).

Design Principles:
- Use Protocol to define interfaces, supporting structural subtyping.
- The core depends on these interfaces rather than concrete implementations.
- Facilitates replacing with fakes during testing.
"""

from soundgraph.core.ports.audio import (
    IAudioGraph,
    IAudioNode,
    IAudioParam,
    IAnalyserNode,
    IBiquadFilterNode,
    IGainNode,
    IStereoPannerNode,
)
from soundgraph.core.ports.transport import ITransport, TransportEvent
from soundgraph.core.ports.scheduler import ITickHandle, ITickScheduler

__all__ = [
    "IAudioGraph",
    "IAudioNode",
    "IAudioParam",
    "IAnalyserNode",
    "IBiquadFilterNode",
    "IGainNode",
    "IStereoPannerNode",
    "ITransport",
    "TransportEvent",
    "ITickHandle",
    "ITickScheduler",
]
