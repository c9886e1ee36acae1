# -*- coding: utf-8 -*-
"""
Audio Graph Port Interface

Defines the node primitives the reconciler wires together. The core decides
which nodes exist and with which parameters; signal processing belongs to the
implementation behind these protocols.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from soundgraph.core.ports.transport import ITransport


@runtime_checkable
class IAudioParam(Protocol):
    """A single automatable node parameter"""

    value: float


@runtime_checkable
class IAudioNode(Protocol):
    """Audio Node Interface

    Base of every graph node.
    """

    def connect(self, destination: "IAudioNode") -> "IAudioNode":
        """Connect this node's output to a destination input

        Args:
            destination: Downstream node

        Returns:
            The destination, so connections can be chained
        """
        ...

    def disconnect(self) -> None:
        """Remove every outgoing connection"""
        ...


@runtime_checkable
class IGainNode(IAudioNode, Protocol):
    """Linear gain stage (1.0 is unity)"""

    @property
    def gain(self) -> IAudioParam:
        ...


@runtime_checkable
class IStereoPannerNode(IAudioNode, Protocol):
    """Stereo panner (-1 left, 0 centre, 1 right)"""

    @property
    def pan(self) -> IAudioParam:
        ...


@runtime_checkable
class IBiquadFilterNode(IAudioNode, Protocol):
    """Second-order filter stage

    type is one of "lowshelf", "highshelf" or "peaking".
    """

    type: str

    @property
    def frequency(self) -> IAudioParam:
        ...

    @property
    def gain(self) -> IAudioParam:
        ...

    @property
    def q(self) -> IAudioParam:
        ...


@runtime_checkable
class IAnalyserNode(IAudioNode, Protocol):
    """Spectrum analyser"""

    fft_size: int

    @property
    def frequency_bin_count(self) -> int:
        """Half the FFT size"""
        ...

    def get_byte_frequency_data(self, buffer: Any) -> None:
        """Copy the current magnitude spectrum into buffer (0-255 per bin)"""
        ...


@runtime_checkable
class IAudioGraph(Protocol):
    """Audio Graph Factory Interface

    Creates the node primitives and exposes the output destination.
    """

    @property
    def destination(self) -> IAudioNode:
        ...

    def create_media_source(self, transport: "ITransport") -> IAudioNode:
        """Create the node that feeds decoded transport audio into the graph"""
        ...

    def create_gain(self) -> IGainNode:
        ...

    def create_stereo_panner(self, pan: float = 0.0) -> IStereoPannerNode:
        ...

    def create_biquad_filter(self) -> IBiquadFilterNode:
        ...

    def create_analyser(self, fft_size: int) -> IAnalyserNode:
        ...
