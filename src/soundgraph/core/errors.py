"""
Error Types

Exceptions raised or reported by the signal graph core.
"""


class SoundGraphError(RuntimeError):
    """Base class for soundgraph errors"""
    pass


class TransportStartError(SoundGraphError):
    """The transport rejected a play request.

    Reported through logging and the event bus, never raised to the host.
    """

    def __init__(self, url: str, cause: BaseException):
        super().__init__(f"Playback failed to start for {url!r}: {cause}")
        self.url = url
        self.cause = cause


class FilterChainMismatchError(SoundGraphError):
    """A gain patch does not match the band layout the chain was built with."""
    pass
