"""
Signal Graph Core Module
"""

from .event_bus import EventBus, EventType
from .errors import SoundGraphError, TransportStartError, FilterChainMismatchError
from .reconcile import ActionKind, ReconcileAction, diff_props
from .scheduling import ManualTickScheduler, SamplingLoop

__all__ = [
    'EventBus',
    'EventType',
    'SoundGraphError',
    'TransportStartError',
    'FilterChainMismatchError',
    'ActionKind',
    'ReconcileAction',
    'diff_props',
    'ManualTickScheduler',
    'SamplingLoop',
]
