"""
Services Module
"""

from .config_service import ConfigService
from .playback_reconciler import PlaybackReconciler, TransportState

__all__ = ['ConfigService', 'PlaybackReconciler', 'TransportState']
