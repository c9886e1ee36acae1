# -*- coding: utf-8 -*-
"""
Event Bus Module - Publish-Subscribe Pattern Implementation

Lets hosts observe sound lifecycle events without holding prop callbacks.

Design Notes:
- Pure Python, no UI framework dependency
- Callbacks run synchronously on the publishing thread, matching the
  single-threaded reconciliation model
"""

from typing import Dict, Callable, Any
from enum import Enum
import uuid
import logging

logger = logging.getLogger(__name__)


class EventType(Enum):
    """Event type enumeration"""

    # Transport events
    SOUND_LOADING = "sound_loading"
    SOUND_LOADED = "sound_loaded"
    SOUND_PLAYING = "sound_playing"
    SOUND_FINISHED = "sound_finished"
    SOUND_PAUSED = "sound_paused"
    SOUND_STOPPED = "sound_stopped"

    # Graph events
    EQUALIZER_REBUILT = "equalizer_rebuilt"
    VISUALIZATION_CHANGED = "visualization_changed"

    # System events
    ERROR_OCCURRED = "error_occurred"


class EventBus:
    """
    Event Bus

    Usage example:
        event_bus = EventBus()

        def on_visualization(values):
            logger.debug("Bands: %s", values)

        sub_id = event_bus.subscribe(EventType.VISUALIZATION_CHANGED, on_visualization)
        event_bus.publish(EventType.VISUALIZATION_CHANGED, [120, 80, 40])
        event_bus.unsubscribe(sub_id)
    """

    def __init__(self):
        self._subscribers: Dict[EventType, Dict[str, Callable]] = {}

    def subscribe(
        self,
        event_type: EventType,
        callback: Callable[[Any], None]
    ) -> str:
        """
        Subscribe to event

        Args:
            event_type: Event type
            callback: Callback function, receiving event data as an argument

        Returns:
            str: Subscription ID, used for unsubscription
        """
        subscription_id = str(uuid.uuid4())
        self._subscribers.setdefault(event_type, {})[subscription_id] = callback
        return subscription_id

    def unsubscribe(self, subscription_id: str) -> bool:
        """
        Unsubscribe

        Args:
            subscription_id: The ID returned when subscribing

        Returns:
            bool: Whether the unsubscription was successful
        """
        for callbacks in self._subscribers.values():
            if subscription_id in callbacks:
                del callbacks[subscription_id]
                return True
        return False

    def publish(self, event_type: EventType, data: Any = None) -> None:
        """
        Publish event

        Args:
            event_type: Event type
            data: Event data
        """
        callbacks = list(self._subscribers.get(event_type, {}).values())
        for callback in callbacks:
            self._safe_call(callback, data)

    def has_subscribers(self, event_type: EventType) -> bool:
        return bool(self._subscribers.get(event_type))

    def _safe_call(self, callback: Callable, data: Any) -> None:
        """Safely call a callback function"""
        try:
            callback(data)
        except Exception as e:
            # Avoid loop: Do not use publish to report error events
            logger.error("Event callback execution error: %s", e)

    def clear(self) -> None:
        """Clear all subscriptions"""
        self._subscribers.clear()
