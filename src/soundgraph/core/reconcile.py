"""
Props Reconciliation

Pure diff between the previous and new SoundProps, producing the actions the
reconciler has to apply. No graph or transport access happens here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, List

from soundgraph.models.sound_props import SoundProps

logger = logging.getLogger(__name__)

# Forward drift (seconds) attributed to normal playback progress
DEFAULT_SEEK_THRESHOLD = 1.0


class ActionKind(Enum):
    """Reconciliation action, listed in application order"""
    SET_URL = "set_url"
    SET_VOLUME = "set_volume"
    SEEK = "seek"
    SET_PLAY_STATUS = "set_play_status"
    SET_STEREO_PAN = "set_stereo_pan"
    START_VISUALIZATION = "start_visualization"
    STOP_VISUALIZATION = "stop_visualization"
    REBUILD_EQUALIZER = "rebuild_equalizer"
    PATCH_EQUALIZER = "patch_equalizer"


@dataclass(frozen=True)
class ReconcileAction:
    kind: ActionKind
    value: Any = None


def should_seek(
    previous: SoundProps,
    current: SoundProps,
    threshold: float = DEFAULT_SEEK_THRESHOLD,
) -> bool:
    """
    Whether the requested position needs a transport seek.

    A rewind always seeks. A forward move seeks only past threshold, so the
    host echoing the transport's own progress back does not cause seeks.
    """
    if current.position is None:
        return False
    previous_position = previous.position or 0.0
    return (
        current.position < previous_position
        or current.position - previous_position > threshold
    )


def equalizer_layout_changed(previous: SoundProps, current: SoundProps) -> bool:
    """Whether the band frequencies or their order differ."""
    return tuple(previous.bands) != tuple(current.bands)


def equalizer_values_changed(previous: SoundProps, current: SoundProps) -> bool:
    """Order-sensitive comparison of the (frequency, gain) entries and pre-amp."""
    return (
        list(previous.bands.items()) != list(current.bands.items())
        or previous.pre_amp != current.pre_amp
    )


def diff_props(
    previous: SoundProps,
    current: SoundProps,
    seek_threshold: float = DEFAULT_SEEK_THRESHOLD,
) -> List[ReconcileAction]:
    """
    Actions needed to move from previous to current props.

    Every rule is evaluated independently; any number of actions may result.
    Identical props produce an empty list.

    Args:
        previous: Props applied last
        current: New props
        seek_threshold: Forward drift (seconds) tolerated without seeking

    Returns:
        Actions in application order
    """
    actions: List[ReconcileAction] = []

    if current.url != previous.url:
        actions.append(ReconcileAction(ActionKind.SET_URL, current.url))

    if current.volume != previous.volume:
        actions.append(ReconcileAction(ActionKind.SET_VOLUME, current.volume))

    if should_seek(previous, current, seek_threshold):
        actions.append(ReconcileAction(ActionKind.SEEK, current.position))

    if current.status is not previous.status:
        actions.append(ReconcileAction(ActionKind.SET_PLAY_STATUS, current.status))

    if (current.stereo_pan or 0.0) != (previous.stereo_pan or 0.0):
        actions.append(ReconcileAction(ActionKind.SET_STEREO_PAN, current.stereo_pan or 0.0))

    had_callback = previous.on_visualization_change is not None
    has_callback = current.on_visualization_change is not None
    if not had_callback and has_callback and current.has_equalizer:
        actions.append(ReconcileAction(ActionKind.START_VISUALIZATION))
    if had_callback and not has_callback:
        actions.append(ReconcileAction(ActionKind.STOP_VISUALIZATION))

    if equalizer_layout_changed(previous, current):
        actions.append(ReconcileAction(ActionKind.REBUILD_EQUALIZER, current.bands))
    elif current.has_equalizer and equalizer_values_changed(previous, current):
        actions.append(ReconcileAction(ActionKind.PATCH_EQUALIZER, current.bands))

    if actions:
        logger.debug("Props diff: %s", ", ".join(action.kind.value for action in actions))
    return actions
