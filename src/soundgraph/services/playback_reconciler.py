"""
Playback Reconciler Module

Translates SoundProps updates into transport commands, equalizer rebuilds or
gain patches, volume/pan pushes and visualization loop control.
"""

from concurrent.futures import Future
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional
import logging

from soundgraph.core.dsp.filter_chain import FilterChainBuilder
from soundgraph.core.dsp.spectrum import FFT_SIZE, HERTZ_STEP, SpectrumAggregator
from soundgraph.core.errors import TransportStartError
from soundgraph.core.event_bus import EventBus, EventType
from soundgraph.core.graph.signal_graph import SignalGraph, build_signal_graph
from soundgraph.core.ports.audio import IAudioGraph
from soundgraph.core.ports.scheduler import ITickScheduler
from soundgraph.core.ports.transport import ITransport, TransportEvent
from soundgraph.core.reconcile import (
    DEFAULT_SEEK_THRESHOLD,
    ActionKind,
    ReconcileAction,
    diff_props,
)
from soundgraph.core.scheduling import SamplingLoop
from soundgraph.models.sound_props import OnPlayingArgs, SoundProps, SoundStatus

logger = logging.getLogger(__name__)


@dataclass
class TransportState:
    """Transport state, mutated as changes are applied"""
    status: SoundStatus = SoundStatus.PLAYING
    volume: float = 100.0
    position: float = 0.0
    stereo_pan: float = 0.0


class PlaybackReconciler:
    """
    Playback Reconciler

    Owns the signal graph of one sound and keeps it, and the transport, in
    line with the latest SoundProps. Runs on a single thread: mount once,
    update on every props change, teardown at the end.

    Example:
        reconciler = PlaybackReconciler(transport, graph, scheduler, props)
        reconciler.mount()

        # Later changes are diffed against the previous props
        reconciler.update(volume=50, equalizer={60: 3, 1000: 0, 14000: -2})

        reconciler.teardown()
    """

    def __init__(
        self,
        transport: ITransport,
        graph: IAudioGraph,
        scheduler: ITickScheduler,
        props: Optional[SoundProps] = None,
        event_bus: Optional[EventBus] = None,
        seek_threshold: float = DEFAULT_SEEK_THRESHOLD,
        fft_size: int = FFT_SIZE,
        hertz_step: float = HERTZ_STEP,
    ):
        self._transport = transport
        self._graph = graph
        self._event_bus = event_bus or EventBus()
        self._props = props or SoundProps()
        self._seek_threshold = seek_threshold
        self._fft_size = fft_size
        self._hertz_step = hertz_step

        self._builder = FilterChainBuilder()
        self._signal_graph: Optional[SignalGraph] = None
        self._aggregator = SpectrumAggregator([], hertz_step)
        self._loop = SamplingLoop(scheduler, self._on_sampling_tick)
        self._state = TransportState(status=self._props.status)
        self._listener_ids: List[str] = []
        self._mounted = False
        self._torn_down = False

    # ===== State =====

    @property
    def props(self) -> SoundProps:
        return self._props

    @property
    def event_bus(self) -> EventBus:
        return self._event_bus

    @property
    def signal_graph(self) -> Optional[SignalGraph]:
        return self._signal_graph

    @property
    def is_mounted(self) -> bool:
        return self._mounted

    @property
    def is_torn_down(self) -> bool:
        return self._torn_down

    @property
    def is_visualizing(self) -> bool:
        return self._loop.running

    @property
    def state(self) -> TransportState:
        """Live transport state, updated in place by each applied change."""
        return self._state

    # ===== Lifecycle =====

    def mount(self) -> SignalGraph:
        """
        Build the graph and apply the initial props.

        Returns:
            SignalGraph: The graph owned by this reconciler
        """
        if self._mounted:
            return self._signal_graph
        if self._torn_down:
            raise RuntimeError("Cannot mount a torn down reconciler")

        props = self._props
        self._transport.src = props.url
        self._signal_graph = build_signal_graph(
            self._graph,
            self._transport,
            equalizer=props.bands,
            pre_amp=props.pre_amp,
            stereo_pan=props.stereo_pan or 0.0,
            fft_size=self._fft_size,
            builder=self._builder,
        )
        self._aggregator = SpectrumAggregator(list(props.bands), self._hertz_step)
        self._subscribe_transport()
        self._mounted = True

        self._set_volume(props.volume)
        if props.position:
            self._seek(props.position)
        self._set_play_status(props.status)
        self._set_stereo_pan(props.stereo_pan or 0.0)

        logger.info(
            "Mounted sound %r (%s, %d equalizer stages)",
            props.url, props.status.value, len(self._signal_graph.filters),
        )
        return self._signal_graph

    def update(self, props: Optional[SoundProps] = None, **changes: Any) -> List[ReconcileAction]:
        """
        Reconcile to new props.

        Args:
            props: Complete new props, or None to derive them from changes
            **changes: Fields to change on the current props

        Returns:
            The actions that were applied (empty when nothing changed)
        """
        new_props = props if props is not None else self._props.replace(**changes)
        previous, self._props = self._props, new_props

        if not self._mounted:
            logger.warning("Sound not mounted, props stored without reconciling")
            return []

        actions = diff_props(previous, new_props, self._seek_threshold)
        for action in actions:
            self._apply(action)
        return actions

    def teardown(self) -> None:
        """Stop sampling, detach listeners and disconnect the graph. Idempotent."""
        if self._torn_down:
            return
        self._torn_down = True
        self._loop.cancel()

        if not self._mounted:
            return

        for listener_id in self._listener_ids:
            self._transport.remove_listener(listener_id)
        self._listener_ids.clear()
        self._transport.pause()
        self._signal_graph.disconnect()
        self._mounted = False
        logger.info("Torn down sound %r", self._props.url)

    # ===== Action application =====

    def _apply(self, action: ReconcileAction) -> None:
        handlers: Dict[ActionKind, Callable[[Any], None]] = {
            ActionKind.SET_URL: self._set_url,
            ActionKind.SET_VOLUME: self._set_volume,
            ActionKind.SEEK: self._seek,
            ActionKind.SET_PLAY_STATUS: self._set_play_status,
            ActionKind.SET_STEREO_PAN: self._set_stereo_pan,
            ActionKind.START_VISUALIZATION: lambda _: self._start_visualization(),
            ActionKind.STOP_VISUALIZATION: lambda _: self._loop.cancel(),
            ActionKind.REBUILD_EQUALIZER: self._rebuild_equalizer,
            ActionKind.PATCH_EQUALIZER: self._patch_equalizer,
        }
        handlers[action.kind](action.value)

    def _set_url(self, url: str) -> None:
        self._loop.cancel()
        self._transport.src = url
        if self._state.status is SoundStatus.PLAYING:
            self._play()

    def _set_volume(self, volume: float) -> None:
        self._state.volume = volume
        self._signal_graph.gain.gain.value = volume / 100

    def _seek(self, position: float) -> None:
        logger.debug("Seeking to %.2fs", position)
        self._state.position = position
        self._transport.current_time = position

    def _set_stereo_pan(self, pan: float) -> None:
        self._state.stereo_pan = pan
        self._signal_graph.panner.pan.value = pan

    def _set_play_status(self, status: SoundStatus) -> None:
        self._state.status = status
        if status is SoundStatus.PAUSED:
            self._pause()
            self._event_bus.publish(EventType.SOUND_PAUSED)
        elif status is SoundStatus.STOPPED:
            self._stop()
            self._event_bus.publish(EventType.SOUND_STOPPED)
        else:
            self._play()

    def _rebuild_equalizer(self, bands: Dict[float, float]) -> None:
        self._signal_graph.rebuild_filters(bands, self._props.pre_amp, self._builder)
        self._aggregator = SpectrumAggregator(list(bands), self._hertz_step)
        self._event_bus.publish(EventType.EQUALIZER_REBUILT, self._signal_graph.filters.stages)

        if not bands:
            self._loop.cancel()
        elif self._props.on_visualization_change is not None and self._state.status is SoundStatus.PLAYING:
            self._loop.start()

    def _patch_equalizer(self, bands: Dict[float, float]) -> None:
        self._signal_graph.filters.patch_gains(bands, self._props.pre_amp)

    # ===== Transport commands =====

    def _play(self) -> None:
        try:
            future = self._transport.play()
        except Exception as e:
            self._report_start_failure(e)
            return
        future.add_done_callback(self._on_play_done)

    def _pause(self) -> None:
        self._transport.pause()
        self._loop.cancel()

    def _stop(self) -> None:
        self._pause()
        self._state.position = 0.0
        self._transport.current_time = 0

    def _on_play_done(self, future: "Future[None]") -> None:
        if self._torn_down:
            return
        if future.cancelled():
            logger.debug("Play request cancelled")
            return

        error = future.exception()
        if error is not None:
            self._report_start_failure(error)
            return

        if self._state.status is SoundStatus.PLAYING:
            self._start_visualization()

    def _report_start_failure(self, cause: BaseException) -> None:
        error = TransportStartError(self._props.url, cause)
        logger.error("%s", error)
        self._event_bus.publish(EventType.ERROR_OCCURRED, error)

    # ===== Visualization =====

    def _start_visualization(self) -> None:
        if self._props.on_visualization_change is None or not self._props.has_equalizer:
            return
        self._loop.start()

    def _on_sampling_tick(self) -> None:
        frame = self._signal_graph.read_spectrum()
        values = self._aggregator.aggregate(frame)
        self._emit(self._props.on_visualization_change, EventType.VISUALIZATION_CHANGED, values)

    # ===== Transport events =====

    def _subscribe_transport(self) -> None:
        listeners = {
            TransportEvent.TIME_UPDATE: self._on_time_update,
            TransportEvent.ENDED: self._on_ended,
            TransportEvent.LOAD_START: self._on_load_start,
            TransportEvent.CAN_PLAY_THROUGH: self._on_can_play_through,
        }
        for event, callback in listeners.items():
            self._listener_ids.append(self._transport.add_listener(event, callback))

    def _on_time_update(self, _event: Any = None) -> None:
        self._state.position = self._transport.current_time
        args = OnPlayingArgs(
            position=self._transport.current_time,
            duration=self._transport.duration,
        )
        self._emit(self._props.on_playing, EventType.SOUND_PLAYING, args)

    def _on_ended(self, event: Any = None) -> None:
        self._emit(self._props.on_finished_playing, EventType.SOUND_FINISHED, event)

    def _on_load_start(self, event: Any = None) -> None:
        self._emit(self._props.on_loading, EventType.SOUND_LOADING, event)

    def _on_can_play_through(self, event: Any = None) -> None:
        self._emit(self._props.on_load, EventType.SOUND_LOADED, event)

    def _emit(self, callback: Optional[Callable[[Any], None]], event_type: EventType, data: Any) -> None:
        """Deliver data to a prop callback and the event bus."""
        if callback is not None:
            try:
                callback(data)
            except Exception as e:
                logger.error("Sound callback for %s failed: %s", event_type.value, e)
        self._event_bus.publish(event_type, data)
