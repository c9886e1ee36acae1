"""
Core Module Tests
"""

import logging

import pytest


class TestEventBus:
    """Event Bus Tests"""

    def test_instances_are_independent(self):
        from soundgraph.core.event_bus import EventBus, EventType

        bus1 = EventBus()
        bus2 = EventBus()
        received = []
        bus1.subscribe(EventType.SOUND_LOADED, received.append)

        bus2.publish(EventType.SOUND_LOADED, "ignored")
        assert received == []

    def test_subscribe_and_publish(self):
        """Test subscription and publication."""
        from soundgraph.core.event_bus import EventBus, EventType

        bus = EventBus()
        received_data = []

        def callback(data):
            received_data.append(data)

        bus.subscribe(EventType.VISUALIZATION_CHANGED, callback)
        bus.publish(EventType.VISUALIZATION_CHANGED, [10, 20, 30])

        assert received_data == [[10, 20, 30]]
        assert bus.has_subscribers(EventType.VISUALIZATION_CHANGED)

    def test_unsubscribe(self):
        """Test unsubscription."""
        from soundgraph.core.event_bus import EventBus, EventType

        bus = EventBus()
        received_data = []

        sub_id = bus.subscribe(EventType.SOUND_FINISHED, received_data.append)
        assert bus.unsubscribe(sub_id) is True
        assert bus.unsubscribe(sub_id) is False
        bus.publish(EventType.SOUND_FINISHED, None)

        assert received_data == []

    def test_failing_callback_does_not_block_others(self, caplog):
        from soundgraph.core.event_bus import EventBus, EventType

        bus = EventBus()
        received = []

        def broken(data):
            raise RuntimeError("listener exploded")

        bus.subscribe(EventType.ERROR_OCCURRED, broken)
        bus.subscribe(EventType.ERROR_OCCURRED, received.append)

        with caplog.at_level(logging.ERROR):
            bus.publish(EventType.ERROR_OCCURRED, "boom")

        assert received == ["boom"]
        assert "listener exploded" in caplog.text

    def test_clear(self):
        from soundgraph.core.event_bus import EventBus, EventType

        bus = EventBus()
        bus.subscribe(EventType.SOUND_PAUSED, lambda data: None)
        bus.clear()
        assert not bus.has_subscribers(EventType.SOUND_PAUSED)


class TestErrors:
    """Error type tests"""

    def test_transport_start_error_keeps_cause(self):
        from soundgraph.core.errors import SoundGraphError, TransportStartError

        cause = OSError("device busy")
        error = TransportStartError("song.mp3", cause)

        assert isinstance(error, SoundGraphError)
        assert error.cause is cause
        assert "song.mp3" in str(error)
        assert "device busy" in str(error)


class TestPorts:
    """Runtime protocol checks against the provided implementations"""

    def test_memory_graph_satisfies_ports(self):
        from soundgraph.core.graph.memory_graph import InMemoryAudioGraph
        from soundgraph.core.ports import (
            IAnalyserNode,
            IAudioGraph,
            IBiquadFilterNode,
            IGainNode,
            IStereoPannerNode,
        )

        graph = InMemoryAudioGraph()
        assert isinstance(graph, IAudioGraph)
        assert isinstance(graph.create_gain(), IGainNode)
        assert isinstance(graph.create_stereo_panner(), IStereoPannerNode)
        assert isinstance(graph.create_biquad_filter(), IBiquadFilterNode)
        assert isinstance(graph.create_analyser(2048), IAnalyserNode)

    def test_fake_transport_satisfies_port(self, transport):
        from soundgraph.core.ports import ITransport

        assert isinstance(transport, ITransport)

    def test_manual_scheduler_satisfies_port(self, scheduler):
        from soundgraph.core.ports import ITickHandle, ITickScheduler

        assert isinstance(scheduler, ITickScheduler)
        assert isinstance(scheduler.schedule(lambda: None), ITickHandle)


@pytest.mark.parametrize(
    "value, expected",
    [("PLAYING", "PLAYING"), ("paused", "PAUSED"), ("STOPPED", "STOPPED"),
     (None, "PLAYING"), ("", "PLAYING"), (3, "PLAYING")],
)
def test_sound_status_parse(value, expected):
    from soundgraph.models.sound_props import SoundStatus

    assert SoundStatus.parse(value).value == expected


def test_normalize_equalizer_keeps_order():
    from soundgraph.models.sound_props import normalize_equalizer

    assert list(normalize_equalizer({"14000": 1, 60: "2"}).items()) == [(14000.0, 1.0), (60.0, 2.0)]
    assert normalize_equalizer(None) == {}
    with pytest.raises(ValueError):
        normalize_equalizer({"bass": 1})
