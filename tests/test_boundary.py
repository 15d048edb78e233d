import pytest

from core.boundary import BoundaryEventController, BoundaryState
from core.duration import DurationView
from core.position import PositionTransform
from core.window_config import DerivedWindow


@pytest.fixture
def rig(make_host):
    """Controller over a [30, 90] window, wired the way the player wires it."""

    host = make_host(duration=3600.0, position=30.0)
    emitted: list[str] = []
    position = PositionTransform(host, DerivedWindow(30.0, 90.0, 60.0))
    durations = DurationView(host, position)
    controller = BoundaryEventController(host, position, durations, emit=lambda: emitted.append("ended"))
    position._on_overshoot = controller.window_reached
    return host, controller, emitted


def test_starts_active(rig):
    _, controller, emitted = rig
    assert controller.state is BoundaryState.ACTIVE
    assert not controller.fired
    assert emitted == []


def test_tick_inside_window_does_nothing(rig):
    host, controller, emitted = rig
    host.position = 60.0
    controller.on_tick()
    assert controller.state is BoundaryState.ACTIVE
    assert host.pause_calls == 0
    assert emitted == []


def test_tick_at_end_pauses_and_emits_once(rig):
    host, controller, emitted = rig
    host.position = 90.0
    for _ in range(5):
        controller.on_tick()
    assert controller.state is BoundaryState.ENDED
    assert controller.fired
    assert emitted == ["ended"]
    assert host.pause_calls >= 1
    assert not host.playing


def test_overshoot_emits_once(rig):
    host, controller, emitted = rig
    host.position = 100.0
    controller.on_tick()
    controller.on_tick()
    assert host.position == 90.0
    assert emitted == ["ended"]


def test_play_request_at_end_restarts_window(rig):
    host, controller, emitted = rig
    host.position = 90.0
    controller.on_tick()
    controller.on_play_request()
    assert host.position == 30.0
    assert host.playing
    assert controller.state is BoundaryState.ACTIVE
    # Replay alone does not re-arm the emission.
    assert controller.fired
    host.position = 90.0
    controller.on_tick()
    assert emitted == ["ended"]


def test_play_request_inside_window_is_ignored(rig):
    host, controller, _ = rig
    host.position = 50.0
    controller.on_play_request()
    assert host.position == 50.0
    assert host.play_calls == 0


def test_acknowledge_rearms(rig):
    host, controller, emitted = rig
    host.position = 90.0
    controller.on_tick()
    controller.acknowledge()
    assert not controller.fired
    controller.on_tick()
    assert emitted == ["ended", "ended"]


def test_seek_back_reenters_active(rig):
    host, controller, _ = rig
    host.position = 90.0
    controller.on_tick()
    host.position = 40.0
    controller.on_tick()
    assert controller.state is BoundaryState.ACTIVE
    assert controller.fired


def test_reset_clears_session(rig):
    host, controller, _ = rig
    host.position = 90.0
    controller.on_tick()
    controller.reset()
    assert controller.state is BoundaryState.ACTIVE
    assert not controller.fired


def test_listener_reading_position_does_not_reemit(make_host):
    host = make_host(position=100.0)
    emitted: list[float] = []
    position = PositionTransform(host, DerivedWindow(30.0, 90.0, 60.0))
    durations = DurationView(host, position)
    controller = BoundaryEventController(
        host, position, durations, emit=lambda: emitted.append(position.get())
    )
    position._on_overshoot = controller.window_reached
    host.position = 120.0
    controller.on_tick()
    assert emitted == [60.0]


def test_open_end_is_ignored_until_corrected(make_host):
    host = make_host(duration=0.0, position=45.0)
    emitted: list[str] = []
    position = PositionTransform(host, DerivedWindow(0.0, 0.0, 0.0))
    durations = DurationView(host, position)
    controller = BoundaryEventController(host, position, durations, emit=lambda: emitted.append("ended"))
    controller.on_tick()
    controller.on_play_request()
    assert controller.state is BoundaryState.ACTIVE
    assert host.seeks == []
    assert host.pause_calls == 0
    assert host.play_calls == 0
    assert emitted == []
