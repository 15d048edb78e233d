import numpy as np
import pytest

from core.position import PositionTransform, clamp_to_window, window_span
from core.window_config import DerivedWindow

WINDOW = DerivedWindow(30.0, 90.0, 60.0)


@pytest.mark.parametrize("seconds", [0.0, 0.1, 12.5, 30.0, 59.9, 60.0])
def test_set_then_get_round_trips(make_host, seconds):
    host = make_host()
    transform = PositionTransform(host, WINDOW)
    transform.set(seconds)
    assert host.position == pytest.approx(30.0 + seconds)
    assert transform.get() == pytest.approx(seconds)


def test_before_window_snaps_to_start(make_host):
    host = make_host(position=20.0)
    transform = PositionTransform(host, WINDOW)
    assert transform.get() == 0.0
    assert host.position == 30.0


def test_seek_jitter_is_tolerated(make_host):
    host = make_host(position=29.95)
    transform = PositionTransform(host, WINDOW)
    assert transform.get() == pytest.approx(-0.05)
    assert host.seeks == []


def test_past_window_clamps_and_reports(make_host):
    host = make_host(position=100.0)
    reports = []
    transform = PositionTransform(host, WINDOW, on_overshoot=lambda: reports.append(host.position))
    assert transform.get() == 60.0
    assert host.position == 90.0
    assert reports == [90.0]


def test_window_end_is_not_overshoot(make_host):
    host = make_host(position=90.0)
    reports = []
    transform = PositionTransform(host, WINDOW, on_overshoot=lambda: reports.append(1))
    assert transform.get() == 60.0
    assert reports == []


def test_set_is_unclamped(make_host):
    host = make_host()
    transform = PositionTransform(host, WINDOW)
    transform.set(-10.0)
    assert host.position == 20.0
    transform.set(100.0)
    assert host.position == 130.0


def test_clamp_to_window_scalar_and_array(make_host):
    assert clamp_to_window(45.0, WINDOW) == 15.0
    assert clamp_to_window(10.0, WINDOW) == 0.0
    out = clamp_to_window(np.array([0.0, 40.0, 200.0]), WINDOW)
    np.testing.assert_allclose(out, np.array([0.0, 10.0, 60.0]))
    assert PositionTransform(make_host(), WINDOW).to_underlying(15.0) == 45.0


def test_open_ended_window_has_no_upper_clamp(make_host):
    window = DerivedWindow(30.0, 0.0, 0.0)
    assert window_span(window) == float("inf")
    assert clamp_to_window(500.0, window) == 470.0
    host = make_host(position=75.0)
    reports = []
    transform = PositionTransform(host, window, on_overshoot=lambda: reports.append(1))
    assert transform.get() == 45.0
    assert host.seeks == []
    assert reports == []
