"""
Test Suite: Frame Ticker
========================
Per-callback elapsed time, baseline reset and mid-frame unregistration.
"""
import pytest

from flightphysics.app.ticker import QtTicker, Ticker


class Recorder:
    def __init__(self):
        self.deltas = []

    def __call__(self, dt):
        self.deltas.append(dt)


class TestTicker:

    def test_delta_since_own_previous_frame(self, clock):
        ticker = Ticker(clock)
        first = Recorder()
        ticker.register(first)
        clock.advance(0.5)
        second = Recorder()
        ticker.register(second)
        clock.advance(0.25)
        ticker.tick()
        assert first.deltas == pytest.approx([0.75])
        assert second.deltas == pytest.approx([0.25])

    def test_register_resets_baseline(self, clock):
        ticker = Ticker(clock)
        callback = Recorder()
        ticker.register(callback)
        clock.advance(10.0)
        ticker.unregister(callback)
        clock.advance(10.0)
        ticker.register(callback)
        clock.advance(0.016)
        ticker.tick()
        assert callback.deltas == pytest.approx([0.016])

    def test_unregister_during_frame(self, clock):
        ticker = Ticker(clock)
        second = Recorder()

        def first(dt):
            ticker.unregister(second)

        ticker.register(first)
        ticker.register(second)
        clock.advance(0.016)
        ticker.tick()
        assert second.deltas == []
        assert len(ticker) == 1

    def test_explicit_timestamp(self, clock):
        ticker = Ticker(clock)
        callback = Recorder()
        ticker.register(callback)
        ticker.tick(now=1.0)
        ticker.tick(now=0.5)
        assert callback.deltas == pytest.approx([1.0, 0.0])

    def test_unregister_unknown_is_noop(self, clock):
        ticker = Ticker(clock)
        ticker.unregister(Recorder())
        assert len(ticker) == 0


class TestQtTicker:

    def test_timer_runs_only_with_callbacks(self, qapp):
        ticker = QtTicker()
        callback = Recorder()
        assert not ticker.is_active
        ticker.register(callback)
        assert ticker.is_active
        ticker.unregister(callback)
        assert not ticker.is_active
