"""
Tests for the per-frame animation driver.

Tests:
- dt clamping
- Engine advance and render hand-off per tick
- Viewport size read every frame
- start/stop lifecycle
"""

import math

import pytest
from unittest.mock import MagicMock

from filter_viz.config import MAX_FRAME_DT
from filter_viz.gui.animation_driver import AnimationDriver, clamp_frame_dt
from filter_viz.modulation import ModulationEngine


@pytest.fixture
def driver_parts(qapp, params):
    """Driver wired to a real engine and mock sinks."""
    engine = ModulationEngine(params)
    render = MagicMock()
    size = {'value': (300, 100)}
    driver = AnimationDriver(
        engine=engine,
        params=params,
        render=render,
        get_size=lambda: size['value'],
        accent_color='#00ccff',
        clock=MagicMock(return_value=10.0),
    )
    return driver, engine, render, size


class TestClampFrameDt:
    """clamp_frame_dt bounds."""

    def test_passes_normal_frame(self):
        """A 16ms frame is untouched."""
        assert clamp_frame_dt(0.016) == 0.016

    def test_caps_stall(self):
        """Long stalls collapse to MAX_FRAME_DT."""
        assert clamp_frame_dt(5.0) == MAX_FRAME_DT

    def test_negative_is_zero(self):
        """A clock going backwards gives 0."""
        assert clamp_frame_dt(-1.0) == 0.0


class TestDriverTick:
    """One frame of work."""

    def test_first_tick_has_zero_dt(self, driver_parts):
        """With no previous frame the first tick advances by 0."""
        driver, engine, _, _ = driver_parts
        assert driver.tick(now=0.0) == 0.0
        assert engine.lfo.phase == 0.0

    def test_stall_is_clamped(self, driver_parts, params):
        """A 5s gap advances the engine by MAX_FRAME_DT only."""
        driver, engine, _, _ = driver_parts
        driver.tick(now=0.0)
        dt = driver.tick(now=5.0)
        assert dt == MAX_FRAME_DT
        expected = 2.0 * math.pi * params.lfo_rate * MAX_FRAME_DT
        assert engine.lfo.phase == pytest.approx(expected)

    def test_last_time_updated(self, driver_parts):
        """The frame time is remembered for the next tick."""
        driver, _, _, _ = driver_parts
        driver.tick(now=1.5)
        assert driver.last_time == 1.5

    def test_render_receives_curve_and_accent(self, driver_parts):
        """The sink gets width + 1 points and the accent colour."""
        driver, _, render, _ = driver_parts
        driver.tick(now=0.0)
        render.assert_called_once()
        points, color = render.call_args.args
        assert len(points) == 301
        assert color == '#00ccff'

    def test_size_read_every_frame(self, driver_parts):
        """A resize applies on the next tick."""
        driver, _, render, size = driver_parts
        driver.tick(now=0.0)
        size['value'] = (100, 50)
        driver.tick(now=0.016)
        points, _ = render.call_args.args
        assert len(points) == 101
        assert all(0.0 <= y <= 50.0 for _, y in points)

    def test_zero_width_renders_empty(self, driver_parts):
        """An unlaid-out widget gets an empty curve."""
        driver, _, render, size = driver_parts
        size['value'] = (0, 0)
        driver.tick(now=0.0)
        points, _ = render.call_args.args
        assert points == []

    def test_tick_uses_clock_when_no_time_given(self, driver_parts):
        """tick() falls back to the injected clock."""
        driver, _, _, _ = driver_parts
        driver.tick()
        assert driver.last_time == 10.0


class TestDriverLifecycle:
    """start/stop scheduling."""

    def test_start_sets_running_and_time(self, driver_parts):
        """start() records the clock and begins scheduling."""
        driver, _, _, _ = driver_parts
        driver.start()
        try:
            assert driver.is_running
            assert driver.last_time == 10.0
        finally:
            driver.stop()

    def test_stop(self, driver_parts):
        """stop() ends scheduling."""
        driver, _, _, _ = driver_parts
        driver.start()
        driver.stop()
        assert not driver.is_running

    def test_stop_when_idle_is_safe(self, driver_parts):
        """Stopping a stopped driver does nothing."""
        driver, _, _, _ = driver_parts
        driver.stop()
        assert not driver.is_running

    def test_frame_callback_ignored_after_stop(self, driver_parts):
        """A late timer callback after stop() does not render."""
        driver, _, render, _ = driver_parts
        driver.start()
        driver.stop()
        driver._on_frame()
        render.assert_not_called()
