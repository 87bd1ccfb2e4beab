"""
Animation Driver - Per-frame loop for the filter display

Each frame:
- measure seconds since the previous frame (monotonic clock)
- clamp to [0, MAX_FRAME_DT] so a stall does not replay as a burst
- advance the modulation engine
- build the response curve at the current viewport size and Q
- hand points + accent colour to the render sink
- schedule the next frame

Clock model:
- A single-shot QTimer re-armed after every frame (FRAME_INTERVAL_MS),
  so frames never queue up behind a slow paint
- Stopping simply stops re-arming; engine state is left as is
"""

from __future__ import annotations

import time
from typing import Callable, List, Optional, Tuple

from PyQt5.QtCore import Qt, QTimer

from filter_viz.config import MAX_FRAME_DT, FRAME_INTERVAL_MS
from filter_viz.model.modulation import FilterParams
from filter_viz.modulation.modulation_engine import ModulationEngine
from filter_viz.utils.filter_response import build_curve
from filter_viz.utils.logger import logger

Point = Tuple[float, float]


def clamp_frame_dt(dt: float) -> float:
    """Clamp a frame interval to [0, MAX_FRAME_DT] seconds."""
    return max(0.0, min(MAX_FRAME_DT, dt))


class AnimationDriver:
    """
    Drives the engine and render sink once per frame.

    Only the previous frame time is kept here; viewport size is read
    through get_size() every frame so resizes apply immediately.
    """

    def __init__(
        self,
        engine: ModulationEngine,
        params: FilterParams,
        render: Callable[[List[Point], str], None],
        get_size: Callable[[], Tuple[int, int]],
        accent_color: str,
        clock: Optional[Callable[[], float]] = None,
    ):
        """
        Initialize driver.

        Args:
            engine: Modulation engine to advance
            params: Shared parameter set (Q read each frame)
            render: Sink callback (points, accent_color)
            get_size: Callback returning (width, height) in pixels
            accent_color: Curve colour handed to the sink (hex string)
            clock: Seconds source, time.monotonic by default
        """
        self._engine = engine
        self._params = params
        self._render = render
        self._get_size = get_size
        self._accent_color = accent_color
        self._clock = clock or time.monotonic

        self._last_time: Optional[float] = None
        self._running = False

        self._frame_timer = QTimer()
        self._frame_timer.setSingleShot(True)
        self._frame_timer.setTimerType(Qt.PreciseTimer)
        self._frame_timer.timeout.connect(self._on_frame)

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def is_running(self) -> bool:
        """Whether frames are being scheduled."""
        return self._running

    @property
    def last_time(self) -> Optional[float]:
        """Clock reading of the previous frame (None before the first)."""
        return self._last_time

    # =========================================================================
    # LIFECYCLE
    # =========================================================================

    def start(self):
        """Start scheduling frames."""
        if self._running:
            return
        self._running = True
        self._last_time = self._clock()
        self._frame_timer.start(FRAME_INTERVAL_MS)
        logger.debug("AnimationDriver: started", component="ANIM")

    def stop(self):
        """Stop scheduling frames."""
        if not self._running:
            return
        self._running = False
        self._frame_timer.stop()
        logger.debug("AnimationDriver: stopped", component="ANIM")

    def _on_frame(self):
        """QTimer callback - run one frame and re-arm."""
        if not self._running:
            return
        self.tick()
        self._frame_timer.start(FRAME_INTERVAL_MS)

    # =========================================================================
    # FRAME
    # =========================================================================

    def tick(self, now: Optional[float] = None) -> float:
        """
        Run one frame.

        Args:
            now: Clock reading in seconds (read from the clock if None)

        Returns:
            The clamped dt that was applied
        """
        if now is None:
            now = self._clock()
        if self._last_time is None:
            self._last_time = now

        raw_dt = now - self._last_time
        dt = clamp_frame_dt(raw_dt)
        if raw_dt > MAX_FRAME_DT:
            logger.debug("AnimationDriver: frame stall clamped", component="ANIM",
                         details=f"dt={raw_dt:.3f}s")
        self._last_time = now

        self._engine.advance(dt)
        fc_norm = self._engine.fc_norm()

        width, height = self._get_size()
        points = build_curve(width, height, fc_norm, self._params.resonance)
        self._render(points, self._accent_color)

        return dt
