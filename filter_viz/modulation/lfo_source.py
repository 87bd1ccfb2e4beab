"""
LFO Source - free-running sine modulation of the cutoff

Phase is accumulated in radians for the life of the process and never
wrapped; sin() is periodic so no wrap is needed, and a straight sum keeps
many small steps equal to one large step.
"""

import math

from filter_viz.config import LFO_CENTER


class LFOSource:
    """Continuous phase accumulator producing a cutoff around LFO_CENTER."""

    def __init__(self):
        self.phase: float = 0.0  # radians, unbounded

    def advance(self, dt: float, rate_hz: float):
        """Advance phase by dt seconds at rate_hz."""
        self.phase += 2.0 * math.pi * rate_hz * dt

    def fc_norm(self, depth: float) -> float:
        """Current normalized cutoff: LFO_CENTER + depth * sin(phase)."""
        return LFO_CENTER + depth * math.sin(self.phase)
