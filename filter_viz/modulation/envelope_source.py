"""
Envelope Source - attack/decay envelope driving the cutoff

State machine:
  IDLE   + advance -> no-op
  ATTACK + advance -> value = min(1, timer/attack); at 1 -> DECAY, timer = 0
  DECAY  + advance -> value = max(0, 1 - timer/decay); at 0 -> IDLE
  Any    + trigger -> ATTACK, timer = 0 (value kept)

Retriggering keeps the current value and restarts the attack timer. The
first advance after a trigger recomputes value from the timer, so a
retrigger from the middle of a decay drops to timer/attack and ramps up
again from there.
"""

from filter_viz.config import ENV_BASE_CUTOFF, ENV_MIN_TIME
from filter_viz.model.modulation import EnvPhase


class EnvelopeSource:
    """Triggerable attack/decay envelope, value in [0, 1]."""

    def __init__(self):
        self._phase = EnvPhase.IDLE
        self._value: float = 0.0
        self._timer: float = 0.0  # seconds since phase entry

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def phase(self) -> EnvPhase:
        """Current state machine phase."""
        return self._phase

    @property
    def value(self) -> float:
        """Envelope output, 0 = closed, 1 = fully open."""
        return self._value

    @property
    def timer(self) -> float:
        """Seconds spent in the current phase."""
        return self._timer

    # =========================================================================
    # CONTROL
    # =========================================================================

    def trigger(self):
        """Restart the attack. Value is left untouched."""
        self._phase = EnvPhase.ATTACK
        self._timer = 0.0

    def reset(self):
        """Force IDLE with value and timer at zero."""
        self._phase = EnvPhase.IDLE
        self._value = 0.0
        self._timer = 0.0

    # =========================================================================
    # TICK
    # =========================================================================

    def advance(self, dt: float, attack: float, decay: float):
        """
        Advance the envelope by dt seconds.

        attack/decay are floored at ENV_MIN_TIME so near-zero settings give
        a very fast but finite ramp.
        """
        if self._phase == EnvPhase.ATTACK:
            self._timer += dt
            self._value = min(1.0, self._timer / max(ENV_MIN_TIME, attack))
            if self._value >= 1.0:
                self._phase = EnvPhase.DECAY
                self._timer = 0.0

        elif self._phase == EnvPhase.DECAY:
            self._timer += dt
            self._value = max(0.0, 1.0 - self._timer / max(ENV_MIN_TIME, decay))
            if self._value <= 0.0:
                self._phase = EnvPhase.IDLE

    def fc_norm(self, depth: float) -> float:
        """Current normalized cutoff: ENV_BASE_CUTOFF + value * depth."""
        return ENV_BASE_CUTOFF + self._value * depth
