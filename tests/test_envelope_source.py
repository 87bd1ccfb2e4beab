"""
Tests for the attack/decay envelope state machine.

Times are binary fractions so accumulated timers land exactly on the
phase boundaries.
"""

import pytest

from filter_viz.modulation.envelope_source import EnvelopeSource
from filter_viz.model.modulation import EnvPhase
from filter_viz.config import ENV_BASE_CUTOFF

ATTACK = 0.125
DECAY = 0.25


def run(env, total, dt, attack=ATTACK, decay=DECAY):
    """Advance env in dt increments for total seconds, returning values seen."""
    values = []
    steps = int(round(total / dt))
    for _ in range(steps):
        env.advance(dt, attack, decay)
        values.append(env.value)
    return values


class TestEnvelopeIdle:
    """Initial and idle behavior."""

    def test_starts_idle_and_closed(self):
        """Fresh envelope is idle with value 0."""
        env = EnvelopeSource()
        assert env.phase == EnvPhase.IDLE
        assert env.value == 0.0
        assert env.timer == 0.0

    def test_idle_advance_is_noop(self):
        """Advancing while idle changes nothing."""
        env = EnvelopeSource()
        env.advance(1.0, ATTACK, DECAY)
        assert env.phase == EnvPhase.IDLE
        assert env.value == 0.0
        assert env.timer == 0.0


class TestEnvelopeTransitions:
    """Attack -> decay -> idle."""

    def test_trigger_enters_attack(self):
        """trigger() sets ATTACK with a zero timer."""
        env = EnvelopeSource()
        env.trigger()
        assert env.phase == EnvPhase.ATTACK
        assert env.timer == 0.0

    def test_attack_completes_into_decay_at_full_value(self):
        """Elapsed >= attack gives DECAY with value 1 and a reset timer."""
        env = EnvelopeSource()
        env.trigger()
        run(env, ATTACK, 1 / 32)
        assert env.phase == EnvPhase.DECAY
        assert env.value == 1.0
        assert env.timer == 0.0

    def test_decay_completes_into_idle_at_zero(self):
        """Elapsed >= decay after the peak gives IDLE with value 0."""
        env = EnvelopeSource()
        env.trigger()
        run(env, ATTACK, 1 / 32)
        run(env, DECAY, 1 / 16)
        assert env.phase == EnvPhase.IDLE
        assert env.value == 0.0

    def test_still_attacking_before_attack_time(self):
        """Partway through the attack the value is timer/attack."""
        env = EnvelopeSource()
        env.trigger()
        env.advance(1 / 32, ATTACK, DECAY)
        assert env.phase == EnvPhase.ATTACK
        assert env.value == pytest.approx(0.25)

    def test_attack_is_monotonic_rising(self):
        """Value never falls during the attack."""
        env = EnvelopeSource()
        env.trigger()
        values = run(env, ATTACK, 0.005)
        assert all(b >= a for a, b in zip(values, values[1:]))

    def test_decay_is_monotonic_falling(self):
        """Value never rises during the decay."""
        env = EnvelopeSource()
        env.trigger()
        run(env, ATTACK, 1 / 32)
        values = run(env, DECAY, 0.005)
        assert all(b <= a for a, b in zip(values, values[1:]))

    def test_single_long_frame_clamps_at_one(self):
        """A frame longer than the attack overshoots to exactly 1."""
        env = EnvelopeSource()
        env.trigger()
        env.advance(1.0, ATTACK, DECAY)
        assert env.value == 1.0
        assert env.phase == EnvPhase.DECAY


class TestEnvelopeRetrigger:
    """Retriggering mid-ramp."""

    def test_retrigger_mid_decay_keeps_value(self):
        """trigger() during decay resets phase and timer but not value."""
        env = EnvelopeSource()
        env.trigger()
        run(env, ATTACK, 1 / 32)
        env.advance(DECAY / 2, ATTACK, DECAY)
        held = env.value
        assert env.phase == EnvPhase.DECAY
        assert held == pytest.approx(0.5)

        env.trigger()
        assert env.phase == EnvPhase.ATTACK
        assert env.timer == 0.0
        assert env.value == held

    def test_value_changes_only_on_next_advance(self):
        """After a retrigger the next advance recomputes value from the timer."""
        env = EnvelopeSource()
        env.trigger()
        run(env, ATTACK, 1 / 32)
        env.advance(DECAY / 2, ATTACK, DECAY)
        env.trigger()
        env.advance(1 / 64, ATTACK, DECAY)
        assert env.value == pytest.approx((1 / 64) / ATTACK)

    def test_retrigger_mid_attack_restarts_timer(self):
        """trigger() during attack restarts the ramp timer."""
        env = EnvelopeSource()
        env.trigger()
        env.advance(1 / 16, ATTACK, DECAY)
        env.trigger()
        assert env.phase == EnvPhase.ATTACK
        assert env.timer == 0.0


class TestEnvelopeEdgeCases:
    """Denominator floor, reset and cutoff mapping."""

    def test_zero_attack_is_finite(self):
        """attack=0 uses the floor instead of dividing by zero."""
        env = EnvelopeSource()
        env.trigger()
        env.advance(0.0005, 0.0, DECAY)
        assert env.value == pytest.approx(0.5)

    def test_zero_decay_is_finite(self):
        """decay=0 empties within one floor-length frame."""
        env = EnvelopeSource()
        env.trigger()
        env.advance(1.0, ATTACK, 0.0)
        env.advance(0.001, ATTACK, 0.0)
        assert env.phase == EnvPhase.IDLE
        assert env.value == 0.0

    def test_reset_forces_idle(self):
        """reset() zeroes value and timer from any phase."""
        env = EnvelopeSource()
        env.trigger()
        env.advance(1 / 16, ATTACK, DECAY)
        env.reset()
        assert env.phase == EnvPhase.IDLE
        assert env.value == 0.0
        assert env.timer == 0.0

    def test_closed_cutoff(self):
        """Value 0 maps to the base cutoff."""
        assert EnvelopeSource().fc_norm(0.4) == ENV_BASE_CUTOFF == 0.25

    def test_open_cutoff(self):
        """Value 1 maps to base + depth."""
        env = EnvelopeSource()
        env.trigger()
        env.advance(1.0, ATTACK, DECAY)
        assert env.fc_norm(0.4) == pytest.approx(0.65)
