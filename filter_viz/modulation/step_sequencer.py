"""
Step Sequencer - 8-step trigger clock for the envelope

Implements a fixed-grid step sequencer with:
- Accumulator-based timing (never drops clock time)
- Multiple steps per tick when a frame spans several steps
- Trigger callback on armed steps
- Highlight callback on every index change

Step duration is one 16th note: 60 / tempo / STEPS_PER_BEAT seconds.
current_step is -1 until the first step boundary after reset().
"""

from __future__ import annotations

from typing import Callable, List, Optional

from filter_viz.config import STEP_COUNT, STEPS_PER_BEAT, DEFAULT_STEPS


class StepSequencer:
    """
    Step clock that fires the envelope trigger on armed steps.

    The step pattern may be edited at any time from the UI; the clock only
    reads it when entering a step.
    """

    def __init__(
        self,
        trigger: Callable[[], None],
        on_step_changed: Optional[Callable[[int], None]] = None,
        steps: Optional[List[bool]] = None,
    ):
        """
        Initialize sequencer.

        Args:
            trigger: Called when an armed step is entered
            on_step_changed: Callback (index) after each index change, -1 on reset
            steps: Initial armed pattern (STEP_COUNT booleans), DEFAULT_STEPS if None
        """
        self._trigger = trigger
        self.on_step_changed = on_step_changed

        pattern = DEFAULT_STEPS if steps is None else steps
        self._steps: List[bool] = [bool(s) for s in pattern[:STEP_COUNT]]
        self._steps += [False] * (STEP_COUNT - len(self._steps))

        # Timing state
        self.current_step: int = -1
        self.step_timer: float = 0.0

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def steps(self) -> List[bool]:
        """Copy of the armed pattern."""
        return list(self._steps)

    @staticmethod
    def step_duration(tempo: float) -> float:
        """Seconds per step (one 16th note) at tempo BPM."""
        return 60.0 / tempo / STEPS_PER_BEAT

    # =========================================================================
    # TICK
    # =========================================================================

    def advance(self, dt: float, tempo: float):
        """
        Advance the clock by dt seconds.

        Accumulator pattern: handles variable frame intervals and
        several step boundaries inside one frame.
        """
        self.step_timer += dt

        duration = self.step_duration(tempo)
        while self.step_timer >= duration:
            self.step_timer -= duration
            self._advance_step()

    def _advance_step(self):
        """Move to the next step and fire the trigger if it is armed."""
        self.current_step = (self.current_step + 1) % STEP_COUNT

        if self._steps[self.current_step]:
            self._trigger()

        if self.on_step_changed is not None:
            self.on_step_changed(self.current_step)

    # =========================================================================
    # TRANSPORT
    # =========================================================================

    def reset(self):
        """Rewind to 'not started' so the next boundary plays step 0."""
        self.step_timer = 0.0
        self.current_step = -1
        if self.on_step_changed is not None:
            self.on_step_changed(self.current_step)

    # =========================================================================
    # PATTERN EDITS (UI -> Engine)
    # =========================================================================

    def set_step(self, index: int, armed: bool):
        """Arm or disarm a step. Out-of-range indices are ignored."""
        if 0 <= index < STEP_COUNT:
            self._steps[index] = bool(armed)

    def toggle_step(self, index: int) -> bool:
        """Flip a step and return its new state (False for out-of-range)."""
        if not 0 <= index < STEP_COUNT:
            return False
        self._steps[index] = not self._steps[index]
        return self._steps[index]
