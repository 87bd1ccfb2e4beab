"""
Modulation Engine - Selects and advances the active cutoff modulator

Owns one LFOSource, one EnvelopeSource and one StepSequencer. The
sequencer's trigger is wired to the envelope.

Mode model:
- LFO: only the LFO advances; its phase keeps running across mode
  switches and is never reset
- ENVELOPE: the sequencer advances first (possibly triggering), then the
  envelope; entering ENVELOPE resets both so the pattern restarts at step 0

Parameters are read from the shared FilterParams on every call.
"""

from __future__ import annotations

from typing import Callable, Optional

from filter_viz.model.modulation import FilterParams, ModMode
from filter_viz.modulation.lfo_source import LFOSource
from filter_viz.modulation.envelope_source import EnvelopeSource
from filter_viz.modulation.step_sequencer import StepSequencer
from filter_viz.utils.logger import logger


class ModulationEngine:
    """Composes the modulation sources behind a single cutoff value."""

    def __init__(
        self,
        params: FilterParams,
        on_step_changed: Optional[Callable[[int], None]] = None,
    ):
        """
        Initialize engine.

        Args:
            params: Shared parameter set (read each tick)
            on_step_changed: Highlight callback (index) forwarded to the sequencer
        """
        self._params = params
        self._mode = params.mode

        self.lfo = LFOSource()
        self.envelope = EnvelopeSource()
        self.sequencer = StepSequencer(
            trigger=self.envelope.trigger,
            on_step_changed=on_step_changed,
        )

        logger.debug(f"ModulationEngine: initialized in {self._mode.name}",
                     component="MOD")

    # =========================================================================
    # PROPERTIES
    # =========================================================================

    @property
    def mode(self) -> ModMode:
        """Active modulation source."""
        return self._mode

    @property
    def params(self) -> FilterParams:
        """Shared parameter set."""
        return self._params

    # =========================================================================
    # TICK
    # =========================================================================

    def advance(self, dt: float):
        """
        Advance the active source by dt seconds.

        A mode written straight into params is applied here through
        switch_mode, so its reset rules still hold.
        """
        p = self._params
        if p.mode != self._mode:
            self.switch_mode(p.mode)
        if self._mode == ModMode.LFO:
            self.lfo.advance(dt, p.lfo_rate)
        else:
            self.sequencer.advance(dt, p.tempo)
            self.envelope.advance(dt, p.attack, p.decay)

    def fc_norm(self) -> float:
        """Current normalized cutoff from the active source."""
        if self._mode == ModMode.LFO:
            return self.lfo.fc_norm(self._params.depth)
        return self.envelope.fc_norm(self._params.depth)

    # =========================================================================
    # MODE SWITCHING
    # =========================================================================

    def switch_mode(self, new_mode: ModMode):
        """
        Switch the active source.

        Entering ENVELOPE resets the sequencer and forces the envelope to
        IDLE/0. Entering LFO leaves the LFO phase untouched.
        """
        if not isinstance(new_mode, ModMode):
            raise ValueError(f"Unknown modulation mode: {new_mode!r}")
        if new_mode == self._mode:
            return

        old_mode = self._mode
        self._mode = new_mode
        self._params.mode = new_mode

        if new_mode == ModMode.ENVELOPE:
            self.sequencer.reset()
            self.envelope.reset()

        logger.debug(
            f"ModulationEngine: mode {old_mode.name} -> {new_mode.name}",
            component="MOD"
        )
