"""
Cutoff Modulation

LFO and sequenced-envelope sources that move the filter cutoff,
composed behind a single engine.
"""

from .lfo_source import LFOSource
from .envelope_source import EnvelopeSource
from .step_sequencer import StepSequencer
from .modulation_engine import ModulationEngine

__all__ = [
    'LFOSource',
    'EnvelopeSource',
    'StepSequencer',
    'ModulationEngine',
]
