"""
Modulation Data Models - Filter Visualizer

Data models shared by the modulation engine and the host UI:
- ModMode: LFO / ENVELOPE source selector
- EnvPhase: IDLE / ATTACK / DECAY envelope states
- FilterParams: Mutable parameter set owned by the host
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from filter_viz.config import FILTER_PARAMS_BY_KEY


class ModMode(Enum):
    """Active modulation source."""
    LFO = 0
    ENVELOPE = 1


class EnvPhase(Enum):
    """Envelope state machine phase."""
    IDLE = 'idle'
    ATTACK = 'attack'
    DECAY = 'decay'


def _default(key: str) -> float:
    return FILTER_PARAMS_BY_KEY[key]['default']


@dataclass
class FilterParams:
    """
    Parameters read by the engine every tick.

    Owned by the host and passed by reference. Control widgets write
    clamped values here; the engine only reads them. A mode written here
    takes effect on the engine's next advance; ModulationEngine.switch_mode
    applies and records it immediately.
    """
    mode: ModMode = ModMode.LFO
    lfo_rate: float = _default('lfo_rate')    # Hz
    depth: float = _default('depth')          # 0..0.4
    tempo: float = _default('tempo')          # BPM
    attack: float = _default('attack')        # seconds
    decay: float = _default('decay')          # seconds
    resonance: float = _default('resonance')  # Q
