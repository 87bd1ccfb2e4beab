"""
Central Configuration
All constants, mappings, and settings in one place
"""

import math

# === FILTER PARAMETERS ===
# Single source of truth for user-facing controls.
# Order determines UI slider order within a panel.
FILTER_PARAMS = [
    {
        'key': 'lfo_rate',
        'label': 'RATE',
        'tooltip': 'LFO Rate',
        'default': 0.12,
        'min': 0.05,
        'max': 10.0,
        'curve': 'exp',
        'unit': 'Hz',
    },
    {
        'key': 'depth',
        'label': 'DEPTH',
        'tooltip': 'Modulation Depth',
        'default': 0.04,  # 10% of max
        'min': 0.0,
        'max': 0.4,       # Keeps LFO cutoff inside 0.075..0.875
        'curve': 'lin',
        'unit': '%',
    },
    {
        'key': 'resonance',
        'label': 'RES',
        'tooltip': 'Filter Resonance (Q)',
        'default': 3.0,
        'min': 1.0,
        'max': 20.0,
        'curve': 'lin',
        'unit': '',
    },
    {
        'key': 'tempo',
        'label': 'TEMPO',
        'tooltip': 'Sequencer Tempo',
        'default': 120.0,
        'min': 40.0,
        'max': 200.0,
        'curve': 'lin',
        'unit': 'BPM',
    },
    {
        'key': 'attack',
        'label': 'ATK',
        'tooltip': 'Envelope Attack',
        'default': 0.05,
        'min': 0.01,
        'max': 1.0,
        'curve': 'exp',
        'unit': 's',
    },
    {
        'key': 'decay',
        'label': 'DEC',
        'tooltip': 'Envelope Decay',
        'default': 0.30,
        'min': 0.05,
        'max': 2.0,
        'curve': 'exp',
        'unit': 's',
    },
]

# Build lookup dict for quick access
FILTER_PARAMS_BY_KEY = {p['key']: p for p in FILTER_PARAMS}

# Slider sets per mode (mode toggle is appended by the panel)
LFO_PANEL_KEYS = ['lfo_rate', 'depth', 'resonance']
ENV_PANEL_KEYS = ['tempo', 'depth', 'attack', 'decay', 'resonance']


def get_param_config(param_key):
    """Get param config by key."""
    return FILTER_PARAMS_BY_KEY[param_key]


def clamp_param(param_key, value):
    """
    Clamp a value to the documented bounds of a parameter.
    Unknown keys pass through unchanged.
    """
    param = FILTER_PARAMS_BY_KEY.get(param_key)
    if param is None:
        return value
    return max(param['min'], min(param['max'], value))


def map_value(normalized, param):
    """
    Map normalized 0-1 slider value to real parameter value.
    Handles linear/exponential curves.
    """
    # Clamp normalized to valid range
    normalized = max(0.0, min(1.0, normalized))

    min_val = param.get('min', 0.0)
    max_val = param.get('max', 1.0)

    if param.get('curve', 'lin') == 'exp':
        # Exponential mapping (need non-zero min)
        if min_val <= 0:
            min_val = 0.001  # Prevent division by zero
        if max_val <= 0:
            max_val = 1.0
        result = min_val * math.pow(max_val / min_val, normalized)
    else:
        result = min_val + (max_val - min_val) * normalized

    # Handle NaN/Inf
    if math.isnan(result) or math.isinf(result):
        result = float(param.get('default', 0.5))

    return result


def unmap_value(mapped, param):
    """
    Inverse of map_value: convert real parameter value back to normalized 0-1.
    Used to place sliders at their current parameter values.
    """
    min_val = param.get('min', 0.0)
    max_val = param.get('max', 1.0)

    mapped = max(min_val, min(max_val, mapped))

    if param.get('curve', 'lin') == 'exp':
        if min_val <= 0:
            min_val = 0.001
        if max_val <= min_val:
            max_val = min_val * 1.001
        if mapped <= 0:
            mapped = min_val
        normalized = math.log(mapped / min_val) / math.log(max_val / min_val)
    else:
        if max_val == min_val:
            normalized = 0.5
        else:
            normalized = (mapped - min_val) / (max_val - min_val)

    return max(0.0, min(1.0, normalized))


def format_value(value, param):
    """
    Format a real value with its unit for display.
    """
    unit = param.get('unit', '')

    if unit == 'Hz':
        return f"{value:.2f} Hz"
    elif unit == '%':
        # Percent of the parameter's maximum
        max_val = param.get('max', 1.0) or 1.0
        return f"{round(value / max_val * 100)}%"
    elif unit == 'BPM':
        return f"{round(value)} BPM"
    elif unit == 's':
        if value < 1.0:
            return f"{value * 1000:.0f} ms"
        return f"{value:.2f} s"
    elif unit == '':
        return f"{value:.1f}"
    else:
        return f"{value:.2f}{unit}"


# === MODULATION ===
LFO_CENTER = 0.475        # fcNorm the LFO swings around
ENV_BASE_CUTOFF = 0.25    # fcNorm when the envelope is fully closed
ENV_MIN_TIME = 0.001      # Floor for attack/decay denominators (seconds)

MOD_MODES = ["LFO", "ENV"]

# === SEQUENCER ===
STEP_COUNT = 8
STEPS_PER_BEAT = 4        # One step = one 16th note
DEFAULT_STEPS = [True, False, False, False, True, False, True, False]

# === FILTER RESPONSE ===
LOG_RANGE_DECADES = 3     # Decades spanned by the horizontal axis
DB_FLOOR = -54.0          # Bottom of the plot
DB_HEADROOM = 6.0         # Space above the resonance peak

# === ANIMATION ===
MAX_FRAME_DT = 0.1        # Seconds; caps catch-up after a stall
FRAME_INTERVAL_MS = 16    # ~60fps frame scheduling

# === WIDGET SIZES ===
SIZES = {
    # Buttons
    'button_step': (22, 22),
    'button_mode': (48, 24),

    # Sliders
    'slider_width': 25,
    'slider_height_medium': 60,

    # Containers
    'display_min_height': 160,
    'control_width': 56,

    # Layout spacing (global)
    'spacing_tight': 2,
    'spacing_normal': 4,
    'spacing_section': 6,
    'margin_tight': 4,
    'margin_normal': 8,
}
