"""
Filter Response - Magnitude response of the visualized low-pass filter.

Two cascaded identical 2nd-order resonant low-pass stages. Evaluated with
numpy over a whole pixel row per frame; no state.

u is the frequency ratio f/fc. At u=1 the (1-u^2)^2 term vanishes and the
single-stage gain is exactly Q, so the peak is finite for any Q > 0.
"""

from typing import List, Tuple, Union

import numpy as np

from filter_viz.config import LOG_RANGE_DECADES, DB_FLOOR, DB_HEADROOM

ArrayLike = Union[float, np.ndarray]


def magnitude_db(u: ArrayLike, q: float) -> ArrayLike:
    """
    Response in dB of two cascaded resonant low-pass stages.

    h = 1 / sqrt((1 - u^2)^2 + (u/Q)^2), dB = 40*log10(h)
    (40 rather than 20: the two stages' 20*log10 terms sum).

    Args:
        u: frequency ratio f/fc (scalar or array, >= 0)
        q: resonance, > 0

    Returns:
        float for scalar input, ndarray otherwise
    """
    u = np.asarray(u, dtype=np.float64)
    h = 1.0 / np.sqrt((1.0 - u * u) ** 2 + (u / q) ** 2)
    db = 40.0 * np.log10(h)
    if db.ndim == 0:
        return float(db)
    return db


def db_range(q: float) -> Tuple[float, float]:
    """Vertical plot range (dB_min, dB_max); headroom tracks the resonance peak."""
    return DB_FLOOR, 40.0 * np.log10(q) + DB_HEADROOM


def build_curve(width: int, height: int, fc_norm: float,
                q: float) -> List[Tuple[float, float]]:
    """
    Build the plot points for one frame.

    The horizontal axis spans LOG_RANGE_DECADES decades with the cutoff at
    x = fc_norm * width. Louder response draws higher (y grows downward).

    Args:
        width: viewport width in pixels
        height: viewport height in pixels
        fc_norm: normalized cutoff, 0..1
        q: resonance, > 0

    Returns:
        width + 1 ordered (x, y) points, x in [0, width], y in [0, height].
        Empty when width <= 0.
    """
    if width <= 0:
        return []

    xs = np.arange(width + 1, dtype=np.float64)
    u = np.power(10.0, (xs / width - fc_norm) * LOG_RANGE_DECADES)
    db = magnitude_db(u, q)

    db_min, db_max = db_range(q)
    t = np.clip((db - db_min) / (db_max - db_min), 0.0, 1.0)
    ys = height * (1.0 - t)

    return list(zip(xs.tolist(), ys.tolist()))
