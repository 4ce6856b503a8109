"""
Smoothing of synthesized tide series.

The synthesized signal carries a small random perturbation; a short centered
moving average suppresses it before extremum detection.  The window is
clamped at the ends of the series: edge points average over a truncated
window instead of being padded, wrapped, or dropped.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence

import numpy as np

from .tidal_prediction import SampledPoint

logger = logging.getLogger(__name__)


def moving_average_values(values: np.ndarray | Sequence[float], window_size: int = 3) -> np.ndarray:
    """
    Edge-clamped centered moving average.

    Point *i* is the mean of ``values[max(0, i - k) : min(n, i + k + 1)]``
    with ``k = window_size // 2``.

    Parameters
    ----------
    values : array-like of float
        Input series.
    window_size : int, optional
        Window width in samples (default 3).

    Returns
    -------
    np.ndarray
        Smoothed series, same length as *values*.

    Raises
    ------
    ValueError
        If *window_size* is less than 1.
    """
    if window_size < 1:
        raise ValueError(f"window_size must be at least 1, got {window_size}.")

    values = np.asarray(values, dtype=float)
    n = len(values)
    if n == 0:
        return values.copy()

    half = window_size // 2
    idx = np.arange(n)
    start = np.maximum(0, idx - half)
    end = np.minimum(n - 1, idx + half)

    cumsum = np.concatenate(([0.0], np.cumsum(values)))
    return (cumsum[end + 1] - cumsum[start]) / (end - start + 1)


def moving_average(
    points: Sequence[SampledPoint],
    window_size: int = 3,
    logger: logging.Logger | None = None,
) -> list[SampledPoint]:
    """
    Smooth the heights of *points*, keeping their times.

    Parameters
    ----------
    points : sequence of SampledPoint
        Time-ordered samples.
    window_size : int, optional
        Window width in samples (default 3).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    list of SampledPoint
        Same length and times as *points*, heights replaced by the
        windowed mean.
    """
    _log = logger or logging.getLogger(__name__)

    smoothed = moving_average_values([p.height for p in points], window_size)
    _log.debug(
        'Moving average: %d points, window=%d.', len(points), window_size,
    )
    return [
        SampledPoint(p.time, float(h)) for p, h in zip(points, smoothed)
    ]
