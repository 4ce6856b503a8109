"""
High/low water extraction from a synthesized tide series.

Detection runs in three stages:

1. Smooth the series with a short moving average.
2. Scan for local extrema: a point is a candidate when it is strictly
   higher (or lower) than every neighbour within ``order`` samples on both
   sides.  The first and last ``order`` samples are never candidates.
3. Merge candidates sequentially into an alternating high/low sequence with
   minimum time and height separation.  Two same-kind extrema in a row keep
   whichever is more extreme.  The merge never backtracks: candidates
   rejected against an entry that is later replaced are not re-examined.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np
from scipy.signal import argrelextrema

from .filtering import moving_average
from .tidal_prediction import MS_PER_HOUR, SampledPoint

logger = logging.getLogger(__name__)

MIN_POINTS = 10
SMOOTHING_WINDOW = 3
DETECTION_ORDER = 6  # samples each side; 3 hours at 30-minute sampling
MIN_SEPARATION_MS = 4 * MS_PER_HOUR
MIN_HEIGHT_DIFFERENCE = 0.1


class ExtremeKind(str, Enum):
    """Polarity of a tidal extreme."""

    HIGH = 'high'
    LOW = 'low'


@dataclass(frozen=True)
class Extreme:
    """A detected high or low water."""

    time: int  # ms epoch
    height: float  # metres
    kind: ExtremeKind

    def is_more_extreme_than(self, other: Extreme) -> bool:
        if self.kind == ExtremeKind.HIGH:
            return self.height > other.height
        return self.height < other.height


def find_extreme_candidates(
    points: Sequence[SampledPoint],
    order: int = DETECTION_ORDER,
) -> list[Extreme]:
    """
    Find strict local maxima and minima within a ``2 * order + 1`` window.

    Uses :func:`scipy.signal.argrelextrema`, restricted to indices with a
    full window on both sides.

    Parameters
    ----------
    points : sequence of SampledPoint
        Time-ordered (usually smoothed) samples.
    order : int, optional
        Half-width of the comparison window in samples (default 6).

    Returns
    -------
    list of Extreme
        Candidates in time order.
    """
    heights = np.asarray([p.height for p in points], dtype=float)
    n = len(heights)
    if n <= 2 * order:
        return []

    high_idx = argrelextrema(heights, np.greater, order=order)[0]
    low_idx = argrelextrema(heights, np.less, order=order)[0]

    # Only indices with a full window; argrelextrema clips at the edges.
    high = {int(i) for i in high_idx if order <= i < n - order}
    low = {int(i) for i in low_idx if order <= i < n - order}
    ambiguous = high & low

    candidates = []
    for i in sorted((high | low) - ambiguous):
        kind = ExtremeKind.HIGH if i in high else ExtremeKind.LOW
        candidates.append(Extreme(points[i].time, points[i].height, kind))
    return candidates


def merge_extreme_candidates(
    candidates: Sequence[Extreme],
    min_separation_ms: int = MIN_SEPARATION_MS,
    min_height_difference: float = MIN_HEIGHT_DIFFERENCE,
) -> list[Extreme]:
    """
    Reduce candidates to a plausible alternating high/low sequence.

    Each candidate is compared against the last accepted extreme:

    * closer than *min_separation_ms* in time, or less than
      *min_height_difference* apart in height: rejected;
    * opposite kind: accepted;
    * same kind: replaces the last accepted extreme if it is more extreme
      (higher high, lower low), otherwise rejected.

    Parameters
    ----------
    candidates : sequence of Extreme
        Time-ordered candidates.
    min_separation_ms : int, optional
        Minimum time between accepted extrema (default 4 hours).
    min_height_difference : float, optional
        Minimum height difference between accepted extrema (default 0.1 m).

    Returns
    -------
    list of Extreme
    """
    accepted: list[Extreme] = []

    for candidate in candidates:
        if not accepted:
            accepted.append(candidate)
            continue

        last = accepted[-1]
        time_diff = candidate.time - last.time
        height_diff = abs(candidate.height - last.height)

        if time_diff < min_separation_ms or height_diff < min_height_difference:
            continue

        if candidate.kind != last.kind:
            accepted.append(candidate)
        elif candidate.is_more_extreme_than(last):
            accepted[-1] = candidate

    return accepted


def find_extremes(
    points: Sequence[SampledPoint],
    smoothing_window: int = SMOOTHING_WINDOW,
    order: int = DETECTION_ORDER,
    min_separation_ms: int = MIN_SEPARATION_MS,
    min_height_difference: float = MIN_HEIGHT_DIFFERENCE,
    logger: logging.Logger | None = None,
) -> list[Extreme]:
    """
    Extract high and low waters from a sampled tide series.

    Parameters
    ----------
    points : sequence of SampledPoint
        Time-ordered samples, typically from
        :func:`~beach_tides.tide_engine.tidal_prediction.sample_window`.
    smoothing_window : int, optional
        Moving-average width applied before the scan (default 3).
    order : int, optional
        Half-width of the local-extremum window in samples (default 6).
    min_separation_ms : int, optional
        Minimum time between accepted extrema (default 4 hours).
    min_height_difference : float, optional
        Minimum height difference between accepted extrema (default 0.1 m).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    list of Extreme
        Alternating high/low extrema in time order.  Empty when fewer than
        10 points are supplied.
    """
    _log = logger or logging.getLogger(__name__)

    if len(points) < MIN_POINTS:
        _log.info(
            'Extrema extraction skipped: %d points (need %d).',
            len(points), MIN_POINTS,
        )
        return []

    smoothed = moving_average(points, smoothing_window, logger=_log)
    candidates = find_extreme_candidates(smoothed, order)
    extremes = merge_extreme_candidates(
        candidates, min_separation_ms, min_height_difference
    )

    n_high = sum(1 for e in extremes if e.kind == ExtremeKind.HIGH)
    _log.info(
        'Extrema extraction: %d candidates -> %d HW, %d LW (order=%d samples).',
        len(candidates), n_high, len(extremes) - n_high, order,
    )
    return extremes
