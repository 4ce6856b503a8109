"""
Beach safety classification from tide height and dynamics.

A tide is flagged dangerous when the water is high, or when consecutive
extrema swing by a large height over a short time (strong currents or
surge).
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from .extremes import Extreme, ExtremeKind
from .tidal_prediction import MS_PER_HOUR

logger = logging.getLogger(__name__)

DANGEROUS_HEIGHT = 0.85
RAPID_CHANGE_HEIGHT = 0.4
RAPID_CHANGE_WINDOW_MS = 4 * MS_PER_HOUR
DANGER_MARGIN_MS = 90 * 60 * 1000


@dataclass(frozen=True)
class DangerPeriod:
    """Interval around a dangerous high water."""

    start: int  # ms epoch
    end: int  # ms epoch
    height: float


def is_dangerous(
    height: float,
    extremes: Sequence[Extreme],
    threshold: float = DANGEROUS_HEIGHT,
    rapid_change_height: float = RAPID_CHANGE_HEIGHT,
    rapid_change_window_ms: int = RAPID_CHANGE_WINDOW_MS,
) -> bool:
    """
    Classify current conditions as dangerous.

    Parameters
    ----------
    height : float
        Current water level in metres.
    extremes : sequence of Extreme
        Upcoming extrema, in any order.
    threshold : float, optional
        Water level above which conditions are dangerous (default 0.85 m).
    rapid_change_height : float, optional
        Height swing between adjacent extrema that counts as rapid when it
        happens within *rapid_change_window_ms* (default 0.4 m).
    rapid_change_window_ms : int, optional
        Default 4 hours.

    Returns
    -------
    bool
    """
    if height > threshold:
        return True

    ordered = sorted(extremes, key=lambda e: e.time)
    for previous, current in zip(ordered, ordered[1:]):
        time_diff = current.time - previous.time
        height_diff = abs(current.height - previous.height)
        if height_diff > rapid_change_height and time_diff < rapid_change_window_ms:
            return True

    return False


def next_dangerous_period(
    extremes: Sequence[Extreme],
    now_ms: int,
    threshold: float = DANGEROUS_HEIGHT,
    margin_ms: int = DANGER_MARGIN_MS,
    logger: logging.Logger | None = None,
) -> DangerPeriod | None:
    """
    Find the next high water above *threshold* after *now_ms*.

    Parameters
    ----------
    extremes : sequence of Extreme
        Extrema, in any order.
    now_ms : int
        Current instant; only later high waters are considered.
    threshold : float, optional
        Minimum high-water height (default 0.85 m).
    margin_ms : int, optional
        Half-width of the returned period around the high water
        (default 90 minutes).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    DangerPeriod or None
        ``None`` when no upcoming high water exceeds the threshold.
    """
    _log = logger or logging.getLogger(__name__)

    upcoming = sorted(
        (
            e for e in extremes
            if e.kind == ExtremeKind.HIGH and e.height > threshold and e.time > now_ms
        ),
        key=lambda e: e.time,
    )
    if not upcoming:
        return None

    peak = upcoming[0]
    _log.info(
        'Next dangerous high water: %.2f m, %d of %d high waters above %.2f m.',
        peak.height, len(upcoming),
        sum(1 for e in extremes if e.kind == ExtremeKind.HIGH), threshold,
    )
    return DangerPeriod(peak.time - margin_ms, peak.time + margin_ms, peak.height)
