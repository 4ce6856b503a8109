"""
Top-level tide computation for a location.

:func:`compute_tide_data` samples the tide signal from now (or a given start)
over a number of days and extracts the high/low waters.  The location is
descriptive: every location uses the same constituent table.  Its timezone,
when set, is the calendar used for day grouping and visit suggestions.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import tzinfo

import numpy as np
import pandas as pd

from .constituents import DEFAULT_CONSTITUENTS, Constituent
from .extremes import Extreme, ExtremeKind, find_extremes
from .local_time import to_local_index
from .tidal_prediction import SampledPoint, sample_window

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LocationDescriptor:
    name: str
    latitude: float
    longitude: float
    country: str | None = None
    region: str | None = None
    timezone: str | None = None


DEFAULT_LOCATION = LocationDescriptor(
    name='Beach',
    latitude=2.0469,
    longitude=45.3182,
    country='Somalia',
    region='East Africa',
    timezone='Africa/Mogadishu',
)


@dataclass(frozen=True)
class TideData:
    """Sampled tide signal and its extrema for one location and window."""

    location: LocationDescriptor
    points: list[SampledPoint] = field(default_factory=list)
    extremes: list[Extreme] = field(default_factory=list)

    @property
    def current_height(self) -> float | None:
        """Height at the start of the window, or ``None`` without points."""
        if not self.points:
            return None
        return self.points[0].height


def compute_tide_data(
    location: LocationDescriptor = DEFAULT_LOCATION,
    days: float = 3,
    constituents: Sequence[Constituent] | None = None,
    start_ms: int | None = None,
    rng: np.random.Generator | None = None,
    logger: logging.Logger | None = None,
) -> TideData:
    """
    Predict the tide at *location* over the next *days* days.

    Parameters
    ----------
    location : LocationDescriptor, optional
        Descriptive location (default :data:`DEFAULT_LOCATION`).
    days : float, optional
        Window length in days (default 3).  Zero gives a single point,
        negative values give no points.
    constituents : sequence of Constituent, optional
        Harmonic terms (default :data:`DEFAULT_CONSTITUENTS`).
    start_ms : int, optional
        Window start in milliseconds since the Unix epoch (default: now).
    rng : numpy.random.Generator, optional
        Source of the synthesis noise; seed it for reproducible output.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    TideData
    """
    _log = logger or logging.getLogger(__name__)

    if start_ms is None:
        start_ms = int(time.time() * 1000)
    if constituents is None:
        constituents = DEFAULT_CONSTITUENTS

    _log.info('Computing %s days of tide data for %s.', days, location.name)
    points = sample_window(
        start_ms, days, constituents, rng=rng, logger=_log,
    )
    extremes = find_extremes(points, logger=_log)
    return TideData(location, points, extremes)


def points_to_frame(
    points: Sequence[SampledPoint],
    tz: str | tzinfo | None = None,
) -> pd.DataFrame:
    """
    Tabulate sampled points in a reference timezone.

    Returns
    -------
    pd.DataFrame
        Columns ``time_ms``, ``local_time``, ``date``, ``height``.
    """
    times = np.array([p.time for p in points], dtype=np.int64)
    local = to_local_index(times, tz)
    return pd.DataFrame({
        'time_ms': times,
        'local_time': local,
        'date': local.date,
        'height': np.array([p.height for p in points], dtype=float),
    })


def extremes_to_frame(
    extremes: Sequence[Extreme],
    tz: str | tzinfo | None = None,
) -> pd.DataFrame:
    """
    Tabulate extrema in a reference timezone, sorted by time.

    Returns
    -------
    pd.DataFrame
        Columns ``time_ms``, ``local_time``, ``date``, ``kind``, ``height``.
        Group on ``date`` for a per-day tide table.
    """
    ordered = sorted(extremes, key=lambda e: e.time)
    times = np.array([e.time for e in ordered], dtype=np.int64)
    local = to_local_index(times, tz)
    return pd.DataFrame({
        'time_ms': times,
        'local_time': local,
        'date': local.date,
        'kind': [ExtremeKind(e.kind).value for e in ordered],
        'height': np.array([e.height for e in ordered], dtype=float),
    })
