"""
Visit-time suggestions derived from low waters on a given weekday.

Low water in daylight is suggested for beach activities.  One hour after
any low water the tide is rising gently, which is suggested for swimming
when it falls within swimming hours.  High waters never produce
suggestions.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, tzinfo

import numpy as np

from .extremes import Extreme, ExtremeKind
from .local_time import FRIDAY, to_local_index
from .tidal_prediction import MS_PER_HOUR

logger = logging.getLogger(__name__)

DAYLIGHT_HOURS = (6, 18)
SWIMMING_HOURS = (7, 17)
SWIMMING_DELAY_MS = MS_PER_HOUR

BEACH_REASON = 'Low tide during daylight hours - ideal for beach activities'
SWIMMING_REASON = 'Gradually rising tide - good for swimming'


@dataclass(frozen=True)
class VisitRecommendation:
    time: datetime  # timezone-aware
    reason: str


def best_visit_times(
    extremes: Sequence[Extreme],
    weekday: int = FRIDAY,
    tz: str | tzinfo | None = None,
    logger: logging.Logger | None = None,
) -> list[VisitRecommendation]:
    """
    Suggest visit times on *weekday* from the low waters in *extremes*.

    Hour windows are inclusive and compare the hour component only, so a
    low water at 18:40 still counts as daylight.

    Parameters
    ----------
    extremes : sequence of Extreme
        Extrema, in any order.
    weekday : int, optional
        Target day, Monday=0 ... Sunday=6 (default Friday).
    tz : str or tzinfo, optional
        Reference timezone for weekday and hour (default UTC).
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    list of VisitRecommendation
        In extreme order; each low water contributes at most a beach
        suggestion followed by a swimming suggestion.
    """
    _log = logger or logging.getLogger(__name__)

    if not extremes:
        return []

    ordered = sorted(extremes, key=lambda e: e.time)
    times = np.array([e.time for e in ordered], dtype=np.int64)
    local = to_local_index(times, tz)
    swim_local = to_local_index(times + SWIMMING_DELAY_MS, tz)

    recommendations = []
    for i, extreme in enumerate(ordered):
        if local[i].dayofweek != weekday or extreme.kind != ExtremeKind.LOW:
            continue

        if DAYLIGHT_HOURS[0] <= local[i].hour <= DAYLIGHT_HOURS[1]:
            recommendations.append(
                VisitRecommendation(local[i].to_pydatetime(), BEACH_REASON)
            )
        if SWIMMING_HOURS[0] <= swim_local[i].hour <= SWIMMING_HOURS[1]:
            recommendations.append(
                VisitRecommendation(swim_local[i].to_pydatetime(), SWIMMING_REASON)
            )

    _log.info(
        'Visit recommendations: %d from %d extrema (weekday=%d).',
        len(recommendations), len(ordered), weekday,
    )
    return recommendations


def best_friday_visit_times(
    extremes: Sequence[Extreme],
    tz: str | tzinfo | None = None,
    logger: logging.Logger | None = None,
) -> list[VisitRecommendation]:
    return best_visit_times(extremes, FRIDAY, tz, logger=logger)
