"""
Conversion of millisecond epochs to a reference timezone.

Weekday and hour-of-day decisions depend on a calendar.  The calendar is
always passed explicitly, as an IANA zone name or a ``tzinfo``, rather than
taken from the host environment.
"""
from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime, tzinfo
from zoneinfo import ZoneInfo

import numpy as np
import pandas as pd

DEFAULT_TIMEZONE = 'UTC'

FRIDAY = 4  # datetime.weekday() / DatetimeIndex.dayofweek numbering


def resolve_timezone(tz: str | tzinfo | None = None) -> tzinfo:
    """Return a ``tzinfo`` for *tz*, defaulting to :data:`DEFAULT_TIMEZONE`."""
    if tz is None:
        tz = DEFAULT_TIMEZONE
    if isinstance(tz, str):
        return ZoneInfo(tz)
    return tz


def to_local_index(
    times_ms: np.ndarray | Sequence[int],
    tz: str | tzinfo | None = None,
) -> pd.DatetimeIndex:
    """Timezone-aware index for millisecond epochs, expressed in *tz*."""
    index = pd.to_datetime(np.asarray(times_ms, dtype=np.int64), unit='ms', utc=True)
    return index.tz_convert(resolve_timezone(tz))


def to_local_datetime(time_ms: int, tz: str | tzinfo | None = None) -> datetime:
    return to_local_index([time_ms], tz)[0].to_pydatetime()
