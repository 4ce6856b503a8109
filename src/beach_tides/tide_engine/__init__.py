"""
Tide Engine Subpackage

Provides functionality for:
- Harmonic constituent definitions
- Tide synthesis and fixed-interval sampling
- Moving-average smoothing
- Extrema extraction (alternating high/low water)
- Beach safety classification
- Weekday visit recommendations
- Timezone-explicit tabular views of points and extrema
"""

from beach_tides.tide_engine.constituents import (
    CONSTITUENT_SPEEDS,
    DEFAULT_CONSTITUENTS,
    Constituent,
    make_constituent,
)
from beach_tides.tide_engine.extremes import (
    Extreme,
    ExtremeKind,
    find_extremes,
)
from beach_tides.tide_engine.filtering import moving_average
from beach_tides.tide_engine.local_time import DEFAULT_TIMEZONE, FRIDAY
from beach_tides.tide_engine.recommendations import (
    VisitRecommendation,
    best_friday_visit_times,
    best_visit_times,
)
from beach_tides.tide_engine.safety import (
    DangerPeriod,
    is_dangerous,
    next_dangerous_period,
)
from beach_tides.tide_engine.service import (
    DEFAULT_LOCATION,
    LocationDescriptor,
    TideData,
    compute_tide_data,
    extremes_to_frame,
    points_to_frame,
)
from beach_tides.tide_engine.tidal_prediction import (
    SampledPoint,
    sample_window,
    tide_height,
)

__all__ = [
    # Constituent definitions
    'Constituent',
    'CONSTITUENT_SPEEDS',
    'DEFAULT_CONSTITUENTS',
    'make_constituent',
    # Synthesis and sampling
    'SampledPoint',
    'tide_height',
    'sample_window',
    # Smoothing
    'moving_average',
    # Extrema extraction
    'Extreme',
    'ExtremeKind',
    'find_extremes',
    # Safety
    'DangerPeriod',
    'is_dangerous',
    'next_dangerous_period',
    # Recommendations
    'FRIDAY',
    'DEFAULT_TIMEZONE',
    'VisitRecommendation',
    'best_visit_times',
    'best_friday_visit_times',
    # Top-level computation
    'LocationDescriptor',
    'DEFAULT_LOCATION',
    'TideData',
    'compute_tide_data',
    'points_to_frame',
    'extremes_to_frame',
]
