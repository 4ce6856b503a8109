"""
Tide synthesis from harmonic constituents.

Evaluates the summed-cosine prediction formula::

    h(t) = sum{ H * cos[a * (t - t0) + g] } + Z0 + noise

where ``a`` is the constituent speed (deg/h), ``H`` its amplitude and ``g``
its phase, plus a uniform perturbation that models short-period unmodelled
variability.  Downstream extremum detection smooths the series to suppress it.

Two entry points are provided:

* :func:`tide_height` / :func:`predict_heights` evaluate the signal at
  given instants.
* :func:`sample_window` walks a time window at a fixed interval and returns
  an ordered list of :class:`SampledPoint`.

Times are millisecond Unix epochs throughout.
"""
from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from .constituents import DEFAULT_CONSTITUENTS, Constituent

logger = logging.getLogger(__name__)

MS_PER_HOUR = 3_600_000
MS_PER_DAY = 86_400_000

REFERENCE_EPOCH_MS = 1_735_689_600_000
"""Phase reference instant, 2025-01-01T00:00:00Z."""

SAMPLING_INTERVAL_MS = 30 * 60 * 1000
NOISE_AMPLITUDE = 0.05


@dataclass(frozen=True)
class SampledPoint:
    """A synthesized water level at one instant."""

    time: int  # ms epoch
    height: float  # metres


def predict_heights(
    times_ms: np.ndarray | Sequence[int],
    constituents: Sequence[Constituent] = DEFAULT_CONSTITUENTS,
    reference_epoch_ms: int = REFERENCE_EPOCH_MS,
    noise_amplitude: float = NOISE_AMPLITUDE,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """
    Evaluate the tide signal at each of *times_ms*.

    Parameters
    ----------
    times_ms : array-like of int
        Instants in milliseconds since the Unix epoch.
    constituents : sequence of Constituent, optional
        Harmonic terms to sum (default :data:`DEFAULT_CONSTITUENTS`).
    reference_epoch_ms : int, optional
        Instant at which every phase is referenced.
    noise_amplitude : float, optional
        Half-width of the uniform perturbation in metres (default 0.05).
        ``0`` gives the exact harmonic sum.
    rng : numpy.random.Generator, optional
        Source of the perturbation.  A fresh unseeded generator is used
        when omitted; pass a seeded one for reproducible output.

    Returns
    -------
    np.ndarray
        Heights in metres, same length as *times_ms*.
    """
    times_ms = np.asarray(times_ms, dtype=np.int64)
    hours = (times_ms - reference_epoch_ms) / MS_PER_HOUR
    heights = np.zeros(len(times_ms), dtype=float)

    for constituent in constituents:
        if constituent.is_mean_level:
            heights += constituent.amplitude
            continue
        angle = np.radians(constituent.speed * hours + constituent.phase)
        heights += constituent.amplitude * np.cos(angle)

    if noise_amplitude > 0:
        rng = rng if rng is not None else np.random.default_rng()
        heights += rng.uniform(-noise_amplitude, noise_amplitude, size=len(heights))

    return heights


def tide_height(
    time_ms: int,
    constituents: Sequence[Constituent] = DEFAULT_CONSTITUENTS,
    reference_epoch_ms: int = REFERENCE_EPOCH_MS,
    noise_amplitude: float = NOISE_AMPLITUDE,
    rng: np.random.Generator | None = None,
) -> float:
    """Water level in metres at a single instant.  See :func:`predict_heights`."""
    return float(
        predict_heights(
            [time_ms], constituents, reference_epoch_ms, noise_amplitude, rng
        )[0]
    )


def sample_window(
    start_ms: int,
    days: float,
    constituents: Sequence[Constituent] = DEFAULT_CONSTITUENTS,
    interval_ms: int = SAMPLING_INTERVAL_MS,
    reference_epoch_ms: int = REFERENCE_EPOCH_MS,
    noise_amplitude: float = NOISE_AMPLITUDE,
    rng: np.random.Generator | None = None,
    logger: logging.Logger | None = None,
) -> list[SampledPoint]:
    """
    Sample the tide signal over ``[start_ms, start_ms + days]``.

    Both ends of the window are inclusive, so a window of ``days`` yields
    ``floor(days * 86_400_000 / interval_ms) + 1`` points.  A zero-length
    window gives the single point at *start_ms*; a negative one gives an
    empty list.

    Parameters
    ----------
    start_ms : int
        Window start in milliseconds since the Unix epoch.
    days : float
        Window length in days.
    constituents : sequence of Constituent, optional
        Harmonic terms (default :data:`DEFAULT_CONSTITUENTS`).
    interval_ms : int, optional
        Sampling step (default 30 minutes).
    reference_epoch_ms, noise_amplitude, rng
        Passed through to :func:`predict_heights`.
    logger : logging.Logger, optional
        Logger instance for diagnostic messages.

    Returns
    -------
    list of SampledPoint
        Points in strictly increasing time order.

    Raises
    ------
    ValueError
        If *interval_ms* is not positive.
    """
    _log = logger or logging.getLogger(__name__)

    if interval_ms <= 0:
        raise ValueError(f"interval_ms must be positive, got {interval_ms}.")
    if days < 0:
        _log.info('Negative window (%s days); no points sampled.', days)
        return []

    start_ms = int(start_ms)
    n_points = int(days * MS_PER_DAY // interval_ms) + 1
    times = start_ms + np.arange(n_points, dtype=np.int64) * interval_ms
    heights = predict_heights(
        times, constituents, reference_epoch_ms, noise_amplitude, rng
    )

    _log.info(
        'Sampled %d points over %s days (%d constituents, interval=%d min).',
        n_points, days, len(constituents), interval_ms // 60_000,
    )
    return [SampledPoint(int(t), float(h)) for t, h in zip(times, heights)]
