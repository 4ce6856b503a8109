"""
Harmonic constituent definitions for the beach tide model.

A constituent is one periodic component of the tide signal, described by its
angular speed, amplitude and phase.  A constituent with zero speed is the
constant mean-level term (``Z0``).

The default set is a small fixed table (five semidiurnal/diurnal terms plus
mean level) used regardless of location.  It is not a station-calibrated
harmonic solution.
"""
from __future__ import annotations

from dataclasses import dataclass

MEAN_LEVEL = 'Z0'
"""Name of the constant mean-level term."""

# ---------------------------------------------------------------------------
# Angular speeds in degrees per hour, rounded to the precision used by the
# default table.  Source: Schureman (1958) SP98, Table 2.
# ---------------------------------------------------------------------------

CONSTITUENT_SPEEDS: dict[str, float] = {
    # Semidiurnal
    'M2': 28.984,
    'S2': 30.000,
    'N2': 28.440,
    # Diurnal
    'K1': 15.041,
    'O1': 13.943,
    # Mean level
    MEAN_LEVEL: 0.0,
}
"""Angular speeds (degrees/hour) for the constituents in the default table."""


@dataclass(frozen=True)
class Constituent:
    """One harmonic term of the tide signal."""

    name: str
    speed: float  # degrees/hour; 0 marks the mean-level offset
    amplitude: float  # metres
    phase: float  # degrees, [0, 360)

    def __post_init__(self):
        if self.amplitude < 0:
            raise ValueError(
                f"amplitude for {self.name} must be non-negative, "
                f"got {self.amplitude}."
            )
        if not 0.0 <= self.phase < 360.0:
            raise ValueError(
                f"phase for {self.name} must be in [0, 360), got {self.phase}."
            )

    @property
    def is_mean_level(self) -> bool:
        return self.speed == 0


def make_constituent(name: str, amplitude: float, phase: float = 0.0) -> Constituent:
    """
    Build a constituent, looking up its speed by name.

    Parameters
    ----------
    name : str
        Constituent name (case-insensitive), e.g. ``"M2"`` or ``"Z0"``.
    amplitude : float
        Amplitude in metres.
    phase : float, optional
        Phase in degrees (default 0).

    Returns
    -------
    Constituent

    Raises
    ------
    ValueError
        If *name* has no known speed.
    """
    cleaned = name.strip().upper()
    if cleaned not in CONSTITUENT_SPEEDS:
        raise ValueError(
            f"Unknown constituent '{name}'; known: "
            f"{', '.join(CONSTITUENT_SPEEDS)}."
        )
    return Constituent(cleaned, CONSTITUENT_SPEEDS[cleaned], amplitude, phase)


DEFAULT_CONSTITUENTS: tuple[Constituent, ...] = (
    make_constituent('M2', 0.28, 220.0),
    make_constituent('S2', 0.12, 250.0),
    make_constituent('N2', 0.06, 200.0),
    make_constituent('K1', 0.08, 150.0),
    make_constituent('O1', 0.05, 130.0),
    make_constituent(MEAN_LEVEL, 0.50),
)
"""Fixed constituent table used when a caller does not supply one."""
