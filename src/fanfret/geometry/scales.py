"""Per-string scale lengths and equal-tempered fret distances.

Scale lengths are blended from bass to treble in log space. The blend
position is warped by a power law::

    u  = i / (N - 1)
    uu = 1 - (1 - u) ** exponent
    L_i = exp(ln(L_bass) + (ln(L_treble) - ln(L_bass)) * uu)

``exponent == 1`` is a pure log-linear blend; larger exponents push the
per-string scales toward the treble value sooner, which bends the fan
harder on the bass side.
"""

from __future__ import annotations

__all__ = [
    "fret_distance",
    "fret_positions",
    "interpolate_scales",
    "per_string_scales",
]

import logging
import math

from fanfret.geometry.constants import MIN_EXPONENT, MIN_SCALE, SEMITONES_PER_OCTAVE
from fanfret.geometry.model import ScaleSet

log = logging.getLogger(__name__)


def fret_distance(scale: float, fret: float) -> float:
    """Distance from the nut to ``fret`` on a string of length ``scale``."""
    return scale - scale / 2.0 ** (fret / SEMITONES_PER_OCTAVE)


def fret_positions(scale: float, frets: int) -> list[float]:
    """Nut-to-fret distances for frets 1..``frets``."""
    return [fret_distance(scale, n) for n in range(1, frets + 1)]


def interpolate_scales(
    string_count: int,
    scale_bass: float,
    scale_treble: float,
    exponent: float,
) -> ScaleSet:
    """Blend the bass and treble scales into one scale per string."""
    n = max(1, int(string_count))
    k = max(MIN_EXPONENT, exponent)
    bass = max(MIN_SCALE, scale_bass)
    treble = max(MIN_SCALE, scale_treble)

    log_bass = math.log(bass)
    log_treble = math.log(treble)

    per_string: list[float] = []
    for i in range(n):
        u = 0.0 if n == 1 else i / (n - 1)
        uu = 1.0 - (1.0 - u) ** k
        per_string.append(math.exp(log_bass + (log_treble - log_bass) * uu))

    scales = ScaleSet(
        scale_bass=bass,
        scale_treble=treble,
        exponent=k,
        per_string=tuple(per_string),
    )
    log.debug(
        "Interpolated %d string scales (bass=%.3f, treble=%.3f, exponent=%.3f)",
        n, bass, treble, k,
    )
    return scales


def per_string_scales(
    string_count: int,
    scale_bass: float,
    scale_treble: float,
    exponent: float,
) -> list[float]:
    """Return the per-string scale lengths, bass string first."""
    return list(interpolate_scales(string_count, scale_bass, scale_treble, exponent).per_string)
