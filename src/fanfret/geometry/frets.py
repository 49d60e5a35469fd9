"""Fret rows for multi-scale fingerboards.

Each string gets its own equal-tempered fret distances; subtracting the
string's distance to the anchor fret lines every string up at ``y == 0``
on that fret, so the anchor fret is straight and every other fret fans
around it.
"""

from __future__ import annotations

__all__ = ["compute_fret_rows"]

import logging

from fanfret.geometry.common import EdgeFrame, build_edge_frame, sorted_row
from fanfret.geometry.model import FretRow
from fanfret.geometry.scales import fret_distance

log = logging.getLogger(__name__)


def compute_fret_rows(
    string_count: int,
    fret_count: int,
    scale_treble: float,
    scale_bass: float,
    anchor_fret: int,
    span_nut: float,
    span_bridge: float,
    overhang: float,
    exponent: float,
) -> list[FretRow]:
    """Compute one :class:`FretRow` per fret, 1..``fret_count``.

    Parameters
    ----------
    string_count : int
        Number of strings; index 0 is the bass string.
    fret_count : int
        Number of frets; zero or fewer yields no rows.
    scale_treble, scale_bass : float
        Scale lengths of the treble-most and bass-most strings.
    anchor_fret : int
        Fret forced straight across all strings.
    span_nut, span_bridge : float
        Distance between the outer strings at the nut and the bridge.
    overhang : float
        Board width beyond the outer strings on each side.
    exponent : float
        Fan exponent for the per-string scale blend.
    """
    frame = build_edge_frame(
        string_count, scale_treble, scale_bass, anchor_fret,
        span_nut, span_bridge, overhang, exponent,
    )
    rows = [_fret_row(frame, n, anchor_fret) for n in range(1, max(0, fret_count) + 1)]
    log.debug("Computed %d fret rows for %d strings", len(rows), frame.string_count)
    return rows


def _fret_row(frame: EdgeFrame, fret: int, anchor_fret: int) -> FretRow:
    string_points = tuple(
        frame.string_point(i, fret_distance(scale, fret) - frame.anchor_offsets[i])
        for i, scale in enumerate(frame.scales.per_string)
    )
    left, right = frame.edges_for(string_points)
    return FretRow(
        fret=fret,
        points=sorted_row(left, string_points, right),
        string_points=string_points,
        edge_left=left,
        edge_right=right,
        is_straight=fret == anchor_fret,
    )
