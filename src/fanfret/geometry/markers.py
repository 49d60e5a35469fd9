"""Inlay marker placement.

A marker for gap ``g`` sits between two neighbouring rows: the nut and
fret 1 for ``g == 0``, otherwise frets ``g`` and ``g + 1``. The midline of
the gap (the ghost curve) is the point-wise average of the two rows; both
rows share the edge, strings, edge layout so points pair up one to one.

The marker lands where the ghost curve crosses a guide line drawn from
the nut to the bridge at a fixed fraction of the board width.
"""

from __future__ import annotations

__all__ = ["ghost_curve", "guide_line", "locate_marker", "locate_markers"]

import logging
from collections.abc import Iterable, Sequence

from fanfret.geometry.constants import (
    DEFAULT_MARKER_SIZE,
    MAX_MARKER_SIZE,
    MIN_MARKER_SIZE,
    PARALLEL_EPS,
    SEGMENT_EPS,
)
from fanfret.geometry.model import FretRow, Marker, NutBridge, Point, Side

log = logging.getLogger(__name__)


def ghost_curve(a: Sequence[Point], b: Sequence[Point]) -> list[Point]:
    """Point-wise midpoint of two rows."""
    return [p.midpoint(q) for p, q in zip(a, b)]


def guide_line(nut_bridge: NutBridge, guide_percent: float) -> tuple[Point, Point]:
    """Guide segment from nut to bridge at ``guide_percent`` of the width."""
    t = min(1.0, max(0.0, guide_percent / 100.0))
    nut, bridge = nut_bridge.nut, nut_bridge.bridge
    start = nut.edge(Side.BASS).lerp(nut.edge(Side.TREBLE), t)
    end = bridge.edge(Side.BASS).lerp(bridge.edge(Side.TREBLE), t)
    return start, end


def segment_intersection(a: Point, b: Point, c: Point, d: Point) -> Point | None:
    """Intersection of segments ``ab`` and ``cd``, or None."""
    rx, ry = b.x - a.x, b.y - a.y
    sx, sy = d.x - c.x, d.y - c.y
    denom = rx * sy - ry * sx
    if abs(denom) < PARALLEL_EPS:
        return None
    qx, qy = c.x - a.x, c.y - a.y
    t = (qx * sy - qy * sx) / denom
    u = (qx * ry - qy * rx) / denom
    lo, hi = -SEGMENT_EPS, 1.0 + SEGMENT_EPS
    if lo <= t <= hi and lo <= u <= hi:
        return Point(a.x + t * rx, a.y + t * ry)
    return None


def _bounding_rows(
    gap: int,
    fret_rows: Sequence[FretRow],
    nut_bridge: NutBridge,
) -> tuple[Sequence[Point], Sequence[Point]] | None:
    by_fret = {row.fret: row for row in fret_rows}
    upper = by_fret.get(gap + 1)
    if upper is None:
        return None
    if gap == 0:
        return nut_bridge.nut.points, upper.points
    lower = by_fret.get(gap)
    if lower is None:
        return None
    return lower.points, upper.points


def locate_marker(
    gap: int,
    guide_percent: float,
    fret_rows: Sequence[FretRow],
    nut_bridge: NutBridge,
    marker_size: float = DEFAULT_MARKER_SIZE,
) -> Marker | None:
    """Place the marker for one gap, or return None if the guide misses it.

    Gaps outside ``[0, len(fret_rows))`` and gaps whose rows are missing
    produce no marker.
    """
    if gap < 0 or gap >= len(fret_rows):
        log.debug("Skipping marker gap %d outside [0, %d)", gap, len(fret_rows))
        return None
    rows = _bounding_rows(gap, fret_rows, nut_bridge)
    if rows is None:
        log.debug("Skipping marker gap %d: bounding rows missing", gap)
        return None

    ghost = ghost_curve(*rows)
    start, end = guide_line(nut_bridge, guide_percent)
    for p, q in zip(ghost, ghost[1:]):
        hit = segment_intersection(start, end, p, q)
        if hit is not None:
            return Marker(
                gap=gap,
                guide_percent=guide_percent,
                position=hit,
                size=min(MAX_MARKER_SIZE, max(MIN_MARKER_SIZE, marker_size)),
            )
    log.debug("Guide line at %.1f%% misses gap %d", guide_percent, gap)
    return None


def locate_markers(
    gaps: Iterable[int],
    guide_percent: float,
    fret_rows: Sequence[FretRow],
    nut_bridge: NutBridge,
    marker_size: float = DEFAULT_MARKER_SIZE,
) -> list[Marker]:
    """Place markers for every gap that has one."""
    markers = []
    for gap in gaps:
        marker = locate_marker(gap, guide_percent, fret_rows, nut_bridge, marker_size)
        if marker is not None:
            markers.append(marker)
    return markers
