"""Nut and bridge curves.

The nut is every string at ``t = 0`` (``y = -dA``) and the bridge every
string at ``t = 1`` (``y = L - dA``). Their edge points come from the same
extrapolation as the fret rows, so all three share one point-list shape.
"""

from __future__ import annotations

__all__ = ["compute_nut_bridge"]

from fanfret.geometry.common import EdgeFrame, build_edge_frame, sorted_row
from fanfret.geometry.model import BoardEnd, EdgeCurve, NutBridge, Point


def compute_nut_bridge(
    string_count: int,
    scale_treble: float,
    scale_bass: float,
    anchor_fret: int,
    span_nut: float,
    span_bridge: float,
    overhang: float,
    exponent: float,
) -> NutBridge:
    """Compute the nut and bridge curves for one parameter set."""
    frame = build_edge_frame(
        string_count, scale_treble, scale_bass, anchor_fret,
        span_nut, span_bridge, overhang, exponent,
    )
    return NutBridge(
        layout=frame.layout,
        nut=_edge_curve(frame, BoardEnd.NUT),
        bridge=_edge_curve(frame, BoardEnd.BRIDGE),
    )


def _edge_curve(frame: EdgeFrame, end: BoardEnd) -> EdgeCurve:
    string_points = []
    for i, scale in enumerate(frame.scales.per_string):
        offset = frame.anchor_offsets[i]
        y = -offset if end is BoardEnd.NUT else scale - offset
        string_points.append(Point(frame.layout.position(end, i), y))
    strings = tuple(string_points)

    left, right = frame.edges_for(strings)
    return EdgeCurve(
        end=end,
        points=sorted_row(left, strings, right),
        string_points=strings,
        edge_left=left,
        edge_right=right,
    )
