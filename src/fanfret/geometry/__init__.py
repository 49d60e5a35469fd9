"""Fingerboard geometry kernel.

Public API:
- compute_string_layout: Lateral string and edge positions
- per_string_scales / interpolate_scales: Per-string scale lengths
- compute_fret_rows: Fret coordinates with extrapolated edges
- compute_nut_bridge: Nut and bridge curves
- locate_marker / locate_markers: Inlay marker placement
"""

from fanfret.geometry.frets import compute_fret_rows
from fanfret.geometry.markers import locate_marker, locate_markers
from fanfret.geometry.model import (
    BoardEnd,
    CubicSegment,
    EdgeCurve,
    FretRow,
    Marker,
    NutBridge,
    Point,
    ScaleSet,
    Side,
    StringLayout,
)
from fanfret.geometry.nut_bridge import compute_nut_bridge
from fanfret.geometry.scales import (
    fret_distance,
    fret_positions,
    interpolate_scales,
    per_string_scales,
)
from fanfret.geometry.strings import compute_string_layout

__all__ = [
    "BoardEnd",
    "CubicSegment",
    "EdgeCurve",
    "FretRow",
    "Marker",
    "NutBridge",
    "Point",
    "ScaleSet",
    "Side",
    "StringLayout",
    "compute_fret_rows",
    "compute_nut_bridge",
    "compute_string_layout",
    "fret_distance",
    "fret_positions",
    "interpolate_scales",
    "locate_marker",
    "locate_markers",
    "per_string_scales",
]
