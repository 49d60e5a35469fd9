"""Convert fitted curves to drawsvg path elements."""

from __future__ import annotations

__all__ = ["curve_to_path", "segments_to_path"]

from collections.abc import Sequence

import drawsvg as draw

from fanfret.curves.pchip import fit_curve
from fanfret.geometry.model import CubicSegment, Point


def segments_to_path(segments: Sequence[CubicSegment], **attrs) -> draw.Path:
    """Build a path from already fitted segments.

    Linear segments become ``L`` commands, everything else ``C``.
    """
    path = draw.Path(**attrs)
    if not segments:
        return path
    start = segments[0].p0
    path.M(start.x, start.y)
    for seg in segments:
        if seg.is_linear:
            path.L(seg.p1.x, seg.p1.y)
        else:
            path.C(seg.c1.x, seg.c1.y, seg.c2.x, seg.c2.y, seg.p1.x, seg.p1.y)
    return path


def curve_to_path(points: Sequence[Point], **attrs) -> draw.Path:
    """Fit ``points`` with a monotone cubic and return it as a path.

    Extra keyword arguments become SVG attributes (``stroke``, ``fill``,
    ``stroke_width``...). A single point yields a bare ``M`` command.
    """
    if len(points) == 1:
        path = draw.Path(**attrs)
        path.M(points[0].x, points[0].y)
        return path
    return segments_to_path(fit_curve(points), **attrs)
