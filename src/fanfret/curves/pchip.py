"""Monotone cubic curve fitting (Fritsch-Carlson PCHIP).

A fret row is an ordered list of points whose ``x`` strictly increases.
Fitting a plain cubic spline through it can overshoot between strings;
PCHIP picks tangents that keep each span inside the range of its two
endpoints, so the curve never wiggles past a string.

Each Hermite span is returned as an equivalent cubic Bezier with control
points one third of the span in from each end::

    c1 = (x0 + h/3, y0 + m0*h/3)
    c2 = (x1 - h/3, y1 - m1*h/3)

When the ``x`` values are not strictly increasing the points are joined
with straight spans instead.
"""

from __future__ import annotations

__all__ = ["fit_curve", "is_strictly_increasing", "pchip_slopes", "y_at_x"]

import logging
from collections.abc import Sequence

from fanfret.geometry.model import CubicSegment, Point

log = logging.getLogger(__name__)


def _sign(v: float) -> int:
    return (v > 0) - (v < 0)


def is_strictly_increasing(xs: Sequence[float]) -> bool:
    """Check that every value is greater than the one before it."""
    return all(b > a for a, b in zip(xs, xs[1:]))


def pchip_slopes(xs: Sequence[float], ys: Sequence[float]) -> list[float]:
    """Tangent at each knot.

    Interior tangents are the weighted harmonic mean of the neighbouring
    secants, or zero at a local extremum. End tangents start from the
    nearest secant and are limited by the next one inward.
    """
    n = len(xs)
    if n < 2:
        return [0.0] * n

    h = [xs[i + 1] - xs[i] for i in range(n - 1)]
    delta = [(ys[i + 1] - ys[i]) / h[i] for i in range(n - 1)]

    m = [0.0] * n
    for i in range(1, n - 1):
        d1, d2 = delta[i - 1], delta[i]
        if d1 == 0 or d2 == 0 or _sign(d1) != _sign(d2):
            continue
        w1 = 2 * h[i] + h[i - 1]
        w2 = h[i] + 2 * h[i - 1]
        m[i] = (w1 + w2) / (w1 / d1 + w2 / d2)

    m[0] = _end_slope(delta[0], delta[1] if n > 2 else None)
    m[-1] = _end_slope(delta[-1], delta[-2] if n > 2 else None)
    return m


def _end_slope(secant: float, inward: float | None) -> float:
    if inward is None:
        return secant
    if _sign(secant) != _sign(inward):
        return 0.0
    if abs(secant) > 2 * abs(inward):
        return 2 * inward
    return secant


def _hermite_to_bezier(p0: Point, p1: Point, m0: float, m1: float) -> CubicSegment:
    h = p1.x - p0.x
    return CubicSegment(
        p0=p0,
        c1=Point(p0.x + h / 3, p0.y + m0 * h / 3),
        c2=Point(p1.x - h / 3, p1.y - m1 * h / 3),
        p1=p1,
    )


def fit_curve(points: Sequence[Point]) -> list[CubicSegment]:
    """Fit a monotone cubic through ``points``.

    Returns one :class:`CubicSegment` per pair of consecutive points, or an
    empty list for fewer than two points.
    """
    if len(points) < 2:
        return []

    xs = [p.x for p in points]
    if not is_strictly_increasing(xs):
        log.debug("Points not strictly increasing in x; joining %d points with lines", len(points))
        return [
            CubicSegment(p0=a, c1=a, c2=b, p1=b, is_linear=True)
            for a, b in zip(points, points[1:])
        ]

    m = pchip_slopes(xs, [p.y for p in points])
    return [
        _hermite_to_bezier(points[i], points[i + 1], m[i], m[i + 1])
        for i in range(len(points) - 1)
    ]


def y_at_x(points: Sequence[Point], x: float) -> float:
    """Linearly interpolate a polyline sorted by ``x``; clamps at both ends."""
    if not points:
        return 0.0
    if x <= points[0].x:
        return points[0].y
    if x >= points[-1].x:
        return points[-1].y
    lo, hi = 0, len(points) - 1
    while hi - lo > 1:
        mid = (lo + hi) // 2
        if points[mid].x <= x:
            lo = mid
        else:
            hi = mid
    p0, p1 = points[lo], points[hi]
    return p0.y + (x - p0.x) / (p1.x - p0.x) * (p1.y - p0.y)
