"""Shared parameters and edge extrapolation for fret and nut/bridge geometry.

Both fret rows and the nut/bridge curves place their outermost points on
two fixed edge lines. Each edge line is written as ``x = b * y + c`` and
passes through the board edge at the nut and at the bridge of its side,
shifted by that side's anchor correction so the anchor fret lands at
``y == 0``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fanfret.geometry.constants import PARALLEL_EPS
from fanfret.geometry.model import Point, ScaleSet, Side, StringLayout
from fanfret.geometry.scales import fret_distance, interpolate_scales
from fanfret.geometry.strings import compute_string_layout

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class EdgeLine:
    """A board edge written as ``x = slope * y + intercept``."""

    slope: float
    intercept: float

    @classmethod
    def through(cls, a: Point, b: Point) -> EdgeLine:
        slope = (b.x - a.x) / (b.y - a.y)
        return cls(slope=slope, intercept=a.x - slope * a.y)

    def x_at(self, y: float) -> float:
        return self.slope * y + self.intercept


@dataclass(frozen=True)
class EdgeFrame:
    """Everything fret and nut/bridge geometry derive from one parameter set."""

    layout: StringLayout
    scales: ScaleSet
    anchor_offsets: tuple[float, ...]
    left: EdgeLine
    right: EdgeLine

    @property
    def string_count(self) -> int:
        return len(self.scales.per_string)

    def edge_line(self, side: Side) -> EdgeLine:
        return self.left if side is Side.BASS else self.right

    def string_point(self, index: int, y: float) -> Point:
        """Point on string ``index`` at longitudinal ``y``.

        The lateral position is the string's own nut-to-bridge line
        evaluated at ``t = (y + dA) / L``.
        """
        scale = self.scales.per_string[index]
        t = (y + self.anchor_offsets[index]) / scale
        x_nut = self.layout.nut_positions[index]
        x_bridge = self.layout.bridge_positions[index]
        return Point(x_nut + t * (x_bridge - x_nut), y)

    def edges_for(self, string_points: tuple[Point, ...]) -> tuple[Point, Point]:
        """Extrapolate the left and right edge points of a row."""
        if len(string_points) == 1:
            y = string_points[0].y
            return Point(self.left.x_at(y), y), Point(self.right.x_at(y), y)
        left = extrapolate_edge(string_points[0], string_points[1], self.left)
        right = extrapolate_edge(string_points[-1], string_points[-2], self.right)
        return left, right


def local_slope(near: Point, far: Point) -> float:
    """Slope ``dy/dx`` of the line through two string points."""
    if far.x == near.x:
        return 0.0
    return (far.y - near.y) / (far.x - near.x)


def extrapolate_edge(near: Point, far: Point, edge: EdgeLine) -> Point:
    """Intersect the line through ``near`` and ``far`` with ``edge``.

    ``near`` is the outermost string point; when the two lines are close to
    parallel the result keeps ``near.y`` and takes ``x`` from the edge line.
    """
    m = local_slope(near, far)
    b, c = edge.slope, edge.intercept
    denom = 1.0 - b * m
    if abs(denom) < PARALLEL_EPS:
        log.debug("Edge line parallel to local slope at y=%.6f; using string y", near.y)
        return Point(edge.x_at(near.y), near.y)
    x = (b * near.y - b * m * near.x + c) / denom
    return Point(x, near.y + m * (x - near.x))


def sorted_row(left: Point, string_points: tuple[Point, ...], right: Point) -> tuple[Point, ...]:
    """Row points ordered by lateral position."""
    return tuple(sorted((left, *string_points, right), key=lambda p: p.x))


def build_edge_frame(
    string_count: int,
    scale_treble: float,
    scale_bass: float,
    anchor_fret: int,
    span_nut: float,
    span_bridge: float,
    overhang: float,
    exponent: float,
) -> EdgeFrame:
    """Compute the layout, scales, anchor corrections and edge lines."""
    layout = compute_string_layout(string_count, span_nut, span_bridge, overhang)
    scales = interpolate_scales(layout.string_count, scale_bass, scale_treble, exponent)
    anchor = max(0, anchor_fret)

    anchor_offsets = tuple(fret_distance(scale, anchor) for scale in scales.per_string)

    # Edge lines follow the configured side scales, not the blended ones
    bass_offset = fret_distance(scales.scale_bass, anchor)
    treble_offset = fret_distance(scales.scale_treble, anchor)
    left = EdgeLine.through(
        Point(layout.edge_nut[0], -bass_offset),
        Point(layout.edge_bridge[0], scales.scale_bass - bass_offset),
    )
    right = EdgeLine.through(
        Point(layout.edge_nut[1], -treble_offset),
        Point(layout.edge_bridge[1], scales.scale_treble - treble_offset),
    )

    return EdgeFrame(
        layout=layout,
        scales=scales,
        anchor_offsets=anchor_offsets,
        left=left,
        right=right,
    )
