"""Data model for fingerboard geometry.

Coordinates are 2-D: ``x`` is lateral (bass side negative, treble side
positive) and ``y`` is longitudinal, measured along the strings from the
anchor fret toward the bridge. All values are frozen; recomputing after a
parameter change always builds new objects.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Side(Enum):
    """Side of the fingerboard a string or edge belongs to."""

    BASS = "bass"
    TREBLE = "treble"


class BoardEnd(Enum):
    """End of the fingerboard where an edge curve sits."""

    NUT = "nut"
    BRIDGE = "bridge"


@dataclass(frozen=True)
class Point:
    """A point on the board plane."""

    x: float
    y: float

    def midpoint(self, other: Point) -> Point:
        return Point(0.5 * (self.x + other.x), 0.5 * (self.y + other.y))

    def lerp(self, other: Point, t: float) -> Point:
        return Point(self.x + (other.x - self.x) * t, self.y + (other.y - self.y) * t)


@dataclass(frozen=True)
class LayoutParams:
    """Inputs of the lateral string layout."""

    string_count: int
    span_nut: float
    span_bridge: float
    overhang: float

    @property
    def board_width_nut(self) -> float:
        return self.span_nut + 2 * self.overhang

    @property
    def board_width_bridge(self) -> float:
        return self.span_bridge + 2 * self.overhang


@dataclass(frozen=True)
class StringLayout:
    """Lateral string and edge positions at the nut and the bridge.

    Position tuples run bass (index 0) to treble (index N-1) and are
    strictly increasing for N >= 2 with a non-zero span.
    """

    edge_nut: tuple[float, float]
    edge_bridge: tuple[float, float]
    nut_positions: tuple[float, ...]
    bridge_positions: tuple[float, ...]

    @property
    def string_count(self) -> int:
        return len(self.nut_positions)

    @property
    def nut_width(self) -> float:
        return self.edge_nut[1] - self.edge_nut[0]

    @property
    def bridge_width(self) -> float:
        return self.edge_bridge[1] - self.edge_bridge[0]

    def edge(self, end: BoardEnd, side: Side) -> float:
        """Lateral position of a board edge at the nut or bridge."""
        pair = self.edge_nut if end is BoardEnd.NUT else self.edge_bridge
        return pair[0] if side is Side.BASS else pair[1]

    def position(self, end: BoardEnd, index: int) -> float:
        """Lateral position of string ``index`` at the nut or bridge."""
        positions = self.nut_positions if end is BoardEnd.NUT else self.bridge_positions
        return positions[index]


@dataclass(frozen=True)
class ScaleSet:
    """Per-string scale lengths blended from the bass and treble scales."""

    scale_bass: float
    scale_treble: float
    exponent: float
    per_string: tuple[float, ...]

    @property
    def bass(self) -> float:
        return self.per_string[0]

    @property
    def treble(self) -> float:
        return self.per_string[-1]

    @property
    def spread(self) -> float:
        """Absolute difference between the bass and treble string scales."""
        return abs(self.bass - self.treble)

    def is_monotone(self) -> bool:
        """True when per-string scales never reverse direction across strings."""
        diffs = [b - a for a, b in zip(self.per_string, self.per_string[1:])]
        return all(d >= 0 for d in diffs) or all(d <= 0 for d in diffs)


@dataclass(frozen=True)
class FretRow:
    """Geometry of a single fret across the board.

    ``points`` holds both edge points and every string point sorted by
    ``x``; ``string_points`` keeps the same string points in bass-to-treble
    string order.
    """

    fret: int
    points: tuple[Point, ...]
    string_points: tuple[Point, ...]
    edge_left: Point
    edge_right: Point
    is_straight: bool = False

    def edge(self, side: Side) -> Point:
        return self.edge_left if side is Side.BASS else self.edge_right


@dataclass(frozen=True)
class EdgeCurve:
    """Nut or bridge curve; same point-list shape as :class:`FretRow`."""

    end: BoardEnd
    points: tuple[Point, ...]
    string_points: tuple[Point, ...]
    edge_left: Point
    edge_right: Point

    def edge(self, side: Side) -> Point:
        return self.edge_left if side is Side.BASS else self.edge_right


@dataclass(frozen=True)
class NutBridge:
    """Nut and bridge curves together with the layout they came from."""

    layout: StringLayout
    nut: EdgeCurve
    bridge: EdgeCurve

    def curve(self, end: BoardEnd) -> EdgeCurve:
        return self.nut if end is BoardEnd.NUT else self.bridge


@dataclass(frozen=True)
class Marker:
    """An inlay marker placed inside a fret gap."""

    gap: int
    guide_percent: float
    position: Point
    size: float


@dataclass(frozen=True)
class CubicSegment:
    """One cubic Bezier span of a fitted curve."""

    p0: Point
    c1: Point
    c2: Point
    p1: Point
    is_linear: bool = field(default=False, compare=False)

    def point_at(self, t: float) -> Point:
        """Evaluate the Bezier at parameter ``t`` in [0, 1]."""
        s = 1.0 - t
        a = s * s * s
        b = 3 * s * s * t
        c = 3 * s * t * t
        d = t * t * t
        return Point(
            a * self.p0.x + b * self.c1.x + c * self.c2.x + d * self.p1.x,
            a * self.p0.y + b * self.c1.y + c * self.c2.y + d * self.p1.y,
        )
