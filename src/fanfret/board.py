"""Board coordinator: runs the whole kernel for one configuration.

Converts and clamps the configuration at the boundary, then computes fret
rows, nut/bridge curves and markers from the same parameters.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from fanfret.config.instrument import InstrumentConfig
from fanfret.geometry.frets import compute_fret_rows
from fanfret.geometry.markers import locate_markers
from fanfret.geometry.model import FretRow, Marker, NutBridge, Point, ScaleSet
from fanfret.geometry.nut_bridge import compute_nut_bridge
from fanfret.geometry.scales import interpolate_scales

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Board:
    """Complete fingerboard geometry in millimeters."""

    config: InstrumentConfig
    scales: ScaleSet
    rows: tuple[FretRow, ...]
    nut_bridge: NutBridge
    markers: tuple[Marker, ...]

    def row(self, fret: int) -> FretRow | None:
        for r in self.rows:
            if r.fret == fret:
                return r
        return None

    def all_points(self) -> list[Point]:
        points = [p for r in self.rows for p in r.points]
        points.extend(self.nut_bridge.nut.points)
        points.extend(self.nut_bridge.bridge.points)
        return points

    def bounds(self) -> tuple[float, float, float, float]:
        """Return (min_x, min_y, max_x, max_y) over every row and curve point."""
        points = self.all_points()
        xs = [p.x for p in points]
        ys = [p.y for p in points]
        return min(xs), min(ys), max(xs), max(ys)


def build_board(config: InstrumentConfig) -> Board:
    """Compute the full board for ``config``."""
    cfg = config.in_millimeters().clamped()
    params = (
        cfg.scale_treble, cfg.scale_bass, cfg.anchor_fret,
        cfg.span_nut, cfg.span_bridge, cfg.overhang, cfg.exponent,
    )
    rows = compute_fret_rows(cfg.strings, cfg.frets, *params)
    nut_bridge = compute_nut_bridge(cfg.strings, *params)
    markers = locate_markers(
        cfg.marker_gaps, cfg.guide_percent, rows, nut_bridge, cfg.marker_size
    )
    log.info(
        "Built board: %d strings, %d frets, %d markers",
        cfg.strings, len(rows), len(markers),
    )
    return Board(
        config=cfg,
        scales=interpolate_scales(cfg.strings, cfg.scale_bass, cfg.scale_treble, cfg.exponent),
        rows=tuple(rows),
        nut_bridge=nut_bridge,
        markers=tuple(markers),
    )
