"""Tests for inlay marker placement."""

import pytest

from fanfret.geometry.frets import compute_fret_rows
from fanfret.geometry.markers import (
    ghost_curve,
    guide_line,
    locate_marker,
    locate_markers,
    segment_intersection,
)
from fanfret.geometry.model import Point
from fanfret.geometry.nut_bridge import compute_nut_bridge

PARAMS = (6, 647.7, 660.4, 12, 35.814, 49.784, 3.048, 1.0)
FRETS = 22


@pytest.fixture
def board():
    strings, *rest = PARAMS
    rows = compute_fret_rows(strings, FRETS, *rest)
    nut_bridge = compute_nut_bridge(strings, *rest)
    return rows, nut_bridge


def test_ghost_curve_is_pointwise_midpoint():
    a = [Point(0.0, 0.0), Point(2.0, 2.0)]
    b = [Point(0.0, 2.0), Point(2.0, 4.0)]
    assert ghost_curve(a, b) == [Point(0.0, 1.0), Point(2.0, 3.0)]


class TestSegmentIntersection:
    def test_crossing(self):
        hit = segment_intersection(Point(0, 0), Point(2, 2), Point(0, 2), Point(2, 0))
        assert hit == Point(1.0, 1.0)

    def test_parallel(self):
        assert segment_intersection(Point(0, 0), Point(1, 0), Point(0, 1), Point(1, 1)) is None

    def test_miss_outside_segments(self):
        assert segment_intersection(Point(0, 0), Point(1, 1), Point(3, 0), Point(4, -1)) is None


def test_guide_line_runs_nut_to_bridge(board):
    _, nb = board
    start, end = guide_line(nb, 50.0)
    mid = nb.nut.edge_left.midpoint(nb.nut.edge_right)
    assert (start.x, start.y) == pytest.approx((mid.x, mid.y))
    assert end.y > start.y


def test_guide_percent_clamped(board):
    _, nb = board
    assert guide_line(nb, 150.0) == guide_line(nb, 100.0)
    assert guide_line(nb, -10.0) == guide_line(nb, 0.0)


def test_first_gap_lies_between_ghost_edges(board):
    rows, nb = board
    marker = locate_marker(0, 50.0, rows, nb)
    assert marker is not None
    ghost = ghost_curve(nb.nut.points, rows[0].points)
    assert ghost[0].x < marker.position.x < ghost[-1].x
    assert nb.nut.edge_left.y < marker.position.y < rows[0].edge_right.y


def test_marker_sits_between_its_frets(board):
    rows, nb = board
    marker = locate_marker(4, 50.0, rows, nb)
    assert marker is not None
    lower, upper = rows[3], rows[4]
    assert min(p.y for p in lower.points) < marker.position.y < max(p.y for p in upper.points)


def test_gap_at_fret_count_returns_none(board):
    rows, nb = board
    assert locate_marker(FRETS, 50.0, rows, nb) is None
    assert locate_marker(FRETS - 1, 50.0, rows, nb) is not None


def test_negative_gap_returns_none(board):
    rows, nb = board
    assert locate_marker(-1, 50.0, rows, nb) is None


def test_marker_size_clamped(board):
    rows, nb = board
    assert locate_marker(2, 50.0, rows, nb, marker_size=100.0).size == 30.0
    assert locate_marker(2, 50.0, rows, nb, marker_size=0.0).size == 1.0


def test_locate_markers_skips_misses(board):
    rows, nb = board
    markers = locate_markers([2, 4, 99, -3, 11], 50.0, rows, nb)
    assert [m.gap for m in markers] == [2, 4, 11]
    assert all(m.guide_percent == 50.0 for m in markers)


@pytest.mark.parametrize("guide_percent", [0.0, 100.0])
def test_every_gap_found_at_board_edges(board, guide_percent):
    """A guide on either edge line still hits every gap."""
    rows, nb = board
    markers = locate_markers(range(FRETS), guide_percent, rows, nb)
    assert [m.gap for m in markers] == list(range(FRETS))


def test_endpoint_hit_within_rounding_is_kept():
    """A crossing a rounding error past a segment end still counts."""
    hit = segment_intersection(
        Point(0.0, 0.0), Point(0.0, 1.0), Point(1e-12, 0.5), Point(1.0, 0.7)
    )
    assert hit is not None
    assert (hit.x, hit.y) == pytest.approx((0.0, 0.5))
