"""Tests for nut and bridge curves."""

import pytest

from fanfret.geometry.model import BoardEnd, Side
from fanfret.geometry.nut_bridge import compute_nut_bridge
from fanfret.geometry.scales import fret_distance


def _scenario(scale_treble=25.0, scale_bass=26.0):
    return compute_nut_bridge(6, scale_treble, scale_bass, 7, 1.4, 2.0, 0.1, 1.0)


def test_bass_scale_moves_only_bass_bridge_edge():
    before = _scenario()
    after = _scenario(scale_bass=27.0)
    assert abs(after.bridge.edge_left.y - before.bridge.edge_left.y) > 0.5
    assert abs(after.bridge.edge_right.y - before.bridge.edge_right.y) < 0.1


def test_treble_scale_moves_only_treble_bridge_edge():
    before = _scenario()
    after = _scenario(scale_treble=26.0)
    assert abs(after.bridge.edge_right.y - before.bridge.edge_right.y) > 0.5
    assert abs(after.bridge.edge_left.y - before.bridge.edge_left.y) < 0.1


def test_string_points_sit_at_nut_and_bridge():
    nb = _scenario()
    for i, (nut, bridge) in enumerate(zip(nb.nut.string_points, nb.bridge.string_points)):
        assert nut.x == pytest.approx(nb.layout.nut_positions[i])
        assert bridge.x == pytest.approx(nb.layout.bridge_positions[i])
        # Nut to bridge along a string is that string's scale
        assert bridge.y - nut.y > 0


def test_equal_scales_give_straight_nut_and_bridge():
    nb = compute_nut_bridge(6, 648.0, 648.0, 12, 36.0, 50.0, 3.0, 1.0)
    for curve in (nb.nut, nb.bridge):
        ys = [p.y for p in curve.points]
        assert max(ys) - min(ys) < 1e-9
    assert nb.nut.edge_left.y == pytest.approx(-fret_distance(648.0, 12))
    assert nb.bridge.edge_left.y == pytest.approx(648.0 - fret_distance(648.0, 12))


def test_curves_match_fret_row_shape():
    nb = _scenario()
    for curve in (nb.nut, nb.bridge):
        assert len(curve.points) == 8
        xs = [p.x for p in curve.points]
        assert xs == sorted(xs)


def test_accessors():
    nb = _scenario()
    assert nb.curve(BoardEnd.NUT) is nb.nut
    assert nb.curve(BoardEnd.BRIDGE) is nb.bridge
    assert nb.bridge.edge(Side.BASS) == nb.bridge.edge_left
    assert nb.nut.edge(Side.TREBLE) == nb.nut.edge_right
