"""Tests for monotone curve fitting and path output."""

import pytest

from fanfret.curves import curve_to_path, fit_curve, segments_to_path, y_at_x
from fanfret.curves.pchip import is_strictly_increasing, pchip_slopes
from fanfret.geometry.model import Point


def _pts(*coords):
    return [Point(x, y) for x, y in coords]


# ---------------------------------------------------------------------------
# Slopes
# ---------------------------------------------------------------------------


class TestSlopes:
    def test_extremum_gets_flat_tangent(self):
        m = pchip_slopes([0.0, 1.0, 2.0], [0.0, 1.0, 0.0])
        assert m[1] == 0.0

    def test_end_slope_zero_when_secants_disagree(self):
        m = pchip_slopes([0.0, 1.0, 2.0], [0.0, 1.0, 0.0])
        assert m[0] == 0.0
        assert m[2] == 0.0

    def test_end_slope_clipped(self):
        m = pchip_slopes([0.0, 1.0, 2.0], [0.0, 10.0, 11.0])
        assert m[0] == pytest.approx(2.0)

    def test_two_points_use_secant(self):
        assert pchip_slopes([0.0, 2.0], [1.0, 5.0]) == pytest.approx([2.0, 2.0])

    def test_flat_neighbour_gives_zero(self):
        m = pchip_slopes([0.0, 1.0, 2.0, 3.0], [0.0, 1.0, 1.0, 2.0])
        assert m[1] == 0.0
        assert m[2] == 0.0

    def test_strictly_increasing(self):
        assert is_strictly_increasing([0.0, 1.0, 2.5])
        assert not is_strictly_increasing([0.0, 1.0, 1.0])


# ---------------------------------------------------------------------------
# Fitting
# ---------------------------------------------------------------------------


class TestFitCurve:
    def test_too_few_points(self):
        assert fit_curve([]) == []
        assert fit_curve(_pts((1.0, 2.0))) == []

    def test_reproduces_knots(self):
        points = _pts((-20.0, 3.0), (-10.0, 1.5), (0.0, 0.2), (10.0, -1.0), (20.0, -4.0))
        segments = fit_curve(points)
        assert len(segments) == 4
        for seg, a, b in zip(segments, points, points[1:]):
            start, end = seg.point_at(0.0), seg.point_at(1.0)
            assert start.x == pytest.approx(a.x, abs=1e-9)
            assert start.y == pytest.approx(a.y, abs=1e-9)
            assert end.x == pytest.approx(b.x, abs=1e-9)
            assert end.y == pytest.approx(b.y, abs=1e-9)

    @pytest.mark.parametrize(
        "coords",
        [
            ((0.0, 0.0), (1.0, 1.0), (2.0, 1.1)),
            ((0.0, 5.0), (0.5, 4.9), (3.0, 0.0)),
            ((0.0, 0.0), (1.0, 1.0), (2.0, 1.1), (3.0, 5.0)),
        ],
    )
    def test_no_overshoot_on_monotone_data(self, coords):
        points = _pts(*coords)
        for seg in fit_curve(points):
            lo, hi = sorted((seg.p0.y, seg.p1.y))
            for k in range(1, 20):
                y = seg.point_at(k / 20).y
                assert lo - 1e-12 <= y <= hi + 1e-12

    def test_controls_at_one_third(self):
        seg = fit_curve(_pts((0.0, 0.0), (3.0, 3.0)))[0]
        assert seg.c1 == Point(1.0, 1.0)
        assert seg.c2 == Point(2.0, 2.0)

    def test_non_increasing_x_falls_back_to_lines(self):
        points = _pts((0.0, 0.0), (0.0, 1.0), (1.0, 1.0))
        segments = fit_curve(points)
        assert len(segments) == 2
        assert all(s.is_linear for s in segments)
        assert segments[0].c1 == points[0]
        assert segments[0].c2 == points[1]


class TestYAtX:
    points = _pts((0.0, 0.0), (1.0, 2.0), (3.0, 4.0))

    def test_interpolates(self):
        assert y_at_x(self.points, 0.5) == pytest.approx(1.0)
        assert y_at_x(self.points, 2.0) == pytest.approx(3.0)

    def test_clamps(self):
        assert y_at_x(self.points, -5.0) == 0.0
        assert y_at_x(self.points, 10.0) == 4.0

    def test_empty(self):
        assert y_at_x([], 1.0) == 0.0


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


class TestPath:
    def test_one_cubic_per_segment(self):
        points = _pts((0.0, 0.0), (1.0, 1.0), (2.0, 1.5), (3.0, 1.0))
        path = curve_to_path(points, stroke="black", fill="none")
        d = path.args["d"]
        assert d.startswith("M")
        assert d.count("C") == 3
        assert "L" not in d
        assert path.args["stroke"] == "black"

    def test_fallback_uses_lines(self):
        points = _pts((0.0, 0.0), (0.0, 1.0), (1.0, 1.0))
        d = curve_to_path(points).args["d"]
        assert d.count("L") == 2
        assert "C" not in d

    def test_single_point(self):
        d = curve_to_path(_pts((2.0, 3.0))).args["d"]
        assert d.startswith("M")
        assert "C" not in d and "L" not in d

    def test_no_segments(self):
        assert segments_to_path([]).args["d"] == ""
