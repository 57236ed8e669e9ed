"""Tests for cubic Bezier evaluation and per-spline sampling."""

import numpy as np
import pytest

from bezier_path_planner.utils.bezier_spline import Spline
from bezier_path_planner.utils.geometry import Point


def make_arch() -> Spline:
    return Spline(Point(0, 0), Point(0, 10), Point(10, 10), Point(10, 0))


def test_position_at_endpoints() -> None:
    s = make_arch()
    start = s.get_position(0.0)
    end = s.get_position(1.0)
    assert (start.x, start.y) == (0.0, 0.0)
    assert (end.x, end.y) == (10.0, 0.0)


def test_position_of_degenerate_spline() -> None:
    p = Point(2.0, -4.0)
    s = Spline(p, p, p, p)
    mid = s.get_position(0.5)
    assert (mid.x, mid.y) == (2.0, -4.0)


def test_position_midpoint_of_arch() -> None:
    # 0.125*P1 + 0.375*P2 + 0.375*P3 + 0.125*P4
    mid = make_arch().get_position(0.5)
    assert mid.x == pytest.approx(5.0)
    assert mid.y == pytest.approx(7.5)


def test_vectorised_positions_match_scalar() -> None:
    s = make_arch()
    ts = np.linspace(0.0, 1.0, 7)
    xy = s.get_positions(ts)
    assert xy.shape == (7, 2)
    for t, (x, y) in zip(ts, xy):
        p = s.get_position(t)
        assert x == pytest.approx(p.x)
        assert y == pytest.approx(p.y)


def test_generate_points_first_segment_keeps_start() -> None:
    s = make_arch()
    pts = s.generate_points(10, True)
    assert len(pts) == 10
    assert (pts[0].x, pts[0].y) == (0.0, 0.0)
    assert (pts[-1].x, pts[-1].y) == (10.0, 0.0)


def test_generate_points_later_segment_drops_start() -> None:
    s = make_arch()
    pts = s.generate_points(10, False)
    assert len(pts) == 9
    second = s.get_position(1.0 / 9.0)
    assert pts[0].x == pytest.approx(second.x)
    assert pts[0].y == pytest.approx(second.y)
    assert (pts[-1].x, pts[-1].y) == (10.0, 0.0)


@pytest.mark.parametrize("tolerance", [1, 0, -3, 2.5, float("inf"), float("nan"), True])
def test_generate_points_rejects_bad_tolerance(tolerance) -> None:
    with pytest.raises(ValueError):
        make_arch().generate_points(tolerance, True)


def test_length_of_straight_spline() -> None:
    s = Spline(Point(0, 0), Point(1, 0), Point(2, 0), Point(3, 0))
    s.generate_points(20, True)
    assert s.length == pytest.approx(3.0)


def test_length_converges_with_tolerance() -> None:
    """Piecewise-linear length grows toward the true arc length as sampling refines."""
    s = make_arch()
    s.generate_points(4, True)
    coarse = s.length
    s.generate_points(200, True)
    fine = s.length
    assert coarse < fine
    # chord and control-polygon bounds
    assert 10.0 < fine < 30.0
