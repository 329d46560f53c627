"""
Unit tests for the SAT kernel and the footprint builders.
"""

import math

import pytest

from parker_pkg import normalize_angle, to_degrees, to_radians
from parker_pkg.geometry import (
    axes_of,
    intervals_overlap,
    project,
    rect_contains_point,
    rect_footprint,
    rotate_point,
    sat_overlap,
    to_shapely,
    unique_axes,
    vehicle_footprint,
)
from parker_pkg.level import Rect
from vehicles import VehicleState


def test_unrotated_rect_corners_are_exact():
    corners = rect_footprint(Rect(0, 0, 40, 20))
    assert corners == [(40, 20), (0, 20), (0, 0), (40, 0)]


def test_rotated_rect_corners():
    corners = rect_footprint(Rect(0, 0, 40, 20, rotation=90))
    assert corners[0] == pytest.approx((10.0, 30.0))
    assert corners[2] == pytest.approx((30.0, -10.0))


def test_vehicle_footprint_heading_zero():
    st = VehicleState(x=480.0, y=180.0, heading=0.0)
    assert vehicle_footprint(st) == [(503, 192), (457, 192), (457, 168), (503, 168)]


def test_vehicle_footprint_heading_quarter_turn():
    st = VehicleState(x=100.0, y=100.0, heading=math.pi / 2)
    xs = [p[0] for p in vehicle_footprint(st)]
    ys = [p[1] for p in vehicle_footprint(st)]
    assert min(xs) == pytest.approx(88.0) and max(xs) == pytest.approx(112.0)
    assert min(ys) == pytest.approx(77.0) and max(ys) == pytest.approx(123.0)


def test_rotate_point():
    assert rotate_point((2.0, 1.0), (1.0, 1.0), math.pi / 2) == pytest.approx((1.0, 2.0))
    assert rotate_point((5.0, 5.0), (5.0, 5.0), 1.234) == pytest.approx((5.0, 5.0))


def test_rectangle_axes():
    rect = rect_footprint(Rect(0, 0, 40, 20, rotation=30))
    assert len(axes_of(rect)) == 4
    assert len(unique_axes(rect)) == 2


def test_project_and_interval_overlap():
    square = [(0, 0), (2, 0), (2, 2), (0, 2)]
    assert project(square, (1, 0)) == (0.0, 2.0)
    assert project(square, (1, 1)) == (0.0, 4.0)
    assert intervals_overlap((0, 1), (1, 2))
    assert intervals_overlap((1, 2), (0, 1))
    assert not intervals_overlap((0, 1), (1.0001, 2))


def test_identical_rectangles_overlap():
    a = rect_footprint(Rect(10, 10, 30, 15, rotation=20))
    assert sat_overlap(a, list(a))


def test_far_apart_rectangles_do_not_overlap():
    a = rect_footprint(Rect(0, 0, 40, 20))
    b = rect_footprint(Rect(200, 200, 40, 20, rotation=45))
    assert not sat_overlap(a, b)


def test_shared_edge_counts_as_overlap():
    car = vehicle_footprint(VehicleState(x=100.0, y=100.0, heading=0.0))
    wall = rect_footprint(Rect(123, 80, 20, 40))
    assert sat_overlap(car, wall)
    gap = rect_footprint(Rect(123.5, 80, 20, 40))
    assert not sat_overlap(car, gap)


def test_diagonal_separation_found_by_rotated_axis():
    """Bounding boxes overlap but the diamond's diagonal edge separates them."""
    diamond = rect_footprint(Rect(0, 0, 10, 10, rotation=45))
    square = rect_footprint(Rect(10, 10, 10, 10))
    assert not sat_overlap(diamond, square)


def test_sat_is_symmetric():
    rects = [
        Rect(0, 0, 40, 20),
        Rect(30, 5, 40, 20, rotation=30),
        Rect(0, 0, 10, 10, rotation=45),
        Rect(10, 10, 10, 10),
        Rect(100, 100, 5, 80, rotation=-15),
        Rect(35, 12, 8, 8, rotation=10),
    ]
    for a in rects:
        for b in rects:
            pa, pb = rect_footprint(a), rect_footprint(b)
            assert sat_overlap(pa, pb) == sat_overlap(pb, pa), f"{a} vs {b}"


def test_sat_agrees_with_shapely_on_rotated_pairs():
    a = rect_footprint(Rect(50, 50, 60, 20, rotation=35))
    for dx in range(-80, 81, 8):
        b = rect_footprint(Rect(50 + dx, 60, 30, 30, rotation=-20))
        expected = to_shapely(a).intersects(to_shapely(b))
        assert sat_overlap(a, b) == expected, f"dx={dx}"


def test_rect_contains_point_is_axis_aligned():
    rect = Rect(10, 10, 20, 10, rotation=45)
    assert rect_contains_point(rect, (15, 15))
    assert rect_contains_point(rect, (10, 10))
    assert rect_contains_point(rect, (30, 20))
    assert not rect_contains_point(rect, (31, 15))
    assert not rect_contains_point(rect, (15, 9.9))


def test_to_shapely_area():
    assert to_shapely(rect_footprint(Rect(0, 0, 40, 20, rotation=12))).area == pytest.approx(800.0)


def test_angle_helpers():
    assert to_radians(180) == pytest.approx(math.pi)
    assert to_degrees(math.pi / 2) == pytest.approx(90.0)
    assert normalize_angle(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert normalize_angle(5 * math.pi) == pytest.approx(math.pi)
    assert normalize_angle(0.0) == 0.0
    a = normalize_angle(-1e-18)
    assert 0.0 <= a < 2 * math.pi


def test_tiny_rectangle_keeps_both_axes():
    a = [(1e-5, 1e-5), (0.0, 1e-5), (0.0, 0.0), (1e-5, 0.0)]
    b = [(x + 2e-5, y) for x, y in a]
    assert len(unique_axes(a)) == 2
    assert not sat_overlap(a, b), "separated along x only"
