# parker_pkg/geometry.py
"""Rectangle footprints and the separating-axis overlap test.

Polygons are plain sequences of ``(x, y)`` vertices in winding order.
Every function here is pure; nothing logs or raises on well-formed input.
"""
from __future__ import annotations

import math
from typing import List, Sequence, Tuple

import numpy as np
from shapely.geometry import Polygon

from vehicles.vehicle_base import DEFAULT_VEHICLE, VehicleConfig, VehicleState
from .utils import to_radians

Vector = Tuple[float, float]
Interval = Tuple[float, float]

__all__ = [
    "rotate_point",
    "axes_of",
    "unique_axes",
    "project",
    "intervals_overlap",
    "sat_overlap",
    "vehicle_footprint",
    "rect_footprint",
    "rect_contains_point",
    "to_shapely",
]


# ---------------------------------------------------------------------------
# SAT kernel
# ---------------------------------------------------------------------------

def rotate_point(p: Vector, center: Vector, angle: float) -> Vector:
    """Rotate *p* about *center* by *angle* (rad) with ``[[c, -s], [s, c]]``."""
    c, s = math.cos(angle), math.sin(angle)
    dx, dy = p[0] - center[0], p[1] - center[1]
    return (center[0] + dx * c - dy * s,
            center[1] + dx * s + dy * c)


def axes_of(polygon: Sequence[Vector]) -> List[Vector]:
    """One edge normal per edge: ``perp(p[i] - p[i+1])``, wrapping around."""
    axes: List[Vector] = []
    n = len(polygon)
    for i in range(n):
        x1, y1 = polygon[i]
        x2, y2 = polygon[(i + 1) % n]
        ex, ey = x1 - x2, y1 - y2
        axes.append((-ey, ex))
    return axes


def unique_axes(polygon: Sequence[Vector], tol: float = 1e-9) -> List[Vector]:
    """Edge normals with parallel and zero-length duplicates removed.

    A rectangle yields 2 axes since opposite edges are parallel.
    """
    out: List[Vector] = []
    for ax, ay in axes_of(polygon):
        if ax == 0.0 and ay == 0.0:
            continue
        if any(abs(ax * by - ay * bx) <= tol * math.hypot(ax, ay) * math.hypot(bx, by)
               for bx, by in out):
            continue
        out.append((ax, ay))
    return out


def project(polygon: Sequence[Vector], axis: Vector) -> Interval:
    """Scalar interval ``(min, max)`` of the vertices dotted with *axis*."""
    dots = np.asarray(polygon, dtype=np.float64) @ np.asarray(axis, dtype=np.float64)
    return float(dots.min()), float(dots.max())


def intervals_overlap(a: Interval, b: Interval) -> bool:
    return a[1] >= b[0] and b[1] >= a[0]


def sat_overlap(poly_a: Sequence[Vector], poly_b: Sequence[Vector]) -> bool:
    """Exact overlap test for two convex polygons.

    Returns ``False`` on the first separating axis found. Touching edges
    count as overlap.
    """
    for axis in unique_axes(poly_a) + unique_axes(poly_b):
        if not intervals_overlap(project(poly_a, axis), project(poly_b, axis)):
            return False
    return True


# ---------------------------------------------------------------------------
# Shape builders
# ---------------------------------------------------------------------------

def _box_corners(cx: float, cy: float, half_x: float, half_y: float,
                 angle: float) -> List[Vector]:
    # front-right, rear-right, rear-left, front-left (unrotated, y down)
    local = [
        (cx + half_x, cy + half_y),
        (cx - half_x, cy + half_y),
        (cx - half_x, cy - half_y),
        (cx + half_x, cy - half_y),
    ]
    if angle == 0.0:
        return local
    return [rotate_point(p, (cx, cy), angle) for p in local]


def vehicle_footprint(state: VehicleState,
                      cfg: VehicleConfig = DEFAULT_VEHICLE) -> List[Vector]:
    """Four corners of the car: length along the heading, width across it."""
    return _box_corners(state.x, state.y, cfg.length / 2.0, cfg.width / 2.0,
                        state.heading)


def rect_footprint(rect) -> List[Vector]:
    """Four corners of a level rectangle rotated (degrees) about its centre."""
    cx = rect.x + rect.width / 2.0
    cy = rect.y + rect.height / 2.0
    rot = to_radians(rect.rotation) if rect.rotation else 0.0
    return _box_corners(cx, cy, rect.width / 2.0, rect.height / 2.0, rot)


def rect_contains_point(rect, point: Vector) -> bool:
    """Axis-aligned hit test used by the editor; ignores ``rect.rotation``."""
    px, py = point
    return (rect.x <= px <= rect.x + rect.width
            and rect.y <= py <= rect.y + rect.height)


def to_shapely(corners: Sequence[Vector]) -> Polygon:
    return Polygon(corners)
