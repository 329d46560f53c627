# parker_pkg/evaluator.py
"""Per-tick crash / win decision for a vehicle state inside a level."""
from __future__ import annotations

import math
from enum import Enum
from typing import Optional, Sequence, Tuple

from vehicles.vehicle_base import DEFAULT_VEHICLE, VehicleConfig, VehicleState
from .geometry import rect_footprint, sat_overlap, vehicle_footprint
from .level import Bounds, Level, Rect
from .utils import to_radians

Vector = Tuple[float, float]

WIN_SPEED_EPS = 0.1
BOUNDARY = -1   # "obstacle index" reported for an arena-boundary crash


class GameStatus(str, Enum):
    RUNNING = "running"
    CRASHED = "crashed"
    WON = "won"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.RUNNING


def out_of_bounds(corners: Sequence[Vector], bounds: Bounds) -> bool:
    return any(x < 0.0 or x > bounds.width or y < 0.0 or y > bounds.height
               for x, y in corners)


def find_collision(state: VehicleState, level: Level,
                   cfg: VehicleConfig = DEFAULT_VEHICLE) -> Optional[int]:
    """What the car is hitting: ``BOUNDARY``, an obstacle index, or ``None``."""
    car = vehicle_footprint(state, cfg)
    if out_of_bounds(car, level.bounds):
        return BOUNDARY
    for i, obs in enumerate(level.obstacles):
        if sat_overlap(car, rect_footprint(obs)):
            return i
    return None


def detect_crash(state: VehicleState, level: Level,
                 cfg: VehicleConfig = DEFAULT_VEHICLE) -> bool:
    return find_collision(state, level, cfg) is not None


def detect_win(state: VehicleState, target: Rect,
               cfg: VehicleConfig = DEFAULT_VEHICLE,
               speed_eps: float = WIN_SPEED_EPS) -> bool:
    """Car at rest and its whole footprint inside the (rotated) target.

    Corners are moved into the target's unrotated frame; the boundary
    itself counts as inside.
    """
    if abs(state.velocity) > speed_eps:
        return False

    tx, ty = target.center
    rot = to_radians(target.rotation) if target.rotation else 0.0
    c, s = math.cos(-rot), math.sin(-rot)
    half_w, half_h = target.width / 2.0, target.height / 2.0

    for px, py in vehicle_footprint(state, cfg):
        dx, dy = px - tx, py - ty
        local_x = dx * c - dy * s
        local_y = dx * s + dy * c
        if abs(local_x) > half_w or abs(local_y) > half_h:
            return False
    return True


def evaluate(state: VehicleState, level: Level,
             cfg: VehicleConfig = DEFAULT_VEHICLE,
             speed_eps: float = WIN_SPEED_EPS) -> GameStatus:
    if detect_crash(state, level, cfg):
        return GameStatus.CRASHED
    if detect_win(state, level.target, cfg, speed_eps):
        return GameStatus.WON
    return GameStatus.RUNNING
