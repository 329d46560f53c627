# vehicles/vehicle_disc_speed.py
"""Kinematic bicycle with discrete steering steps and discrete speed levels.

Velocity is not integrated: every tick it is taken straight from
``(gear, speed_level)``. The pose is a first-order Euler step that
translates along the pre-update heading and then rotates the heading by
``v / R``.
"""
from __future__ import annotations

import math

from vehicles.vehicle_base import DEFAULT_VEHICLE, Gear, VehicleConfig, VehicleState

REST_EPS = 1e-3


def throttle_magnitude(speed_level: int, cfg: VehicleConfig = DEFAULT_VEHICLE) -> float:
    idx = max(1, min(cfg.n_speed_levels, int(speed_level))) - 1
    return cfg.speed_levels[idx]


def target_velocity(gear: Gear, speed_level: int, cfg: VehicleConfig = DEFAULT_VEHICLE) -> float:
    if gear is Gear.DRIVE:
        return throttle_magnitude(speed_level, cfg)
    if gear is Gear.REVERSE:
        return -throttle_magnitude(speed_level, cfg)
    return 0.0


def steering_angle(steering_step: int, cfg: VehicleConfig = DEFAULT_VEHICLE) -> float:
    """Front-wheel angle (rad). ``steering_step`` must already be in [-S, S]."""
    return steering_step * (cfg.max_steering_angle / cfg.steering_steps)


def turn_radius(steer: float, cfg: VehicleConfig = DEFAULT_VEHICLE) -> float:
    """Signed radius ``wheelbase / tan(steer)``; undefined for ``steer == 0``."""
    return cfg.wheelbase / math.tan(steer)


def advance(state: VehicleState,
            cfg: VehicleConfig = DEFAULT_VEHICLE,
            rest_eps: float = REST_EPS) -> VehicleState:
    """One simulation tick. Pure: returns a new state, never mutates ``state``."""
    v = target_velocity(state.gear, state.speed_level, cfg)
    x, y, yaw = state.x, state.y, state.heading

    if abs(v) > rest_eps:
        x += v * math.cos(yaw)
        y += v * math.sin(yaw)

        steer = steering_angle(state.steering_step, cfg)
        if abs(steer) > rest_eps:
            R = turn_radius(steer, cfg)
            yaw += v / R

    return state.with_changes(x=x, y=y, heading=yaw, velocity=v)
