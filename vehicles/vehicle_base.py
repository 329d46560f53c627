from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Tuple

Vector = Tuple[float, float]


class Gear(str, Enum):
    DRIVE = "D"
    REVERSE = "R"
    PARK = "P"


@dataclass(frozen=True)
class VehicleConfig:
    """Physical constants of the car, shared by every session.

    Units are arena pixels; speeds are pixels per tick.
    """
    length: float = 46.0
    width: float = 24.0
    wheelbase: float = 28.0          # axle-to-axle, <= length
    max_steering_angle: float = math.pi / 4
    steering_steps: int = 10         # S: discrete steps from centre to full lock
    speed_levels: Tuple[float, ...] = (0.4, 0.7, 1.0, 1.3, 1.6)

    @property
    def n_speed_levels(self) -> int:
        return len(self.speed_levels)

    @property
    def max_speed(self) -> float:
        return max(self.speed_levels)


DEFAULT_VEHICLE = VehicleConfig()


@dataclass(frozen=True)
class VehicleState:
    x: float
    y: float
    heading: float                   # rad, 0 = +x, grows clockwise on screen (y down)
    steering_step: int = 0
    velocity: float = 0.0
    speed_level: int = 1
    gear: Gear = Gear.PARK

    @property
    def position(self) -> Vector:
        return (self.x, self.y)

    def with_changes(self, **changes) -> "VehicleState":
        return replace(self, **changes)


def initial_state(x: float, y: float, heading_deg: float) -> VehicleState:
    """Vehicle parked at a start pose, wheels centred, slowest throttle."""
    return VehicleState(x=float(x), y=float(y), heading=math.radians(heading_deg))
