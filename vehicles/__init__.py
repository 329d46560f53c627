from vehicles.vehicle_base import (
    DEFAULT_VEHICLE,
    Gear,
    VehicleConfig,
    VehicleState,
    initial_state,
)
from vehicles.vehicle_disc_speed import (
    REST_EPS,
    advance,
    steering_angle,
    target_velocity,
    throttle_magnitude,
    turn_radius,
)

__all__ = [
    "DEFAULT_VEHICLE",
    "Gear",
    "VehicleConfig",
    "VehicleState",
    "initial_state",
    "REST_EPS",
    "advance",
    "steering_angle",
    "target_velocity",
    "throttle_magnitude",
    "turn_radius",
]
