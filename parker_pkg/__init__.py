from .utils import normalize_angle, to_degrees, to_radians
from .geometry import (
    axes_of,
    intervals_overlap,
    project,
    rect_contains_point,
    rect_footprint,
    rotate_point,
    sat_overlap,
    unique_axes,
    vehicle_footprint,
)
from .level import Bounds, Level, LevelValidationError, Rect, StartPose, validate_level
from .levels import LEVELS
from .evaluator import GameStatus, detect_crash, detect_win, evaluate, find_collision
from .config import EngineConfig
from .scenario_manager import ScenarioManager
from .session import ParkingSession
from .parking_env import ParkingGameEnv

from vehicles import DEFAULT_VEHICLE, Gear, VehicleConfig, VehicleState, advance
