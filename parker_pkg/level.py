# parker_pkg/level.py
from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

from shapely.geometry import box

from vehicles.vehicle_base import DEFAULT_VEHICLE, VehicleConfig, VehicleState, initial_state
from .geometry import rect_footprint, to_shapely, vehicle_footprint

Vector = Tuple[float, float]


class LevelValidationError(ValueError):
    """Raised when a level cannot be played as given."""


@dataclass(frozen=True)
class Rect:
    """Obstacle, target zone or any other level rectangle.

    ``(x, y)`` is the top-left corner before rotation; ``rotation`` is in
    degrees about the rectangle's own centre.
    """
    x: float
    y: float
    width: float
    height: float
    rotation: float = 0.0

    @property
    def center(self) -> Vector:
        return (self.x + self.width / 2.0, self.y + self.height / 2.0)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Rect":
        return cls(float(d["x"]), float(d["y"]),
                   float(d["width"]), float(d["height"]),
                   float(d.get("rotation") or 0.0))

    def to_dict(self) -> Dict[str, float]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class StartPose:
    x: float
    y: float
    heading: float = 0.0    # degrees


@dataclass(frozen=True)
class Bounds:
    width: float
    height: float


@dataclass(frozen=True)
class Level:
    id: int
    name: str
    bounds: Bounds
    start: StartPose
    target: Rect
    obstacles: Tuple[Rect, ...] = field(default_factory=tuple)
    description: str = ""

    def start_state(self) -> VehicleState:
        return initial_state(self.start.x, self.start.y, self.start.heading)

    def replace(self, **changes) -> "Level":
        """New level with *changes* applied; this one is left untouched."""
        if "obstacles" in changes:
            changes["obstacles"] = tuple(changes["obstacles"])
        return dataclasses.replace(self, **changes)

    # ------------------------------------------------------------------
    # dict / JSON mirror of the record
    # ------------------------------------------------------------------
    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "Level":
        try:
            start = d["start"]
            return cls(
                id=int(d["id"]),
                name=str(d["name"]),
                description=str(d.get("description", "")),
                bounds=Bounds(float(d["bounds"]["width"]), float(d["bounds"]["height"])),
                start=StartPose(float(start["x"]), float(start["y"]),
                                float(start.get("heading", 0.0))),
                target=Rect.from_dict(d["target"]),
                obstacles=tuple(Rect.from_dict(o) for o in d.get("obstacles", [])),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise LevelValidationError(f"malformed level record: {exc!r}") from exc

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "bounds": {"width": self.bounds.width, "height": self.bounds.height},
            "start": {"x": self.start.x, "y": self.start.y, "heading": self.start.heading},
            "target": self.target.to_dict(),
            "obstacles": [o.to_dict() for o in self.obstacles],
        }


# ---------------------------------------------------------------------------
# Validation (kept out of the per-tick engine)
# ---------------------------------------------------------------------------

def _check_rect(rect: Rect, what: str) -> None:
    if rect.width <= 0 or rect.height <= 0:
        raise LevelValidationError(
            f"{what} is degenerate ({rect.width} x {rect.height})")


def validate_level(level: Level, cfg: VehicleConfig = DEFAULT_VEHICLE) -> Level:
    """Reject levels the engine would accept but that make no sense to play.

    Returns *level* unchanged so it can be used inline.
    """
    if level.bounds.width <= 0 or level.bounds.height <= 0:
        raise LevelValidationError(
            f"level {level.id}: arena bounds must be positive, got "
            f"{level.bounds.width} x {level.bounds.height}")
    _check_rect(level.target, f"level {level.id}: target")
    for i, obs in enumerate(level.obstacles):
        _check_rect(obs, f"level {level.id}: obstacle {i}")

    arena = box(0.0, 0.0, level.bounds.width, level.bounds.height)
    ego_poly = to_shapely(vehicle_footprint(level.start_state(), cfg))
    if not arena.covers(ego_poly):
        raise LevelValidationError(f"level {level.id}: start pose leaves the arena")
    for i, obs in enumerate(level.obstacles):
        if ego_poly.intersects(to_shapely(rect_footprint(obs))):
            raise LevelValidationError(
                f"level {level.id}: start pose intersects obstacle {i}")
    if not arena.intersects(to_shapely(rect_footprint(level.target))):
        raise LevelValidationError(f"level {level.id}: target lies outside the arena")
    return level
