# parker_pkg/session.py
from __future__ import annotations

import logging
from typing import Optional

from vehicles.vehicle_base import DEFAULT_VEHICLE, Gear, VehicleConfig, VehicleState
from vehicles.vehicle_disc_speed import advance
from .config import EngineConfig
from .evaluator import GameStatus, detect_win, find_collision
from .level import Level

logger = logging.getLogger(__name__)


class ParkingSession:
    """Single owner of the vehicle state for one play session.

    An external fixed-rate driver calls :meth:`tick` once per frame. The
    controls below are the only place discrete inputs enter the engine, so
    both the steering step and the speed level are clamped here.
    """

    def __init__(self, level: Level,
                 vehicle: VehicleConfig = DEFAULT_VEHICLE,
                 config: Optional[EngineConfig] = None):
        self.vehicle = vehicle
        self.config = config or EngineConfig()
        self.reset(level)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def reset(self, level: Optional[Level] = None) -> VehicleState:
        """Back to the start pose; optionally swap in an edited level."""
        if level is not None:
            self.level = level
        self.state = self.level.start_state().with_changes(
            speed_level=self.config.initial_speed_level)
        self.status = GameStatus.RUNNING
        self.playing = False
        self.step_count = 0
        self.blamed_obstacle: Optional[int] = None
        logger.info("Session reset on level %s (%s)", self.level.id, self.level.name)
        return self.state

    def tick(self) -> GameStatus:
        if self.status.is_terminal:
            if self.config.strict_ticks:
                raise RuntimeError(f"tick() after game over ({self.status.value})")
            return self.status
        if not self.playing:
            return self.status

        self.state = advance(self.state, self.vehicle, self.config.rest_epsilon)
        self.step_count += 1
        # crash is checked before win; one collision pass also gives the blame
        hit = find_collision(self.state, self.level, self.vehicle)
        if hit is not None:
            self.status = GameStatus.CRASHED
        elif detect_win(self.state, self.level.target, self.vehicle,
                        self.config.win_speed_epsilon):
            self.status = GameStatus.WON

        if self.status is GameStatus.CRASHED:
            self.blamed_obstacle = hit
            logger.info("[Crash] step=%d at (%.1f, %.1f) obstacle=%s",
                        self.step_count, self.state.x, self.state.y, self.blamed_obstacle)
        elif self.status is GameStatus.WON:
            logger.info("[Parked] step=%d at (%.1f, %.1f)",
                        self.step_count, self.state.x, self.state.y)
        return self.status

    # ------------------------------------------------------------------
    # Controls
    # ------------------------------------------------------------------
    def steer(self, delta: int) -> int:
        if not self.status.is_terminal:
            s = self.vehicle.steering_steps
            step = max(-s, min(s, self.state.steering_step + int(delta)))
            self.state = self.state.with_changes(steering_step=step)
        return self.state.steering_step

    def adjust_speed(self, delta: int) -> int:
        if not self.status.is_terminal:
            lvl = max(1, min(self.vehicle.n_speed_levels, self.state.speed_level + int(delta)))
            self.state = self.state.with_changes(speed_level=lvl)
        return self.state.speed_level

    def change_gear(self, gear: Gear) -> Gear:
        """Shift; leaving Park drops back to the slowest level and starts play."""
        if self.status.is_terminal:
            return self.state.gear
        gear = Gear(gear)
        if gear is Gear.PARK:
            self.state = self.state.with_changes(gear=gear)
        else:
            self.state = self.state.with_changes(
                gear=gear, speed_level=self.config.initial_speed_level)
            self.playing = True
        logger.debug("Gear -> %s", gear.value)
        return gear

    def toggle_forward(self) -> Gear:
        return self.change_gear(Gear.DRIVE if self.state.gear is Gear.PARK else Gear.PARK)

    def toggle_backward(self) -> Gear:
        return self.change_gear(Gear.REVERSE if self.state.gear is Gear.PARK else Gear.PARK)
