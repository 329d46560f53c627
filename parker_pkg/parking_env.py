from __future__ import annotations

import logging
import math
from typing import Dict, Optional

import gymnasium as gym
import numpy as np

from vehicles.vehicle_base import DEFAULT_VEHICLE, Gear
from .config import EngineConfig
from .evaluator import GameStatus
from .scenario_manager import ScenarioManager
from .session import ParkingSession

logger = logging.getLogger(__name__)

# Discrete actions, one control input per tick
NOOP, STEER_LEFT, STEER_RIGHT, FORWARD, BACKWARD, PARK, SPEED_UP, SPEED_DOWN = range(8)
N_ACTIONS = 8

_GEAR_CODE = {Gear.DRIVE: 1.0, Gear.REVERSE: -1.0, Gear.PARK: 0.0}


class ParkingGameEnv(gym.Env):
    metadata = {"render_modes": [], "name": "ParkingGameEnv"}

    def __init__(self, config: Optional[Dict] = None):
        cfg = config or {}
        # ======================== 基本参数 ========================
        self.engine_cfg = EngineConfig(
            max_steps=cfg.get("max_steps", EngineConfig.max_steps),
            data_dir=cfg.get("data_dir", EngineConfig.data_dir),
        )
        self.vehicle_cfg = cfg.get("vehicle", DEFAULT_VEHICLE)
        self.max_steps = self.engine_cfg.max_steps
        self.level_id = cfg.get("level_id", 1)

        # ======================== 场景 / 会话 ========================
        self.scenario = ScenarioManager(self.engine_cfg)
        self.session = ParkingSession(self.scenario.get(self.level_id),
                                      self.vehicle_cfg, self.engine_cfg)

        # ======================== 动作 / 观测空间 ========================
        self.action_space = gym.spaces.Discrete(N_ACTIONS)
        self.observation_space = gym.spaces.Box(
            low=-1.0, high=1.0, shape=(9,), dtype=np.float32)
        self._obs_buf = np.empty(9, dtype=np.float32)
        self.step_count = 0

    # ------------------------------------------------------------------
    # Gym API
    # ------------------------------------------------------------------
    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict] = None):
        super().reset(seed=seed)
        options = options or {}
        level_id = options.get("level_id")
        if level_id is not None and level_id != self.session.level.id:
            self.level_id = level_id
            logger.debug("Switching to level %s", level_id)
            self.session.reset(self.scenario.get(level_id))
        else:
            self.session.reset()
        self.step_count = 0
        return self._get_observation(), self._info()

    def step(self, action):
        self._apply_action(int(action))
        status = self.session.tick()
        self.step_count += 1

        if status is GameStatus.WON:
            reward = 1.0
        elif status is GameStatus.CRASHED:
            reward = -1.0
        else:
            reward = 0.0
        terminated = status.is_terminal
        truncated = not terminated and self.step_count >= self.max_steps
        return self._get_observation(), reward, terminated, truncated, self._info()

    def render(self):
        return None

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _apply_action(self, action: int):
        s = self.session
        if action == STEER_LEFT:
            s.steer(-1)
        elif action == STEER_RIGHT:
            s.steer(+1)
        elif action == FORWARD:
            s.toggle_forward()
        elif action == BACKWARD:
            s.toggle_backward()
        elif action == PARK:
            s.change_gear(Gear.PARK)
        elif action == SPEED_UP:
            s.adjust_speed(+1)
        elif action == SPEED_DOWN:
            s.adjust_speed(-1)
        elif action != NOOP:
            raise ValueError(f"unknown action {action}")

    def _get_observation(self) -> np.ndarray:
        st = self.session.state
        lvl = self.session.level
        veh = self.vehicle_cfg
        w, h = lvl.bounds.width, lvl.bounds.height
        tx, ty = lvl.target.center
        dist = math.hypot(tx - st.x, ty - st.y) / math.hypot(w, h)

        self._obs_buf[:] = [
            st.x / w, st.y / h,                                    # position
            math.sin(st.heading), math.cos(st.heading),            # heading
            st.steering_step / veh.steering_steps,                 # steering
            st.velocity / veh.max_speed,                           # velocity
            (st.speed_level - 1) / max(1, veh.n_speed_levels - 1), # throttle
            _GEAR_CODE[st.gear],                                   # gear
            dist,                                                  # dist to target
        ]
        # the car may poke outside the arena on its crash tick
        np.clip(self._obs_buf, -1.0, 1.0, out=self._obs_buf)
        return self._obs_buf.copy()

    def _info(self) -> Dict:
        return {
            "status": self.session.status.value,
            "collision": self.session.status is GameStatus.CRASHED,
            "blamed_obstacle": self.session.blamed_obstacle,
            "level_id": self.session.level.id,
            "step": self.step_count,
            "sim_step": self.session.step_count,
        }
