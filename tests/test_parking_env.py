"""
Tests for the gymnasium wrapper.
"""

import numpy as np
import pytest

from parker_pkg.parking_env import (
    BACKWARD,
    FORWARD,
    NOOP,
    N_ACTIONS,
    ParkingGameEnv,
    STEER_RIGHT,
)


@pytest.fixture
def env(tmp_path):
    e = ParkingGameEnv({"data_dir": str(tmp_path), "max_steps": 2000})
    yield e
    e.close()


def test_reset_observation(env):
    obs, info = env.reset(seed=0)
    assert obs.shape == (9,)
    assert obs.dtype == np.float32
    assert env.observation_space.contains(obs)
    assert info["status"] == "running"
    assert info["level_id"] == 1
    assert env.action_space.n == N_ACTIONS


def test_forward_moves_car(env):
    env.reset()
    x0 = env.session.state.x
    obs, reward, terminated, truncated, info = env.step(FORWARD)
    assert env.session.state.x == pytest.approx(x0 + 0.4)
    assert reward == 0.0
    assert not terminated and not truncated
    assert obs[7] == 1.0, "gear code for Drive"


def test_crash_terminates_with_penalty(env):
    env.reset()
    env.step(FORWARD)
    terminated = False
    for _ in range(1000):
        obs, reward, terminated, truncated, info = env.step(NOOP)
        if terminated:
            break
    assert terminated
    assert reward == -1.0
    assert info["collision"] is True
    assert info["blamed_obstacle"] == 4


def test_truncation(tmp_path):
    env = ParkingGameEnv({"data_dir": str(tmp_path), "max_steps": 5})
    env.reset()
    for i in range(5):
        _, _, terminated, truncated, _ = env.step(STEER_RIGHT)
    assert truncated and not terminated


def test_reset_can_switch_level(env):
    _, info = env.reset(options={"level_id": 3})
    assert info["level_id"] == 3
    assert env.session.level.name == "Parallel Nightmare"


def test_reverse_then_unknown_action(env):
    env.reset()
    env.step(BACKWARD)
    assert env.session.state.velocity == pytest.approx(-0.4)
    with pytest.raises(ValueError):
        env.step(N_ACTIONS)
