"""Tests for runner_env.py: the headless gymnasium environment."""

import numpy as np

from lane_runner.config import GameConfig
from lane_runner.envs import LaneRunnerEnv


def rollout(env, seed, actions):
    obs, _ = env.reset(seed=seed)
    trace = [obs.copy()]
    for action in actions:
        obs, reward, terminated, truncated, _ = env.step(action)
        trace.append(obs.copy())
        if terminated or truncated:
            break
    return trace


class TestLaneRunnerEnv:
    def test_reset_observation(self):
        env = LaneRunnerEnv()
        obs, info = env.reset(seed=0)

        assert obs.shape == (6,)
        assert obs.dtype == np.float32
        assert env.observation_space.contains(obs)
        assert obs[0] == 0.5          # 三車道中的中間車道
        assert obs[1] == 1.0
        assert info["score"] == 0
        assert info["lane_count"] == 3

    def test_actions_move_car(self):
        env = LaneRunnerEnv()
        env.reset(seed=0)
        obs, *_ = env.step(0)
        assert obs[0] == 0.0
        obs, *_ = env.step(2)
        obs, *_ = env.step(2)
        assert obs[0] == 1.0

    def test_standing_still_eventually_crashes(self):
        """原地不動終究會撞車並得到負獎勵"""
        env = LaneRunnerEnv(config=GameConfig(coins_enabled=False))
        env.reset(seed=3)
        terminated = truncated = False
        reward = 0.0
        while not (terminated or truncated):
            _, reward, terminated, truncated, _ = env.step(1)
        assert terminated
        assert reward <= 0.0

    def test_truncation(self):
        env = LaneRunnerEnv(max_steps=5)
        env.reset(seed=0)
        results = [env.step(1) for _ in range(5)]
        assert results[-1][3] is True
        assert all(r[3] is False for r in results[:-1])

    def test_seed_is_reproducible(self):
        actions = [0, 1, 2, 1] * 200
        a = rollout(LaneRunnerEnv(), 11, actions)
        b = rollout(LaneRunnerEnv(), 11, actions)
        assert len(a) == len(b)
        assert all(np.array_equal(x, y) for x, y in zip(a, b))

    def test_observations_stay_in_space(self):
        env = LaneRunnerEnv()
        env.reset(seed=5)
        rng = np.random.default_rng(5)
        for _ in range(500):
            obs, _, terminated, truncated, _ = env.step(int(rng.integers(3)))
            assert env.observation_space.contains(obs)
            if terminated or truncated:
                break

    def test_step_after_crash_stays_terminated(self):
        """撞車後繼續呼叫 step 仍回報 terminated，且狀態不再推進"""
        env = LaneRunnerEnv(config=GameConfig(coins_enabled=False))
        env.reset(seed=3)
        terminated = truncated = False
        while not (terminated or truncated):
            _, _, terminated, truncated, info = env.step(1)
        assert terminated

        now = env.now
        for action in (0, 1, 2):
            obs, reward, terminated, truncated, after = env.step(action)
            assert terminated is True
            assert truncated is False
            assert reward == 0.0
            assert after == info
        assert env.now == now
