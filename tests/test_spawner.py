"""Tests for spawner.py: timed obstacle and coin generation."""

import numpy as np

from lane_runner.config import GameConfig
from lane_runner.core import EntitySpawner, RunState

from helpers import make_obstacle


class TestObstacleSpawn:
    def test_no_spawn_before_interval(self, config, state, rng):
        spawner = EntitySpawner(config, rng)
        assert spawner.maybe_spawn(999, state) == []
        assert state.last_obstacle_spawn == 0

    def test_spawn_at_interval_resets_timer(self, config, state, rng):
        """到達間隔時生成一台，計時器重設為 now"""
        spawner = EntitySpawner(config, rng)
        spawned = spawner.maybe_spawn(1000, state)

        assert len(spawned) == 1
        assert state.last_obstacle_spawn == 1000
        assert spawner.maybe_spawn(1500, state) == []

    def test_spawned_obstacle_fields(self, config, state, rng):
        spawner = EntitySpawner(config, rng)
        obstacle = spawner.maybe_spawn(1000, state)[0]

        assert obstacle.y == -config.obstacle_height
        assert obstacle.scored is False
        assert obstacle.x == state.lanes[obstacle.lane]
        assert 0 <= obstacle.lane < state.lane_count

    def test_spawn_does_not_touch_state_collection(self, config, state, rng):
        EntitySpawner(config, rng).maybe_spawn(1000, state)
        assert state.obstacles == []

    def test_batch_lanes_are_distinct(self, config):
        """同一批障礙物車道互不相同"""
        for seed in range(50):
            state = RunState.new(config, now=0)
            state.lane_count = 4
            state.lanes = [45, 135, 225, 315]
            state.obstacles_per_spawn = 3
            spawned = EntitySpawner(config, np.random.default_rng(seed)).maybe_spawn(1000, state)
            lanes = [o.lane for o in spawned]
            assert len(lanes) == 3
            assert len(set(lanes)) == 3

    def test_batch_clamped_to_lane_count(self, config, state, rng):
        """每批數量大於車道數時，以車道數為上限"""
        state.obstacles_per_spawn = 10
        spawned = EntitySpawner(config, rng).maybe_spawn(1000, state)
        assert sorted(o.lane for o in spawned) == [0, 1, 2]

    def test_seeded_rng_is_reproducible(self, config):
        def lanes_for(seed):
            state = RunState.new(config, now=0)
            spawner = EntitySpawner(config, np.random.default_rng(seed))
            return [spawner.maybe_spawn(t * 1000, state)[0].lane for t in range(1, 20)]

        assert lanes_for(7) == lanes_for(7)

    def test_every_lane_gets_used(self, config, state, rng):
        spawner = EntitySpawner(config, rng)
        lanes = {spawner.maybe_spawn(t * 1000, state)[0].lane for t in range(1, 100)}
        assert lanes == {0, 1, 2}


class TestCoinSpawn:
    def test_disabled(self, config, state, rng):
        assert EntitySpawner(config, rng).maybe_spawn_coin(10_000, state) is None

    def test_spawn_at_interval(self, rng):
        config = GameConfig()
        state = RunState.new(config, now=0)
        spawner = EntitySpawner(config, rng)

        assert spawner.maybe_spawn_coin(699, state) is None
        coin = spawner.maybe_spawn_coin(700, state)
        assert coin is not None
        assert coin.y == -config.coin_diameter
        assert coin.radius == config.coin_diameter / 2
        assert coin.x == state.lanes[coin.lane]
        assert state.last_coin_spawn == 700

    def test_skipped_when_obstacle_at_lane_entrance(self, rng):
        """車道入口仍有障礙物時不生成金幣，但計時器照樣重設"""
        config = GameConfig(lane_count=1, escalated_lane_count=1, car_start_lane=0)
        state = RunState.new(config, now=0)
        state.obstacles.append(make_obstacle(state, 0, -80, config))

        spawner = EntitySpawner(config, rng)
        assert spawner.maybe_spawn_coin(700, state) is None
        assert state.last_coin_spawn == 700

    def test_obstacle_on_screen_does_not_block(self, rng):
        config = GameConfig(lane_count=1, escalated_lane_count=1, car_start_lane=0)
        state = RunState.new(config, now=0)
        state.obstacles.append(make_obstacle(state, 0, 10, config))

        assert EntitySpawner(config, rng).maybe_spawn_coin(700, state) is not None
