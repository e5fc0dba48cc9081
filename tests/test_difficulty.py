"""Tests for difficulty.py: speed ramp and one-shot escalation."""

import math

from lane_runner.core import DifficultyController

from helpers import make_obstacle


class TestSpeedRamp:
    def test_no_increase_before_interval(self, config, state):
        DifficultyController(config).tick(4999, state)
        assert state.speed == config.base_speed

    def test_increase_at_interval(self, config, state):
        DifficultyController(config).tick(5000, state)
        assert state.speed == config.base_speed + 0.5
        assert state.last_speed_increase == 5000

    def test_speed_formula_over_time(self, config, state):
        """連續運行 T 毫秒後 speed == base + 0.5 * floor(T / 5000)"""
        controller = DifficultyController(config)
        for t in range(0, 60_001, 16):
            controller.tick(t, state)
            assert state.speed == config.base_speed + 0.5 * math.floor(t / 5000)

    def test_long_gap_counts_every_interval(self, config, state):
        """一次跨越多個間隔時逐段累加"""
        DifficultyController(config).tick(12_000, state)
        assert state.speed == config.base_speed + 1.0
        assert state.last_speed_increase == 10_000

    def test_speed_never_decreases(self, config, state):
        controller = DifficultyController(config)
        previous = state.speed
        for t in range(0, 40_000, 333):
            controller.tick(t, state)
            assert state.speed >= previous
            previous = state.speed


class TestEscalation:
    def test_not_before_threshold(self, config, state):
        state.score = 59
        assert DifficultyController(config).tick(0, state) is False
        assert state.lane_count == 3
        assert state.extra_lane_added is False

    def test_escalates_at_threshold(self, config, state):
        """分數達 60：四車道、每批兩台、車輛保持原車道"""
        state.score = 60
        assert DifficultyController(config).tick(0, state) is True

        assert state.lane_count == 4
        assert state.lanes == [45, 135, 225, 315]
        assert state.obstacles_per_spawn == 2
        assert state.extra_lane_added is True
        assert state.car.lane == 1
        assert state.car.x == 135

    def test_relayouts_existing_entities(self, config, state):
        state.obstacles = [make_obstacle(state, 0, 100), make_obstacle(state, 2, 200)]
        state.score = 60
        DifficultyController(config).tick(0, state)

        assert [(o.lane, o.x) for o in state.obstacles] == [(0, 45), (2, 225)]

    def test_fires_only_once(self, config, state):
        controller = DifficultyController(config)
        state.score = 60
        assert controller.tick(0, state) is True

        state.score = 200
        state.obstacles_per_spawn = 2
        for t in range(1, 20):
            assert controller.tick(t, state) is False
        assert state.lane_count == 4
        assert state.obstacles_per_spawn == 2

    def test_car_on_right_edge_keeps_lane(self, config, state):
        state.car.lane = 2
        state.car.x = state.lanes[2]
        state.score = 60
        DifficultyController(config).tick(0, state)
        assert state.car.lane == 2
        assert state.car.x == 225
