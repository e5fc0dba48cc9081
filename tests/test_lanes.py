"""Tests for lanes.py: lane centers, clamping and relayout."""

import pytest

from lane_runner.core import compute_lanes, clamp_lane, relayout
from lane_runner.core.entities import Obstacle


class TestComputeLanes:
    def test_three_lanes(self):
        assert compute_lanes(3, 360) == [60, 180, 300]

    def test_four_lanes(self):
        assert compute_lanes(4, 360) == [45, 135, 225, 315]

    def test_single_lane_is_centered(self):
        assert compute_lanes(1, 200) == [100]

    @pytest.mark.parametrize("lane_count, width", [(0, 360), (-1, 360), (3, 0), (3, -10)])
    def test_invalid_input(self, lane_count, width):
        with pytest.raises(ValueError):
            compute_lanes(lane_count, width)


class TestClampLane:
    def test_clamp(self):
        assert clamp_lane(-1, 3) == 0
        assert clamp_lane(1, 3) == 1
        assert clamp_lane(3, 3) == 2
        assert clamp_lane(3, 4) == 3


class TestRelayout:
    def test_keeps_lane_index_and_moves_x(self):
        """重排只改 x，不改車道索引"""
        obstacles = [Obstacle(lane=i, x=v, y=0, width=80, height=80)
                     for i, v in enumerate(compute_lanes(3, 360))]
        relayout(obstacles, compute_lanes(4, 360))

        assert [o.lane for o in obstacles] == [0, 1, 2]
        assert [o.x for o in obstacles] == [45, 135, 225]

    def test_out_of_range_lane_untouched(self):
        obstacle = Obstacle(lane=3, x=315, y=0, width=80, height=80)
        relayout([obstacle], compute_lanes(3, 360))
        assert obstacle.x == 315
        assert obstacle.lane == 3
