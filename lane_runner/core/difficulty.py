"""
難度控制
"""

from ..config.game_config import GameConfig
from .game_state import RunState
from .lanes import compute_lanes, clamp_lane, relayout


class DifficultyController:
    """
    難度狀態機

    - 速度：每滿 speed_interval_ms 加 speed_increment，無上限
    - 升級：分數首次達到 escalation_score 時增加車道並提高生成密度，每局僅一次
    """

    def __init__(self, config: GameConfig):
        self.config = config

    def tick(self, now: float, state: RunState) -> bool:
        """更新難度，回傳本次是否觸發升級"""
        self._ramp_speed(now, state)

        if not state.extra_lane_added and state.score >= self.config.escalation_score:
            self._escalate(state)
            return True
        return False

    def _ramp_speed(self, now: float, state: RunState):
        interval = self.config.speed_interval_ms
        # 計時器按整段間隔推進，長幀也不會漏算
        while now - state.last_speed_increase >= interval:
            state.speed += self.config.speed_increment
            state.last_speed_increase += interval

    def _escalate(self, state: RunState):
        state.lane_count = self.config.escalated_lane_count
        state.lanes = compute_lanes(state.lane_count, self.config.canvas_width)
        relayout(state.obstacles, state.lanes)
        relayout(state.coins, state.lanes)

        car = state.car
        car.lane = clamp_lane(car.lane, state.lane_count)
        car.x = state.lanes[car.lane]

        state.obstacles_per_spawn = self.config.escalated_obstacles_per_spawn
        state.extra_lane_added = True
