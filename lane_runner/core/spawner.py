"""
實體生成器
"""

from typing import List, Optional

import numpy as np

from ..config.constants import OBSTACLE_PALETTE
from ..config.game_config import GameConfig
from .entities import Obstacle, Coin
from .game_state import RunState


class EntitySpawner:
    """依時間間隔生成障礙物與金幣"""

    def __init__(self, config: GameConfig, rng: np.random.Generator):
        self.config = config
        self.rng = rng

    def maybe_spawn(self, now: float, state: RunState) -> List[Obstacle]:
        """
        到達生成間隔時生成一批障礙物

        同一批障礙物佔用互不相同的車道，數量上限為車道數。

        Args:
            now: 當前時間 (毫秒)
            state: 單局狀態，會重設 last_obstacle_spawn

        Returns:
            新生成的障礙物 (未加入 state)
        """
        if now - state.last_obstacle_spawn < state.spawn_interval_ms:
            return []
        state.last_obstacle_spawn = now

        count = min(state.obstacles_per_spawn, state.lane_count)
        lanes = self.rng.permutation(state.lane_count)[:count]

        height = self.config.obstacle_height
        spawned = []
        for lane in lanes:
            lane = int(lane)
            color = OBSTACLE_PALETTE[int(self.rng.integers(len(OBSTACLE_PALETTE)))]
            spawned.append(Obstacle(lane=lane, x=state.lanes[lane], y=-height,
                                    width=self.config.obstacle_width,
                                    height=height, color=color))
        return spawned

    def maybe_spawn_coin(self, now: float, state: RunState) -> Optional[Coin]:
        """到達間隔時嘗試生成金幣；車道入口仍有障礙物時放棄本次"""
        if not self.config.coins_enabled:
            return None
        if now - state.last_coin_spawn < state.coin_spawn_interval_ms:
            return None
        state.last_coin_spawn = now

        lane = int(self.rng.integers(state.lane_count))
        if any(o.lane == lane and o.y < 0 for o in state.obstacles):
            return None

        diameter = self.config.coin_diameter
        return Coin(lane=lane, x=state.lanes[lane], y=-diameter, radius=diameter / 2)
