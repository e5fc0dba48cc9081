"""
模擬步進
"""

from dataclasses import dataclass

import numpy as np

from ..config.game_config import GameConfig
from .difficulty import DifficultyController
from .game_state import RunState
from .geometry import CollisionDetector
from .spawner import EntitySpawner


@dataclass
class StepResult:
    """單幀結果"""
    spawned: int = 0
    scored: int = 0
    coins_collected: int = 0
    escalated: bool = False
    collided: bool = False


class Simulation:
    """
    每幀推進一次單局狀態

    固定順序：生成 → 難度 → 移動 → 計分 → 清除 → 碰撞 → 收集金幣。
    """

    def __init__(self, config: GameConfig, rng: np.random.Generator):
        self.config = config
        self.spawner = EntitySpawner(config, rng)
        self.difficulty = DifficultyController(config)
        self.collision_detector = CollisionDetector()

    def step(self, state: RunState, now: float) -> StepResult:
        """
        推進一幀

        Args:
            state: 單局狀態 (原地修改)
            now: 當前時間 (毫秒)

        Returns:
            本幀發生的事件
        """
        result = StepResult()
        if state.game_over:
            return result

        # 1. 生成與難度
        spawned = self.spawner.maybe_spawn(now, state)
        state.obstacles.extend(spawned)
        result.spawned = len(spawned)

        coin = self.spawner.maybe_spawn_coin(now, state)
        if coin is not None:
            state.coins.append(coin)

        result.escalated = self.difficulty.tick(now, state)

        # 2. 移動
        delta = self._displacement(state, now)
        for obstacle in state.obstacles:
            obstacle.y += delta
        for c in state.coins:
            c.y += delta
        state.last_step_time = now
        state.frame_count += 1

        # 3. 計分：障礙物頂邊越過車輛底邊
        car = state.car
        for obstacle in state.obstacles:
            if not obstacle.scored and obstacle.top > car.bottom:
                obstacle.scored = True
                state.score += 1
                state.obstacles_passed += 1
                result.scored += 1

        # 4. 清除離開畫面的實體
        height = self.config.canvas_height
        state.obstacles = [o for o in state.obstacles if not o.is_off_screen(height)]
        state.coins = [c for c in state.coins if not c.is_off_screen(height)]

        # 5. 碰撞
        for obstacle in state.obstacles:
            if self.collision_detector.rects_intersect(car, obstacle):
                state.game_over = True
                result.collided = True
                return result

        # 6. 收集金幣
        remaining = []
        for c in state.coins:
            if self.collision_detector.circle_rect_intersect(c, car):
                state.score += self.config.coin_value
                state.coins_collected += 1
                result.coins_collected += 1
            else:
                remaining.append(c)
        state.coins = remaining

        return result

    def _displacement(self, state: RunState, now: float) -> float:
        if not self.config.time_normalized:
            return state.speed
        elapsed = max(0.0, now - state.last_step_time)
        return state.speed * elapsed / self.config.reference_frame_ms
