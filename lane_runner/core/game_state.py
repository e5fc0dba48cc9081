"""
遊戲狀態管理
"""

from enum import Enum
from typing import List, Dict, Any
from dataclasses import dataclass, field

from ..config.game_config import GameConfig
from .entities import Car, Obstacle, Coin
from .lanes import compute_lanes


class RunPhase(Enum):
    """單局生命週期"""
    IDLE = "idle"
    RUNNING = "running"
    GAME_OVER = "game_over"


class Command(Enum):
    """輸入端送進核心的指令"""
    SHIFT_LEFT = -1
    SHIFT_RIGHT = 1
    RESTART = 0


@dataclass
class RunState:
    """單局狀態"""

    car: Car
    lanes: List[float]

    # 實體
    obstacles: List[Obstacle] = field(default_factory=list)
    coins: List[Coin] = field(default_factory=list)

    # 分數
    score: int = 0
    obstacles_passed: int = 0
    coins_collected: int = 0

    # 難度
    speed: float = 0.0
    spawn_interval_ms: float = 0.0
    coin_spawn_interval_ms: float = 0.0
    obstacles_per_spawn: int = 1
    lane_count: int = 3
    extra_lane_added: bool = False

    # 遊戲控制
    game_over: bool = False
    frame_count: int = 0

    # 計時器 (毫秒)
    last_obstacle_spawn: float = 0.0
    last_coin_spawn: float = 0.0
    last_speed_increase: float = 0.0
    last_step_time: float = 0.0

    @classmethod
    def new(cls, config: GameConfig, now: float) -> "RunState":
        """建立一局全新狀態，所有計時器從 now 起算"""
        lanes = compute_lanes(config.lane_count, config.canvas_width)
        lane = config.car_start_lane
        car = Car(lane=lane, x=lanes[lane], y=config.car_y,
                  width=config.car_width, height=config.car_height)
        return cls(
            car=car,
            lanes=lanes,
            speed=config.base_speed,
            spawn_interval_ms=config.obstacle_spawn_interval_ms,
            coin_spawn_interval_ms=config.coin_spawn_interval_ms,
            obstacles_per_spawn=config.obstacles_per_spawn,
            lane_count=config.lane_count,
            last_obstacle_spawn=now,
            last_coin_spawn=now,
            last_speed_increase=now,
            last_step_time=now,
        )

    def snapshot(self) -> Dict[str, Any]:
        """獲取渲染數據"""
        return {
            'car': {'lane': self.car.lane, 'x': self.car.x, 'y': self.car.y,
                    'width': self.car.width, 'height': self.car.height},
            'obstacles': [{'lane': o.lane, 'x': o.x, 'y': o.y,
                           'width': o.width, 'height': o.height,
                           'scored': o.scored, 'color': o.color}
                          for o in self.obstacles],
            'coins': [{'lane': c.lane, 'x': c.x, 'y': c.y, 'radius': c.radius}
                      for c in self.coins],
            'lanes': list(self.lanes),
            'lane_count': self.lane_count,
            'score': self.score,
            'speed': self.speed,
            'game_over': self.game_over,
        }
