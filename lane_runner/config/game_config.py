"""
模擬參數
"""

import numbers
from dataclasses import dataclass, fields, asdict
from typing import Dict, Any

from . import constants as C


INT_FIELDS = ('lane_count', 'escalated_lane_count', 'car_start_lane',
              'obstacles_per_spawn', 'escalated_obstacles_per_spawn',
              'escalation_score', 'coin_value')
FLOAT_FIELDS = ('canvas_width', 'canvas_height', 'car_width', 'car_height',
                'car_bottom_offset', 'obstacle_width', 'obstacle_height', 'coin_diameter',
                'base_speed', 'speed_increment', 'speed_interval_ms',
                'obstacle_spawn_interval_ms', 'coin_spawn_interval_ms', 'reference_frame_ms')
BOOL_FIELDS = ('coins_enabled', 'time_normalized')


class ConfigurationError(ValueError):
    """無效的遊戲配置"""


@dataclass
class GameConfig:
    """單局模擬所需的全部參數"""

    canvas_width: float = C.CANVAS_WIDTH
    canvas_height: float = C.CANVAS_HEIGHT

    lane_count: int = C.BASE_LANE_COUNT
    escalated_lane_count: int = C.ESCALATED_LANE_COUNT
    car_start_lane: int = C.CAR_START_LANE

    car_width: float = C.CAR_WIDTH
    car_height: float = C.CAR_HEIGHT
    car_bottom_offset: float = C.CAR_BOTTOM_OFFSET
    obstacle_width: float = C.OBSTACLE_WIDTH
    obstacle_height: float = C.OBSTACLE_HEIGHT
    coin_diameter: float = C.COIN_DIAMETER

    base_speed: float = C.BASE_SPEED
    speed_increment: float = C.SPEED_INCREMENT
    speed_interval_ms: float = C.SPEED_INTERVAL_MS
    obstacle_spawn_interval_ms: float = C.OBSTACLE_SPAWN_INTERVAL_MS
    coin_spawn_interval_ms: float = C.COIN_SPAWN_INTERVAL_MS

    obstacles_per_spawn: int = C.OBSTACLES_PER_SPAWN
    escalated_obstacles_per_spawn: int = C.ESCALATED_OBSTACLES_PER_SPAWN
    escalation_score: int = C.ESCALATION_SCORE

    coins_enabled: bool = True
    coin_value: int = C.COIN_VALUE

    # False: 每幀固定位移 speed；True: 位移按 elapsed / reference_frame_ms 縮放
    time_normalized: bool = False
    reference_frame_ms: float = C.REFERENCE_FRAME_MS

    @property
    def car_y(self) -> float:
        return self.canvas_height - self.car_bottom_offset

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GameConfig":
        """從字典建立配置，未知鍵直接報錯"""
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ConfigurationError(f"未知的遊戲參數: {', '.join(sorted(unknown))}")
        config = cls(**data)
        config.validate()
        return config

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def validate(self) -> "GameConfig":
        """檢查配置，無效時拋出 ConfigurationError"""
        self._check_types()

        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise ConfigurationError(
                f"畫布尺寸必須為正數: {self.canvas_width}x{self.canvas_height}")
        if self.lane_count < 1:
            raise ConfigurationError(f"車道數至少為 1: {self.lane_count}")
        if self.escalated_lane_count < self.lane_count:
            raise ConfigurationError(
                f"升級後車道數 ({self.escalated_lane_count}) 不可少於初始車道數 ({self.lane_count})")
        if not 0 <= self.car_start_lane < self.lane_count:
            raise ConfigurationError(f"起始車道超出範圍: {self.car_start_lane}")

        for name in ('car_width', 'car_height', 'obstacle_width',
                     'obstacle_height', 'coin_diameter'):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} 必須為正數")
        if not 0 < self.car_bottom_offset <= self.canvas_height:
            raise ConfigurationError(f"car_bottom_offset 超出畫布: {self.car_bottom_offset}")

        for name in ('speed_interval_ms', 'obstacle_spawn_interval_ms',
                     'coin_spawn_interval_ms', 'reference_frame_ms'):
            if getattr(self, name) <= 0:
                raise ConfigurationError(f"{name} 必須為正數")
        if self.base_speed < 0 or self.speed_increment < 0:
            raise ConfigurationError("速度參數不可為負")

        if self.obstacles_per_spawn < 1 or self.escalated_obstacles_per_spawn < 1:
            raise ConfigurationError("每次生成的障礙物數至少為 1")
        if self.escalation_score < 0 or self.coin_value < 0:
            raise ConfigurationError("分數參數不可為負")
        return self

    def _check_types(self):
        for name in INT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigurationError(f"{name} 必須為整數: {value!r}")
        for name in FLOAT_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, numbers.Real):
                raise ConfigurationError(f"{name} 必須為數值: {value!r}")
        for name in BOOL_FIELDS:
            value = getattr(self, name)
            if not isinstance(value, bool):
                raise ConfigurationError(f"{name} 必須為布林值: {value!r}")
