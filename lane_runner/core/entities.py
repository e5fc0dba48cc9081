"""
遊戲實體
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Car:
    """玩家車輛，y 在整局中固定"""
    lane: int
    x: float
    y: float
    width: float
    height: float

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    @property
    def bottom(self) -> float:
        return self.y + self.height / 2


@dataclass
class Obstacle:
    """迎面而來的障礙車"""
    lane: int
    x: float
    y: float
    width: float
    height: float
    scored: bool = False
    color: Tuple[int, int, int] = (239, 71, 111)

    @property
    def top(self) -> float:
        return self.y - self.height / 2

    def is_off_screen(self, canvas_height: float) -> bool:
        return self.y - self.height >= canvas_height


@dataclass
class Coin:
    """可收集的金幣"""
    lane: int
    x: float
    y: float
    radius: float

    def is_off_screen(self, canvas_height: float) -> bool:
        return self.y - self.radius >= canvas_height
