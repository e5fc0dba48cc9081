"""
抽象渲染器接口
"""

from abc import ABC, abstractmethod
from typing import List, Tuple


class Renderer(ABC):
    """渲染器抽象基類"""

    @abstractmethod
    def init(self, width: int, height: int, title: str = ""):
        """初始化渲染器"""
        pass

    @abstractmethod
    def draw_road(self, lanes: List[float]):
        """繪製路面與車道分隔線"""
        pass

    @abstractmethod
    def draw_rect_entity(self, x: float, y: float, width: float, height: float,
                         color: Tuple[int, int, int]):
        """以中心座標繪製矩形實體 (車輛、障礙物)"""
        pass

    @abstractmethod
    def draw_coin(self, x: float, y: float, radius: float):
        """繪製金幣"""
        pass

    @abstractmethod
    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'medium', color: Tuple[int, int, int] = None,
                  center: bool = False):
        """繪製文字"""
        pass

    @abstractmethod
    def draw_panel(self, x: int, y: int, width: int, height: int,
                   alpha: int = 180):
        """繪製面板"""
        pass

    @abstractmethod
    def present(self):
        """呈現畫面"""
        pass

    @abstractmethod
    def cleanup(self):
        """清理資源"""
        pass

    @abstractmethod
    def handle_events(self) -> dict:
        """處理事件"""
        pass
