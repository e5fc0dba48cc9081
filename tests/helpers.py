"""測試輔助函數"""

from lane_runner.config import GameConfig
from lane_runner.core import Obstacle, Coin


def make_obstacle(state, lane, y, config=None):
    config = config or GameConfig()
    return Obstacle(lane=lane, x=state.lanes[lane], y=y,
                    width=config.obstacle_width, height=config.obstacle_height)


def make_coin(state, lane, y, config=None):
    config = config or GameConfig()
    return Coin(lane=lane, x=state.lanes[lane], y=y, radius=config.coin_diameter / 2)
