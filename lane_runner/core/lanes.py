"""
車道模型
"""

from typing import Iterable, List


def compute_lanes(lane_count: int, canvas_width: float) -> List[float]:
    """回傳每條車道的中心 x 座標"""
    if lane_count < 1:
        raise ValueError(f"車道數至少為 1: {lane_count}")
    if canvas_width <= 0:
        raise ValueError(f"畫布寬度必須為正數: {canvas_width}")

    lane_width = canvas_width / lane_count
    return [lane_width * (i + 0.5) for i in range(lane_count)]


def clamp_lane(lane: int, lane_count: int) -> int:
    return max(0, min(lane, lane_count - 1))


def relayout(entities: Iterable, lanes: List[float]):
    """
    依新的車道中心重設實體的 x

    車道索引不變；索引超出範圍的實體保持原位置。
    """
    for entity in entities:
        if 0 <= entity.lane < len(lanes):
            entity.x = lanes[entity.lane]
