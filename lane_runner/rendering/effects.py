"""
效果管理系統
"""

import math
from typing import List, Tuple, Dict
from dataclasses import dataclass
from ..config.constants import (
    CRASH_EFFECT_RADIUS_INIT, CRASH_EFFECT_RADIUS_GROW, CRASH_EFFECT_ALPHA_DECAY,
    CRASH_EFFECT_COLOR, COIN_SPARKLE_COUNT, COIN_SPARKLE_SPEED, COIN_SPARKLE_LIFETIME,
    THEME_COLORS,
)


@dataclass
class Effect:
    """效果基類"""
    x: float
    y: float
    active: bool = True

    def update(self, dt: float = 1.0):
        """更新效果"""
        pass

    def is_alive(self) -> bool:
        """檢查效果是否還活著"""
        return self.active


@dataclass
class CrashEffect(Effect):
    """撞車擴散圈"""
    radius: float = CRASH_EFFECT_RADIUS_INIT
    alpha: float = 255
    color: Tuple[int, int, int] = CRASH_EFFECT_COLOR

    def update(self, dt: float = 1.0):
        self.radius += CRASH_EFFECT_RADIUS_GROW * dt
        self.alpha -= CRASH_EFFECT_ALPHA_DECAY * dt

        if self.alpha <= 0:
            self.alpha = 0
            self.active = False

    def render_data(self) -> Dict:
        """獲取渲染數據"""
        return {
            'x': self.x,
            'y': self.y,
            'radius': self.radius,
            'alpha': int(self.alpha),
            'color': self.color
        }


@dataclass
class ParticleEffect(Effect):
    """金幣火花粒子"""
    velocity_x: float = 0.0
    velocity_y: float = 0.0
    lifetime: float = COIN_SPARKLE_LIFETIME
    size: float = 3.0
    color: Tuple[int, int, int] = THEME_COLORS['coin']

    def update(self, dt: float = 1.0):
        self.x += self.velocity_x * dt
        self.y += self.velocity_y * dt
        self.lifetime -= dt

        if self.lifetime <= 0:
            self.active = False

    def render_data(self) -> Dict:
        alpha = int(255 * max(0.0, self.lifetime) / COIN_SPARKLE_LIFETIME)
        return {
            'x': self.x,
            'y': self.y,
            'radius': self.size,
            'alpha': min(255, alpha),
            'color': self.color
        }


class EffectManager:
    """效果管理器"""

    def __init__(self):
        self.effects: List[Effect] = []

    def add_crash(self, x: float, y: float):
        """添加撞車效果"""
        self.effects.append(CrashEffect(x=x, y=y))

    def add_coin_burst(self, x: float, y: float, count: int = COIN_SPARKLE_COUNT):
        """在金幣位置灑出一圈粒子"""
        for i in range(count):
            angle = 2 * math.pi * i / count
            self.effects.append(ParticleEffect(
                x=x, y=y,
                velocity_x=COIN_SPARKLE_SPEED * math.cos(angle),
                velocity_y=COIN_SPARKLE_SPEED * math.sin(angle),
            ))

    def update(self, dt: float = 1.0):
        """更新所有效果並清理死亡的效果"""
        for effect in self.effects:
            effect.update(dt)
        self.effects = [e for e in self.effects if e.is_alive()]

    def get_render_data(self) -> List[Dict]:
        return [effect.render_data() for effect in self.effects]

    def clear(self):
        """清空所有效果"""
        self.effects.clear()

    def active_count(self) -> Dict[str, int]:
        """獲取活躍效果數量"""
        return {
            'total': len(self.effects),
            'crashes': sum(isinstance(e, CrashEffect) for e in self.effects),
            'particles': sum(isinstance(e, ParticleEffect) for e in self.effects),
        }
