"""渲染系統模組"""

from .renderer import Renderer
from .pygame_renderer import PygameRenderer
from .effects import EffectManager, CrashEffect, ParticleEffect

__all__ = ['Renderer', 'PygameRenderer', 'EffectManager', 'CrashEffect', 'ParticleEffect']
