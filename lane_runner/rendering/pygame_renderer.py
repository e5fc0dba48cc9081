"""
Pygame渲染器實現
"""

import pygame
from typing import List, Tuple, Optional, Dict
from .renderer import Renderer
from ..config.constants import (
    THEME_COLORS, LANE_DIVIDER_WIDTH,
    FONT_FAMILY_PRIMARY, FONT_SIZE_SMALL, FONT_SIZE_MEDIUM, FONT_SIZE_LARGE,
)


class PygameRenderer(Renderer):
    """Pygame渲染器"""

    def __init__(self):
        self.screen = None
        self.clock = None
        self.fonts = {}
        self.width = 0
        self.height = 0
        self.road_surface = None
        self._road_lane_count = 0

    def init(self, width: int, height: int, title: str = ""):
        """初始化Pygame"""
        pygame.init()
        self.width = width
        self.height = height
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()

        self._init_fonts()

    def _init_fonts(self):
        """初始化字體"""
        sizes = {'small': FONT_SIZE_SMALL, 'medium': FONT_SIZE_MEDIUM, 'large': FONT_SIZE_LARGE}
        for name, size in sizes.items():
            try:
                self.fonts[name] = pygame.font.SysFont(FONT_FAMILY_PRIMARY, size)
            except pygame.error:
                self.fonts[name] = pygame.font.SysFont(None, size)

    def _create_road_background(self, lanes: List[float]) -> pygame.Surface:
        """創建路面背景 (車道數改變時重建)"""
        surface = pygame.Surface((self.width, self.height))
        surface.fill(THEME_COLORS['background'])

        lane_width = self.width / len(lanes)
        for i in range(1, len(lanes)):
            x = int(lane_width * i)
            pygame.draw.line(surface, THEME_COLORS['lane_divider'],
                             (x, 0), (x, self.height), LANE_DIVIDER_WIDTH)
        return surface

    def draw_road(self, lanes: List[float]):
        """繪製路面"""
        if self.road_surface is None or self._road_lane_count != len(lanes):
            self.road_surface = self._create_road_background(lanes)
            self._road_lane_count = len(lanes)
        self.screen.blit(self.road_surface, (0, 0))

    def draw_rect_entity(self, x: float, y: float, width: float, height: float,
                         color: Tuple[int, int, int]):
        rect = pygame.Rect(int(x - width / 2), int(y - height / 2), int(width), int(height))
        pygame.draw.rect(self.screen, color, rect, border_radius=6)

    def draw_coin(self, x: float, y: float, radius: float):
        pygame.draw.circle(self.screen, THEME_COLORS['coin'], (int(x), int(y)), int(radius))

    def draw_circle_alpha(self, x: float, y: float, radius: float,
                          color: Tuple[int, int, int], alpha: int):
        """繪製半透明圓 (特效用)"""
        if alpha <= 0 or radius <= 0:
            return
        size = int(radius * 2) + 2
        surface = pygame.Surface((size, size), pygame.SRCALPHA)
        pygame.draw.circle(surface, (*color, alpha), (size // 2, size // 2), int(radius))
        self.screen.blit(surface, (int(x - size / 2), int(y - size / 2)))

    def draw_text(self, text: str, x: int, y: int,
                  size: str = 'medium', color: Tuple[int, int, int] = None,
                  center: bool = False):
        """繪製文字"""
        if color is None:
            color = THEME_COLORS['text_primary']

        font = self.fonts.get(size, self.fonts['medium'])
        surface = font.render(text, True, color)

        if center:
            rect = surface.get_rect(center=(x, y))
            self.screen.blit(surface, rect)
        else:
            self.screen.blit(surface, (x, y))

    def draw_panel(self, x: int, y: int, width: int, height: int,
                   alpha: int = 180):
        """繪製半透明面板"""
        panel = pygame.Surface((width, height), pygame.SRCALPHA)
        panel.fill((0, 0, 0, alpha))
        self.screen.blit(panel, (x, y))

    def present(self):
        """呈現畫面"""
        pygame.display.flip()

    def cleanup(self):
        """清理資源"""
        pygame.quit()

    def handle_events(self) -> Dict:
        """處理事件"""
        events = {
            'quit': False,
            'keys': [],
            'pointer_x': None,
        }

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                events['quit'] = True
            elif event.type == pygame.KEYDOWN:
                if event.key in (pygame.K_ESCAPE, pygame.K_q):
                    events['quit'] = True
                events['keys'].append(event.key)
            elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                events['pointer_x'] = event.pos[0]

        return events

    def tick(self, fps: float) -> Optional[int]:
        """控制幀率"""
        if self.clock:
            return self.clock.tick(fps)
        return None
