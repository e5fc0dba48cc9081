#!/usr/bin/env python3
"""
Lane Runner - 互動版
方向鍵 / A D 換道，點擊車輛左右側亦可換道；撞車後按 SPACE 或點擊重新開始。
"""

import sys
from typing import Optional

from .config import Settings, load_settings, constants
from .controls import commands_from_keys, command_from_pointer
from .core import RunSession, StepResult
from .rendering import PygameRenderer, EffectManager
from .storage import JsonHighScoreStore


class LaneRunnerApp:
    """主應用"""

    def __init__(self, settings: Settings):
        """初始化應用"""
        self.settings = settings
        self.session: Optional[RunSession] = None
        self.renderer: Optional[PygameRenderer] = None
        self.effect_manager = EffectManager()

    def initialize(self):
        """初始化系統"""
        store = JsonHighScoreStore(self.settings.resolved_high_score_path)
        print(f"[信息] 最高分存檔: {store.path}")

        self.session = RunSession(self.settings.game, store=store, seed=self.settings.seed)

        self._init_renderer()

    def _init_renderer(self):
        """初始化渲染器"""
        game = self.settings.game
        self.renderer = PygameRenderer()
        self.renderer.init(int(game.canvas_width), int(game.canvas_height),
                           self.settings.window_title)

    def run(self):
        """運行主迴圈"""
        self.session.start()
        print(f"[信息] 遊戲開始，最高分 {self.session.high_score}")

        running = True
        while running:
            running = self._handle_events()

            result = self.session.step()
            self._on_step(result)

            self._render_frame()
            self.renderer.tick(self.settings.render_fps)

        self.cleanup()

    def _handle_events(self) -> bool:
        """處理事件，返回是否繼續"""
        events = self.renderer.handle_events()
        if events['quit']:
            return False

        game_over = self.session.is_game_over
        commands = commands_from_keys(events['keys'], game_over)
        pointer = command_from_pointer(events['pointer_x'],
                                       self.session.state.car.x, game_over)
        if pointer is not None:
            commands.append(pointer)

        for command in commands:
            was_over = self.session.is_game_over
            if self.session.apply(command) and was_over:
                self.effect_manager.clear()
                print(f"[信息] 重新開始，最高分 {self.session.high_score}")
        return True

    def _on_step(self, result: StepResult):
        """根據本幀事件觸發特效與訊息"""
        car = self.session.state.car
        if result.escalated:
            print(f"[信息] 難度提升：{self.session.state.lane_count} 條車道")
        if result.collided:
            state = self.session.state
            print(f"[信息] 撞車！分數 {state.score} "
                  f"(閃過 {state.obstacles_passed}，金幣 {state.coins_collected})")
        if not self.settings.enable_effects:
            return
        if result.coins_collected:
            self.effect_manager.add_coin_burst(car.x, car.top)
        if result.collided:
            self.effect_manager.add_crash(car.x, car.top)

    def _render_frame(self):
        """渲染一幀"""
        snapshot = self.session.snapshot()
        self.renderer.draw_road(snapshot['lanes'])

        for coin in snapshot['coins']:
            self.renderer.draw_coin(coin['x'], coin['y'], coin['radius'])
        for obstacle in snapshot['obstacles']:
            self.renderer.draw_rect_entity(obstacle['x'], obstacle['y'],
                                           obstacle['width'], obstacle['height'],
                                           obstacle['color'])
        car = snapshot['car']
        self.renderer.draw_rect_entity(car['x'], car['y'], car['width'], car['height'],
                                       constants.THEME_COLORS['car'])

        self.effect_manager.update()
        for data in self.effect_manager.get_render_data():
            self.renderer.draw_circle_alpha(data['x'], data['y'], data['radius'],
                                            data['color'], data['alpha'])

        self._render_ui(snapshot)
        self.renderer.present()

    def _render_ui(self, snapshot: dict):
        """渲染UI元素"""
        width = self.renderer.width
        height = self.renderer.height

        self.renderer.draw_text(f"Score: {snapshot['score']}", width // 2,
                                constants.HUD_SCORE_Y, size='small', center=True)

        if snapshot['phase'] != 'game_over':
            return

        self.renderer.draw_panel(0, 0, width, height, alpha=constants.GAME_OVER_OVERLAY_ALPHA)
        self.renderer.draw_text("Game Over", width // 2, height // 2 - 60,
                                size='large', center=True)
        color = (constants.THEME_COLORS['text_warning'] if snapshot['new_high_score']
                 else constants.THEME_COLORS['text_primary'])
        self.renderer.draw_text(f"High Score: {snapshot['high_score']}", width // 2,
                                height // 2, size='medium', color=color, center=True)
        self.renderer.draw_text("Tap / Press Space to Restart", width // 2,
                                height // 2 + 50, size='small',
                                color=constants.THEME_COLORS['text_secondary'], center=True)

    def cleanup(self):
        """清理資源"""
        if self.renderer:
            self.renderer.cleanup()
        print("[信息] 程序正常結束。")


def main(argv=None):
    """主函數"""
    argv = sys.argv[1:] if argv is None else argv
    config_path = argv[0] if argv else "config.yaml"

    settings = load_settings(config_path)
    app = LaneRunnerApp(settings)
    app.initialize()
    app.run()


if __name__ == "__main__":
    main()
