"""
配置管理系統
"""

from pathlib import Path
from typing import Dict, Any, Optional
import yaml
import json

from . import constants as C
from .game_config import GameConfig


SETTING_KEYS = ('window_title', 'render_fps', 'enable_effects',
                'seed', 'high_score_path')


class Settings:
    """配置管理類"""

    def __init__(self):
        # 遊戲模擬參數
        self.game = GameConfig()

        # 顯示設定
        self.window_title = "Lane Runner"
        self.render_fps = C.RENDER_FPS
        self.enable_effects = True

        # 隨機種子 (None 表示不固定)
        self.seed: Optional[int] = None

        # 最高分存檔
        self.high_score_path = C.DEFAULT_HIGH_SCORE_PATH

    def load_from_file(self, config_path: str):
        """從文件載入配置"""
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        elif path.suffix == '.json':
            with open(path, 'r', encoding='utf-8') as f:
                config = json.load(f)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

        self.update(config)

    def update(self, config: Dict[str, Any]):
        """以字典覆寫配置，game 區塊與預設值合併"""
        for key, value in config.items():
            if key == 'game':
                merged = self.game.to_dict()
                merged.update(value or {})
                self.game = GameConfig.from_dict(merged)
            elif key in SETTING_KEYS:
                setattr(self, key, value)
            else:
                print(f"[警告] 忽略未知配置項: {key}")

    def to_dict(self) -> Dict[str, Any]:
        return {
            'window_title': self.window_title,
            'render_fps': self.render_fps,
            'enable_effects': self.enable_effects,
            'seed': self.seed,
            'high_score_path': self.high_score_path,
            'game': self.game.to_dict(),
        }

    def save_to_file(self, config_path: str):
        """保存配置到文件"""
        config = self.to_dict()
        path = Path(config_path)

        if path.suffix == '.yaml' or path.suffix == '.yml':
            with open(path, 'w', encoding='utf-8') as f:
                yaml.dump(config, f, default_flow_style=False, allow_unicode=True)
        elif path.suffix == '.json':
            with open(path, 'w', encoding='utf-8') as f:
                json.dump(config, f, indent=2, ensure_ascii=False)
        else:
            raise ValueError(f"不支援的配置文件格式: {path.suffix}")

    def validate(self) -> bool:
        """驗證配置的有效性"""
        self.game.validate()

        if self.render_fps <= 0:
            print(f"[警告] render_fps 無效 ({self.render_fps})，改用預設值 {C.RENDER_FPS}")
            self.render_fps = C.RENDER_FPS

        return True

    @property
    def resolved_high_score_path(self) -> Path:
        return Path(self.high_score_path).expanduser()


def load_settings(config_path: str = None) -> Settings:
    """載入配置的便捷函數"""
    settings = Settings()

    if config_path and Path(config_path).exists():
        settings.load_from_file(config_path)

    settings.validate()
    return settings
