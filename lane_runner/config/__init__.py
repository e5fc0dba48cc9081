"""配置管理模組"""

from .settings import Settings, load_settings
from .game_config import GameConfig, ConfigurationError
from . import constants

__all__ = ['Settings', 'load_settings', 'GameConfig', 'ConfigurationError', 'constants']
