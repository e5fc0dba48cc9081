"""Lane Runner - 車道閃避無盡跑酷模擬"""

from .config import Settings, load_settings, GameConfig, ConfigurationError
from .core import RunSession, RunPhase, Command, StepResult
from .storage import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore

__version__ = "1.0.0"

__all__ = [
    'Settings', 'load_settings', 'GameConfig', 'ConfigurationError',
    'RunSession', 'RunPhase', 'Command', 'StepResult',
    'HighScoreStore', 'JsonHighScoreStore', 'MemoryHighScoreStore',
]
