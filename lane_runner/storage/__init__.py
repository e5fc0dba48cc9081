"""持久化模組"""

from .high_score import HighScoreStore, JsonHighScoreStore, MemoryHighScoreStore

__all__ = ['HighScoreStore', 'JsonHighScoreStore', 'MemoryHighScoreStore']
