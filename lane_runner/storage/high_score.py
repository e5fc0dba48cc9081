"""
最高分存檔
"""

import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Union


class HighScoreStore(ABC):
    """最高分儲存介面"""

    @abstractmethod
    def load(self) -> int:
        """讀取最高分，不存在時回傳 0"""
        pass

    @abstractmethod
    def save(self, score: int):
        """寫入最高分"""
        pass


class MemoryHighScoreStore(HighScoreStore):
    """記憶體內存檔，用於測試與無頭執行"""

    def __init__(self, initial: int = 0):
        self.value = initial
        self.save_count = 0

    def load(self) -> int:
        return self.value

    def save(self, score: int):
        self.value = score
        self.save_count += 1


class JsonHighScoreStore(HighScoreStore):
    """以 JSON 檔案保存最高分: {"high_score": n}"""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def load(self) -> int:
        if not self.path.exists() or self.path.stat().st_size == 0:
            return 0

        with open(self.path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        value = data.get('high_score', 0) if isinstance(data, dict) else data
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValueError(f"存檔內容無效: {self.path}")
        return value

    def save(self, score: int):
        if score < 0:
            raise ValueError(f"最高分不可為負: {score}")
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, 'w', encoding='utf-8') as f:
            json.dump({'high_score': int(score)}, f, indent=2)
