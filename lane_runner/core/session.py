"""
單局會話
"""

import time
from typing import Callable, Optional, Dict, Any

import numpy as np

from ..config.game_config import GameConfig
from ..storage.high_score import HighScoreStore, MemoryHighScoreStore
from .game_state import RunState, RunPhase, Command
from .lanes import clamp_lane
from .simulation import Simulation, StepResult


def monotonic_ms() -> float:
    """預設時鐘 (毫秒)"""
    return time.perf_counter() * 1000.0


class RunSession:
    """
    持有當前一局的所有可變狀態

    狀態機: IDLE → RUNNING → GAME_OVER → (restart) → RUNNING
    最高分的讀寫交給 HighScoreStore；存檔失敗不影響遊戲結果。
    """

    def __init__(self, config: Optional[GameConfig] = None,
                 store: Optional[HighScoreStore] = None,
                 rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None,
                 clock: Optional[Callable[[], float]] = None):
        """
        初始化會話

        Args:
            config: 模擬參數，會先驗證
            store: 最高分存檔，預設為記憶體存檔
            rng: 隨機數產生器；未提供時以 seed 建立
            seed: 隨機種子
            clock: 回傳毫秒時間的函數
        """
        self.config = (config or GameConfig()).validate()
        self.store = store if store is not None else MemoryHighScoreStore()
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.clock = clock or monotonic_ms

        self.simulation = Simulation(self.config, self.rng)
        self.phase = RunPhase.IDLE
        self.state: Optional[RunState] = None
        self.high_score = 0
        self.new_high_score = False

    # ---------- 生命週期 ----------
    def start(self, now: Optional[float] = None) -> RunState:
        """開始新的一局 (整體重建狀態)"""
        if now is None:
            now = self.clock()
        self.high_score = self._load_high_score()
        self.new_high_score = False
        self.state = RunState.new(self.config, now)
        self.phase = RunPhase.RUNNING
        return self.state

    def restart(self, now: Optional[float] = None) -> RunState:
        """丟棄當前一局並重新開始"""
        return self.start(now)

    def step(self, now: Optional[float] = None) -> StepResult:
        """推進一幀；非進行中時不做任何事"""
        if self.phase is not RunPhase.RUNNING:
            return StepResult()
        if now is None:
            now = self.clock()

        result = self.simulation.step(self.state, now)
        if result.collided:
            self._finish_run()
        return result

    def _finish_run(self):
        self.phase = RunPhase.GAME_OVER
        score = self.state.score
        if score > self.high_score:
            self.high_score = score
            self.new_high_score = True
            self._save_high_score(score)

    # ---------- 輸入 ----------
    def shift_lane(self, direction: int) -> bool:
        """
        換道

        Args:
            direction: -1 (左) 或 +1 (右)

        Returns:
            車道是否改變
        """
        if direction not in (-1, 1):
            raise ValueError(f"換道方向必須為 -1 或 1: {direction}")
        if self.phase is not RunPhase.RUNNING:
            return False

        car = self.state.car
        new_lane = clamp_lane(car.lane + direction, self.state.lane_count)
        if new_lane == car.lane:
            return False
        car.lane = new_lane
        car.x = self.state.lanes[new_lane]
        return True

    def apply(self, command: Command, now: Optional[float] = None) -> bool:
        """套用輸入指令，回傳是否生效"""
        if command is Command.RESTART:
            if self.phase is RunPhase.GAME_OVER:
                self.restart(now)
                return True
            return False
        return self.shift_lane(command.value)

    # ---------- 查詢 ----------
    @property
    def is_game_over(self) -> bool:
        return self.phase is RunPhase.GAME_OVER

    def snapshot(self) -> Dict[str, Any]:
        """供渲染端讀取的狀態副本"""
        data = self.state.snapshot() if self.state else {}
        data['phase'] = self.phase.value
        data['high_score'] = self.high_score
        data['new_high_score'] = self.new_high_score
        return data

    # ---------- 存檔 ----------
    def _load_high_score(self) -> int:
        try:
            value = int(self.store.load())
        except Exception as e:
            print(f"[警告] 無法讀取最高分，視為 0: {e}")
            return 0
        return max(0, value)

    def _save_high_score(self, score: int):
        try:
            self.store.save(score)
        except Exception as e:
            print(f"[警告] 最高分保存失敗: {e}")
