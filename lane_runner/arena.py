#!/usr/bin/env python3
"""
arena.py ─ 無頭機器人評測
====================================================================
功能:
- 在 LaneRunnerEnv 上以固定種子跑多局，比較內建機器人的表現。
- 每局記錄分數、閃過車輛數、金幣數與存活步數。
- 以 numpy 彙整平均 / 標準差 / 最佳分數，並輸出 JSON 報告。
"""
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Callable, Dict, List, Any

import numpy as np
from tqdm import tqdm

from .config.game_config import GameConfig
from .envs import LaneRunnerEnv

# ────────────────── 1. 用戶配置區域 (ARENA_CONFIG) ──────────────────
ARENA_CONFIG: Dict[str, Any] = {
    "bots": ["random", "dodger"],
    "episodes_per_bot": 20,
    "seed": 0,
    "max_steps": 20_000,
    "output_path": "results_arena/arena_report.json",
}
# ────────────────── (用戶配置區域結束) ──────────────────

Bot = Callable[[np.ndarray, Dict[str, Any], np.random.Generator], int]

DANGER_THRESHOLD = 0.45


# ────────────────── 2. 內建機器人 ──────────────────
def random_bot(obs: np.ndarray, info: Dict[str, Any], rng: np.random.Generator) -> int:
    return int(rng.integers(3))


def dodger_bot(obs: np.ndarray, info: Dict[str, Any], rng: np.random.Generator) -> int:
    """本車道前方有車逼近時，換到相鄰且較空的車道"""
    lane_count = info["lane_count"]
    lane = int(round(obs[0] * max(1, lane_count - 1)))
    proximity = obs[2:2 + lane_count]

    if proximity[lane] < DANGER_THRESHOLD:
        return 1

    candidates = [(proximity[l], l) for l in (lane - 1, lane + 1) if 0 <= l < lane_count]
    if not candidates:
        return 1
    _, target = min(candidates)
    return 0 if target < lane else 2


BOTS: Dict[str, Bot] = {
    "random": random_bot,
    "dodger": dodger_bot,
}


# ────────────────── 3. 對局 ──────────────────
def play_episode(env: LaneRunnerEnv, bot: Bot, seed: int) -> Dict[str, Any]:
    """以指定種子跑一局，回傳統計"""
    obs, info = env.reset(seed=seed)
    rng = np.random.default_rng(seed)
    steps = 0
    terminated = truncated = False

    while not (terminated or truncated):
        action = bot(obs, info, rng)
        obs, _, terminated, truncated, info = env.step(action)
        steps += 1

    return {
        "seed": seed,
        "score": info["score"],
        "obstacles_passed": info["obstacles_passed"],
        "coins_collected": info["coins_collected"],
        "steps": steps,
        "crashed": bool(terminated),
    }


def run_arena(bot_names: List[str], episodes: int, seed: int = 0,
              max_steps: int = 20_000, config: GameConfig = None) -> Dict[str, Any]:
    """執行所有機器人的評測並彙整結果"""
    unknown = [name for name in bot_names if name not in BOTS]
    if unknown:
        raise ValueError(f"未知的機器人: {', '.join(unknown)}")

    env = LaneRunnerEnv(config=config, max_steps=max_steps)
    report: Dict[str, Any] = {"created_at": datetime.now().isoformat(), "bots": {}}

    try:
        for name in bot_names:
            bot = BOTS[name]
            episodes_data = [
                play_episode(env, bot, seed + i)
                for i in tqdm(range(episodes), desc=f"評測 {name}", leave=False)
            ]
            scores = np.array([e["score"] for e in episodes_data], dtype=np.float64)
            report["bots"][name] = {
                "episodes": episodes_data,
                "mean_score": float(scores.mean()) if scores.size else 0.0,
                "std_score": float(scores.std()) if scores.size else 0.0,
                "best_score": int(scores.max()) if scores.size else 0,
            }
    finally:
        env.close()

    return report


def save_report(report: Dict[str, Any], output_path: Path) -> None:
    """將結果寫入 JSON"""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(report, f, indent=2, ensure_ascii=False)


def print_ranking(report: Dict[str, Any]) -> None:
    ranking = sorted(report["bots"].items(), key=lambda kv: kv[1]["mean_score"], reverse=True)
    print("\n--- 排名 ---")
    for rank, (name, stats) in enumerate(ranking, start=1):
        print(f"{rank}. {name:<10} 平均 {stats['mean_score']:.2f} ± {stats['std_score']:.2f}"
              f"  最佳 {stats['best_score']}")


def main():
    cfg = ARENA_CONFIG
    print(f"[信息] 機器人: {', '.join(cfg['bots'])}，每個 {cfg['episodes_per_bot']} 局")
    report = run_arena(cfg["bots"], cfg["episodes_per_bot"], cfg["seed"], cfg["max_steps"])

    output_path = Path(cfg["output_path"])
    save_report(report, output_path)
    print_ranking(report)
    print(f"[信息] 報告已保存: {output_path}")


if __name__ == "__main__":
    main()
