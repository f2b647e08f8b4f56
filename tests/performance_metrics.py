# tests/performance_metrics.py
from __future__ import annotations

import random
import statistics
import time
from dataclasses import dataclass

from board import Point, iter_points
from engine.actions import reveal_cell, start_game
from engine.state import GameStatus
from engine.utils import Difficulty

@dataclass
class RunConfig:
    rows: int
    cols: int
    mines: int
    games: int
    name: str

def first_click(rows: int, cols: int) -> Point:
    """Use center-ish start to avoid bias toward corners."""
    return Point(x=cols // 2, y=rows // 2)

def run_single_game(cfg: RunConfig, seed: int) -> dict:
    """Play one game with random reveals; return metrics for aggregation."""
    rng_player = random.Random(seed + 13_37)

    state = start_game(Difficulty(cfg.rows, cfg.cols, cfg.mines), seed)
    start = time.perf_counter()
    state = reveal_cell(state, first_click(cfg.rows, cfg.cols))
    opening = state.view.counts.revealed

    moves = 1
    while state.status == GameStatus.RUNNING:
        hidden = [
            p for p in iter_points(state.grid)
            if state.grid[p.y][p.x].is_hidden
        ]
        state = reveal_cell(state, rng_player.choice(hidden))
        moves += 1
    duration = time.perf_counter() - start

    return {
        "win": state.status == GameStatus.WIN,
        "moves": moves,
        "opening": opening,
        "time": duration,
    }

def summarize(cfg: RunConfig, results: list[dict]) -> None:
    wins = sum(1 for r in results if r["win"])
    win_rate = wins / len(results)
    moves = [r["moves"] for r in results]
    times = [r["time"] for r in results]
    openings = [r["opening"] for r in results]

    print(f"\n=== {cfg.name} ({cfg.rows}x{cfg.cols}, {cfg.mines} mines, n={cfg.games}) ===")
    print(f"Win rate: {win_rate:.2%} ({wins}/{len(results)})")
    print(f"Avg moves: {statistics.mean(moves):.1f}")
    print(f"Avg opening size: {statistics.mean(openings):.1f} cells")
    print(f"Avg time per game: {statistics.mean(times):.3f}s")

def run_suite(configs: list[RunConfig], base_seed: int = 12345) -> None:
    for cfg in configs:
        results = [run_single_game(cfg, base_seed + i) for i in range(cfg.games)]
        summarize(cfg, results)

if __name__ == "__main__":
    configs = [
        RunConfig(rows=9, cols=9, mines=10, games=200, name="Beginner"),
        RunConfig(rows=16, cols=16, mines=40, games=200, name="Intermediate"),
        RunConfig(rows=30, cols=16, mines=99, games=200, name="Expert"),
    ]
    run_suite(configs)
