#!/usr/bin/env python3
from __future__ import annotations

import math
import statistics as stats
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Tuple

from tictactoe_engine.analysis import reachable_boards
from tictactoe_engine.board import initial_board
from tictactoe_engine.search import SearchStats, best_move


def ci95(values: List[float]) -> Tuple[float, float]:
    if not values:
        return (float("nan"), float("nan"))
    m = stats.fmean(values)
    s = stats.pstdev(values) if len(values) > 1 else 0.0
    z = 1.96
    half = z * (s / math.sqrt(len(values)))
    return m, half


@dataclass
class Config:
    repeats: int = 10


def _time(fn: Callable[[], object], repeats: int) -> List[float]:
    times: List[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        times.append(time.perf_counter() - t0)
    return times


def main() -> int:
    cfg = Config()
    empty = initial_board()
    counter = SearchStats()
    best_move(empty, counter)
    measurements = {
        "opening_best_move_s": _time(lambda: best_move(empty), cfg.repeats),
        "reachable_boards_s": _time(reachable_boards, cfg.repeats),
    }
    lines = [f"opening_nodes={counter.nodes} opening_cutoffs={counter.cutoffs}"]
    for name, values in measurements.items():
        m, h = ci95(values)
        lines.append(f"{name}: mean={m:.4f} ci95_half={h:.4f}")
    print("\n".join(lines))
    bench_md = Path(__file__).resolve().parents[1] / "docs" / "benchmarks.md"
    if bench_md.parent.exists():
        bench_md.write_text("# Benchmarks\n\n" + "\n".join(f"- {ln}" for ln in lines) + "\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
