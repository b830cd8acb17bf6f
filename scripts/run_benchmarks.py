#!/usr/bin/env python3
from __future__ import annotations

import argparse
import logging
import math
import statistics as stats
import time
from dataclasses import dataclass
from typing import List, Tuple

from ttt_minimax import EMPTY, X, BoardGeometry, mini_max


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
    repeats: int = 5
    side: int = 3
    max_depth: int = 9


def main() -> int:
    p = argparse.ArgumentParser(description="Time the first move from an empty board per depth")
    p.add_argument("--repeats", type=int, default=Config.repeats)
    p.add_argument("--side", type=int, default=Config.side)
    p.add_argument("--max-depth", type=int, default=Config.max_depth)
    ns = p.parse_args()
    cfg = Config(repeats=ns.repeats, side=ns.side, max_depth=ns.max_depth)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    geometry = BoardGeometry.for_side(cfg.side)
    empty = tuple(EMPTY * geometry.cells)
    for depth in range(1, cfg.max_depth + 1):
        times: List[float] = []
        for _ in range(cfg.repeats):
            t0 = time.perf_counter()
            best = mini_max(depth, X, empty, geometry)
            times.append(time.perf_counter() - t0)
        m, h = ci95(times)
        logging.info("side=%d depth=%d mean=%.4fs ci95=%.4fs best=%s", cfg.side, depth, m, h, "".join(best))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
