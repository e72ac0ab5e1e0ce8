#!/usr/bin/env python3
"""Win/draw rates for every pairing of Easy and Hard, averaged over seeds."""
from __future__ import annotations

import logging
import math
import statistics as stats
from dataclasses import dataclass
from itertools import product
from typing import List, Tuple

from terminal_ttt.simulation import run_series
from terminal_ttt.strategy import Difficulty


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
    seeds: int = 10
    rounds: int = 200


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    cfg = Config()
    for x, o in product(Difficulty, Difficulty):
        x_rates: List[float] = []
        o_rates: List[float] = []
        draw_rates: List[float] = []
        for seed in range(cfg.seeds):
            score = run_series(x, o, cfg.rounds, seed=seed)
            x_rates.append(score.x_wins / score.games)
            o_rates.append(score.o_wins / score.games)
            draw_rates.append(score.draws / score.games)
        (mx, hx), (mo, ho), (md, hd) = ci95(x_rates), ci95(o_rates), ci95(draw_rates)
        logging.info(
            "x=%s o=%s x_win=%.3f±%.3f o_win=%.3f±%.3f draw=%.3f±%.3f",
            x.value, o.value, mx, hx, mo, ho, md, hd,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
